# main.py

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from auth.jwt_handler import TokenHandler
from config.config import Settings, configure_logging, load_settings
from database.connection import Database
from errors.errors import register_error_handlers

# Import routers
from users.users import router as auth_router
from bookings.bookings import router as bookings_router
from contact.contact import router as contact_router
from destinations.destinations import router as destinations_router
from seed.seed import router as seed_router


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    load_dotenv()
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.database = Database(settings.database_url)
        await app.state.database.create_all()
        yield
        await app.state.database.dispose()

    app = FastAPI(title="Panama Travelers API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.token_handler = TokenHandler(settings.jwt_secret)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Include all routers
    app.include_router(auth_router)
    app.include_router(bookings_router)
    app.include_router(contact_router)
    app.include_router(destinations_router)
    app.include_router(seed_router)

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
