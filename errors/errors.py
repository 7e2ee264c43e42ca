import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from auth.cookie_handler import clear_auth_cookie

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Error with a status code and a message that is safe to show to clients."""

    status_code = 500

    def __init__(self, message: str, clear_session: bool = False):
        super().__init__(message)
        self.message = message
        self.clear_session = clear_session


class RequestError(AppError):
    status_code = 400


class AuthenticationError(AppError):
    status_code = 401


class NotFoundError(AppError):
    status_code = 404


class ConflictError(AppError):
    status_code = 409


class InternalError(AppError):
    status_code = 500


@contextmanager
def handler_errors(message: str) -> Iterator[None]:
    """
    Turn unexpected failures inside a route into an InternalError carrying a
    generic message. Errors that already describe the client outcome pass through.
    """
    try:
        yield
    except (AppError, StarletteHTTPException):
        raise
    except Exception as exc:
        logger.exception(message)
        raise InternalError(message) from exc


def _secure_cookies(request: Request) -> bool:
    settings = getattr(request.app.state, "settings", None)
    return bool(settings and settings.is_production)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        response = JSONResponse(status_code=exc.status_code, content={"message": exc.message})
        if exc.clear_session:
            clear_auth_cookie(response, secure=_secure_cookies(request))
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors() or []
        logger.info("Rejected request body on %s: %s", request.url.path, errors[:1])
        return JSONResponse(status_code=400, content={"message": "Invalid request body"})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"message": "Internal server error"})
