import argparse
import asyncio
import logging

from dotenv import load_dotenv
from fastapi import APIRouter, Depends
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from config.config import configure_logging, load_settings, normalize_database_url
from database.connection import Database, get_db
from database.tables import Destination
from errors.errors import handler_errors
from models.base import MessageResponse
from models.destination import DestinationCreate
from users.users import create_user, get_user_by_email

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/seed", tags=["seed"])

DEMO_USER_NAME = "Demo User"
DEMO_USER_EMAIL = "demo@panamatravelers.com"
DEMO_USER_PASSWORD = "password123"

DESTINATIONS = [
    DestinationCreate(
        name="Maasai Mara National Reserve",
        image="https://tse3.mm.bing.net/th?id=OIP.w0lfNX9l9OFgCJ469cnuggHaEK&pid=Api",
        description=(
            "Famous for the annual wildebeest migration, the Maasai Mara offers incredible wildlife "
            "viewing opportunities with lions, elephants, giraffes, and more in their natural habitat."
        ),
        reason=(
            "Visit for the spectacular Great Migration (July-October), where millions of wildebeest "
            "cross the Mara River, and for the chance to see the Big Five in one location."
        ),
        price="$56/Ksh 6,000",
    ),
    DestinationCreate(
        name="Diani Beach",
        image="https://tse4.mm.bing.net/th?id=OIP.YI78AOWG9COMx67oiSAp4AHaE8&pid=Api",
        description=(
            "A stunning white sand beach along Kenya's coast with crystal clear turquoise waters, "
            "perfect for swimming, snorkeling, and water sports."
        ),
        reason=(
            "Visit for the pristine beaches, vibrant coral reefs for snorkeling and diving, and the "
            "relaxed coastal atmosphere with excellent seafood restaurants."
        ),
        price="$70/Ksh 7,500",
    ),
]


async def seed_database(db: AsyncSession) -> dict:
    """
    Insert the destination catalogue and the demo account if they are missing.

    Safe to run repeatedly: destinations are only inserted into an empty table
    and the demo user only when no account uses its email.
    """
    created = {"destinations": 0, "demo_user": False}

    existing_destinations = await db.scalar(select(func.count()).select_from(Destination))
    if not existing_destinations:
        db.add_all([Destination(**d.model_dump()) for d in DESTINATIONS])
        await db.commit()
        created["destinations"] = len(DESTINATIONS)

    if not await get_user_by_email(db, DEMO_USER_EMAIL):
        await create_user(db, DEMO_USER_NAME, DEMO_USER_EMAIL, DEMO_USER_PASSWORD)
        created["demo_user"] = True

    logger.info("Seed finished: %s", created)
    return created


@router.post("", response_model=MessageResponse)
async def seed(db: AsyncSession = Depends(get_db)):
    with handler_errors("Failed to seed database"):
        await seed_database(db)
        return MessageResponse(message="Database seeded successfully")


async def _seed_from_settings(database_url: str) -> dict:
    database = Database(database_url)
    try:
        await database.create_all()
        async with database.session() as db:
            return await seed_database(db)
    finally:
        await database.dispose()


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Create tables and seed destinations and the demo user.")
    parser.add_argument("--database-url", help="Overrides DATABASE_URL")
    args = parser.parse_args(argv)

    load_dotenv()

    settings = load_settings()
    configure_logging(settings.log_level)
    database_url = normalize_database_url(args.database_url) if args.database_url else settings.database_url
    asyncio.run(_seed_from_settings(database_url))


if __name__ == "__main__":
    main()
