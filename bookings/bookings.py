# bookings.py

import logging
from datetime import datetime, timezone
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from auth.session import SessionContext, get_session_context, require_session
from database.connection import get_db
from database.tables import Booking, BookingStatus, Destination, User
from errors.errors import NotFoundError, RequestError, handler_errors
from models.booking import BookingCreate, BookingCreated, BookingResponse, BookingWithDestination

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/bookings", tags=["bookings"])

# Upper bound of a 32-bit INTEGER column
MAX_TRAVELERS = 2**31 - 1

REQUIRED_FIELDS = ("name", "email", "phone", "destination", "departure_date", "travelers")


def parse_travelers(value) -> int:
    """Accept a positive integer or a string holding one."""
    if isinstance(value, bool):
        raise RequestError("Travelers must be a positive whole number")
    try:
        travelers = int(str(value).strip())
    except ValueError:
        raise RequestError("Travelers must be a positive whole number")
    if travelers < 1 or travelers > MAX_TRAVELERS:
        raise RequestError("Travelers must be a positive whole number")
    return travelers


def parse_departure_date(value: str) -> datetime:
    """Accept an ISO 8601 date or datetime, with or without a trailing Z."""
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        departure = datetime.fromisoformat(text)
    except ValueError:
        raise RequestError("Departure date must be an ISO 8601 date")
    if departure.tzinfo is None:
        departure = departure.replace(tzinfo=timezone.utc)
    return departure


# --- Booking Endpoints ---

@router.post("", response_model=BookingCreated)
async def create_booking(
    booking: BookingCreate,
    session: SessionContext = Depends(get_session_context),
    db: AsyncSession = Depends(get_db),
):
    with handler_errors("Failed to create booking"):
        if any(getattr(booking, field) in (None, "") for field in REQUIRED_FIELDS):
            raise RequestError("Missing required fields")

        travelers = parse_travelers(booking.travelers)
        departure_date = parse_departure_date(booking.departure_date)

        if not await db.get(Destination, booking.destination):
            raise NotFoundError("Destination not found")

        # Guests may book without an account; the booking is then unowned.
        # A valid token for a user that no longer exists also books as a guest.
        user_id = session.user_id
        if user_id is not None and not await db.get(User, user_id):
            user_id = None

        new_booking = Booking(
            user_id=user_id,
            destination_id=booking.destination,
            name=booking.name,
            email=booking.email,
            phone=booking.phone,
            departure_date=departure_date,
            travelers=travelers,
            comments=booking.comments or None,
            status=BookingStatus.PENDING,
        )
        db.add(new_booking)
        await db.commit()
        logger.info("Created booking %s for destination %s", new_booking.id, new_booking.destination_id)

        return BookingCreated(
            message="Booking created successfully",
            booking=BookingResponse.model_validate(new_booking),
        )


@router.get("", response_model=List[BookingWithDestination])
async def get_my_bookings(
    session: SessionContext = Depends(require_session),
    db: AsyncSession = Depends(get_db),
):
    """Bookings owned by the session user, newest first, each with its destination."""
    with handler_errors("Failed to fetch bookings"):
        result = await db.execute(
            select(Booking)
            .options(selectinload(Booking.destination))
            .where(Booking.user_id == session.user_id)
            .order_by(Booking.created_at.desc())
        )
        return [BookingWithDestination.model_validate(b) for b in result.scalars().all()]
