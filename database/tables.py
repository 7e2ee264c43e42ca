import enum
import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


def new_id() -> str:
    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BookingStatus(str, enum.Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class TimestampMixin:
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)


# ------------------------------------------------------------
# USER TABLE
# ------------------------------------------------------------
class User(TimestampMixin, Base):
    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=new_id)
    name = Column(String(200), nullable=False)
    email = Column(String(320), unique=True, index=True, nullable=False)
    password = Column(String(128), nullable=False)  # bcrypt hash

    bookings = relationship("Booking", back_populates="user")


# ------------------------------------------------------------
# DESTINATION TABLE
# ------------------------------------------------------------
class Destination(TimestampMixin, Base):
    __tablename__ = "destinations"

    id = Column(String(32), primary_key=True, default=new_id)
    name = Column(String(200), nullable=False, index=True)
    image = Column(String(500), nullable=False)
    description = Column(Text, nullable=False)
    reason = Column(Text, nullable=False)
    price = Column(String(100), nullable=False)  # display text, e.g. "$56/Ksh 6,000"

    bookings = relationship("Booking", back_populates="destination")


# ------------------------------------------------------------
# BOOKING TABLE
# ------------------------------------------------------------
class Booking(TimestampMixin, Base):
    __tablename__ = "bookings"

    id = Column(String(32), primary_key=True, default=new_id)
    user_id = Column(String(32), ForeignKey("users.id"), nullable=True, index=True)  # null for guest bookings
    destination_id = Column(String(32), ForeignKey("destinations.id"), nullable=True)
    name = Column(String(200), nullable=False)
    email = Column(String(320), nullable=False)
    phone = Column(String(50), nullable=False)
    departure_date = Column(DateTime(timezone=True), nullable=False)
    travelers = Column(Integer, nullable=False)
    comments = Column(Text, nullable=True)
    status = Column(
        Enum(
            BookingStatus,
            name="booking_status",
            native_enum=False,
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        default=BookingStatus.PENDING,
        nullable=False,
    )

    user = relationship("User", back_populates="bookings")
    destination = relationship("Destination", back_populates="bookings")


# ------------------------------------------------------------
# CONTACT MESSAGE TABLE
# ------------------------------------------------------------
class ContactMessage(TimestampMixin, Base):
    __tablename__ = "contact_messages"

    id = Column(String(32), primary_key=True, default=new_id)
    name = Column(String(200), nullable=False)
    email = Column(String(320), nullable=False)
    subject = Column(String(300), nullable=False)
    message = Column(Text, nullable=False)
    is_read = Column(Boolean, default=False, nullable=False)
