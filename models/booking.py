from pydantic import EmailStr
from typing import Optional, Union
from datetime import datetime

from database.tables import BookingStatus
from models.base import ApiModel
from models.destination import DestinationResponse


class BookingCreate(ApiModel):
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    destination: Optional[str] = None
    departure_date: Optional[str] = None
    travelers: Optional[Union[int, str]] = None
    comments: Optional[str] = None

class BookingResponse(ApiModel):
    id: str
    user_id: Optional[str] = None
    destination_id: Optional[str] = None
    name: str
    email: str
    phone: str
    departure_date: datetime
    travelers: int
    comments: Optional[str] = None
    status: BookingStatus = BookingStatus.PENDING
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

class BookingWithDestination(BookingResponse):
    destination: Optional[DestinationResponse] = None

class BookingCreated(ApiModel):
    message: str
    booking: BookingResponse
