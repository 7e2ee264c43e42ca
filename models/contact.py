from pydantic import EmailStr
from typing import Optional

from models.base import ApiModel


class ContactCreate(ApiModel):
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    subject: Optional[str] = None
    message: Optional[str] = None

class ContactResponse(ApiModel):
    message: str
    contact_id: str
