from pydantic import EmailStr
from typing import Optional
from datetime import datetime

from models.base import ApiModel


# Request bodies keep every field optional so that missing fields are
# reported by the handlers with their own messages.
class UserCreate(ApiModel):
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    password: Optional[str] = None

class UserLogin(ApiModel):
    email: Optional[EmailStr] = None
    password: Optional[str] = None

class UserResponse(ApiModel):
    """Public view of a user; the password hash never leaves the store."""
    id: str
    name: str
    email: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
