from typing import Optional
from datetime import datetime

from models.base import ApiModel


class DestinationBase(ApiModel):
    name: str
    image: str
    description: str
    reason: str
    price: str

class DestinationCreate(DestinationBase):
    pass

class DestinationResponse(DestinationBase):
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
