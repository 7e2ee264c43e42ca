from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from database.connection import get_db
from database.tables import Destination
from errors.errors import NotFoundError, handler_errors
from models.destination import DestinationResponse

router = APIRouter(prefix="/api/destinations", tags=["destinations"])


@router.get("", response_model=List[DestinationResponse])
async def get_destinations(db: AsyncSession = Depends(get_db)):
    with handler_errors("Failed to fetch destinations"):
        result = await db.execute(select(Destination).order_by(Destination.name.asc()))
        return [DestinationResponse.model_validate(d) for d in result.scalars().all()]


@router.get("/{destination_id}", response_model=DestinationResponse)
async def get_destination(destination_id: str, db: AsyncSession = Depends(get_db)):
    with handler_errors("Failed to fetch destination"):
        destination = await db.get(Destination, destination_id)
        if not destination:
            raise NotFoundError("Destination not found")
        return DestinationResponse.model_validate(destination)
