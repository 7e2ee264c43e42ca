import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from database.connection import get_db
from database.tables import ContactMessage
from errors.errors import RequestError, handler_errors
from models.contact import ContactCreate, ContactResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/contact", tags=["contact"])


@router.post("", response_model=ContactResponse)
async def send_contact_message(contact: ContactCreate, db: AsyncSession = Depends(get_db)):
    with handler_errors("Failed to send message"):
        if not contact.name or not contact.email or not contact.subject or not contact.message:
            raise RequestError("All fields are required")

        contact_message = ContactMessage(
            name=contact.name,
            email=contact.email,
            subject=contact.subject,
            message=contact.message,
        )
        db.add(contact_message)
        await db.commit()
        logger.info("Stored contact message %s", contact_message.id)

        return ContactResponse(message="Message sent successfully", contact_id=contact_message.id)
