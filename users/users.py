import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request, Response
from fastapi.concurrency import run_in_threadpool
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from auth.cookie_handler import clear_auth_cookie, set_auth_cookie
from auth.jwt_handler import TokenHandler
from auth.password_handler import hash_password, verify_password
from auth.session import SessionContext, get_session_context, get_token_handler
from database.connection import get_db
from database.tables import User
from errors.errors import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    RequestError,
    handler_errors,
)
from models.base import MessageResponse
from models.user import UserCreate, UserLogin, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])

DUPLICATE_EMAIL = "User with this email already exists"
INVALID_CREDENTIALS = "Invalid email or password"


async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def create_user(db: AsyncSession, name: str, email: str, password: str) -> User:
    """Insert a user, mapping a unique-email violation to ConflictError."""
    hashed_password = await run_in_threadpool(hash_password, password)
    user = User(name=name, email=email, password=hashed_password)
    db.add(user)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise ConflictError(DUPLICATE_EMAIL)
    return user


def _secure_cookies(request: Request) -> bool:
    return request.app.state.settings.is_production


@router.post("/signup", response_model=UserResponse)
async def signup(
    user: UserCreate,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db),
    tokens: TokenHandler = Depends(get_token_handler),
):
    with handler_errors("An error occurred during signup"):
        if not user.name or not user.email or not user.password:
            raise RequestError("Name, email, and password are required")

        if await get_user_by_email(db, user.email):
            raise ConflictError(DUPLICATE_EMAIL)

        new_user = await create_user(db, user.name, user.email, user.password)
        logger.info("Created user %s", new_user.id)

        set_auth_cookie(response, tokens.create_access_token(new_user.id), secure=_secure_cookies(request))
        return UserResponse.model_validate(new_user)


@router.post("/login", response_model=UserResponse)
async def login(
    credentials: UserLogin,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db),
    tokens: TokenHandler = Depends(get_token_handler),
):
    with handler_errors("An error occurred during login"):
        if not credentials.email or not credentials.password:
            raise RequestError("Email and password are required")

        # Unknown email and wrong password must look the same to the caller
        user = await get_user_by_email(db, credentials.email)
        if not user:
            raise AuthenticationError(INVALID_CREDENTIALS)
        if not await run_in_threadpool(verify_password, credentials.password, user.password):
            raise AuthenticationError(INVALID_CREDENTIALS)

        set_auth_cookie(response, tokens.create_access_token(user.id), secure=_secure_cookies(request))
        return UserResponse.model_validate(user)


@router.post("/logout", response_model=MessageResponse)
async def logout(request: Request, response: Response):
    with handler_errors("An error occurred during logout"):
        clear_auth_cookie(response, secure=_secure_cookies(request))
        return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(
    session: SessionContext = Depends(get_session_context),
    db: AsyncSession = Depends(get_db),
):
    with handler_errors("An error occurred during authentication check"):
        if not session.has_token:
            raise AuthenticationError("Not authenticated")
        if not session.is_authenticated:
            raise AuthenticationError("Invalid or expired token", clear_session=True)

        user = await db.get(User, session.user_id)
        if not user:
            raise NotFoundError("User not found", clear_session=True)
        return UserResponse.model_validate(user)
