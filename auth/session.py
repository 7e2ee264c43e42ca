from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Request

from auth.cookie_handler import get_auth_cookie
from auth.jwt_handler import TokenHandler
from errors.errors import AuthenticationError


@dataclass(frozen=True)
class SessionContext:
    """What the auth cookie says about the caller, resolved once per request."""

    token: Optional[str] = None
    user_id: Optional[str] = None

    @property
    def has_token(self) -> bool:
        return self.token is not None

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None


def get_token_handler(request: Request) -> TokenHandler:
    return request.app.state.token_handler


def get_session_context(
    request: Request,
    tokens: TokenHandler = Depends(get_token_handler),
) -> SessionContext:
    token = get_auth_cookie(request)
    if token is None:
        return SessionContext()
    return SessionContext(token=token, user_id=tokens.verify_token(token))


def require_session(session: SessionContext = Depends(get_session_context)) -> SessionContext:
    """Dependency for routes that need a valid session."""
    if not session.has_token:
        raise AuthenticationError("Not authenticated")
    if not session.is_authenticated:
        raise AuthenticationError("Invalid or expired token")
    return session
