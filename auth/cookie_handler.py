from typing import Optional

from fastapi import Request, Response

from auth.jwt_handler import ACCESS_TOKEN_LIFETIME

COOKIE_NAME = "auth_token"
COOKIE_PATH = "/"
COOKIE_MAX_AGE = int(ACCESS_TOKEN_LIFETIME.total_seconds())  # 1 week


def set_auth_cookie(response: Response, token: str, secure: bool = False) -> None:
    """Store the session token in an HTTP-only cookie."""
    response.set_cookie(
        key=COOKIE_NAME,
        value=token,
        max_age=COOKIE_MAX_AGE,
        path=COOKIE_PATH,
        secure=secure,
        httponly=True,
        samesite="lax",
    )


def get_auth_cookie(request: Request) -> Optional[str]:
    return request.cookies.get(COOKIE_NAME) or None


def clear_auth_cookie(response: Response, secure: bool = False) -> None:
    response.delete_cookie(
        key=COOKIE_NAME,
        path=COOKIE_PATH,
        secure=secure,
        httponly=True,
        samesite="lax",
    )
