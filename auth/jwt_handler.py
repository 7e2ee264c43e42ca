import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt, JWTError

ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_DAYS = 7
ACCESS_TOKEN_LIFETIME = timedelta(days=ACCESS_TOKEN_EXPIRE_DAYS)

logger = logging.getLogger(__name__)


class TokenHandler:
    """
    Issues and verifies the signed session token.

    The token is a stateless JWT carrying the user id as ``sub`` plus
    ``iat``/``exp`` claims. Nothing is stored server side, so changing the
    secret invalidates every outstanding token.
    """

    def __init__(self, secret_key: str, algorithm: str = ALGORITHM, lifetime: timedelta = ACCESS_TOKEN_LIFETIME):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.lifetime = lifetime

    def create_access_token(self, user_id: str, now: Optional[datetime] = None) -> str:
        """
        Create a JWT access token for the given user id.
        """
        issued_at = now or datetime.now(timezone.utc)
        to_encode = {
            "sub": str(user_id),
            "iat": issued_at,
            "exp": issued_at + self.lifetime,
        }
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def verify_token(self, token: Optional[str]) -> Optional[str]:
        """
        Verify a JWT token and return the user id if valid, else None.
        """
        if not token:
            return None
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as exc:
            logger.debug("Token verification failed: %s", exc)
            return None
        user_id = payload.get("sub")
        if not isinstance(user_id, str) or not user_id:
            return None
        return user_id
