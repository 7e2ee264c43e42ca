import logging
import os
from dataclasses import dataclass
from typing import List

DEV_JWT_SECRET = "dev-only-secret-key-at-least-32-chars-long"
MIN_SECRET_LENGTH = 32

logger = logging.getLogger(__name__)


class ConfigError(RuntimeError):
    pass


@dataclass(frozen=True)
class Settings:
    database_url: str
    jwt_secret: str
    env: str
    cors_origins: List[str]
    log_level: str

    @property
    def is_production(self) -> bool:
        return self.env in ("prod", "production")


def _getenv(name: str, default: str = "") -> str:
    return (os.environ.get(name) or default).strip()


def normalize_database_url(url: str) -> str:
    """Point plain Postgres URLs at the asyncpg driver."""
    for prefix in ("postgres://", "postgresql://"):
        if url.startswith(prefix):
            return "postgresql+asyncpg://" + url[len(prefix):]
    return url


def load_settings() -> Settings:
    env = _getenv("APP_ENV", "development").lower()
    is_production = env in ("prod", "production")

    secret = _getenv("JWT_SECRET")
    if not secret:
        if is_production:
            raise ConfigError("JWT_SECRET is required in production.")
        logger.warning("JWT_SECRET not set; using the development fallback key")
        secret = DEV_JWT_SECRET
    if len(secret) < MIN_SECRET_LENGTH:
        raise ConfigError(f"JWT_SECRET must be at least {MIN_SECRET_LENGTH} characters long.")

    origins = [o.strip() for o in _getenv("CORS_ORIGINS", "http://localhost:3000").split(",") if o.strip()]

    return Settings(
        database_url=normalize_database_url(_getenv("DATABASE_URL", "sqlite+aiosqlite:///./travel.db")),
        jwt_secret=secret,
        env=env,
        cors_origins=origins,
        log_level=_getenv("LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
