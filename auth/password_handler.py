import base64
import hashlib

import bcrypt

# bcrypt only reads the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str | bytes) -> bytes:
    if isinstance(password, bytes):
        password_bytes = password
    else:
        password_bytes = password.encode('utf-8')

    if len(password_bytes) > BCRYPT_MAX_BYTES:
        password_bytes = base64.b64encode(hashlib.sha256(password_bytes).digest())
    return password_bytes


def hash_password(password: str | bytes) -> str:
    """
    Hash a password with bcrypt using a fresh salt, handling str or bytes input.
    The salt and cost factor are embedded in the returned string.
    """
    salt = bcrypt.gensalt()
    hashed = bcrypt.hashpw(_password_bytes(password), salt)
    return hashed.decode('utf-8')


def verify_password(plain_password: str | bytes, hashed_password: str | None) -> bool:
    """
    Verify a password against its stored bcrypt hash.
    Returns False instead of raising when the stored hash is malformed.
    """
    if not hashed_password:
        return False
    try:
        return bcrypt.checkpw(_password_bytes(plain_password), hashed_password.encode('utf-8'))
    except ValueError:
        return False
