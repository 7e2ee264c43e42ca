from datetime import datetime, timedelta, timezone

from jose import jwt

from auth.jwt_handler import ALGORITHM, TokenHandler

SECRET = "unit-test-secret-key-with-enough-length"


def _flip_signature(token: str) -> str:
    header, payload, signature = token.split(".")
    i = len(signature) // 2
    replacement = "A" if signature[i] != "A" else "B"
    return ".".join([header, payload, signature[:i] + replacement + signature[i + 1:]])


def test_issued_token_verifies_to_user_id():
    tokens = TokenHandler(SECRET)
    token = tokens.create_access_token("user-123")
    assert tokens.verify_token(token) == "user-123"


def test_token_expires_seven_days_after_issue():
    tokens = TokenHandler(SECRET)
    claims = jwt.get_unverified_claims(tokens.create_access_token("user-123"))
    assert claims["sub"] == "user-123"
    assert claims["exp"] - claims["iat"] == 7 * 24 * 60 * 60


def test_tampered_signature_is_rejected():
    tokens = TokenHandler(SECRET)
    token = tokens.create_access_token("user-123")
    assert tokens.verify_token(_flip_signature(token)) is None


def test_expired_token_is_rejected():
    tokens = TokenHandler(SECRET)
    issued = datetime.now(timezone.utc) - timedelta(days=8)
    token = tokens.create_access_token("user-123", now=issued)
    assert tokens.verify_token(token) is None


def test_token_signed_with_other_key_is_rejected():
    token = TokenHandler("another-secret-key-that-is-long-enough").create_access_token("user-123")
    assert TokenHandler(SECRET).verify_token(token) is None


def test_malformed_tokens_are_rejected():
    tokens = TokenHandler(SECRET)
    for token in ("", None, "not-a-token", "a.b.c"):
        assert tokens.verify_token(token) is None


def test_token_without_subject_is_rejected():
    exp = datetime.now(timezone.utc) + timedelta(days=1)
    token = jwt.encode({"exp": exp}, SECRET, algorithm=ALGORITHM)
    assert TokenHandler(SECRET).verify_token(token) is None
