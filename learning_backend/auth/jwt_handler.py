"""Bearer tokens for signed-in users.

The ``sub`` claim carries the user's id as a string. Tokens expire after
``JWT_EXPIRES_MINUTES`` (a day by default); there is no refresh or revocation.
"""
from datetime import datetime, timedelta, timezone

import jwt

from learning_backend.core import config

def create_access_token(user_id: int, expires_minutes: int | None = None) -> str:
    expire_minutes = expires_minutes or config.JWT_EXPIRES_MINUTES
    issued_at = datetime.now(timezone.utc)
    expire = issued_at + timedelta(minutes=expire_minutes)
    payload = {"sub": str(user_id), "exp": expire, "iat": issued_at}
    return jwt.encode(payload, config.JWT_SECRET_KEY, algorithm=config.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict:
    return jwt.decode(
        token,
        config.JWT_SECRET_KEY,
        algorithms=[config.JWT_ALGORITHM],
        options={"require": ["sub", "exp"]},
    )


def read_user_id(token: str) -> int:
    payload = decode_access_token(token)
    try:
        return int(payload["sub"])
    except (TypeError, ValueError) as exc:
        raise jwt.InvalidTokenError("Token subject is not a user id.") from exc
