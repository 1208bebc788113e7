"""Password hashing and HS256 session tokens.

Tokens carry ``{USERNAME, USER_ID, exp}``. Verification only ever accepts
HS256, so a token whose header claims another algorithm (including ``none``)
is rejected as invalid.
"""

from __future__ import annotations

import logging
import time
from typing import Any

import bcrypt
import jwt

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
# bcrypt only reads the first 72 bytes of a password.
BCRYPT_MAX_BYTES = 72


class TokenError(Exception):
    pass


class InvalidTokenError(TokenError):
    pass


class TokenExpiredError(TokenError):
    pass


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = 10) -> str:
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    return bcrypt.checkpw(_password_bytes(password), hashed.encode("utf-8"))


def create_token(payload: dict[str, Any], secret: str) -> str:
    return jwt.encode(payload, secret, algorithm=ALGORITHM, headers={"typ": "JWT"})


def verify_token(token: str, secret: str) -> dict[str, Any]:
    try:
        return jwt.decode(
            token,
            secret,
            algorithms=[ALGORITHM],
            options={"require": ["exp"]},
        )
    except jwt.ExpiredSignatureError as exc:
        raise TokenExpiredError("Token expired") from exc
    except jwt.InvalidTokenError as exc:
        logger.debug("Rejected token: %s", exc)
        raise InvalidTokenError("Invalid token") from exc


def issue_user_token(user_id: int, username: str, secret: str, ttl_sec: int = 3600) -> str:
    payload = {"USERNAME": username, "USER_ID": user_id, "exp": int(time.time()) + ttl_sec}
    return create_token(payload, secret)
