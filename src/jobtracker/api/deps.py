from __future__ import annotations

import logging
from collections.abc import Generator

from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from jobtracker.config import Settings, get_settings
from jobtracker.core.security import TokenExpiredError, TokenError, verify_token
from jobtracker.db.session import get_db_session

logger = logging.getLogger(__name__)


def get_db() -> Generator[Session, None, None]:
    yield from get_db_session()


def get_app_settings() -> Settings:
    return get_settings()


def get_current_user_id(
    authorization: str | None = Header(default=None),
    settings: Settings = Depends(get_app_settings),
) -> int:
    """Resolve the caller's user id from a ``Bearer`` token."""
    if not authorization:
        raise HTTPException(status_code=401, detail="Authorization header missing")

    parts = authorization.split(" ")
    token = parts[1] if len(parts) > 1 else ""
    if not token:
        raise HTTPException(status_code=401, detail="Invalid token")

    try:
        payload = verify_token(token, settings.jwt_secret)
    except TokenExpiredError as exc:
        raise HTTPException(status_code=401, detail="Token expired") from exc
    except TokenError as exc:
        logger.info("Rejected bearer token: %s", exc)
        raise HTTPException(status_code=401, detail="Invalid token") from exc

    user_id = payload.get("USER_ID")
    if not user_id:
        raise HTTPException(status_code=400, detail="Invalid request")
    return user_id
