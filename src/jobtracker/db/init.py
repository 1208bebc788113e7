from __future__ import annotations

import logging

from jobtracker.config import get_settings
from jobtracker.db.base import Base
from jobtracker.db.session import engine
from jobtracker.db import models  # noqa: F401

logger = logging.getLogger(__name__)


def ensure_data_directories() -> None:
    settings = get_settings()
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def init_database() -> dict[str, list[str]]:
    ensure_data_directories()
    Base.metadata.create_all(bind=engine)
    tables = sorted(Base.metadata.tables)
    logger.info("Database ready with tables: %s", ", ".join(tables))
    return {"tables": tables}
