# celine/binding/core/db.py
from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import MetaData
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from celine.binding.core.config import settings

# Naming convention is strongly recommended for Alembic compatibility
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

logger = logging.getLogger(__name__)


def create_engine(url: str | None = None, *, echo: bool | None = None) -> AsyncEngine:
    """Create an async engine for ``url`` (defaults to ``settings.database_url``).

    In-memory SQLite gets a ``StaticPool`` so every session sees the same
    database.
    """
    url = url or settings.database_url
    kwargs: dict[str, Any] = {
        "echo": settings.database_echo if echo is None else echo,
        "future": True,
    }
    if url.startswith("sqlite") and ":memory:" in url:
        kwargs["poolclass"] = StaticPool
        kwargs["connect_args"] = {"check_same_thread": False}
    else:
        kwargs["pool_pre_ping"] = True

    logger.info("Creating async DB engine (%s)", url.split("://", 1)[0])
    return create_async_engine(url, **kwargs)


class Base(DeclarativeBase):
    """Shared SQLAlchemy declarative base for bindable entities."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)
