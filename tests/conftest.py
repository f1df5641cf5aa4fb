# tests/conftest.py
from __future__ import annotations

from typing import AsyncIterator

import pytest_asyncio

from celine.binding.core.repository import DataSource
from tests.helpers.models import Post, User


@pytest_asyncio.fixture
async def data_source() -> AsyncIterator[DataSource]:
    """Ephemeral in-memory database with the ``user`` and ``post`` tables."""
    source = DataSource(models=[User, Post], url="sqlite+aiosqlite:///:memory:")
    await source.create_all()
    try:
        yield source
    finally:
        await source.dispose()
