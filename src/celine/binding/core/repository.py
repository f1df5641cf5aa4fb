# celine/binding/core/repository.py
"""
SQLAlchemy persistence for route model binding.

``DataSource`` owns an async engine and a set of mapped entity classes and
hands out one ``SqlAlchemyRepository`` per entity. Filters are applied
with ``filter_by`` so every value travels as a bound parameter.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Generic, Iterable, TypeVar

from sqlalchemy import MetaData, Table, func, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from celine.binding.contracts.resolver import Filter
from celine.binding.core.db import create_engine

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=DeclarativeBase)


class RepositoryNotFoundError(LookupError):
    """No entity is registered under the requested repository name."""

    def __init__(self, name: str, available: Iterable[str]) -> None:
        super().__init__(
            f"No repository for '{name}'. Available: {sorted(available)}"
        )
        self.name = name


class SqlAlchemyRepository(Generic[ModelT]):
    """Single-entity lookups for one mapped class."""

    def __init__(
        self,
        model: type[ModelT],
        sessionmaker: async_sessionmaker[AsyncSession],
    ) -> None:
        self._model = model
        self._sessionmaker = sessionmaker

    @property
    def model(self) -> type[ModelT]:
        return self._model

    @property
    def entity_name(self) -> str:
        return self._model.__name__

    async def find_one(self, filter: Filter) -> ModelT | None:
        stmt = select(self._model).filter_by(**filter).limit(1)
        async with self._sessionmaker() as session:
            result = await session.execute(stmt)
            return result.scalars().first()

    async def save(self, *entities: ModelT) -> None:
        async with self._sessionmaker() as session:
            session.add_all(entities)
            await session.commit()

    async def count(self) -> int:
        async with self._sessionmaker() as session:
            result = await session.execute(
                select(func.count()).select_from(self._model)
            )
            return result.scalar_one()


class DataSource:
    """Engine, sessions and repositories for a set of mapped entities.

    Repositories are looked up by lower-cased table name or class name,
    so route parameter ``user`` resolves the ``User`` entity.
    """

    def __init__(
        self,
        models: Iterable[type[DeclarativeBase]],
        *,
        url: str | None = None,
        engine: AsyncEngine | None = None,
    ) -> None:
        self._engine = engine or create_engine(url)
        self._sessionmaker = async_sessionmaker(
            self._engine,
            expire_on_commit=False,
            autoflush=False,
        )
        self._repositories: dict[str, SqlAlchemyRepository[Any]] = {}
        self._models: list[type[DeclarativeBase]] = []
        for model in models:
            self.register(model)

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    def register(self, model: type[DeclarativeBase]) -> None:
        repo = SqlAlchemyRepository(model, self._sessionmaker)
        names = {model.__name__.lower(), str(model.__tablename__).lower()}
        for name in names:
            existing = self._repositories.get(name)
            if existing is not None and existing.model is not model:
                raise ValueError(
                    f"Repository name '{name}' already used by {existing.entity_name}"
                )
            self._repositories[name] = repo
        if model not in self._models:
            self._models.append(model)
        logger.info("Registered repository: %s (%s)", model.__name__, sorted(names))

    def get_repository(self, name: str) -> SqlAlchemyRepository[Any]:
        try:
            return self._repositories[name.lower()]
        except KeyError:
            raise RepositoryNotFoundError(name, self._repositories)

    def has_repository(self, name: str) -> bool:
        return name.lower() in self._repositories

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Async context manager for DB sessions, committing on success."""
        async with self._sessionmaker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                logger.exception("DB transaction rolled back")
                raise

    @property
    def models(self) -> list[type[DeclarativeBase]]:
        return list(self._models)

    async def create_all(self) -> None:
        """Create tables for the registered entities only.

        Models may come from different declarative bases; each group is
        created through its own metadata.
        """
        grouped: dict[MetaData, list[Table]] = {}
        for model in self._models:
            grouped.setdefault(model.metadata, []).append(model.__table__)

        async with self._engine.begin() as conn:
            for metadata, tables in grouped.items():
                await conn.run_sync(metadata.create_all, tables=tables)
        logger.info("DB initialized (create_all)")

    async def dispose(self) -> None:
        await self._engine.dispose()
