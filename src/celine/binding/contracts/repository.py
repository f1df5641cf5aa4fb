# celine/binding/contracts/repository.py
"""
Persistence collaborator contracts.

The binding core only needs two things from the persistence layer: a way
to obtain a repository by (lower-cased) name, and a single-result lookup
on that repository. ``celine.binding.core.repository`` provides the
SQLAlchemy implementation; tests use in-memory fakes.
"""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from celine.binding.contracts.resolver import Filter


@runtime_checkable
class Repository(Protocol):
    """Single-entity lookup scoped to one entity type."""

    @property
    def entity_name(self) -> str:
        """Display name of the entity type, used verbatim in error messages."""
        ...

    async def find_one(self, filter: Filter) -> Any | None:
        ...


@runtime_checkable
class RepositorySource(Protocol):
    """Hands out repositories by name.

    Implementations raise their own error when no repository matches;
    the binding core lets it propagate.
    """

    def get_repository(self, name: str) -> Repository:
        ...
