# celine/binding/contracts/resolver.py
"""
Resolver contracts.

A resolver turns the context of a single route parameter into the filter
used to look its entity up. One resolver is configured per application
and applied to every bound parameter; it may branch on ``param_name`` or
scope the lookup using models resolved earlier in the same request.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Mapping, Union

if TYPE_CHECKING:
    from starlette.requests import Request

    from celine.binding.core.store import RouteModels

Filter = Mapping[str, Any]
"""Field constraints understood by the repository, e.g. ``{"id": ...}``."""

ResolverFunction = Callable[["ResolverContext"], Union[Filter, Awaitable[Filter]]]


@dataclass(frozen=True)
class ResolverContext:
    """Everything a resolver may need to build a lookup filter.

    Attributes:
        id: Raw value of the route parameter (an id, a slug, ...).
        req: The request being processed.
        route_models: Models already resolved for this request, in
            resolution order. Later parameters see earlier ones only.
        param_name: Parameter name as written in the route template.
    """

    id: str
    req: Request
    route_models: RouteModels
    param_name: str


def default_resolver(context: ResolverContext) -> Filter:
    """Look the entity up by primary key, without any extra scoping."""
    return {"id": context.id}


@dataclass(frozen=True)
class RouteModelBindingConfig:
    """Configuration applied once when binding is installed.

    Example::

        RouteModelBindingConfig(
            default_resolver=lambda ctx: {"id": ctx.id, "deleted_at": None},
        )
    """

    default_resolver: ResolverFunction = default_resolver
