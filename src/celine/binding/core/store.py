# celine/binding/core/store.py
"""
Per-request route model store.

Resolved models live on ``request.state`` for the lifetime of a request,
keyed by the parameter name exactly as written in the route template.
"""
from __future__ import annotations

from typing import Any

from starlette.requests import Request

STORAGE_KEY = "route_models"


class RouteModels(dict[str, Any]):
    """Ordered mapping of parameter name to resolved model."""

    def __repr__(self) -> str:
        return f"RouteModels({dict.__repr__(self)})"


def get_route_models(request: Request) -> RouteModels | None:
    """Return the store attached to ``request``, or ``None`` if binding never ran."""
    return getattr(request.state, STORAGE_KEY, None)


def ensure_route_models(request: Request) -> RouteModels:
    """Return the store attached to ``request``, attaching an empty one if needed."""
    store = get_route_models(request)
    if store is None:
        store = RouteModels()
        setattr(request.state, STORAGE_KEY, store)
    return store
