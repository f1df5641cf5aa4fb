# celine/binding/core/accessor.py
"""
Handler-side access to bound route models.

``RouteModel("user")`` reads what the binding middleware already stored;
it never queries on its own. Apply binding to the route (or its router)
with ``Depends(bind_route_models)`` so the store is populated first::

    router = APIRouter(dependencies=[Depends(bind_route_models)])

    @router.get("/users/{user}/posts/{post}")
    async def show(user: User = RouteModel("user"), post: Post = RouteModel("post")):
        return {"user": user, "post": post}
"""
from __future__ import annotations

from typing import Any

from fastapi import Depends, Request

from celine.binding.core.store import get_route_models


def read_route_model(request: Request, name: str) -> Any:
    """Return the model bound to ``name`` on ``request``, or ``None``."""
    store = get_route_models(request)
    if store is None:
        return None
    return store.get(name)


def RouteModel(name: str) -> Any:
    """FastAPI parameter default returning the model bound to ``name``."""

    def _route_model(request: Request) -> Any:
        return read_route_model(request, name)

    return Depends(_route_model, use_cache=False)
