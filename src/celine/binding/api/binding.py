# celine/binding/api/binding.py
"""
Route model binding for FastAPI applications.

``install_route_model_binding`` is called once while building the app.
Routes opt in with ``Depends(bind_route_models)``, either per route or
for a whole router.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request

from celine.binding.api.exceptions import register_exception_handlers
from celine.binding.contracts.repository import RepositorySource
from celine.binding.contracts.resolver import RouteModelBindingConfig
from celine.binding.core.middleware import RouteModelBindingMiddleware
from celine.binding.core.store import RouteModels

logger = logging.getLogger(__name__)

STATE_KEY = "route_model_binding"


def install_route_model_binding(
    app: FastAPI,
    source: RepositorySource,
    config: RouteModelBindingConfig | None = None,
) -> RouteModelBindingMiddleware:
    """Attach a binding middleware to ``app`` and map its errors to HTTP responses."""
    middleware = RouteModelBindingMiddleware(source, config)
    setattr(app.state, STATE_KEY, middleware)
    register_exception_handlers(app)
    logger.info(
        "Route model binding installed (resolver=%s)",
        getattr(middleware.config.default_resolver, "__name__", "custom"),
    )
    return middleware


def get_route_model_binding(request: Request) -> RouteModelBindingMiddleware:
    middleware = getattr(request.app.state, STATE_KEY, None)
    if middleware is None:
        raise RuntimeError(
            "Route model binding is not installed; call install_route_model_binding()"
        )
    return middleware


async def bind_route_models(request: Request) -> RouteModels:
    """FastAPI dependency binding every path parameter of the current request."""
    return await get_route_model_binding(request).bind(request)
