# celine/binding/main.py
"""
Application factory.

Builds a FastAPI app with route model binding installed over a
SQLAlchemy ``DataSource``. Routers passed in decide which routes bind.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Iterable

from fastapi import APIRouter, FastAPI

from celine.binding.api.binding import install_route_model_binding
from celine.binding.contracts.resolver import RouteModelBindingConfig
from celine.binding.core.config import settings
from celine.binding.core.logging import configure_logging
from celine.binding.core.repository import DataSource

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    source: DataSource = app.state.data_source
    await source.create_all()

    yield

    await source.dispose()


def create_app(
    source: DataSource | None = None,
    config: RouteModelBindingConfig | None = None,
    routers: Iterable[APIRouter] = (),
) -> FastAPI:
    """Build and wire the application."""
    configure_logging(settings.log_level, json=settings.log_json)
    logger.info("Creating application (env=%s)", settings.app_env)

    source = source or DataSource(models=())

    app = FastAPI(
        title="CELINE Route Model Binding",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.data_source = source

    install_route_model_binding(app, source, config)

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok"}

    for router in routers:
        app.include_router(router)

    return app
