# celine/binding/core/middleware.py
"""
RouteModelBindingMiddleware - resolves route parameters into models.

For every path parameter of a request, in the order the router exposes
them, the middleware picks the repository named after the lower-cased
parameter, asks the configured resolver for a lookup filter, runs a
single-result lookup and stores the model under the original parameter
name. Parameters are resolved one after the other so a resolver can
scope its lookup on models bound earlier in the same request.
"""
from __future__ import annotations

import inspect
import logging
from typing import Any, Awaitable, Callable, Mapping, TypeVar

from starlette.requests import Request

from celine.binding.contracts.repository import RepositorySource
from celine.binding.contracts.resolver import (
    Filter,
    ResolverContext,
    RouteModelBindingConfig,
)
from celine.binding.core.errors import InvalidArgumentError, ModelNotFoundError
from celine.binding.core.store import RouteModels, ensure_route_models

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RouteModelBindingMiddleware:
    """Binds route parameters to model instances.

    Use it either through :meth:`use` with an explicit continuation, or
    as a FastAPI dependency (an instance is callable with the request).
    """

    def __init__(
        self,
        source: RepositorySource,
        config: RouteModelBindingConfig | None = None,
    ) -> None:
        self._source = source
        self._config = config or RouteModelBindingConfig()

    @property
    def config(self) -> RouteModelBindingConfig:
        return self._config

    async def use(
        self,
        request: Request,
        response: Any,
        call_next: Callable[[], T | Awaitable[T]],
    ) -> T:
        """Bind every route parameter of ``request``, then hand over to ``call_next``.

        ``call_next`` is invoked exactly once, and only when all parameters
        were resolved. ``response`` is left untouched.

        Raises:
            InvalidArgumentError: a parameter value is empty or missing.
            ModelNotFoundError: no entity matches a parameter's filter.
        """
        await self.bind(request)
        result = call_next()
        if inspect.isawaitable(result):
            return await result
        return result

    async def __call__(self, request: Request) -> RouteModels:
        return await self.bind(request)

    async def bind(self, request: Request) -> RouteModels:
        """Resolve all path parameters of ``request`` into its route model store."""
        store = ensure_route_models(request)
        await self.resolve(request.path_params, request=request, store=store)
        return store

    async def resolve(
        self,
        params: Mapping[str, str | None],
        *,
        request: Request,
        store: RouteModels,
    ) -> RouteModels:
        for name, raw_id in params.items():
            repo = self._source.get_repository(name.lower())

            if not raw_id:
                logger.debug(
                    "Rejected empty id for route parameter '%s' (%s)",
                    name,
                    repo.entity_name,
                )
                raise InvalidArgumentError(entity_name=repo.entity_name, param_name=name)

            context = ResolverContext(
                id=raw_id,
                req=request,
                route_models=store,
                param_name=name,
            )
            where = await self._build_filter(context)
            entity = await repo.find_one(where)

            if entity is None:
                logger.debug(
                    "No %s found for route parameter '%s'", repo.entity_name, name
                )
                raise ModelNotFoundError(
                    entity_name=repo.entity_name, param_name=name, id=raw_id
                )

            store[name] = entity
            logger.debug("Bound route parameter '%s' to %s", name, repo.entity_name)

        return store

    async def _build_filter(self, context: ResolverContext) -> Filter:
        where = self._config.default_resolver(context)
        if inspect.isawaitable(where):
            where = await where
        return where
