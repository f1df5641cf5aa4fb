"""Resolve route parameters into persisted models before handlers run."""
from celine.binding.api.binding import bind_route_models, install_route_model_binding
from celine.binding.contracts import (
    Filter,
    Repository,
    RepositorySource,
    ResolverContext,
    ResolverFunction,
    RouteModelBindingConfig,
    default_resolver,
)
from celine.binding.core.accessor import RouteModel
from celine.binding.core.errors import (
    BindingError,
    InvalidArgumentError,
    ModelNotFoundError,
)
from celine.binding.core.middleware import RouteModelBindingMiddleware
from celine.binding.core.repository import DataSource, RepositoryNotFoundError
from celine.binding.core.store import RouteModels

__all__ = [
    "bind_route_models", "install_route_model_binding",
    "Filter", "Repository", "RepositorySource",
    "ResolverContext", "ResolverFunction",
    "RouteModelBindingConfig", "default_resolver",
    "RouteModel",
    "BindingError", "InvalidArgumentError", "ModelNotFoundError",
    "RouteModelBindingMiddleware",
    "DataSource", "RepositoryNotFoundError",
    "RouteModels",
]
