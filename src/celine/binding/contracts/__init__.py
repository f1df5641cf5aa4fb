"""Public contracts for route model binding."""
from celine.binding.contracts.repository import Repository, RepositorySource
from celine.binding.contracts.resolver import (
    Filter,
    ResolverContext,
    ResolverFunction,
    RouteModelBindingConfig,
    default_resolver,
)

__all__ = [
    "Repository", "RepositorySource",
    "Filter", "ResolverContext", "ResolverFunction",
    "RouteModelBindingConfig", "default_resolver",
]
