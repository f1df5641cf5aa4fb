# celine/binding/core/errors.py
"""
Errors raised while binding route parameters to models.

Two failure kinds are kept apart so callers can tell a bad client input
from a lookup miss. A missing repository is not a ``BindingError``: it is
raised by the persistence layer and propagates untouched.
"""
from __future__ import annotations


class BindingError(Exception):
    """Base class for route model binding failures."""

    status_code: int = 500

    def __init__(self, message: str, *, entity_name: str, param_name: str) -> None:
        super().__init__(message)
        self.message = message
        self.entity_name = entity_name
        self.param_name = param_name


class InvalidArgumentError(BindingError):
    """The raw route parameter value is empty or missing."""

    status_code = 400

    def __init__(self, *, entity_name: str, param_name: str) -> None:
        super().__init__(
            f"The id for {entity_name} is not valid",
            entity_name=entity_name,
            param_name=param_name,
        )


class ModelNotFoundError(BindingError):
    """No entity matched the filter built for a route parameter."""

    status_code = 404

    def __init__(self, *, entity_name: str, param_name: str, id: str) -> None:
        super().__init__(
            f"Could not find {entity_name} with id {id}",
            entity_name=entity_name,
            param_name=param_name,
        )
        self.id = id
