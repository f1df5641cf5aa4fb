# celine/binding/api/exceptions.py
"""
HTTP mapping for binding errors.

``InvalidArgumentError`` becomes a 400 and ``ModelNotFoundError`` a 404.
Anything else (a missing repository included) is left to the framework.
"""
from __future__ import annotations

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from celine.binding.core.errors import BindingError

logger = logging.getLogger(__name__)


def error_body(exc: BindingError) -> dict:
    return {
        "message": exc.message,
        "error": HTTPStatus(exc.status_code).phrase,
        "statusCode": exc.status_code,
    }


async def binding_error_handler(request: Request, exc: BindingError) -> JSONResponse:
    logger.warning(
        "Route model binding failed on %s %s: %s",
        request.method,
        request.url.path,
        exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content=error_body(exc))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BindingError, binding_error_handler)
