"""
Error types and their HTTP translation.

Only two failure modes exist: a requested record, command or path is
not in the dataset (404), or a request body is unreadable or lacks a
required field (400).  Both are reported as JSON bodies of the form
``{"error": <message>, ...details}`` whatever output format the caller
asked for.  Framework validation errors are folded into the 400 case.
"""

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

# Key in a route's ``openapi_extra`` holding the usage hint for 400 replies.
USAGE_KEY = "x-usage"


class SecureAppError(Exception):
    """Base class for errors reported verbatim to API callers."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.message, **self.details}


class NotFoundError(SecureAppError):
    """The requested id, command or path does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class BadRequestError(SecureAppError):
    """The request body is unreadable or lacks a required field."""

    status_code = status.HTTP_400_BAD_REQUEST


async def secureapp_error_handler(request: Request, exc: SecureAppError) -> JSONResponse:
    logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


def _route_paths(app: FastAPI) -> List[str]:
    # The OpenAPI document lists every schema route, however routers are nested.
    return list(app.openapi().get("paths", {}))


def _usage(request: Request) -> str:
    route = request.scope.get("route")
    extra = getattr(route, "openapi_extra", None) or {}
    return extra.get(USAGE_KEY) or "See GET / for the endpoint directory"


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report unparseable or mistyped request input as a bad request."""
    kinds = {error.get("type") for error in exc.errors()}
    message = "Malformed JSON body" if "json_invalid" in kinds else "Invalid request"
    return await secureapp_error_handler(request, BadRequestError(message, usage=_usage(request)))


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render framework HTTP errors (unknown path, wrong method) as JSON."""
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        logger.info("%s %s -> 404: no matching route", request.method, request.url.path)
        body: Dict[str, Any] = {
            "error": "Endpoint not found",
            "path": request.url.path,
            "availableEndpoints": _route_paths(request.app),
        }
    else:
        logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.detail)
        body = {"error": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=body, headers=getattr(exc, "headers", None))


def register_error_handlers(app: FastAPI) -> None:
    """Attach the JSON error handlers to ``app``."""
    app.add_exception_handler(SecureAppError, secureapp_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
