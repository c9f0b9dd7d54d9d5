"""Mapping of domain errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from blog.domain.error import (
    InvalidIdentifierError,
    InvalidPageError,
    NotAuthenticatedError,
    NotAuthorizedError,
    NotFoundError,
    PayloadValidationError,
    PersistenceError,
)


async def handle_bad_request(request: Request, exc: Exception) -> JSONResponse:
    """Malformed id or page number."""
    logfire.warn("Bad request", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc)},
    )


async def handle_payload_validation(
    request: Request, exc: PayloadValidationError
) -> JSONResponse:
    """Schema violations, returned field by field."""
    logfire.warn(
        "Payload validation failed",
        path=request.url.path,
        fields=[error.field for error in exc.errors],
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": [error.model_dump() for error in exc.errors]},
    )


async def handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Bodies that are not valid JSON, in the same shape as payload errors."""
    errors = [
        {
            "field": ".".join(str(part) for part in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]
    logfire.warn(
        "Request rejected before validation",
        path=request.url.path,
        fields=[error["field"] for error in errors],
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": errors},
    )


async def handle_not_authenticated(
    request: Request, exc: NotAuthenticatedError
) -> JSONResponse:
    logfire.warn("Unauthenticated request", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": str(exc)},
    )


async def handle_not_authorized(request: Request, exc: NotAuthorizedError) -> Response:
    """Non-owner mutation; the body is left empty."""
    logfire.warn("Unauthorized post modification attempt", error=str(exc))
    return Response(status_code=status.HTTP_403_FORBIDDEN)


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    logfire.warn(
        "Resource not found", resource=exc.resource, identifier=exc.identifier
    )
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"message": f"{exc.resource} does not exist."},
    )


async def handle_persistence_error(
    request: Request, exc: PersistenceError
) -> JSONResponse:
    """Store failure; the cause is passed through as is."""
    logfire.error("Store failure", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc)},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register domain error handlers on the application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(InvalidIdentifierError, handle_bad_request)
    app.add_exception_handler(InvalidPageError, handle_bad_request)
    app.add_exception_handler(PayloadValidationError, handle_payload_validation)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(NotAuthenticatedError, handle_not_authenticated)
    app.add_exception_handler(NotAuthorizedError, handle_not_authorized)
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(PersistenceError, handle_persistence_error)
