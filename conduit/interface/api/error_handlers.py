"""Global exception handlers.

Every failure is rendered as ``{"errors": {field: [messages]}}``:
- ValidationError -> 422 with the aggregated field errors
- NotAuthenticatedError -> 401
- NotAuthorizedError -> 403
- NotFoundError -> 404 with the underlying message
- RequestValidationError (malformed body or query) -> 422
- anything else -> 500 without internal details
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from conduit.domain.error import (
    NotAuthenticatedError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)


def _errors(field: str, *messages: str) -> dict:
    return {"errors": {field: list(messages)}}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logfire.info(
            "Validation failed", path=request.url.path, fields=sorted(exc.errors)
        )
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"errors": exc.errors},
        )

    @app.exception_handler(NotAuthenticatedError)
    async def not_authenticated_handler(request: Request, exc: NotAuthenticatedError):
        logfire.info("Not authenticated", path=request.url.path, reason=str(exc))
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content=_errors("authorization", str(exc)),
        )

    @app.exception_handler(NotAuthorizedError)
    async def not_authorized_handler(request: Request, exc: NotAuthorizedError):
        logfire.warn("Not authorized", path=request.url.path, reason=str(exc))
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN,
            content=_errors("authorization", str(exc)),
        )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        logfire.info("Not found", path=request.url.path, reason=str(exc))
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=_errors(exc.resource.lower(), str(exc)),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ):
        errors: dict[str, list[str]] = {}
        for error in exc.errors():
            loc = [str(part) for part in error.get("loc", ()) if part != "body"]
            field = loc[-1] if loc else "body"
            errors.setdefault(field, []).append(error.get("msg", "is invalid"))

        logfire.info("Malformed request", path=request.url.path, fields=sorted(errors))
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"errors": errors},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logfire.exception("Unhandled exception", path=request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_errors("server", "An unexpected error occurred"),
        )
