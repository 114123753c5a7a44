"""Exception handlers shaping failures into JSON error responses."""

import structlog
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from webgit.core.exceptions import ForbiddenError, GitCommandError, WebGitError
from webgit.security.session import SESSION_TOKEN_HEADER

logger = structlog.get_logger(__name__)

# Every other method is state-changing and requires the session token.
SAFE_METHODS = frozenset({"GET", "HEAD", "OPTIONS"})


def error_body(message: str, details: dict | None = None) -> dict:
    body: dict = {"error": message}
    if details:
        body["details"] = jsonable_encoder(details)
    return body


async def forbidden_handler(request: Request, exc: ForbiddenError) -> JSONResponse:
    logger.warning(
        "Rejected request without valid session token",
        method=request.method,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN,
        content={"error": exc.message},
    )


async def webgit_error_handler(request: Request, exc: WebGitError) -> JSONResponse:
    log = logger.error if isinstance(exc, GitCommandError) else logger.warning
    log(
        "Request failed",
        method=request.method,
        path=request.url.path,
        error_type=type(exc).__name__,
        error=exc.message,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(exc.message, exc.details),
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Shape request validation failures as 500s.

    FastAPI parses the body before route dependencies run, so a malformed
    body on a state-changing route is checked for the token here first.
    """
    if request.method not in SAFE_METHODS:
        try:
            request.app.state.session_guard.verify(request.headers.get(SESSION_TOKEN_HEADER))
        except ForbiddenError as e:
            return await forbidden_handler(request, e)

    logger.warning(
        "Malformed request",
        method=request.method,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Invalid request", {"errors": exc.errors()}),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Forbidden maps to 403; every other handled failure maps to 500."""
    app.add_exception_handler(ForbiddenError, forbidden_handler)
    app.add_exception_handler(WebGitError, webgit_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
