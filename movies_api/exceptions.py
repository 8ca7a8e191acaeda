from typing import List

from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from .schemas.movie import ValidationIssue, issues_from_errors

logger = logging.getLogger(__name__)

class MoviesApiException(Exception):
    """Base exception for the application"""
    pass

class MovieNotFoundError(MoviesApiException):
    def __init__(self, movie_id: str):
        super().__init__(f"Movie {movie_id} not found")
        self.movie_id = movie_id

class MovieValidationError(MoviesApiException):
    def __init__(self, issues: List[ValidationIssue]):
        super().__init__(f"{len(issues)} invalid field(s)")
        self.issues = issues

def _issues_response(request: Request, issues: List[ValidationIssue]) -> JSONResponse:
    request_id = getattr(request.state, "request_id", "unknown")
    logger.info(
        "Validation error",
        extra={"request_id": request_id, "path": request.url.path, "method": request.method},
    )
    return JSONResponse(
        status_code=400,
        content={"error": [issue.model_dump() for issue in issues]},
    )

async def movie_not_found_handler(request: Request, exc: MovieNotFoundError):
    request_id = getattr(request.state, "request_id", "unknown")
    logger.info("Movie not found", extra={"request_id": request_id, "movie_id": exc.movie_id})
    return JSONResponse(status_code=404, content={"message": "Movie not found"})

async def movie_validation_handler(request: Request, exc: MovieValidationError):
    return _issues_response(request, exc.issues)

async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Handle request parsing errors (e.g. a body that is not valid JSON)
    with the same 400 issue list as schema validation failures.
    """
    return _issues_response(request, issues_from_errors(exc.errors()))

async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    Handle framework HTTP errors such as unknown routes or unsupported methods.
    """
    request_id = getattr(request.state, "request_id", "unknown")

    # Log 5xx errors as errors, 4xx as info
    if exc.status_code >= 500:
        logger.error(f"HTTP {exc.status_code} error", extra={"request_id": request_id, "path": request.url.path})
    else:
        logger.info(f"HTTP {exc.status_code} error", extra={"request_id": request_id, "path": request.url.path})

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail, "request_id": request_id},
        headers=getattr(exc, "headers", None),
    )

async def global_exception_handler(request: Request, exc: Exception):
    """
    Catch-all handler: returns a 500 JSON response without internal details.
    """
    request_id = getattr(request.state, "request_id", "unknown")

    logger.error(
        "Unhandled exception occurred",
        extra={"request_id": request_id, "path": request.url.path},
        exc_info=exc
    )

    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal Server Error",
            "message": "An unexpected error occurred. Please contact support.",
            "request_id": request_id
        },
    )
