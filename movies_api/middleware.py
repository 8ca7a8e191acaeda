import time
import uuid
import logging
from typing import Iterable, Optional

from fastapi import Request
from fastapi.responses import PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

class OriginPolicy:
    """
    Allow-list of browser origins, fixed for the lifetime of the app.

    Requests without an Origin header (curl, server-to-server, same-origin
    tooling) are always allowed.
    """
    def __init__(self, allowed_origins: Iterable[str]):
        self.allowed_origins = frozenset(allowed_origins)

    def is_allowed(self, origin: Optional[str]) -> bool:
        if not origin:
            return True
        return origin in self.allowed_origins

class OriginPolicyMiddleware(BaseHTTPMiddleware):
    """
    Reject requests from origins outside the allow-list before they reach a route.
    """
    def __init__(self, app: ASGIApp, policy: OriginPolicy):
        super().__init__(app)
        self.policy = policy

    async def dispatch(self, request: Request, call_next):
        origin = request.headers.get("origin")
        if not self.policy.is_allowed(origin):
            logger.warning(
                "Origin rejected",
                extra={
                    "request_id": getattr(request.state, "request_id", "unknown"),
                    "origin": origin,
                    "path": request.url.path,
                    "method": request.method,
                },
            )
            return PlainTextResponse("Not allowed by CORS", status_code=403)
        return await call_next(request)

class RequestTrackingMiddleware(BaseHTTPMiddleware):
    """
    Middleware to add correlation ID (request_id) and log request timing.
    """
    def __init__(self, app: ASGIApp):
        super().__init__(app)

    async def dispatch(self, request: Request, call_next):
        # Reuse the caller's request id when one is supplied
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        request.state.request_id = request_id

        start_time = time.time()

        try:
            response = await call_next(request)
        except Exception as e:
            process_time = (time.time() - start_time) * 1000
            logger.error(
                "Request failed",
                extra={
                    "request_id": request_id,
                    "path": request.url.path,
                    "method": request.method,
                    "duration_ms": round(process_time, 2),
                },
                exc_info=True
            )
            raise e

        process_time = (time.time() - start_time) * 1000
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = str(round(process_time, 2))

        logger.info(
            "Request completed",
            extra={
                "request_id": request_id,
                "path": request.url.path,
                "method": request.method,
                "status_code": response.status_code,
                "duration_ms": round(process_time, 2),
            }
        )

        return response
