"""
=============================================================================
Movies API
=============================================================================
CRUD over an in-memory movie catalog:
  - GET/POST /movies, GET/PATCH/DELETE /movies/{id}
  - Full/partial payload validation with per-field issue lists
  - Origin allow-list enforced before routing
=============================================================================
"""

import logging
from datetime import datetime
from typing import Iterable, Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import ACCEPTED_ORIGINS, VERSION, Settings, settings as default_settings
from .exceptions import (
    MovieNotFoundError,
    MovieValidationError,
    global_exception_handler,
    http_exception_handler,
    movie_not_found_handler,
    movie_validation_handler,
    validation_exception_handler,
)
from .logging_config import setup_logging
from .middleware import OriginPolicy, OriginPolicyMiddleware, RequestTrackingMiddleware
from .repositories.movie_repository import MovieRepository
from .routers import movie_router
from .seed_data import load_seed_movies

logger = logging.getLogger(__name__)


def create_app(
    repository: Optional[MovieRepository] = None,
    allowed_origins: Iterable[str] = ACCEPTED_ORIGINS,
) -> FastAPI:
    """
    Build the application around its own movie store.

    Tests pass a fresh repository; by default the store is seeded from the
    bundled catalog.
    """
    app = FastAPI(
        title="Movies API",
        description="In-memory movie catalog with CRUD endpoints",
        version=VERSION,
    )
    app.state.movie_repository = repository if repository is not None else MovieRepository(load_seed_movies())

    # =========================================================================
    # MIDDLEWARE (last added runs first)
    # =========================================================================
    allowed_origins = list(allowed_origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(OriginPolicyMiddleware, policy=OriginPolicy(allowed_origins))
    app.add_middleware(RequestTrackingMiddleware)

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================
    app.add_exception_handler(MovieNotFoundError, movie_not_found_handler)
    app.add_exception_handler(MovieValidationError, movie_validation_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    app.include_router(movie_router.router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "timestamp": datetime.now().isoformat(),
            "version": VERSION
        }

    return app


setup_logging(default_settings.LOG_LEVEL)
app = create_app()


def run(settings: Settings = default_settings):
    import uvicorn

    logger.info(f"server listening on port http://localhost:{settings.PORT}")
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,
        server_header=False,
    )


# =============================================================================
# MAIN
# =============================================================================
if __name__ == "__main__":
    run()
