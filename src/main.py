"""Main FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse

from api.exception_handlers import setup_exception_handlers
from api.middleware.logging import RequestLoggingMiddleware
from api.middleware.request_id import RequestIDMiddleware
from api.middleware.security import SecurityHeadersMiddleware
from api.router import router as api_router
from api.routes.health import router as health_router
from core.config import settings
from core.logging import setup_logging
from infrastructure.database.session import engine

logger = structlog.get_logger()

# Initialize structured logging
setup_logging()

DESCRIPTION = f"""\
## Developer Social Network

Accounts, developer profiles and a shared post feed with likes and comments.

### Authentication
Register at `POST /api/users` or log in at `POST /api/auth` to receive a
token, then send it on private routes in the `{settings.auth_token_header}` header:
```
{settings.auth_token_header}: <your_token>
```
"""

OPENAPI_TAGS = [
    {"name": "health", "description": "Health check endpoints"},
    {"name": "users", "description": "Account registration"},
    {"name": "auth", "description": "Login and the current user"},
    {"name": "profile", "description": "Developer profiles, experience and education"},
    {"name": "posts", "description": "Posts, likes and comments"},
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Warn about unsafe settings on startup; release DB connections on shutdown."""
    if settings.is_production and settings.jwt_secret_key == "CHANGE-ME-IN-PRODUCTION":
        logger.warning("default_jwt_secret_in_production")

    logger.info("application_started", environment=settings.app_env)
    yield
    await engine.dispose()
    logger.info("application_stopped")


def _add_middleware(app: FastAPI) -> None:
    # LIFO order - last added = outermost
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", settings.auth_token_header, "X-Request-ID"],
        expose_headers=["X-Request-ID"],
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
        title=settings.app_name,
        description=DESCRIPTION,
        version=settings.app_version,
        debug=settings.debug,
        license_info={"name": "MIT"},
        openapi_tags=OPENAPI_TAGS,
    )

    _add_middleware(app)
    setup_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(api_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
    )
