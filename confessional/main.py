"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (confession API, health, pages)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware
- Logging configuration
- Database engine and startup migrations

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from confessional.core.config import Settings, load_settings
from confessional.domain.confessions.errors import StartupConfigError
from confessional.infrastructure.confessions.schema import (
    build_engine,
    run_migrations,
)
from confessional.infrastructure.web.homepage_renderer import HomepageRenderer
from confessional.infrastructure.web.static_assets import StaticAssetStore
from confessional.interfaces.confessions.router import router as confessions_router
from confessional.interfaces.health import router as health_router
from confessional.interfaces.pages.router import router as pages_router
from confessional.shared.errors.handlers import register_error_handlers
from confessional.shared.logging import configure_logging
from confessional.shared.security.headers import SecurityHeadersMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: migrate before serving, release the pool on exit."""
    run_migrations(app.state.engine)

    yield

    app.state.engine.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application. The engine,
    renderer and asset store are built here and attached to app.state.

    Args:
        settings: Explicit settings. Loaded from the environment when omitted.

    Returns:
        A fully configured FastAPI application instance.

    Raises:
        StartupConfigError: If settings are omitted and the environment is invalid.
    """
    if settings is None:
        settings = load_settings()

    configure_logging(level=settings.log_level, log_sql=settings.log_sql)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.engine = build_engine(
        settings.database_url,
        pool_size=settings.connection_pool_size,
        pool_timeout=settings.pool_timeout,
    )
    app.state.renderer = HomepageRenderer()
    app.state.assets = StaticAssetStore(settings.static_root)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers (pages last: its asset route matches every GET path) ---
    app.include_router(health_router, prefix="/api")
    app.include_router(confessions_router)
    app.include_router(pages_router)

    return app


def main() -> None:
    """Run the server. Exits with status 1 on invalid configuration."""
    try:
        settings = load_settings()
    except StartupConfigError as exc:
        configure_logging()
        for problem in exc.problems:
            logger.critical("Startup configuration error: %s", problem)
        raise SystemExit(1) from exc

    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
