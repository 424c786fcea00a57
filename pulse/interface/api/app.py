"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pulse.config import Settings
from pulse.interface.api.routes import (
    categories,
    health,
    invites,
    poll_configs,
    polls,
    profiles,
    psi,
    user_polls,
)
from pulse.interface.error import register_error_handlers
from pulse.util.di.container import create_container, setup_di
from pulse.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container; the production container when omitted
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Pulse API",
        description="Backend API for Pulse - polls, invites and public reputation scores",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container())
    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(categories.router)
    app_instance.include_router(poll_configs.router)
    app_instance.include_router(polls.router)
    app_instance.include_router(user_polls.router)
    app_instance.include_router(invites.router)
    app_instance.include_router(psi.router)
    app_instance.include_router(profiles.router)

    return app_instance
