"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from autohub.config import Settings
from autohub.interface.api.errors import register_exception_handlers
from autohub.interface.api.routes import (
    activities,
    admin,
    auth,
    blog,
    businesses,
    categories,
    claims,
    health,
    questions,
    reviews,
    users,
    vehicles,
)
from autohub.util.di.container import create_container, setup_di
from autohub.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this. Tests pass their own
    container built from the in-memory providers.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="AutoHub API",
        description="Backend API for AutoHub - an automotive community with Q&A, business listings and reviews",
        version="0.1.0",
    )

    if container is None:
        # Instrument FastAPI for automatic tracing of HTTP requests
        instrument_fastapi(app_instance)
        container = create_container()

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
            "X-Requested-With",
        ],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container)
    register_exception_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(questions.router)
    app_instance.include_router(businesses.router)
    app_instance.include_router(reviews.router)
    app_instance.include_router(vehicles.router)
    app_instance.include_router(blog.router)
    app_instance.include_router(categories.router)
    app_instance.include_router(claims.router)
    app_instance.include_router(activities.router)
    app_instance.include_router(users.router)
    app_instance.include_router(admin.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
