"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from huddle.config import Settings
from huddle.interface.api.routes import comments, health
from huddle.interface.error import register_error_handlers
from huddle.util.di.container import create_container, setup_di
from huddle.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function;
    start_app.py handles this.

    Args:
        container: DI container to use; defaults to the production one
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Huddle Comments API",
        description="Threaded discussions with attachments on Huddle events",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,  # auth_token cookie
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())
    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(comments.router)

    # Attachment files; URLs are /uploads/<comment_folder>/<name>
    app_instance.mount(
        "/uploads",
        StaticFiles(directory=settings.storage.upload_root, check_dir=False),
        name="uploads",
    )

    return app_instance


# App instance for uvicorn
app = create_app()
