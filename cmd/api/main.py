"""
FastAPI Service - Main entry point for the CleanTasks API.
- Routes are separated into modules
- In-memory repositories held by an application-scoped container
- Service-level errors mapped to HTTP status codes by global handlers
"""

import os
import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Running this file directly puts cmd/api on sys.path, not the project root
APP_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.dirname(os.path.dirname(APP_DIR))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from core.config import get_settings  # noqa: E402
from core.container import Container, bootstrap_container  # noqa: E402
from core.logger import logger  # noqa: E402
from internal.api.error_handlers import register_error_handlers  # noqa: E402
from internal.api.routes import category_router, health_router, task_router  # noqa: E402


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup and shutdown; in-memory data is dropped on shutdown."""
    settings = get_settings()
    logger.info(
        f"========== Starting {settings.app_name} v{settings.app_version} API service =========="
    )
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"API: {settings.api_host}:{settings.api_port}{settings.api_prefix}")

    yield

    logger.info("========== Shutting down API service ==========")


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Factory function to create and configure the FastAPI application.

    Args:
        container: Container to serve from; a fresh one with empty
            in-memory repositories is built when omitted

    Returns:
        FastAPI: Configured application instance
    """
    try:
        logger.info("Creating FastAPI application...")
        settings = get_settings()

        description = """
## CleanTasks API

Task and category management backed by in-memory repositories.

### Key Features

* **Categories** - CRUD with case-insensitive unique names
* **Tasks** - CRUD, completion, and filtering by status, priority and category
* **Overdue view** - Tasks past their due date that are not completed

Data lives in memory and is lost on restart.
        """

        tags_metadata = [
            {"name": "Tasks", "description": "Task operations and filtered views."},
            {"name": "Categories", "description": "Category operations."},
            {"name": "Health", "description": "Health check endpoints."},
        ]

        app = FastAPI(
            title=settings.app_name,
            version=settings.app_version,
            description=description,
            lifespan=lifespan,
            openapi_tags=tags_metadata,
            docs_url="/docs",
            redoc_url="/redoc",
            openapi_url="/openapi.json",
        )

        app.state.container = container or bootstrap_container()

        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        register_error_handlers(app)

        app.include_router(health_router)
        app.include_router(category_router, prefix=settings.api_prefix)
        app.include_router(task_router, prefix=settings.api_prefix)
        logger.debug("Routes registered: health, categories, tasks")

        logger.info("FastAPI application created successfully")
        return app

    except Exception as e:
        logger.error(f"Failed to create FastAPI application: {e}")
        logger.exception("Application creation error details:")
        raise


app = create_app()


# Run with: python cmd/api/main.py
if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    logger.info("========== Starting Uvicorn Server ==========")
    logger.info(f"Host: {settings.api_host}, Port: {settings.api_port}, Reload: {settings.api_reload}")

    # The reload subprocess imports core/ and internal/ through PYTHONPATH
    current_pythonpath = os.environ.get("PYTHONPATH", "")
    if PROJECT_ROOT not in current_pythonpath.split(os.pathsep):
        os.environ["PYTHONPATH"] = (
            f"{PROJECT_ROOT}{os.pathsep}{current_pythonpath}" if current_pythonpath else PROJECT_ROOT
        )

    # The import string is relative to cmd/api; the stdlib owns the name "cmd".
    if settings.api_reload:
        uvicorn.run(
            "main:app",
            app_dir=APP_DIR,
            host=settings.api_host,
            port=settings.api_port,
            reload=True,
            log_level="info" if settings.debug else "warning",
        )
    else:
        uvicorn.run(
            app,
            host=settings.api_host,
            port=settings.api_port,
            log_level="info" if settings.debug else "warning",
        )
