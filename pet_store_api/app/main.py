"""
Main entrypoint for the Pet Store API.

This module assembles the FastAPI application: it sets up logging,
registers the 400 error handlers and includes the versioned router.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``, so it can be
served directly::

    uvicorn pet_store_api.app.main:app --port 3000
"""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.errors import BadRequestError, bad_request_handler, validation_error_handler
from .core.logging_config import setup_logging
from .core.store import init_store


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.add_exception_handler(BadRequestError, bad_request_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.on_event("startup")
    async def startup_event() -> None:
        # Every server start begins from the seed records.
        init_store()

    return app


app = create_app()
