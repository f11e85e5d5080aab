"""
Main entrypoint for the Event Registration API.

This module assembles the FastAPI application, sets up logging, CORS
and the versioned router, and owns the registration service for the
lifetime of the app.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Run it with uvicorn, e.g.::

    uvicorn event_registration_api.app.main:app --reload
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.router import router as v1_router
from .core.config import Settings, settings
from .core.logging_config import setup_logging
from .core.seed import seed_events
from .services.registration_service import RegistrationService


def create_app(
    app_settings: Optional[Settings] = None,
    service: Optional[RegistrationService] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the module‑level ``settings``.
    service : Optional[RegistrationService]
        Registration service to serve.  A new service with an empty
        store is created when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings.log_level, app_settings.log_file)

    app = FastAPI(title=app_settings.project_name, version=app_settings.api_version)
    app.state.settings = app_settings
    app.state.registration_service = service or RegistrationService()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(v1_router, prefix="/eventreg")

    @app.on_event("startup")
    async def startup_event() -> None:
        if app_settings.seed_on_startup:
            seed_events(app.state.registration_service)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
