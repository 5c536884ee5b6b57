"""
Main entrypoint for the User Directory API.

This module assembles the FastAPI application, sets up logging, wires
the data and service layers together and includes versioned routers.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``.  Importing the
app here makes it easy to run with uvicorn or another ASGI server,
e.g.::

    uvicorn user_directory_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .core.store import UserStore
from .services.user_service import UserService

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    The store and the service are constructed here by hand and the
    service is kept on ``app.state`` for the route dependencies.  Each
    call builds a new store, so separate apps never share records.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module level settings
        read from the environment at import time.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings

    # Initialise logging before anything else so that the wiring below
    # is logged with the configured format.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    store = UserStore(seed=settings.seed_sample_users)
    app.state.user_service = UserService(store)
    logger.info("User service wired to an in-memory store with %d users", len(store))

    # Mount versioned routes under /api/v1.
    app.include_router(v1_router, prefix="/api/v1")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
