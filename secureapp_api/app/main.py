"""
Main entrypoint for the SecureApp Customer API.

This module assembles the FastAPI application, sets up logging,
builds the read-only dataset and includes the v1 router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn secureapp_api.app.main:app --port 3000

Settings, the dataset and the clock can all be passed explicitly;
tests use that to run against a fixed dataset and a frozen clock
without starting a server.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.dataset import Clock, Dataset, load_dataset, utc_now
from .core.errors import register_error_handlers
from .core.logging_config import setup_logging
from .core.middleware import AccessLogMiddleware
from .schemas.customer import CustomerStatus

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    dataset: Optional[Dataset] = None,
    clock: Optional[Clock] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the values read from the
        environment at import time.
    dataset : Optional[Dataset]
        Records to serve.  Defaults to the seed dataset.
    clock : Optional[Clock]
        Callable returning the current time for response timestamps.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the dataset
    # loader can log.
    setup_logging(settings.log_level, settings.log_file)

    dataset = dataset if dataset is not None else load_dataset()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("%s %s starting (%s)", settings.project_name, settings.api_version, settings.environment)
        logger.info("Total customers loaded: %d", len(dataset.customers))
        logger.info("Active customers: %d", dataset.count_by_status(CustomerStatus.ACTIVE))
        logger.info("Inactive customers: %d", dataset.count_by_status(CustomerStatus.INACTIVE))
        logger.info("Commands loaded: %d", len(dataset.commands))
        yield
        logger.info("%s shutting down", settings.project_name)

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.state.settings = settings
    app.state.dataset = dataset
    app.state.clock = clock or utc_now

    app.add_middleware(AccessLogMiddleware)
    register_error_handlers(app)
    app.include_router(v1_router)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
