"""FastAPI application with lifespan hook."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from fastapi_app import routes
from helpers.constants import APP_CONFIG, APP_LOGGER, EXPORTER_NAME, EXPORTER_VERSION


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the collector eagerly so a bad metric filter aborts startup."""
    APP_LOGGER.info(msg=f"Starting {EXPORTER_NAME}", version=EXPORTER_VERSION)
    APP_LOGGER.info(msg=f"AWS Billing Exporter config: {APP_CONFIG}")
    routes._get_registry()
    yield


app = FastAPI(
    title="AWS Billing Exporter",
    description="Prometheus exporter for AWS Cost Explorer figures",
    version=EXPORTER_VERSION,
    lifespan=lifespan,
)
app.include_router(routes.router)
