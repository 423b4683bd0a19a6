"""FastAPI server for the coverage demo service."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from coverage_demo.api import router as api_router
from coverage_demo.env_config import get_log_level
from coverage_demo.logging_config import setup_logging
from coverage_demo.models.domain import APP_INFO
from coverage_demo.models.dto import HealthResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for app startup/shutdown."""
    setup_logging(get_log_level())
    logger.info("Starting %s %s", APP_INFO.name, APP_INFO.version)

    yield

    logger.info("Shutting down %s", APP_INFO.name)


app = FastAPI(
    title=APP_INFO.name,
    description=APP_INFO.description,
    version=APP_INFO.version,
    lifespan=lifespan,
)


def custom_openapi():
    """Custom OpenAPI schema with enhanced documentation."""
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=APP_INFO.name,
        version=APP_INFO.version,
        description="""
# Coverage Demo API

Trivial arithmetic and greeting endpoints used to demonstrate unit and
integration test coverage.

## Endpoints
- `GET /` plain-text hello
- `GET /info` static application information
- `GET /calculate/sum`, `GET /calculate/product` with query `a`, `b`
- `GET /check/even/{num}`
- `GET /greet` with query `name`, `time` (morning, afternoon, evening)

## Invalid input
Numeric parameters are parsed from their leading integer ("5px" is 5).
Input without one never produces an error status: sum and product return
`{"result": 0}` and the parity check returns `{"number": 0, "isEven": true}`.
        """,
        routes=app.routes,
    )

    app.openapi_schema = openapi_schema
    return app.openapi_schema


app.openapi = custom_openapi

app.include_router(api_router)


@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check endpoint."""
    return HealthResponse(status="ok")
