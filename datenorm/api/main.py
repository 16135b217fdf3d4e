"""FastAPI application factory.

Assembles the health and date routers and maps ``InvalidQueryError`` to
HTTP 422.  This module is the authoritative app object — datenorm/main.py
re-exports it.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from datenorm.api.routes.dates import router as dates_router
from datenorm.api.routes.health import router as health_router
from datenorm.core.errors import InvalidQueryError
from datenorm.core.logging import setup_logging
from datenorm.core.settings import get_settings
from datenorm.normalization.date_formats import ACCEPTED_FORMATS

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    setup_logging()
    yield


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    lifespan=lifespan,
)


@app.exception_handler(InvalidQueryError)
async def invalid_query_handler(_: Request, exc: InvalidQueryError) -> JSONResponse:
    logger.info("Rejected query value: %s", type(exc).__name__)
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "accepted_formats": list(ACCEPTED_FORMATS)},
    )


app.include_router(health_router)
app.include_router(dates_router)
