"""FastAPI application exposing the ETL pipeline."""

import logging
import os
from typing import List

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .middleware import LoggingMiddleware
from .routers import etl

logger = logging.getLogger(__name__)


def cors_origins() -> List[str]:
    """Allowed browser origins, comma separated in API_CORS_ORIGINS."""
    raw = os.getenv('API_CORS_ORIGINS', 'http://localhost:3000,http://localhost:8000')
    return [origin.strip() for origin in raw.split(',') if origin.strip()]


def create_app() -> FastAPI:
    app = FastAPI(
        title="Sports Data ETL",
        description="Extracts team, player and game feeds and loads them into a database or S3",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    origins = cors_origins()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)
    app.include_router(etl.router, prefix="/api/v1/etl", tags=["etl"])

    logger.debug(f"ETL API configured for origins {origins}")
    return app


app = create_app()
