"""Custom middleware for the FastAPI application."""

import time
import logging
from typing import Callable
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs every request and its response time."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        client = request.client.host if request.client else 'unknown'
        logger.info(f"Request: {request.method} {request.url.path} from {client}")

        response = await call_next(request)

        process_time = time.perf_counter() - start_time
        logger.info(f"Response: {response.status_code} for {request.method} {request.url.path} "
                    f"({process_time:.3f}s)")
        response.headers["X-Process-Time"] = f"{process_time:.6f}"
        return response
