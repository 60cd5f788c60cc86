"""
Request/Response logging middleware.
"""

import time
import uuid
from typing import Callable

import structlog
from fastapi import FastAPI, Request, Response

from job_tracker.config.logging import get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
QUIET_PATH_SUFFIXES = ("/health/", "/health/live")


class LoggingMiddleware:
    """Request/Response logging middleware for FastAPI."""

    def __init__(self, app: FastAPI):
        self.app = app
        self.add_logging_middleware()

    def add_logging_middleware(self) -> None:
        """Add request/response logging middleware."""

        @self.app.middleware("http")
        async def logging_middleware(request: Request, call_next: Callable) -> Response:
            # Honour an incoming request id
            request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
            request.state.request_id = request_id

            structlog.contextvars.clear_contextvars()
            structlog.contextvars.bind_contextvars(request_id=request_id)

            log = logger.debug if request.url.path.endswith(QUIET_PATH_SUFFIXES) else logger.info
            start_time = time.perf_counter()

            log(
                "Request started",
                method=request.method,
                path=request.url.path,
                client_host=request.client.host if request.client else None,
            )

            try:
                response = await call_next(request)
            except Exception as e:
                logger.error(
                    "Request failed",
                    method=request.method,
                    path=request.url.path,
                    error=str(e),
                    process_time=f"{time.perf_counter() - start_time:.4f}s",
                )
                raise
            finally:
                structlog.contextvars.clear_contextvars()

            process_time = time.perf_counter() - start_time
            log(
                "Request completed",
                request_id=request_id,
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                process_time=f"{process_time:.4f}s",
            )

            response.headers[REQUEST_ID_HEADER] = request_id
            response.headers["X-Process-Time"] = f"{process_time:.4f}"
            return response
