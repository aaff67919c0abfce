"""FastAPI middleware for request tracing, timing and metrics"""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from lending_engine.infrastructure.observability.metrics import request_duration_histogram

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
PROCESS_TIME_HEADER = "X-Process-Time"

# Scoring and schedule calls are pure arithmetic; anything slower is worth a look
SLOW_REQUEST_MS = 250


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Attach a request ID to every request/response.

    An upstream ID (dashboard, gateway) is reused so engine logs line up with
    the caller's; otherwise a UUID4 is generated.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class MetricsMiddleware(BaseHTTPMiddleware):
    """Time each request: latency histogram, X-Process-Time header, slow-call warning"""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start
        elapsed_ms = elapsed * 1000

        request_duration_histogram.labels(
            method=request.method,
            endpoint=request.url.path,
            status=response.status_code,
        ).observe(elapsed)
        response.headers[PROCESS_TIME_HEADER] = f"{elapsed_ms:.2f}ms"

        if elapsed_ms > SLOW_REQUEST_MS:
            logger.warning(
                "%s %s completed in %.2fms (SLOW)",
                request.method,
                request.url.path,
                elapsed_ms,
                extra={
                    "request_id": getattr(request.state, "request_id", "unknown"),
                    "status_code": response.status_code,
                    "duration_ms": elapsed_ms,
                },
            )

        return response
