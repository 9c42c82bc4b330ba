# ==============================================================================
# REQUEST LOGGER MIDDLEWARE
# ==============================================================================
# Per-request access log with a short correlation id and timing
# ==============================================================================

from __future__ import annotations

import logging
import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from artverse.core.constants import APIConstants

logger = logging.getLogger(__name__)


class RequestLoggerMiddleware(BaseHTTPMiddleware):
    """
    Logs every request and its outcome.

    A client-supplied ``X-Request-ID`` is reused, otherwise a short id
    is generated. The id is stored on ``request.state`` and echoed in
    the response headers along with the handling time.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable,
    ) -> Response:
        """Process request with logging."""
        request_id = (
            request.headers.get(APIConstants.REQUEST_ID_HEADER)
            or uuid.uuid4().hex[:8]
        )
        request.state.request_id = request_id
        client = request.client.host if request.client else "-"
        started = time.perf_counter()

        logger.info(f"[{request_id}] {request.method} {request.url.path} from {client}")

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.perf_counter() - started) * 1000
            logger.error(
                f"[{request_id}] {request.method} {request.url.path} "
                f"- failed after {duration_ms:.2f}ms: {e}"
            )
            raise

        duration_ms = (time.perf_counter() - started) * 1000
        level = logging.INFO if response.status_code < 400 else logging.WARNING
        logger.log(
            level,
            f"[{request_id}] {request.method} {request.url.path} "
            f"-> {response.status_code} ({duration_ms:.2f}ms)",
        )

        response.headers[APIConstants.REQUEST_ID_HEADER] = request_id
        response.headers[APIConstants.RESPONSE_TIME_HEADER] = f"{duration_ms:.2f}ms"
        return response
