"""Request logging middleware.

Tags every HTTP request with a request ID (a well-formed client X-Request-ID
is kept, anything else is replaced), stores it on request.state for routers
to echo in ApiResponse, returns it in the X-Request-ID header, and logs one
line per request.

Log format:
    INFO [GET] /api/v1/ids/next → 200 (1ms) req_a1b2c3d4e5f6
"""

import logging
import re
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from src.sf_common.response import new_request_id

logger = logging.getLogger("sf.request")

REQUEST_ID_HEADER = "X-Request-ID"
_REQUEST_ID_RE = re.compile(r"[\w-]{1,64}", re.ASCII)


def _resolve_request_id(request: Request) -> str:
    """Reuse a well-formed client X-Request-ID, otherwise mint a new one."""
    supplied = request.headers.get(REQUEST_ID_HEADER)
    if supplied and _REQUEST_ID_RE.fullmatch(supplied):
        return supplied
    return new_request_id()


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = _resolve_request_id(request)
        request.state.request_id = request_id

        start = time.perf_counter()
        response: Response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        response.headers[REQUEST_ID_HEADER] = request_id
        logger.info(
            "[%s] %s → %d (%.0fms) %s",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            request_id,
        )
        return response
