"""
Request context middleware for request logging.

WHAT: Middleware that assigns every request an id, makes it available
throughout the request lifecycle and logs one access line per request.

WHY: A request id on every log line and on the response (X-Request-ID)
lets a client-reported failure be matched to the server log. Services
reach the id through ``get_request_context`` without a Request object.

HOW: Stores a RequestContext in a ContextVar and in ``request.state``.
A ``logging.Filter`` copies the request id onto log records.
"""

import logging
import time
import uuid
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Optional, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


@dataclass
class RequestContext:
    """
    Container for request-scoped context data.

    Fields:
    - request_id: Unique identifier for the request (for log correlation)
    - path: Request path
    - method: HTTP method (GET, POST, etc.)
    - started_at: Monotonic clock value when the request arrived
    """

    request_id: str
    path: str
    method: str
    started_at: float


# Each async request gets its own isolated context
_request_context: ContextVar[Optional[RequestContext]] = ContextVar(
    "request_context", default=None
)


def get_request_context() -> Optional[RequestContext]:
    """
    Get the current request context.

    Returns:
        RequestContext if within a request, None otherwise
    """
    return _request_context.get()


def get_request_id(request: Request) -> str:
    """
    Reuse the caller's X-Request-ID if it sent one, otherwise mint a UUID4.

    Args:
        request: The incoming request

    Returns:
        Request id as string
    """
    incoming = request.headers.get(REQUEST_ID_HEADER)
    if incoming and incoming.strip():
        return incoming.strip()[:128]
    return str(uuid.uuid4())


class RequestIdLogFilter(logging.Filter):
    """
    Logging filter that sets ``record.request_id``.

    Records emitted outside a request get "-".
    """

    def filter(self, record: logging.LogRecord) -> bool:
        context = _request_context.get()
        record.request_id = context.request_id if context else "-"
        return True


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Middleware that captures request context and logs each request.

    Example:
        # In a service:
        ctx = get_request_context()
        logger.info(f"[{ctx.request_id}] project created")
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process request and add context.

        Args:
            request: Incoming request
            call_next: Next middleware/handler

        Returns:
            Response with request ID header added
        """
        context = RequestContext(
            request_id=get_request_id(request),
            path=request.url.path,
            method=request.method,
            started_at=time.perf_counter(),
        )

        request.state.context = context
        token = _request_context.set(context)

        try:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = context.request_id

            elapsed_ms = (time.perf_counter() - context.started_at) * 1000
            logger.info(
                f"{context.method} {context.path} -> {response.status_code} "
                f"({elapsed_ms:.1f} ms) [{context.request_id}]"
            )
            return response

        finally:
            _request_context.reset(token)
