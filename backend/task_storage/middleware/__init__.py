"""
Middleware package.

WHY: Middleware provides cross-cutting concerns such as request ids and
access logging that apply to all requests.
"""

from task_storage.middleware.request_context import (
    REQUEST_ID_HEADER,
    RequestContext,
    RequestContextMiddleware,
    RequestIdLogFilter,
    get_request_context,
    get_request_id,
)

__all__ = [
    "REQUEST_ID_HEADER",
    "RequestContext",
    "RequestContextMiddleware",
    "RequestIdLogFilter",
    "get_request_context",
    "get_request_id",
]
