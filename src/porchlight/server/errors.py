"""Error mapping for porchlight requests.

Every failure ends at the boundary of its own request: HTTPError maps
to its status, anything else to a 500.
"""

import logging

from porchlight.errors import FileReadError, HTTPError
from porchlight.http.request import Request
from porchlight.http.response import Response

logger = logging.getLogger("porchlight.server")


def handle_http_error(exc: HTTPError, request: Request) -> Response:
    """Map an HTTPError to a Response with an empty body.

    Expected outcomes such as a 404 are logged at debug level only.
    """
    logger.debug("%d %s %s: %s", exc.status, request.method, request.path, exc.detail)
    resp = Response(body="", status=exc.status, content_type="text/plain; charset=utf-8")
    for name, value in exc.headers:
        resp = resp.with_header(name, value)
    return resp


def handle_internal_error(exc: Exception, request: Request) -> Response:
    """Handle unexpected exceptions (and unreadable files) as 500 errors."""
    if isinstance(exc, FileReadError):
        logger.error("500 %s %s: %s", request.method, request.path, exc, exc_info=exc)
    else:
        logger.exception("500 %s %s", request.method, request.path)
    return Response(
        body="Internal Server Error",
        status=500,
        content_type="text/plain; charset=utf-8",
    )
