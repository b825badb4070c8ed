"""ASGI handler — the only component that touches raw ``http`` scopes.

Converts the scope to a Request, runs the app's synchronous
request-to-response function in a worker thread, and sends the result.
"""

from collections.abc import Callable
from functools import partial

import anyio

from porchlight._internal.asgi import Receive, Scope, Send
from porchlight.http.request import Request
from porchlight.http.response import Response
from porchlight.server.sender import send_response


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    handle: Callable[[Request], Response],
) -> None:
    """Process a single HTTP request through *handle*.

    Blocking file reads happen in an anyio worker thread, so a slow disk
    delays only this response.
    """
    if scope["type"] != "http":
        return

    request = Request.from_asgi(dict(scope))
    response = await anyio.to_thread.run_sync(partial(handle, request))
    await send_response(response, send, head=request.method == "HEAD")
