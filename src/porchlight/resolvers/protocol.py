"""Resolver protocol and the chain walker.

No base class required. The chain checks the shape, not the lineage.
"""

from collections.abc import Sequence
from typing import Protocol

from porchlight.errors import NotFound
from porchlight.http.request import Request
from porchlight.http.response import Response


class Resolver(Protocol):
    """Protocol for one link in the resolution chain.

    Accepts both functions and callable objects::

        # Function resolver
        def health(request: Request) -> Response | None:
            if request.path == "/healthz":
                return Response("ok")
            return None

        # Class resolver
        class Maintenance:
            def __call__(self, request: Request) -> Response | None: ...
    """

    def __call__(self, request: Request) -> Response | None: ...


def resolve(resolvers: Sequence[Resolver], request: Request) -> Response:
    """Return the first answer from *resolvers*, in order.

    Raises ``NotFound`` when every resolver declines.
    """
    for resolver in resolvers:
        response = resolver(request)
        if response is not None:
            return response
    raise NotFound(f"Nothing resolves {request.method} {request.path!r}")
