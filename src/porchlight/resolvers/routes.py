"""Route-table resolver — consulted after the static assets."""

import inspect
from collections.abc import Callable
from typing import Any

from porchlight.errors import NotFound
from porchlight.http.request import Request
from porchlight.http.response import Response
from porchlight.routing.router import Router
from porchlight.server.negotiation import negotiate


class RouteResolver:
    """Resolver that dispatches to the compiled route table.

    Declines (returns None) when no route matches, leaving the 404
    decision to the end of the chain.
    """

    __slots__ = ("_router",)

    def __init__(self, router: Router) -> None:
        self._router = router

    @property
    def router(self) -> Router:
        return self._router

    def __call__(self, request: Request) -> Response | None:
        try:
            match = self._router.match(request.method, request.path)
        except NotFound:
            return None

        handler = match.route.handler
        request = request.with_path_params(match.path_params)
        result = handler(**build_handler_kwargs(handler, request))
        if inspect.isawaitable(result):
            if inspect.iscoroutine(result):
                result.close()
            msg = (
                f"Handler {match.route.path!r} returned an awaitable; "
                "route handlers must be plain functions."
            )
            raise TypeError(msg)
        return negotiate(result)


def build_handler_kwargs(handler: Callable[..., Any], request: Request) -> dict[str, Any]:
    """Inspect the handler signature and build kwargs.

    Resolution order:
    1. ``request`` parameter (by name or ``Request`` annotation)
    2. Path parameters (by name, converted to the annotated type)
    """
    sig = inspect.signature(handler, eval_str=True)
    kwargs: dict[str, Any] = {}

    for name, param in sig.parameters.items():
        if name == "request" or param.annotation is Request:
            kwargs[name] = request
        elif name in request.path_params:
            value = request.path_params[name]
            if param.annotation is not inspect.Parameter.empty:
                try:
                    kwargs[name] = param.annotation(value)
                except (ValueError, TypeError):
                    kwargs[name] = value
            else:
                kwargs[name] = value

    return kwargs
