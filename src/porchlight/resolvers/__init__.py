"""Resolvers — the ordered chain that turns a Request into a Response.

A resolver is any callable matching::

    def resolver(request: Request) -> Response | None

``None`` declines the request and the next resolver is tried. The app
evaluates a fixed sequence:

    StaticResolver -- files under the asset directory (checked first)
    RouteResolver  -- the explicit route table
    (fallback)     -- NotFound, answered with an empty 404
"""

from porchlight.resolvers.protocol import Resolver, resolve
from porchlight.resolvers.routes import RouteResolver
from porchlight.resolvers.static import StaticResolver, content_type_for

__all__ = [
    "Resolver",
    "RouteResolver",
    "StaticResolver",
    "content_type_for",
    "resolve",
]
