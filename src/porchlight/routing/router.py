"""Compiled router with trie-based path matching.

Each node holds static children, at most one parameter edge, and the
routes terminating there keyed by method.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from porchlight.errors import ConfigurationError, NotFound
from porchlight.routing.params import CONVERTERS
from porchlight.routing.route import Route, RouteMatch, Segment


def parse_path(path: str) -> list[Segment]:
    """Parse a route path string into segments.

    Examples::

        "/"               -> []
        "/users"          -> [Segment("users")]
        "/users/{id:int}" -> [Segment("users"), Segment("{id:int}", "id", "int")]
    """
    if not path.startswith("/"):
        msg = f"Route path {path!r} must start with '/'."
        raise ConfigurationError(msg)

    segments: list[Segment] = []
    for part in path.strip("/").split("/"):
        if not part:
            continue
        if part.startswith("{") and part.endswith("}"):
            name, _, converter = part[1:-1].partition(":")
            converter = converter or "str"
            if converter not in CONVERTERS:
                msg = f"Unknown converter {converter!r} in route {path!r}."
                raise ConfigurationError(msg)
            segments.append(Segment(value=part, param=name, converter=converter))
        else:
            segments.append(Segment(value=part))
    return segments


@dataclass(slots=True)
class _Node:
    """A node in the route trie. Mutable during compilation only."""

    children: dict[str, _Node] = field(default_factory=dict)
    param: _ParamEdge | None = None
    routes: dict[str, Route] = field(default_factory=dict)


@dataclass(slots=True)
class _ParamEdge:
    name: str
    regex: re.Pattern[str]
    node: _Node


class Router:
    """Compiled route table.

    Usage::

        router = Router()
        router.add(Route("/", index, frozenset({"GET"})))
        router.compile()
        match = router.match("GET", "/")
    """

    __slots__ = ("_compiled", "_root", "_routes")

    def __init__(self) -> None:
        self._root = _Node()
        self._routes: list[Route] = []
        self._compiled = False

    def add(self, route: Route) -> None:
        """Add a route. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)

        node = self._root
        for seg in parse_path(route.path):
            if seg.param is None:
                node = node.children.setdefault(seg.value, _Node())
                continue
            if node.param is None:
                pattern, _ = CONVERTERS[seg.converter]
                node.param = _ParamEdge(seg.param, re.compile(f"^{pattern}$"), _Node())
            elif node.param.name != seg.param:
                msg = (
                    f"Route {route.path!r} names parameter {seg.param!r} where "
                    f"another route already uses {node.param.name!r}."
                )
                raise ConfigurationError(msg)
            node = node.param.node

        for method in route.methods:
            if method in node.routes:
                msg = f"Duplicate route: {method} {route.path!r} is already registered."
                raise ConfigurationError(msg)
            node.routes[method] = route
        self._routes.append(route)

    @property
    def routes(self) -> list[Route]:
        """All registered routes, in registration order."""
        return list(self._routes)

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    def match(self, method: str, path: str) -> RouteMatch:
        """Match a request method and path against the table.

        A ``GET`` route also answers ``HEAD``. Raises ``NotFound`` when no
        route matches, including when the path exists only for other
        methods.
        """
        parts = [p for p in path.strip("/").split("/") if p]
        found = self._walk(self._root, parts, 0, {})
        if found is not None:
            node, params = found
            route = node.routes.get(method)
            if route is None and method == "HEAD":
                route = node.routes.get("GET")
            if route is not None:
                return RouteMatch(route=route, path_params=params)
        raise NotFound(f"No route matches {method} {path!r}")

    def _walk(
        self,
        node: _Node,
        parts: list[str],
        index: int,
        params: dict[str, str],
    ) -> tuple[_Node, dict[str, str]] | None:
        if index == len(parts):
            return (node, params) if node.routes else None

        part = parts[index]

        # Static segments win over parameters at the same depth.
        child = node.children.get(part)
        if child is not None:
            found = self._walk(child, parts, index + 1, params)
            if found is not None:
                return found

        edge = node.param
        if edge is not None and edge.regex.match(part):
            return self._walk(edge.node, parts, index + 1, {**params, edge.name: part})

        return None
