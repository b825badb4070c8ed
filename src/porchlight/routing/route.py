"""Route and RouteMatch frozen dataclasses."""

from dataclasses import dataclass

from porchlight._internal.types import Handler


@dataclass(frozen=True, slots=True)
class Segment:
    """One parsed segment of a route path.

    Static: ``users``     (param=None)
    Param:  ``{id}``      (param="id", converter="str")
    Typed:  ``{id:int}``  (param="id", converter="int")
    """

    value: str
    param: str | None = None
    converter: str = "str"


@dataclass(frozen=True, slots=True)
class Route:
    """A (methods, path pattern) pair mapped to a handler.

    Created during app setup, compiled into the router at freeze time.
    """

    path: str
    handler: Handler
    methods: frozenset[str]
    name: str | None = None


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: Route
    path_params: dict[str, str]
