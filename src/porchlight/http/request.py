"""Immutable HTTP request descriptor.

Everything the resolvers need is captured when the request is built;
there is nothing left to read from the connection afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from porchlight.http.headers import Headers


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``path`` is taken from the scope, already percent-decoded by the
    server. The query string is kept verbatim:
    no resolver looks at it, but it survives for handlers that want it.
    """

    method: str
    path: str
    headers: Headers = field(default_factory=Headers)
    query_string: str = ""
    path_params: dict[str, str] = field(default_factory=dict)
    http_version: str = "1.1"
    client: tuple[str, int] | None = None

    @property
    def url(self) -> str:
        """Path plus query string, as the client sent it."""
        if self.query_string:
            return f"{self.path}?{self.query_string}"
        return self.path

    def with_path_params(self, path_params: dict[str, str]) -> Request:
        """Return a copy carrying the parameters captured by the router."""
        return Request(
            method=self.method,
            path=self.path,
            headers=self.headers,
            query_string=self.query_string,
            path_params=path_params,
            http_version=self.http_version,
            client=self.client,
        )

    @classmethod
    def from_asgi(cls, scope: dict[str, Any]) -> Request:
        """Create a Request from an ASGI ``http`` scope."""
        client = scope.get("client")
        return cls(
            method=scope["method"].upper(),
            path=scope["path"],
            headers=Headers(tuple(scope.get("headers", ()))),
            query_string=scope.get("query_string", b"").decode("latin-1"),
            http_version=scope.get("http_version", "1.1"),
            client=tuple(client) if client else None,
        )
