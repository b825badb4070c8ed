"""Porchlight exception hierarchy.

Shared across the router, resolvers, app, and listener so every module
raises and catches the same types.
"""

from dataclasses import dataclass
from pathlib import Path


class PorchlightError(Exception):
    """Base for all porchlight-specific errors."""


class ConfigurationError(PorchlightError):
    """Raised when app configuration is invalid.

    Typically surfaces during ``App._freeze()`` at startup.
    """


class BindError(PorchlightError):
    """The listening socket could not be established.

    Raised by ``start()`` when the port is already in use or the process
    lacks permission to bind it. Terminal for startup: no retry, no
    port search.
    """

    def __init__(self, host: str, port: int, reason: str = "") -> None:
        self.host = host
        self.port = port
        self.reason = reason
        message = f"Cannot bind {host}:{port}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class FileReadError(PorchlightError):
    """A static file matched by path lookup could not be read.

    Happens when the file disappears or loses its permissions between
    the existence check and the read. Answered with a 500 for the
    affected request only.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"Cannot read static file {self.path}")


@dataclass(frozen=True, slots=True)
class HTTPError(PorchlightError):
    """An error that maps directly to an HTTP status code.

    Raised by the router or resolvers. ``App.handle()`` catches these
    and answers with the status and an empty body.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404 — no asset and no route matched the request."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class Forbidden(HTTPError):  # noqa: N818
    """403 — the request path resolves outside the asset directory."""

    def __init__(self, detail: str = "Forbidden") -> None:
        super().__init__(status=403, detail=detail)
