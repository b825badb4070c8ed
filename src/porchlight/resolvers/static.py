"""Static asset resolver.

Serves files from the asset directory for any request path that names
an existing file. Directory paths serve their index file, which is how
a file can collide with (and shadow) the root route.

Declines everything else so the route table gets its turn.
"""

import logging
import mimetypes
from pathlib import Path
from urllib.parse import quote

from porchlight.errors import FileReadError, Forbidden
from porchlight.http.request import Request
from porchlight.http.response import Response

logger = logging.getLogger("porchlight.static")

_TEXT_TYPES = {
    ".html": "text/html",
    ".htm": "text/html",
    ".css": "text/css",
    ".js": "application/javascript",
    ".mjs": "application/javascript",
    ".json": "application/json",
    ".txt": "text/plain",
    ".svg": "image/svg+xml",
}

# Private table so the process-wide mimetypes registry stays untouched.
_MIME = mimetypes.MimeTypes()


def content_type_for(path: Path) -> str:
    """Content type for *path*, inferred from its extension.

    Textual types carry ``charset=utf-8``. Unknown extensions fall back
    to ``application/octet-stream``.
    """
    suffix = path.suffix.lower()
    if suffix in _TEXT_TYPES:
        return f"{_TEXT_TYPES[suffix]}; charset=utf-8"
    guessed, _ = _MIME.guess_type(path.name)
    return guessed or "application/octet-stream"


class StaticResolver:
    """Resolver that answers with files from a directory.

    Security: resolves symlinks and verifies the final path is within
    the configured directory to prevent path traversal.

    Usage::

        static = StaticResolver("./public", index="index.html")
        static(Request("GET", "/style.css"))   # -> Response
        static(Request("GET", "/missing"))     # -> None
    """

    __slots__ = ("_cache_control", "_directory", "_index")

    def __init__(
        self,
        directory: str | Path,
        *,
        index: str = "index.html",
        cache_control: str = "public, max-age=0",
    ) -> None:
        self._directory = Path(directory).resolve()
        self._index = index
        self._cache_control = cache_control

    @property
    def directory(self) -> Path:
        return self._directory

    def __call__(self, request: Request) -> Response | None:
        """Serve a file, or decline with None."""
        if request.method not in ("GET", "HEAD"):
            return None

        relative = request.path.lstrip("/")
        if "\x00" in relative:
            return None
        file_path = (self._directory / relative).resolve() if relative else self._directory
        if not file_path.is_relative_to(self._directory):
            raise Forbidden(f"{request.path!r} escapes the asset directory")

        if file_path.is_dir():
            index_path = file_path / self._index
            if not index_path.is_file():
                return None
            # "/docs" -> "/docs/" so relative links inside the index resolve.
            if relative and not request.path.endswith("/"):
                location = quote(request.path + "/")
                return Response(body="", status=301).with_header("Location", location)
            file_path = index_path
        elif request.path.endswith("/"):
            # A trailing slash names a directory, never a file.
            return None

        if not file_path.is_file():
            return None

        return self._serve_file(file_path)

    def _serve_file(self, file_path: Path) -> Response:
        """Read a file and build a response."""
        try:
            body = file_path.read_bytes()
        except OSError as exc:
            # Vanished or lost permissions after the is_file() check.
            raise FileReadError(file_path) from exc

        logger.debug("static %s (%d bytes)", file_path, len(body))
        return (
            Response(body=body, content_type=content_type_for(file_path))
            .with_header("Cache-Control", self._cache_control)
        )
