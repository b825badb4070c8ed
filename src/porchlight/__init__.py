"""Porchlight — a minimal static content server.

Serves a directory of assets and a default document at ``/``, with the
asset lookup checked before the route table.

Basic usage::

    from porchlight import App, ServerConfig

    app = App(ServerConfig(asset_dir="./public", port=8080))

    @app.route("/")
    def index():
        return "What a wonderful world!! keep pushing keep learning!"

    app.run()
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "BindError",
    "ConfigurationError",
    "FileReadError",
    "Forbidden",
    "HTTPError",
    "Listener",
    "NotFound",
    "PorchlightError",
    "Request",
    "Response",
    "ServerConfig",
    "create_app",
    "start",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import porchlight`` fast while providing a clean top-level API.
    """
    if name == "App":
        from porchlight.app import App

        return App

    if name == "ServerConfig":
        from porchlight.config import ServerConfig

        return ServerConfig

    if name == "Request":
        from porchlight.http.request import Request

        return Request

    if name == "Response":
        from porchlight.http.response import Response

        return Response

    if name in ("Listener", "start"):
        from porchlight.server import listener as _listener

        return getattr(_listener, name)

    if name == "create_app":
        from porchlight.site import create_app

        return create_app

    if name in (
        "BindError",
        "ConfigurationError",
        "FileReadError",
        "Forbidden",
        "HTTPError",
        "NotFound",
        "PorchlightError",
    ):
        from porchlight import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
