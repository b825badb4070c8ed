"""The default site — one root route over the shipped asset directory.

Built explicitly by :func:`create_app`; nothing here lives at module
scope, so tests and the CLI each get their own app.

Two variants share this factory:

* asset-serving (default): ``public/`` holds ``index.html``, which the
  static resolver serves for ``/`` ahead of the root route;
* minimal: an empty asset directory, where the root route answers with
  the greeting (or ``config.default_document`` when one is set).
"""

from pathlib import Path

from porchlight.app import App
from porchlight.config import ServerConfig
from porchlight.http.response import Response
from porchlight.resolvers.static import content_type_for


def create_app(config: ServerConfig | None = None) -> App:
    """Build the site app from *config* (defaults to ``ServerConfig()``)."""
    app = App(config)
    default_document = (
        Path(app.config.default_document) if app.config.default_document is not None else None
    )
    greeting = app.config.greeting

    @app.route("/", name="default-document")
    def index() -> Response:
        if default_document is None:
            return Response(greeting, content_type="text/html; charset=utf-8")
        return Response(
            default_document.read_bytes(),
            content_type=content_type_for(default_document),
        )

    return app
