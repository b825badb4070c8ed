"""Listener — binds the port and hands the app to pounce.

``start()`` is the only way a porchlight app reaches the network. It
fails fast with ``BindError`` when the address cannot be bound, then
returns a handle whose ``run()`` blocks while pounce serves requests.
"""

from __future__ import annotations

import logging
import socket
from dataclasses import dataclass
from typing import TYPE_CHECKING

from porchlight.errors import BindError

if TYPE_CHECKING:
    from porchlight.app import App

logger = logging.getLogger("porchlight.server")


def probe_bind(host: str, port: int) -> None:
    """Check that ``(host, port)`` can be bound right now.

    Binds a throwaway socket and closes it. ``SO_REUSEADDR`` is set so a
    port lingering in TIME_WAIT is not mistaken for a live listener.

    Raises ``BindError`` if the port is in use or the process lacks
    permission.
    """
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    try:
        with socket.socket(family, socket.SOCK_STREAM) as sock:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.bind((host, port))
    except OSError as exc:
        raise BindError(host, port, exc.strerror or str(exc)) from exc


@dataclass(slots=True)
class Listener:
    """Handle for a started server.

    Returned by ``start()``; ``run()`` blocks until the process is
    interrupted.
    """

    app: App
    host: str
    port: int

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"

    def run(self) -> None:
        """Serve until interrupted (pounce handles SIGINT/SIGTERM)."""
        logger.debug("handing %s to pounce", self.url)
        _serve(self.app, self.host, self.port)


def start(app: App, host: str | None = None, port: int | None = None) -> Listener:
    """Freeze *app*, verify the address, and return a Listener.

    Terminal on failure: ``BindError`` propagates to the caller. There
    is no retry and no search for another port.
    """
    app._ensure_frozen()

    _host = host or app.config.host
    _port = app.config.port if port is None else port

    probe_bind(_host, _port)
    app._address = (_host, _port)
    return Listener(app=app, host=_host, port=_port)


def _serve(app: App, host: str, port: int) -> None:
    """Run pounce with a single worker for the live App object.

    Pounce's ``run()`` takes an import string, but porchlight has a
    constructed ``App``, so ``pounce.Server`` is used directly with the
    ASGI callable.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=1,
        log_level=app.config.log_level,
        log_format=app.config.log_format,
    )
    Server(config, app).run()
