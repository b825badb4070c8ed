"""``porchlight run`` — bind the port and serve.

Builds the config from CLI overrides, resolves the app, and starts the
listener. A bind failure is terminal: message on stderr, exit status 1.
"""

import argparse
import sys
from dataclasses import replace

from porchlight._internal.logs import setup_logging
from porchlight.cli._resolve import resolve_app
from porchlight.config import ServerConfig
from porchlight.errors import BindError


def build_config(args: argparse.Namespace) -> ServerConfig:
    """Apply the CLI overrides that were given to the default config."""
    overrides: dict[str, object] = {}
    if args.host:
        overrides["host"] = args.host
    if args.port is not None:
        overrides["port"] = args.port
    if args.asset_dir:
        overrides["asset_dir"] = args.asset_dir
    if args.log_level:
        overrides["log_level"] = args.log_level
    return replace(ServerConfig(), **overrides)


def run_server(args: argparse.Namespace) -> None:
    """Start the server for ``args.app``."""
    from porchlight.server.listener import start

    config = build_config(args)
    try:
        app = resolve_app(args.app, config)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    setup_logging(args.log_level or app.config.log_level)

    try:
        listener = start(app, args.host, args.port)
    except BindError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    listener.run()
