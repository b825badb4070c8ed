"""Shared fixtures: a throwaway asset directory and apps built over it."""

import logging

import pytest

from porchlight.app import App
from porchlight.config import ServerConfig


@pytest.fixture
def asset_dir(tmp_path):
    """Asset directory resembling the shipped site."""
    public = tmp_path / "public"
    public.mkdir()
    (public / "index.html").write_text("<h1>Home</h1>")
    (public / "style.css").write_text("body { color: red; }")
    (public / "app.js").write_text("console.log('hello');")
    (public / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n")
    (public / "data.bin").write_bytes(b"\x00\x01\x02\x03")

    docs = public / "docs"
    docs.mkdir()
    (docs / "index.html").write_text("<h1>Docs</h1>")

    (public / "empty").mkdir()
    return public


@pytest.fixture
def empty_asset_dir(tmp_path):
    """Asset directory with nothing in it (the minimal variant)."""
    empty = tmp_path / "empty-public"
    empty.mkdir()
    return empty


@pytest.fixture
def make_app():
    """Factory for apps with a greeting root route over a given directory."""

    def _make(directory, **overrides) -> App:
        app = App(ServerConfig(asset_dir=directory, **overrides))

        @app.route("/")
        def index():
            return "root route"

        return app

    return _make


@pytest.fixture(autouse=True)
def _reset_porchlight_logger():
    """Drop console handlers added by setup_logging() so each test starts clean."""
    logger = logging.getLogger("porchlight")
    level = logger.level

    def strip() -> None:
        logger.handlers[:] = [h for h in logger.handlers if not getattr(h, "_porchlight", False)]

    strip()
    yield
    strip()
    logger.setLevel(level)
