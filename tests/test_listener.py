"""Tests for porchlight.server.listener — binding and handing off to pounce."""

import socket

import pytest

from porchlight.app import App
from porchlight.config import ServerConfig
from porchlight.errors import BindError
from porchlight.server import listener
from porchlight.server.listener import Listener, probe_bind, start


@pytest.fixture
def busy_port():
    """A port held by a listening socket for the duration of the test."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    sock.listen(1)
    yield sock.getsockname()[1]
    sock.close()


@pytest.fixture
def free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


class TestProbeBind:
    def test_free_port(self, free_port) -> None:
        probe_bind("127.0.0.1", free_port)

    def test_busy_port(self, busy_port) -> None:
        with pytest.raises(BindError) as exc_info:
            probe_bind("127.0.0.1", busy_port)
        assert exc_info.value.port == busy_port
        assert exc_info.value.host == "127.0.0.1"


class TestStart:
    def test_returns_listener(self, free_port, empty_asset_dir) -> None:
        app = App(ServerConfig(asset_dir=empty_asset_dir, port=free_port))
        result = start(app)
        assert isinstance(result, Listener)
        assert result.port == free_port
        assert result.url == f"http://127.0.0.1:{free_port}"

    def test_records_address(self, free_port, empty_asset_dir) -> None:
        app = App(ServerConfig(asset_dir=empty_asset_dir))
        start(app, "127.0.0.1", free_port)
        assert app.port == free_port

    def test_freezes_app(self, free_port, empty_asset_dir) -> None:
        app = App(ServerConfig(asset_dir=empty_asset_dir))
        start(app, port=free_port)
        with pytest.raises(RuntimeError):
            app.on_startup(lambda: None)

    def test_busy_port_is_terminal(self, busy_port, empty_asset_dir) -> None:
        app = App(ServerConfig(asset_dir=empty_asset_dir, port=busy_port))
        with pytest.raises(BindError):
            start(app)
        assert app._address is None

    def test_run_hands_off_to_server(self, free_port, empty_asset_dir, monkeypatch) -> None:
        calls: list[tuple] = []
        monkeypatch.setattr(listener, "_serve", lambda *args: calls.append(args))

        app = App(ServerConfig(asset_dir=empty_asset_dir))
        start(app, port=free_port).run()

        assert calls == [(app, "127.0.0.1", free_port)]

    def test_app_run(self, free_port, empty_asset_dir, monkeypatch) -> None:
        calls: list[tuple] = []
        monkeypatch.setattr(listener, "_serve", lambda *args: calls.append(args))

        app = App(ServerConfig(asset_dir=empty_asset_dir))
        app.run(port=free_port)

        assert calls == [(app, "127.0.0.1", free_port)]
