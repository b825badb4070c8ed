"""Tests for porchlight.resolvers.static — the asset resolver."""

from pathlib import Path

import pytest

from porchlight.errors import FileReadError, Forbidden
from porchlight.http.request import Request
from porchlight.resolvers.static import StaticResolver, content_type_for


class TestContentTypes:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("index.html", "text/html; charset=utf-8"),
            ("style.css", "text/css; charset=utf-8"),
            ("app.js", "application/javascript; charset=utf-8"),
            ("APP.JS", "application/javascript; charset=utf-8"),
            ("logo.png", "image/png"),
            ("data.bin", "application/octet-stream"),
            ("README", "application/octet-stream"),
        ],
    )
    def test_inferred_from_extension(self, name: str, expected: str) -> None:
        assert content_type_for(Path(name)) == expected


class TestServing:
    def test_serves_file_bytes(self, asset_dir) -> None:
        response = StaticResolver(asset_dir)(Request("GET", "/style.css"))
        assert response is not None
        assert response.status == 200
        assert response.body == b"body { color: red; }"
        assert response.content_type == "text/css; charset=utf-8"

    def test_serves_binary(self, asset_dir) -> None:
        response = StaticResolver(asset_dir)(Request("GET", "/logo.png"))
        assert response is not None
        assert response.body == b"\x89PNG\r\n\x1a\n"
        assert response.content_type == "image/png"

    def test_cache_control(self, asset_dir) -> None:
        static = StaticResolver(asset_dir, cache_control="no-cache")
        response = static(Request("GET", "/app.js"))
        assert response is not None
        assert response.header("Cache-Control") == "no-cache"

    def test_root_serves_index(self, asset_dir) -> None:
        response = StaticResolver(asset_dir)(Request("GET", "/"))
        assert response is not None
        assert response.body == b"<h1>Home</h1>"

    def test_nested_directory_index(self, asset_dir) -> None:
        response = StaticResolver(asset_dir)(Request("GET", "/docs/"))
        assert response is not None
        assert response.body == b"<h1>Docs</h1>"

    def test_directory_without_slash_redirects(self, asset_dir) -> None:
        response = StaticResolver(asset_dir)(Request("GET", "/docs"))
        assert response is not None
        assert response.status == 301
        assert response.header("Location") == "/docs/"

    def test_custom_index_name(self, asset_dir) -> None:
        (asset_dir / "home.htm").write_text("<p>home</p>")
        response = StaticResolver(asset_dir, index="home.htm")(Request("GET", "/"))
        assert response is not None
        assert response.body == b"<p>home</p>"

    def test_head_is_served(self, asset_dir) -> None:
        assert StaticResolver(asset_dir)(Request("HEAD", "/style.css")) is not None

    def test_redirect_location_is_percent_encoded(self, asset_dir) -> None:
        (asset_dir / "日本").mkdir()
        (asset_dir / "日本" / "index.html").write_text("<h1>Nihon</h1>")
        response = StaticResolver(asset_dir)(Request("GET", "/日本"))
        assert response is not None
        assert response.status == 301
        assert response.header("Location") == "/%E6%97%A5%E6%9C%AC/"

    def test_literal_percent_in_filename(self, asset_dir) -> None:
        (asset_dir / "100%25.txt").write_text("full")
        response = StaticResolver(asset_dir)(Request("GET", "/100%25.txt"))
        assert response is not None
        assert response.body == b"full"


class TestDeclining:
    def test_missing_file(self, asset_dir) -> None:
        assert StaticResolver(asset_dir)(Request("GET", "/missing.css")) is None

    def test_directory_without_index(self, asset_dir) -> None:
        assert StaticResolver(asset_dir)(Request("GET", "/empty/")) is None

    def test_root_without_index(self, empty_asset_dir) -> None:
        assert StaticResolver(empty_asset_dir)(Request("GET", "/")) is None

    def test_missing_directory(self, tmp_path) -> None:
        assert StaticResolver(tmp_path / "nope")(Request("GET", "/")) is None

    def test_post_is_declined(self, asset_dir) -> None:
        assert StaticResolver(asset_dir)(Request("POST", "/style.css")) is None

    def test_null_byte(self, asset_dir) -> None:
        assert StaticResolver(asset_dir)(Request("GET", "/style.css\x00")) is None

    def test_trailing_slash_on_file(self, asset_dir) -> None:
        assert StaticResolver(asset_dir)(Request("GET", "/style.css/")) is None

    def test_overlong_name(self, asset_dir) -> None:
        assert StaticResolver(asset_dir)(Request("GET", "/" + "a" * 5000)) is None


class TestSafety:
    def test_traversal_is_forbidden(self, asset_dir) -> None:
        (asset_dir.parent / "secret.txt").write_text("secret")
        with pytest.raises(Forbidden):
            StaticResolver(asset_dir)(Request("GET", "/../secret.txt"))

    def test_symlink_out_of_root_is_forbidden(self, asset_dir) -> None:
        outside = asset_dir.parent / "outside.txt"
        outside.write_text("outside")
        (asset_dir / "link.txt").symlink_to(outside)
        with pytest.raises(Forbidden):
            StaticResolver(asset_dir)(Request("GET", "/link.txt"))

    def test_unreadable_file_raises_file_read_error(self, asset_dir, monkeypatch) -> None:
        def boom(self: Path) -> bytes:
            raise PermissionError(13, "Permission denied")

        monkeypatch.setattr(Path, "read_bytes", boom)
        with pytest.raises(FileReadError) as exc_info:
            StaticResolver(asset_dir)(Request("GET", "/style.css"))
        assert exc_info.value.path.name == "style.css"
