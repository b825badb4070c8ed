"""Server configuration.

ServerConfig is a frozen dataclass — immutable after creation, constructed
once by the entry point and handed to the app. No ambient globals.
"""

from dataclasses import dataclass, field
from pathlib import Path

GREETING = "What a wonderful world!! keep pushing keep learning!"

# Shipped site assets live next to the package, not the working directory.
DEFAULT_ASSET_DIR = Path(__file__).parent / "site" / "public"


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """Server configuration. Immutable after creation.

    All fields have defaults matching the shipped site. Override what
    you need::

        config = ServerConfig(port=3000, asset_dir="./public")
    """

    # Listener
    host: str = "127.0.0.1"
    port: int = 8080

    # Assets
    asset_dir: str | Path = field(default=DEFAULT_ASSET_DIR)
    index: str = "index.html"
    cache_control: str = "public, max-age=0"

    # Root route: file contents when set, literal greeting otherwise
    default_document: str | Path | None = None
    greeting: str = GREETING

    # Logging (forwarded to pounce for its access log)
    log_level: str = "info"
    log_format: str = "text"

    def asset_root(self) -> Path:
        """The asset directory as an absolute, symlink-free path."""
        return Path(self.asset_dir).resolve()
