"""Runtime configuration for the mdlive server."""

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000
DEFAULT_TIMEOUT_SECONDS = 60
DEFAULT_POLL_INTERVAL_MS = 1000
DEFAULT_SUPERVISE_INTERVAL = 5.0


@dataclass(frozen=True)
class PollWindow:
    """Bounds of a single reload check.

    A check makes at most ``timeout_seconds`` attempts, sleeping
    ``poll_interval_ms`` between them.
    """

    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS
    poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS

    def __post_init__(self) -> None:
        if self.timeout_seconds < 1:
            raise ValueError("timeout_seconds must be at least 1")
        if self.poll_interval_ms < 1:
            raise ValueError("poll_interval_ms must be at least 1")

    @property
    def poll_interval(self) -> float:
        """Sleep between attempts, in seconds."""
        return self.poll_interval_ms / 1000

    @property
    def total_ms(self) -> int:
        """Longest time a check can take, in milliseconds."""
        return self.timeout_seconds * self.poll_interval_ms


@dataclass
class ServerConfig:
    """Everything the server needs to know at startup."""

    markdown_file: Path
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    static_dir: Path = field(default_factory=lambda: Path("."))
    poll_window: PollWindow = field(default_factory=PollWindow)
    supervise_interval: float = DEFAULT_SUPERVISE_INTERVAL

    def __post_init__(self) -> None:
        self.markdown_file = Path(self.markdown_file)
        self.static_dir = Path(self.static_dir)
