"""Pytest configuration and fixtures."""

from collections.abc import Generator
from pathlib import Path

import pytest

from mdlive.config import PollWindow, ServerConfig
from mdlive.reload import ChangeSignal, FileWatcher


@pytest.fixture
def notes_file(tmp_path: Path) -> Path:
    """A markdown file to serve, created before any watcher starts."""
    path = tmp_path / "notes.md"
    path.write_text("# Notes\n\nfirst line\nsecond line\n")
    return path


@pytest.fixture
def fast_window() -> PollWindow:
    """A poll window short enough for tests: 5 checks, 50 ms apart."""
    return PollWindow(timeout_seconds=5, poll_interval_ms=50)


@pytest.fixture
def server_config(notes_file: Path, fast_window: PollWindow) -> ServerConfig:
    return ServerConfig(
        markdown_file=notes_file,
        static_dir=notes_file.parent,
        poll_window=fast_window,
        supervise_interval=0.05,
    )


@pytest.fixture
def running_watcher(notes_file: Path) -> Generator[FileWatcher, None, None]:
    """A started watcher on notes_file, stopped after the test."""
    watcher = FileWatcher(notes_file, ChangeSignal())
    watcher.start()
    yield watcher
    watcher.stop()
