"""Filesystem watching for the served markdown file.

The watcher subscribes to the target's parent directory rather than the
file itself. Many editors save by writing a new file and renaming it over
the old one, which a watch on the original inode would miss.
"""

import asyncio
import logging
import os
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from watchdog.events import (
    FileCreatedEvent,
    FileModifiedEvent,
    FileMovedEvent,
    FileSystemEvent,
    FileSystemEventHandler,
)
from watchdog.observers import Observer
from watchdog.observers.api import BaseObserver

from mdlive.errors import WatcherStartupError
from mdlive.reload.signal import ChangeSignal

logger = logging.getLogger(__name__)

# Only entry creation, content modification and renames are subscribed to
WATCHED_EVENTS = [FileCreatedEvent, FileModifiedEvent, FileMovedEvent]


class FileEventKind(str, Enum):
    """Kinds of directory activity the watcher reacts to."""

    CREATED = "created"
    MODIFIED = "modified"


@dataclass(frozen=True)
class FileEvent:
    """A single notification about an entry in the watched directory."""

    name: str
    kind: FileEventKind


def resolve_watch_dir(target: str | Path) -> Path:
    """Return the directory to subscribe to for ``target``.

    A bare file name has no parent segment, so the current working
    directory is used instead.
    """
    parent = os.path.dirname(os.fspath(target))
    if not parent:
        return Path(".")
    return Path(parent)


def _event_name(path: str | bytes) -> str:
    return os.path.basename(os.fsdecode(path))


class TargetEventHandler(FileSystemEventHandler):
    """Turns watchdog callbacks into FileEvents and filters them by name."""

    def __init__(self, target_name: str, signal: ChangeSignal):
        self.target_name = target_name
        self.signal = signal

    def on_created(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self.handle(FileEvent(_event_name(event.src_path), FileEventKind.CREATED))

    def on_modified(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self.handle(FileEvent(_event_name(event.src_path), FileEventKind.MODIFIED))

    def on_moved(self, event: FileSystemEvent) -> None:
        # A rename onto the target is how atomic saves land
        if not event.is_directory:
            self.handle(FileEvent(_event_name(event.dest_path), FileEventKind.CREATED))

    def handle(self, event: FileEvent) -> bool:
        """Set the change signal if ``event`` names the target.

        Returns:
            True if the event matched the target.
        """
        logger.debug(f"File {event.kind.value}: {event.name}")
        if event.name != self.target_name:
            return False
        logger.info(f"Detected change to {event.name} ({event.kind.value})")
        self.signal.set()
        return True


class FileWatcher:
    """Watches one file and raises a ChangeSignal whenever it changes.

    The watchdog observer runs on its own daemon thread for the lifetime of
    the process. Keep the instance around: ``is_alive()`` is how the server
    notices that notifications have stopped.

    Example:
        signal = ChangeSignal()
        watcher = FileWatcher(Path("notes.md"), signal)
        watcher.start()
        ...
        if signal.test_and_clear():
            print("notes.md changed")
    """

    def __init__(
        self,
        target: str | Path,
        signal: ChangeSignal,
        observer_factory: Callable[[], BaseObserver] = Observer,
    ):
        self.target = Path(target)
        self.signal = signal
        self.watch_dir = resolve_watch_dir(target)
        self.handler = TargetEventHandler(self.target.name, signal)
        self._observer_factory = observer_factory
        self._observer: BaseObserver | None = None

    @property
    def started(self) -> bool:
        return self._observer is not None

    def start(self) -> None:
        """Subscribe to the watch directory and start the observer thread.

        Raises:
            WatcherStartupError: If the directory cannot be watched.
        """
        if self._observer is not None:
            return

        if not self.watch_dir.is_dir():
            raise WatcherStartupError(f"Cannot watch {self.watch_dir}: not a directory")

        observer = self._observer_factory()
        try:
            observer.schedule(
                self.handler,
                str(self.watch_dir),
                recursive=False,
                event_filter=WATCHED_EVENTS,
            )
            observer.start()
        except OSError as e:
            raise WatcherStartupError(f"Failed to watch {self.watch_dir}: {e}") from e

        self._observer = observer
        logger.info(f"Watching {self.watch_dir} for changes to {self.target.name}")

    def is_alive(self) -> bool:
        """Check that the observer and every emitter thread are still running."""
        if self._observer is None or not self._observer.is_alive():
            return False
        return all(emitter.is_alive() for emitter in self._observer.emitters)

    def stop(self, timeout: float | None = 5.0) -> None:
        """Stop the observer thread and wait for it to exit."""
        if self._observer is None:
            return
        self._observer.stop()
        self._observer.join(timeout)
        self._observer = None
        logger.debug(f"Stopped watching {self.watch_dir}")


async def supervise_watcher(watcher: FileWatcher, interval: float) -> None:
    """Report the watcher's death once, then return.

    Runs alongside the server. A dead watcher means the browser will never
    be told to reload again, so this logs at critical level.
    """
    while watcher.is_alive():
        await asyncio.sleep(interval)
    logger.critical(
        f"File watcher for {watcher.target} is no longer running; "
        "reload notifications are disabled"
    )
