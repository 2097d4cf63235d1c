"""Live-reload notification: file watching, change signal and long-poll.

- FileWatcher sets the ChangeSignal when the served file changes
- ReloadPoller answers browser reload checks from that signal
"""

from mdlive.reload.poller import ReloadAnswer, ReloadPoller
from mdlive.reload.signal import ChangeSignal
from mdlive.reload.watcher import (
    FileEvent,
    FileEventKind,
    FileWatcher,
    TargetEventHandler,
    resolve_watch_dir,
    supervise_watcher,
)

__all__ = [
    "ChangeSignal",
    "FileEvent",
    "FileEventKind",
    "FileWatcher",
    "ReloadAnswer",
    "ReloadPoller",
    "TargetEventHandler",
    "resolve_watch_dir",
    "supervise_watcher",
]
