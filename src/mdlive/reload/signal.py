"""Single-slot change notification shared by the watcher and pollers."""

import threading


class ChangeSignal:
    """A boolean flag that is only ever set, or read-and-cleared atomically.

    The watcher thread calls ``set()``; request handlers call
    ``test_and_clear()``. There is no plain getter; a read followed by a
    separate reset could drop a change that lands in between.

    This is a single slot, not a queue. Several pending readers compete
    for one ``True``; only the first to test it sees the change.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value = False

    def set(self) -> None:
        """Record that the watched file changed."""
        with self._lock:
            self._value = True

    def test_and_clear(self) -> bool:
        """Return the current value and reset it to False in one step."""
        with self._lock:
            value = self._value
            self._value = False
            return value
