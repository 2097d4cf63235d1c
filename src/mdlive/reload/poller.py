"""Long-poll answer to "has the file changed since I last asked?"."""

import asyncio
import logging
from typing import Literal

from mdlive.config import PollWindow
from mdlive.reload.signal import ChangeSignal

logger = logging.getLogger(__name__)

ReloadAnswer = Literal["yes", "no"]


class ReloadPoller:
    """Waits up to one poll window for the change signal to fire.

    Each check consumes the signal it observes, so one change produces at
    most one "yes" for a caller that checks again straight after. Checks
    running at the same time share that single change: one gets "yes",
    the rest wait out their window.
    """

    def __init__(self, signal: ChangeSignal, window: PollWindow | None = None):
        self.signal = signal
        self.window = window or PollWindow()

    async def check_for_change(self) -> ReloadAnswer:
        """Return "yes" as soon as a change is seen, or "no" after the window."""
        for _ in range(self.window.timeout_seconds):
            if self.signal.test_and_clear():
                logger.debug("Reload check: change observed")
                return "yes"
            await asyncio.sleep(self.window.poll_interval)
        return "no"
