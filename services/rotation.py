"""Cyclic index rotation driven by an asyncio periodic task.

A RotationTimer owns at most one running task. Loading a new element
count always cancels the previous task before a new one starts, and
leaving the timer's `with` block cancels whatever is running.
"""

import asyncio
from collections.abc import Callable

from utils.logging import get_logger

logger = get_logger(__name__)


class RotationTimer:
    """Current position in a list of `count` elements, advanced every `interval` seconds.

    Rotation only runs while count > 1. With a single element (or none)
    the index stays at 0 and no task is scheduled.
    """

    def __init__(self, interval: float, on_tick: Callable[[int], None] | None = None) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self.interval = interval
        self.on_tick = on_tick
        self.index = 0
        self.count = 0
        self._task: asyncio.Task | None = None

    def __enter__(self) -> "RotationTimer":
        return self

    def __exit__(self, *exc_info) -> None:
        self.cancel()

    @property
    def should_rotate(self) -> bool:
        return self.count > 1

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def reset(self, count: int) -> None:
        """Load a new element count: cancel, rewind to 0, restart if needed.

        Must be called from a running event loop when count > 1.
        """
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        self.cancel()
        self.index = 0
        self.count = count
        if self.should_rotate:
            self._task = asyncio.get_running_loop().create_task(self._run())
            logger.debug(f"Rotation started over {count} elements every {self.interval}s")

    def tick(self) -> int:
        """Advance one position (no-op unless rotating) and return the index."""
        if self.should_rotate:
            self.index = (self.index + 1) % self.count
            if self.on_tick is not None:
                self.on_tick(self.index)
        return self.index

    def cancel(self) -> None:
        """Stop the running task, if any. Safe to call repeatedly."""
        if self._task is not None:
            self._task.cancel()
            self._task = None

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            self.tick()
