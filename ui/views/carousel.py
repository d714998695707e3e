"""Top airing carousel (home screen section).

Shows one currently-airing anime at a time and rotates through the list
on a fixed interval. The fetch waits for the parent's ready signal and
runs at most once per mount; a per-instance throttle also rejects
attempts closer than the refetch guard to the previous one.
"""

import time
from collections.abc import Callable, Sequence

from rich.console import RenderableType
from rich.text import Text

from models.config import settings
from models.models import AnimeRecord
from services.jikan_client import JikanClient
from services.rotation import RotationTimer
from ui.views.base import FetchThrottle, OnceLatch, View, anime_card, run_blocking
from utils.exceptions import CatalogError
from utils.logging import get_logger

logger = get_logger(__name__)

LOADING_MESSAGE = "Loading top airing anime..."
EMPTY_MESSAGE = "No airing anime found."
ERROR_MESSAGE = "Failed to load top airing anime."


class TopAiringCarousel(View):
    def __init__(
        self,
        client: JikanClient,
        interval: float | None = None,
        refetch_guard: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__()
        self.client = client
        self.ready = False
        self.parent_error = ""
        self.error: str | None = None
        self.records: list[AnimeRecord] = []
        self.timer = RotationTimer(
            interval if interval is not None else settings.carousel.rotation_interval_ms / 1000
        )
        self._fetch_once = OnceLatch()
        self._throttle = FetchThrottle(
            refetch_guard if refetch_guard is not None else settings.carousel.refetch_guard_ms / 1000,
            clock=clock,
        )

    def mount(self) -> None:
        super().mount()
        self._fetch_once.rearm()

    def unmount(self) -> None:
        super().unmount()
        self.timer.cancel()

    @property
    def current(self) -> AnimeRecord | None:
        if not self.records or self.timer.index >= len(self.records):
            return None
        return self.records[self.timer.index]

    async def activate(self, ready: bool, error: str = "") -> None:
        """Receive the parent's ready signal and fetch if it is the first one."""
        self.ready = ready
        self.parent_error = error
        if not ready or not self.mounted:
            return
        if not self._fetch_once.acquire():
            return
        if not self._throttle.allow():
            logger.debug("Top airing refetch suppressed by throttle")
            # unmount() stopped the timer; rotate the records still held
            self.timer.reset(len(self.records))
            return

        try:
            records = await run_blocking(self.client.fetch_top_airing)
        except CatalogError as e:
            if self.is_stale("top airing error"):
                return
            logger.warning(f"Top airing fetch failed: {e}")
            self.error = ERROR_MESSAGE
            return

        if self.is_stale("top airing"):
            return
        self.show(records)

    def show(self, records: Sequence[AnimeRecord]) -> None:
        """Replace the displayed list and restart rotation from the first item."""
        self.error = None
        self.records = list(records)
        self.timer.reset(len(self.records))

    def render(self) -> RenderableType:
        if not self.ready:
            return Text(LOADING_MESSAGE)
        if self.parent_error:
            return Text(self.parent_error, style="error")
        if self.error:
            return Text(self.error, style="error")
        record = self.current
        if record is None:
            return Text(EMPTY_MESSAGE, style="menu.muted")
        position = Text(f"{self.timer.index + 1}/{len(self.records)}", style="menu.muted")
        return anime_card(record, position, large=True)
