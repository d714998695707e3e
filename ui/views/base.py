"""Shared view lifecycle.

Every view is a rich renderable with an explicit mounted lifetime:
- mount() / unmount() bracket the time the view is on screen
- results that arrive after unmount() are dropped, never applied
- OnceLatch and FetchThrottle are per-instance guards for one-shot fetches
"""

import asyncio
import time
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from rich.console import RenderableType
from rich.panel import Panel
from rich.text import Text

from models.models import AnimeRecord
from utils.logging import get_logger

logger = get_logger(__name__)


async def run_blocking(func: Callable[..., Any], *args: Any) -> Any:
    """Run a blocking call (HTTP) on the loop's default executor."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, func, *args)


class OnceLatch:
    """Lets exactly one caller through until re-armed."""

    def __init__(self) -> None:
        self.fired = False

    def acquire(self) -> bool:
        if self.fired:
            return False
        self.fired = True
        return True

    def rearm(self) -> None:
        self.fired = False


class FetchThrottle:
    """Rejects attempts closer than `min_interval` seconds to the previous one.

    The timestamp lives on the instance, so it survives every re-render
    and re-mount of the owning view.
    """

    def __init__(self, min_interval: float, clock: Callable[[], float] = time.monotonic) -> None:
        self.min_interval = min_interval
        self.clock = clock
        self.last_attempt: float | None = None

    def allow(self) -> bool:
        now = self.clock()
        if self.last_attempt is not None and now - self.last_attempt < self.min_interval:
            return False
        self.last_attempt = now
        return True


class View:
    """Base class for screens and screen sections.

    Screens set `path` (their route) and `links` (label -> route).
    """

    path: str | None = None
    links: Mapping[str, str] = MappingProxyType({})

    def __init__(self) -> None:
        self.mounted = False

    def mount(self) -> None:
        self.mounted = True

    def unmount(self) -> None:
        self.mounted = False

    async def start(self) -> None:
        """Work done once the view is mounted (fetches, timers)."""

    def render(self) -> RenderableType:
        raise NotImplementedError

    def __rich__(self) -> RenderableType:
        return self.render()

    def is_stale(self, what: str) -> bool:
        """True when a result for `what` arrived after unmount and must be dropped."""
        if self.mounted:
            return False
        logger.debug(f"{type(self).__name__}: discarding {what} received after unmount")
        return True


def anime_card(record: AnimeRecord, *lines: RenderableType, large: bool = False) -> Panel:
    """Card with the title, extra lines, and the poster URL."""
    body = Text(record.title, style="menu.title")
    for line in lines:
        body.append("\n")
        body.append(line if isinstance(line, Text) else Text(str(line)))
    image = record.large_image_url if large else record.image_url
    body.append(f"\n{image or 'no image'}", style="menu.muted")
    return Panel(body, border_style="menu.muted", expand=False)


def heading(text: str) -> Text:
    return Text(text, style="menu.title")
