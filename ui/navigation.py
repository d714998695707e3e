"""Route table and screen loop.

Two routes exist: "/" (home) and "/schedule". Each screen gets its own
event loop for its mounted lifetime; leaving the screen unmounts it,
which cancels its rotation timer and drops any fetch still in flight.
"""

import asyncio
import sys

from rich.console import Console, Group
from rich.live import Live
from rich.text import Text

from models.config import settings
from services.jikan_client import JikanClient
from ui.components import console as app_console
from ui.components import loading, menu_navigate
from ui.views.base import View, run_blocking
from ui.views.home import HomeView
from ui.views.schedule import ScheduleView
from utils.logging import get_logger

logger = get_logger(__name__)

ROUTES: dict[str, type[View]] = {
    "/": HomeView,
    "/schedule": ScheduleView,
}

ENTER_HINT = "Press Enter for the navigation menu"


def build_view(path: str, client: JikanClient) -> View:
    """Instantiate the screen registered for a route."""
    try:
        view_cls = ROUTES[path]
    except KeyError:
        raise ValueError(f"Unknown route {path!r}, expected one of {sorted(ROUTES)}") from None
    return view_cls(client)


async def wait_for_enter() -> None:
    await run_blocking(sys.stdin.readline)


class Navigator:
    """Shows one screen at a time and follows the links the user picks."""

    def __init__(self, client: JikanClient, console: Console | None = None) -> None:
        self.client = client
        self.console = console or app_console

    async def show(self, view: View, once: bool = False) -> None:
        """Mount a screen, display it until dismissed, then unmount it.

        Args:
            view: Screen to display
            once: Print the loaded screen a single time instead of a live display
        """
        view.mount()
        task = asyncio.create_task(view.start())
        try:
            if once:
                with loading("Loading...", console_instance=self.console):
                    await task
                self.console.print(view)
            else:
                live_view = Group(view, Text(f"\n{ENTER_HINT}", style="menu.muted"))
                with Live(
                    live_view,
                    console=self.console,
                    refresh_per_second=settings.display.refresh_per_second,
                ):
                    await wait_for_enter()
        finally:
            view.unmount()
            task.cancel()

    def next_path(self, view: View) -> str | None:
        """Ask which link to follow; None means quit."""
        choice = menu_navigate(list(view.links), "Navigate")
        if choice is None:
            return None
        return view.links[choice]

    def run(self, path: str = "/", once: bool = False) -> None:
        """Navigate from `path` until the user quits."""
        current: str | None = path
        while current is not None:
            view = build_view(current, self.client)
            logger.debug(f"Showing {current}")
            asyncio.run(self.show(view, once=once))
            if once:
                return
            current = self.next_path(view)
