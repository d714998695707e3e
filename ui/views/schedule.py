"""Weekly schedule screen (route "/schedule").

Fetches the broadcast schedule once per mount, groups it by day and
renders the seven weekdays plus "Unknown" in fixed order.
"""

from types import MappingProxyType

from rich.columns import Columns
from rich.console import Group, RenderableType
from rich.text import Text

from models.models import AnimeRecord, ViewState
from services.grouping import DAYS_OF_WEEK, bucket_for, group_by_day
from services.jikan_client import JikanClient
from ui.views.base import OnceLatch, View, anime_card, heading, run_blocking
from utils.exceptions import CatalogError
from utils.logging import get_logger

logger = get_logger(__name__)

TITLE = "Upcoming Anime Schedule"
ERROR_MESSAGE = "Failed to load anime schedule."
TIME_NOT_ANNOUNCED = "Not Announced"


def release_time(record: AnimeRecord) -> str:
    """Broadcast time, or "Not Announced" when the API has none."""
    if record.broadcast is None or not record.broadcast.time:
        return TIME_NOT_ANNOUNCED
    return record.broadcast.time


class ScheduleView(View):
    """State machine LOADING -> READY | ERROR, one fetch per mount."""

    path = "/schedule"
    links = MappingProxyType({"Go to Home": "/"})

    def __init__(self, client: JikanClient) -> None:
        super().__init__()
        self.client = client
        self.state = ViewState.LOADING
        self.error: str | None = None
        self.grouped: dict[str, list[AnimeRecord]] = {}
        self._fetch_once = OnceLatch()

    def mount(self) -> None:
        super().mount()
        self.state = ViewState.LOADING
        self.error = None
        self._fetch_once.rearm()

    async def start(self) -> None:
        if not self.mounted or not self._fetch_once.acquire():
            return

        try:
            records = await run_blocking(self.client.fetch_schedules)
        except CatalogError as e:
            if self.is_stale("schedule error"):
                return
            logger.warning(f"Schedule fetch failed: {e}")
            self.error = ERROR_MESSAGE
            self.state = ViewState.ERROR
            return

        if self.is_stale("schedule"):
            return
        self.grouped = group_by_day(records)
        self.state = ViewState.READY
        logger.debug(f"Schedule ready: {len(records)} anime in {len(self.grouped)} buckets")

    def render(self) -> RenderableType:
        if self.state is ViewState.ERROR:
            return Group(heading(TITLE), Text(self.error or ERROR_MESSAGE, style="error"))
        if self.state is ViewState.LOADING:
            return Group(heading(TITLE), Text("Loading..."))
        return Group(heading(TITLE), *(self._render_day(day) for day in DAYS_OF_WEEK))

    def _render_day(self, day: str) -> RenderableType:
        title = Text(f"\n{day}", style="info")
        bucket = bucket_for(self.grouped, day)
        if not bucket:
            return Group(title, Text(f"No anime scheduled for {day}.", style="menu.muted"))
        cards = [
            anime_card(record, Text(f"Release Date: {release_time(record)}"))
            for record in bucket
        ]
        return Group(title, Columns(cards))
