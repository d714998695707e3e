"""All-time popular anime grid (home screen section)."""

from rich.columns import Columns
from rich.console import Group, RenderableType
from rich.text import Text

from models.models import AnimeRecord
from services.jikan_client import JikanClient
from ui.views.base import OnceLatch, View, anime_card, heading, run_blocking
from utils.exceptions import CatalogError
from utils.logging import get_logger

logger = get_logger(__name__)

TITLE = "Popular Anime"
LOADING_MESSAGE = "Loading popular anime..."


class PopularAnime(View):
    """Static grid in API order; a failed fetch leaves the grid empty."""

    def __init__(self, client: JikanClient) -> None:
        super().__init__()
        self.client = client
        self.ready = False
        self.error: str | None = None
        self.records: list[AnimeRecord] = []
        self._fetch_once = OnceLatch()

    def mount(self) -> None:
        super().mount()
        self._fetch_once.rearm()

    async def activate(self, ready: bool, error: str = "") -> None:
        self.ready = ready
        if not ready or not self.mounted or not self._fetch_once.acquire():
            return

        try:
            records = await run_blocking(self.client.fetch_popular)
        except CatalogError as e:
            if self.is_stale("popular error"):
                return
            logger.warning(f"Popular anime fetch failed: {e}")
            self.error = str(e)
            return

        if not self.is_stale("popular"):
            self.records = records

    def render(self) -> RenderableType:
        if not self.ready:
            return Text(LOADING_MESSAGE)
        cards = [anime_card(record) for record in self.records]
        return Group(heading(f"\n{TITLE}"), Columns(cards))
