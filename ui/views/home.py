"""Home screen (route "/").

HomeContent holds back for a fixed minimum loading time, probes the
catalog once, then flips its ready flag and activates the carousel and
the popular grid. The probe outcome only decides the error message
handed down; ready is set either way.
"""

import asyncio
from types import MappingProxyType

from rich.console import Group, RenderableType
from rich.text import Text

from models.config import settings
from services.jikan_client import JikanClient
from ui.views.base import View, heading, run_blocking
from ui.views.carousel import TopAiringCarousel
from ui.views.popular import PopularAnime
from utils.exceptions import CatalogError
from utils.logging import get_logger

logger = get_logger(__name__)

TITLE = "Welcome to the Anime Schedule App!"
SCHEDULE_LINK = "Go to Schedule"
PROBE_ERROR = "Failed to load anime."


class HomeContent(View):
    def __init__(
        self,
        client: JikanClient,
        delay: float | None = None,
        carousel: TopAiringCarousel | None = None,
        popular: PopularAnime | None = None,
    ) -> None:
        super().__init__()
        self.client = client
        self.delay = delay if delay is not None else settings.home.loading_delay_ms / 1000
        self.carousel = carousel or TopAiringCarousel(client)
        self.popular = popular or PopularAnime(client)
        self.ready = False
        self.error = ""

    def mount(self) -> None:
        super().mount()
        self.ready = False
        self.error = ""
        self.carousel.mount()
        self.popular.mount()

    def unmount(self) -> None:
        super().unmount()
        self.carousel.unmount()
        self.popular.unmount()

    async def start(self) -> None:
        await asyncio.sleep(self.delay)
        if not self.mounted:
            return

        error = ""
        try:
            await run_blocking(self.client.probe)
        except CatalogError as e:
            logger.warning(f"Catalog probe failed: {e}")
            error = PROBE_ERROR

        if self.is_stale("probe"):
            return
        self.error = error
        self.ready = True
        await asyncio.gather(
            self.carousel.activate(self.ready, self.error),
            self.popular.activate(self.ready, self.error),
        )

    def render(self) -> RenderableType:
        return Group(self.carousel, self.popular)


class HomeView(View):
    path = "/"
    links = MappingProxyType({SCHEDULE_LINK: "/schedule"})

    def __init__(self, client: JikanClient, content: HomeContent | None = None) -> None:
        super().__init__()
        self.content = content or HomeContent(client)

    def mount(self) -> None:
        super().mount()
        self.content.mount()

    def unmount(self) -> None:
        super().unmount()
        self.content.unmount()

    async def start(self) -> None:
        await self.content.start()

    def render(self) -> RenderableType:
        return Group(
            heading(TITLE),
            self.content,
            Text(f"\n→ {SCHEDULE_LINK}", style="info"),
        )
