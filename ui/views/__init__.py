"""Screens and screen sections.

- home: HomeView ("/") with HomeContent, TopAiringCarousel and PopularAnime
- schedule: ScheduleView ("/schedule")
"""

from ui.views.carousel import TopAiringCarousel
from ui.views.home import HomeContent, HomeView
from ui.views.popular import PopularAnime
from ui.views.schedule import ScheduleView

__all__ = ["HomeContent", "HomeView", "PopularAnime", "ScheduleView", "TopAiringCarousel"]
