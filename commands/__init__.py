"""Command handlers for the anime-schedule CLI.

Each module opens one route of the app:
- home.py: top airing carousel and popular anime ("/")
- schedule.py: weekly broadcast schedule ("/schedule")
"""

from commands.home import home
from commands.schedule import schedule

__all__ = ["home", "schedule"]
