"""Business logic services layer.

Core services for anime-schedule:
- jikan_client: Jikan catalog API client
- grouping: weekly schedule bucketing
- rotation: carousel index rotation timer
"""

from services import grouping, jikan_client, rotation

__all__ = [
    "grouping",
    "jikan_client",
    "rotation",
]
