"""Data models and configuration.

Pydantic models and configuration:
- models: Catalog records and view state
- config: Centralized configuration (Pydantic Settings)
"""

from models.models import AnimeImages, AnimeRecord, Broadcast, ImageSet, ViewState
from models.config import settings, get_data_path

__all__ = [
    "AnimeImages",
    "AnimeRecord",
    "Broadcast",
    "ImageSet",
    "ViewState",
    "settings",
    "get_data_path",
]
