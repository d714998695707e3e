"""
Shared test fixtures and configuration for anime-schedule test suite.

This module provides:
- Record factories and realistic Jikan payloads
- Fake catalog clients (no network)
- Themed recording consoles for render assertions
"""

import io
import json
from unittest.mock import Mock

import pytest
import requests

from models.models import AnimeRecord
from services.jikan_client import JikanClient
from ui.components import make_console


# ========== Record Fixtures ==========


def make_record(mal_id: int, title: str | None = None, day: str | None = None, time: str | None = None, **extra):
    """Build an AnimeRecord the way the API would deliver it."""
    payload = {
        "mal_id": mal_id,
        "title": title or f"Anime {mal_id}",
        "images": {
            "jpg": {
                "image_url": f"https://cdn.myanimelist.net/images/anime/{mal_id}.jpg",
                "large_image_url": f"https://cdn.myanimelist.net/images/anime/{mal_id}l.jpg",
            }
        },
        **extra,
    }
    if day is not None or time is not None:
        payload["broadcast"] = {"day": day, "time": time}
    return AnimeRecord.model_validate(payload)


@pytest.fixture
def record_factory():
    return make_record


@pytest.fixture
def jikan_schedule_payload():
    """Trimmed /schedules response as sent by Jikan (plural day names)."""
    return {
        "pagination": {"last_visible_page": 1, "has_next_page": False},
        "data": [
            {
                "mal_id": 52991,
                "title": "Sousou no Frieren",
                "images": {
                    "jpg": {
                        "image_url": "https://cdn.myanimelist.net/images/anime/1015/138006.jpg",
                        "small_image_url": "https://cdn.myanimelist.net/images/anime/1015/138006t.jpg",
                        "large_image_url": "https://cdn.myanimelist.net/images/anime/1015/138006l.jpg",
                    }
                },
                "broadcast": {
                    "day": "Fridays",
                    "time": "23:00",
                    "timezone": "Asia/Tokyo",
                    "string": "Fridays at 23:00 (JST)",
                },
                "score": 9.3,
                "rank": 1,
                "episodes": 28,
            },
            {
                "mal_id": 21,
                "title": "One Piece",
                "images": {"jpg": {"image_url": "https://cdn.myanimelist.net/images/anime/6/73245.jpg"}},
                "broadcast": {"day": "Sundays", "time": "09:30", "timezone": "Asia/Tokyo"},
                "episodes": None,
            },
            {
                "mal_id": 99999,
                "title": "Mystery Slot",
                "images": {"jpg": {}},
                "broadcast": {"day": None, "time": None, "timezone": None, "string": "Unknown"},
            },
        ],
    }


# ========== HTTP Fixtures ==========


def make_response(status: int = 200, json_body=None, body: bytes = b"") -> requests.Response:
    """Real requests.Response with a canned body."""
    response = requests.Response()
    response.status_code = status
    response._content = json.dumps(json_body).encode("utf-8") if json_body is not None else body
    response.encoding = "utf-8"
    response.url = "https://api.jikan.moe/v4/test"
    return response


@pytest.fixture
def mock_session():
    """requests.Session stand-in; tests set session.get.return_value."""
    return Mock(spec=requests.Session)


@pytest.fixture
def jikan_client(mock_session):
    return JikanClient(base_url="https://api.jikan.moe/v4", session=mock_session)


# ========== Fake Client Fixtures ==========


@pytest.fixture
def fake_client():
    """Catalog client whose fetches return empty lists unless overridden."""
    client = Mock(spec=JikanClient)
    client.fetch_schedules.return_value = []
    client.fetch_top_airing.return_value = []
    client.fetch_popular.return_value = []
    client.probe.return_value = None
    return client


# ========== Rendering Fixtures ==========


@pytest.fixture
def render_text():
    """Render any rich renderable to plain text with the app theme."""

    def _render(renderable) -> str:
        console = make_console(file=io.StringIO(), record=True, width=200, color_system=None)
        console.print(renderable)
        return console.export_text()

    return _render


@pytest.fixture
def quiet_console():
    """Themed console writing to a buffer instead of the terminal."""
    return make_console(file=io.StringIO(), record=True, width=200, color_system=None)
