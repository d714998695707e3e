"""Jikan API client for anime-schedule.

Read-only REST client for the three catalog listings the views display.
No caching and no retries: every call is exactly one GET.
"""

import requests
from pydantic import ValidationError

from models.config import settings
from models.models import AnimeRecord
from utils.exceptions import NetworkError, ParseError
from utils.logging import get_logger

logger = get_logger(__name__)

SCHEDULES_ENDPOINT = "/schedules"
TOP_ANIME_ENDPOINT = "/top/anime"


class JikanClient:
    """Synchronous client for the Jikan v4 API.

    Attributes:
        base_url: API root, customizable for testing.
        timeout: Per-request timeout in seconds; None keeps the transport default.
    """

    def __init__(
        self,
        base_url: str | None = None,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ) -> None:
        self.base_url = (base_url or settings.jikan.api_url).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout if timeout is not None else settings.jikan.timeout

    def __enter__(self) -> "JikanClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Release the underlying HTTP session."""
        self.session.close()

    def fetch_schedules(self) -> list[AnimeRecord]:
        """Get every anime with a weekly broadcast slot."""
        return self._get_records(SCHEDULES_ENDPOINT)

    def fetch_top_airing(self) -> list[AnimeRecord]:
        """Get the top ranked anime that are currently airing."""
        return self._get_records(TOP_ANIME_ENDPOINT, params={"filter": "airing"})

    def fetch_popular(self) -> list[AnimeRecord]:
        """Get the all-time top ranked anime."""
        return self._get_records(TOP_ANIME_ENDPOINT)

    def probe(self) -> None:
        """Check that the catalog answers at all.

        Raises:
            NetworkError: On transport failure or non-success status.
        """
        self._send(TOP_ANIME_ENDPOINT)

    def _send(self, endpoint: str, params: dict | None = None) -> requests.Response:
        url = f"{self.base_url}{endpoint}"
        logger.debug(f"GET {url} params={params}")
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning(f"Request to {url} failed: {e}")
            raise NetworkError(f"Request to {url} failed: {e}") from e

        if not 200 <= response.status_code < 300:
            logger.warning(f"{url} answered with status {response.status_code}")
            raise NetworkError(f"{url} answered with status {response.status_code}")
        return response

    def _get_records(self, endpoint: str, params: dict | None = None) -> list[AnimeRecord]:
        response = self._send(endpoint, params)

        try:
            payload = response.json()
        except ValueError as e:
            # requests raises a JSONDecodeError subclassing ValueError
            logger.warning(f"Invalid JSON from {endpoint}: {e}")
            raise ParseError(f"Response from {endpoint} is not valid JSON") from e

        if not isinstance(payload, dict):
            raise ParseError(f"Response from {endpoint} is not a JSON object")

        items = payload.get("data")
        if items is None:
            # Missing data means "no results", not a failure
            return []
        if not isinstance(items, list):
            raise ParseError(f"Field 'data' from {endpoint} is not a list")

        try:
            records = [AnimeRecord.model_validate(item) for item in items]
        except ValidationError as e:
            logger.warning(f"Unexpected record shape from {endpoint}: {e}")
            raise ParseError(f"Unexpected record shape from {endpoint}") from e

        logger.debug(f"{endpoint}: {len(records)} records")
        return records
