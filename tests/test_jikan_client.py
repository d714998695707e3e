"""
Tests for services/jikan_client.py

Coverage:
- Endpoint and query parameters of each fetch
- Record parsing into AnimeRecord
- Missing data treated as empty result
- NetworkError on transport failure and non-success status
- ParseError on invalid JSON and unexpected shapes
- Probe only checks the status
"""

from unittest.mock import Mock

import pytest
import requests

from conftest import make_response
from models.models import AnimeRecord
from services.jikan_client import JikanClient
from utils.exceptions import CatalogError, NetworkError, ParseError


class TestEndpoints:
    """Each fetch issues exactly one GET against its endpoint."""

    def test_fetch_schedules_url(self, jikan_client, mock_session):
        mock_session.get.return_value = make_response(json_body={"data": []})
        jikan_client.fetch_schedules()
        mock_session.get.assert_called_once_with(
            "https://api.jikan.moe/v4/schedules", params=None, timeout=jikan_client.timeout
        )

    def test_fetch_top_airing_filters_airing(self, jikan_client, mock_session):
        mock_session.get.return_value = make_response(json_body={"data": []})
        jikan_client.fetch_top_airing()
        mock_session.get.assert_called_once_with(
            "https://api.jikan.moe/v4/top/anime",
            params={"filter": "airing"},
            timeout=jikan_client.timeout,
        )

    def test_fetch_popular_has_no_filter(self, jikan_client, mock_session):
        mock_session.get.return_value = make_response(json_body={"data": []})
        jikan_client.fetch_popular()
        mock_session.get.assert_called_once_with(
            "https://api.jikan.moe/v4/top/anime", params=None, timeout=jikan_client.timeout
        )

    def test_base_url_trailing_slash_stripped(self, mock_session):
        mock_session.get.return_value = make_response(json_body={"data": []})
        client = JikanClient(base_url="http://localhost:8080/v4/", session=mock_session)
        client.fetch_popular()
        assert mock_session.get.call_args.args[0] == "http://localhost:8080/v4/top/anime"

    def test_explicit_timeout_forwarded(self, mock_session):
        mock_session.get.return_value = make_response(json_body={"data": []})
        client = JikanClient(session=mock_session, timeout=7.5)
        client.fetch_schedules()
        assert mock_session.get.call_args.kwargs["timeout"] == 7.5

    def test_no_retry_on_failure(self, jikan_client, mock_session):
        mock_session.get.return_value = make_response(status=500)
        with pytest.raises(NetworkError):
            jikan_client.fetch_popular()
        assert mock_session.get.call_count == 1


class TestParsing:
    """Response bodies become AnimeRecord lists."""

    def test_records_parsed_in_order(self, jikan_client, mock_session, jikan_schedule_payload):
        mock_session.get.return_value = make_response(json_body=jikan_schedule_payload)
        records = jikan_client.fetch_schedules()

        assert all(isinstance(r, AnimeRecord) for r in records)
        assert [r.mal_id for r in records] == [52991, 21, 99999]
        assert records[0].broadcast.day == "Fridays"
        assert records[0].broadcast.time == "23:00"

    def test_missing_data_is_empty(self, jikan_client, mock_session):
        mock_session.get.return_value = make_response(json_body={"pagination": {}})
        assert jikan_client.fetch_top_airing() == []

    def test_null_data_is_empty(self, jikan_client, mock_session):
        mock_session.get.return_value = make_response(json_body={"data": None})
        assert jikan_client.fetch_popular() == []

    def test_invalid_json_raises_parse_error(self, jikan_client, mock_session):
        mock_session.get.return_value = make_response(body=b"<html>Bad gateway</html>")
        with pytest.raises(ParseError):
            jikan_client.fetch_schedules()

    def test_non_list_data_raises_parse_error(self, jikan_client, mock_session):
        mock_session.get.return_value = make_response(json_body={"data": {"mal_id": 1}})
        with pytest.raises(ParseError):
            jikan_client.fetch_schedules()

    def test_non_object_body_raises_parse_error(self, jikan_client, mock_session):
        mock_session.get.return_value = make_response(json_body=[1, 2, 3])
        with pytest.raises(ParseError):
            jikan_client.fetch_schedules()

    def test_record_without_id_raises_parse_error(self, jikan_client, mock_session):
        mock_session.get.return_value = make_response(json_body={"data": [{"title": "No id"}]})
        with pytest.raises(ParseError):
            jikan_client.fetch_popular()


class TestNetworkFailures:
    """Transport problems and bad statuses raise NetworkError."""

    @pytest.mark.parametrize("status", [400, 404, 429, 500, 503])
    def test_non_success_status(self, jikan_client, mock_session, status):
        mock_session.get.return_value = make_response(status=status, json_body={"data": []})
        with pytest.raises(NetworkError):
            jikan_client.fetch_schedules()

    @pytest.mark.parametrize("status", [301, 304])
    def test_redirect_status_rejected(self, jikan_client, mock_session, status):
        mock_session.get.return_value = make_response(status=status, json_body={"data": []})
        with pytest.raises(NetworkError, match=str(status)):
            jikan_client.fetch_top_airing()

    def test_connection_error(self, jikan_client, mock_session):
        mock_session.get.side_effect = requests.ConnectionError("connection refused")
        with pytest.raises(NetworkError) as exc_info:
            jikan_client.fetch_top_airing()
        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)

    def test_timeout(self, jikan_client, mock_session):
        mock_session.get.side_effect = requests.Timeout("read timed out")
        with pytest.raises(NetworkError):
            jikan_client.fetch_popular()

    def test_errors_share_catalog_base(self):
        assert issubclass(NetworkError, CatalogError)
        assert issubclass(ParseError, CatalogError)
        assert not issubclass(ParseError, NetworkError)


class TestProbe:
    """probe() only cares about reachability."""

    def test_probe_ignores_body(self, jikan_client, mock_session):
        mock_session.get.return_value = make_response(body=b"not json at all")
        assert jikan_client.probe() is None
        assert mock_session.get.call_args.args[0] == "https://api.jikan.moe/v4/top/anime"

    def test_probe_raises_on_status(self, jikan_client, mock_session):
        mock_session.get.return_value = make_response(status=502)
        with pytest.raises(NetworkError):
            jikan_client.probe()


class TestLifecycle:
    def test_context_manager_closes_session(self):
        session = Mock(spec=requests.Session)
        with JikanClient(session=session) as client:
            assert client.session is session
        session.close.assert_called_once()
