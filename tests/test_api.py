"""Tests for tripcal.api with the HTTP layer mocked."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from tripcal.api import (
    build_headers,
    create_reservation,
    get_property,
    get_unavailable_dates,
    normalize_unavailable_dates,
)
from tripcal.domain.models import PropertyId

BASE_URL = "https://api.example.test/api"


def make_response(payload: dict) -> MagicMock:
    response = MagicMock()
    response.json.return_value = payload
    response.raise_for_status.return_value = None
    return response


class TestBuildHeaders:
    """Tests for build_headers."""

    def test_without_token(self) -> None:
        """Should only ask for JSON without a token."""
        assert build_headers() == {"Accept": "application/json"}

    def test_with_token(self) -> None:
        """Should add a bearer token."""
        assert build_headers("abc")["Authorization"] == "Bearer abc"


class TestNormalizeUnavailableDates:
    """Tests for normalize_unavailable_dates."""

    def test_plain_days(self) -> None:
        """Should keep plain DateKeys."""
        assert normalize_unavailable_dates(["2025-06-15", "2025-06-16"]) == frozenset({"2025-06-15", "2025-06-16"})

    def test_timestamps(self) -> None:
        """Should strip time parts from ISO timestamps."""
        assert normalize_unavailable_dates(["2025-06-15T00:00:00.000Z"]) == frozenset({"2025-06-15"})

    def test_skips_empty_and_non_strings(self) -> None:
        """Should drop values that are not strings."""
        assert normalize_unavailable_dates(["", None, 5, "2025-06-15"]) == frozenset({"2025-06-15"})


class TestGetUnavailableDates:
    """Tests for get_unavailable_dates."""

    @patch("tripcal.api.requests.get")
    def test_fetches_availability(self, mock_get: MagicMock) -> None:
        """Should call the availability endpoint and return a set."""
        mock_get.return_value = make_response({"unavailableDates": ["2025-06-15", "2025-06-15"]})

        result = get_unavailable_dates(BASE_URL + "/", PropertyId("p1"), token="tok", timeout=5)

        assert result == frozenset({"2025-06-15"})
        mock_get.assert_called_once()
        args, kwargs = mock_get.call_args
        assert args[0] == f"{BASE_URL}/property/availability/p1"
        assert kwargs["headers"]["Authorization"] == "Bearer tok"
        assert kwargs["timeout"] == 5

    @patch("tripcal.api.requests.get")
    def test_missing_field(self, mock_get: MagicMock) -> None:
        """Should return an empty set when the backend omits the field."""
        mock_get.return_value = make_response({})

        assert get_unavailable_dates(BASE_URL, PropertyId("p1")) == frozenset()

    @patch("tripcal.api.requests.get")
    def test_http_error_propagates(self, mock_get: MagicMock) -> None:
        """Should raise on HTTP errors."""
        response = make_response({})
        response.raise_for_status.side_effect = requests.HTTPError("404")
        mock_get.return_value = response

        with pytest.raises(requests.RequestException):
            get_unavailable_dates(BASE_URL, PropertyId("missing"))


class TestGetProperty:
    """Tests for get_property."""

    @patch("tripcal.api.requests.get")
    def test_fetches_property(self, mock_get: MagicMock) -> None:
        """Should return the property JSON."""
        mock_get.return_value = make_response({"name": "Casa", "pricePerNight": 300})

        result = get_property(BASE_URL, PropertyId("p1"))

        assert result["pricePerNight"] == 300
        assert mock_get.call_args[0][0] == f"{BASE_URL}/property/p1"


class TestCreateReservation:
    """Tests for create_reservation."""

    @patch("tripcal.api.requests.post")
    def test_posts_payload(self, mock_post: MagicMock) -> None:
        """Should POST the payload as JSON."""
        mock_post.return_value = make_response({"reservation": {"_id": "r1"}, "message": "ok"})
        payload = {"reservationUser": "u1", "propertyBooked": "p1"}

        result = create_reservation(BASE_URL, payload, token="tok")

        assert result["reservation"]["_id"] == "r1"
        args, kwargs = mock_post.call_args
        assert args[0] == f"{BASE_URL}/reservation/createReservation"
        assert kwargs["json"] == payload

    @patch("tripcal.api.requests.post")
    def test_connection_error_propagates(self, mock_post: MagicMock) -> None:
        """Should let connection errors through."""
        mock_post.side_effect = requests.ConnectionError("down")

        with pytest.raises(requests.RequestException):
            create_reservation(BASE_URL, {})
