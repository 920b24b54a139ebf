"""TripWise backend API interactions."""

import logging
from typing import Any

import requests

from tripcal.domain.models import DateKey, PropertyId

DEFAULT_API_BASE_URL = "https://trip-wise-backend.vercel.app/api"
DEFAULT_TIMEOUT = 10

logger = logging.getLogger(__name__)


def build_headers(token: str | None = None) -> dict[str, str]:
    """Build request headers, adding a bearer token when one is available.

    Args:
        token: Session token, if logged in.

    Returns:
        Header dictionary.
    """
    headers = {
        "Accept": "application/json",
    }
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def normalize_unavailable_dates(raw_dates: list[str]) -> frozenset[DateKey]:
    """Reduce backend date strings to DateKeys.

    The backend may send plain days or full ISO timestamps; only the
    leading YYYY-MM-DD part is kept.

    Args:
        raw_dates: Dates as returned by the backend.

    Returns:
        Set of DateKeys.
    """
    return frozenset(DateKey(value[:10]) for value in raw_dates if isinstance(value, str) and value)


def get_unavailable_dates(
    base_url: str,
    property_id: PropertyId,
    token: str | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> frozenset[DateKey]:
    """Fetch the unavailable dates of a property.

    Args:
        base_url: API base URL.
        property_id: Property to look up.
        token: Optional session token.
        timeout: Request timeout in seconds.

    Returns:
        Set of unavailable DateKeys.

    Raises:
        requests.RequestException: If API request fails.
    """
    url = f"{base_url.rstrip('/')}/property/availability/{property_id}"
    logger.debug("GET %s", url)
    response = requests.get(url, headers=build_headers(token), timeout=timeout)
    response.raise_for_status()
    return normalize_unavailable_dates(response.json().get("unavailableDates", []))


def get_property(
    base_url: str,
    property_id: PropertyId,
    token: str | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> dict[str, Any]:
    """Fetch a property's details.

    Args:
        base_url: API base URL.
        property_id: Property to look up.
        token: Optional session token.
        timeout: Request timeout in seconds.

    Returns:
        Property dictionary (name, pricePerNight, ...).

    Raises:
        requests.RequestException: If API request fails.
    """
    url = f"{base_url.rstrip('/')}/property/{property_id}"
    logger.debug("GET %s", url)
    response = requests.get(url, headers=build_headers(token), timeout=timeout)
    response.raise_for_status()
    result: dict[str, Any] = response.json()
    return result


def create_reservation(
    base_url: str,
    payload: dict[str, Any],
    token: str | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> dict[str, Any]:
    """Create a reservation.

    Args:
        base_url: API base URL.
        payload: createReservation request body.
        token: Optional session token.
        timeout: Request timeout in seconds.

    Returns:
        Response dictionary with "reservation", "itinerary" and "message".

    Raises:
        requests.RequestException: If API request fails.
    """
    url = f"{base_url.rstrip('/')}/reservation/createReservation"
    logger.debug("POST %s", url)
    response = requests.post(url, json=payload, headers=build_headers(token), timeout=timeout)
    response.raise_for_status()
    result: dict[str, Any] = response.json()
    return result
