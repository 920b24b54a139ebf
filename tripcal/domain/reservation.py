"""Pure functions for turning a committed range into a reservation request.

This module contains the functional core for booking:
- No I/O operations (no network, no console, no files)
- No side effects
- Payments are in the property's currency, as floats like the backend uses
"""

from dataclasses import dataclass
from typing import Any

from tripcal.dates import days_between, parse_date_key
from tripcal.domain.models import DateKey, PropertyId, UserId
from tripcal.domain.selection import DateRange

# Backend expects UTC midnight timestamps with milliseconds
TIMESTAMP_SUFFIX = "T00:00:00.000Z"


@dataclass(frozen=True)
class ReservationQuote:
    """Immutable price breakdown for a stay."""

    check_in: DateKey
    check_out: DateKey
    nights: int
    price_per_night: float
    payment: float


def count_nights(check_in: DateKey, check_out: DateKey) -> int:
    """Count nights between check-in and check-out.

    Args:
        check_in: Arrival day.
        check_out: Departure day.

    Returns:
        Number of nights (0 when both are the same day).

    Raises:
        ValueError: If either key is malformed or check-out is before check-in.
    """
    start = parse_date_key(check_in)
    end = parse_date_key(check_out)
    if start is None or end is None:
        raise ValueError(f"Invalid dates: {check_in} - {check_out}")

    nights = days_between(start, end)
    if nights < 0:
        raise ValueError("Check-out must not be before check-in")
    return nights


def calculate_payment(price_per_night: float, nights: int) -> float:
    """Total payment for a stay, rounded to cents."""
    return round(price_per_night * nights, 2)


def quote_stay(date_range: DateRange, price_per_night: float) -> ReservationQuote:
    """Price a committed range.

    Raises:
        ValueError: If the price is negative or the range is malformed.
    """
    if price_per_night < 0:
        raise ValueError("Price per night must not be negative")

    nights = count_nights(date_range.start, date_range.end)
    return ReservationQuote(
        check_in=date_range.start,
        check_out=date_range.end,
        nights=nights,
        price_per_night=price_per_night,
        payment=calculate_payment(price_per_night, nights),
    )


def format_timestamp(key: DateKey) -> str:
    """Convert a DateKey to the backend's UTC timestamp format."""
    return f"{key}{TIMESTAMP_SUFFIX}"


def build_reservation_request(
    user_id: UserId,
    property_id: PropertyId,
    date_range: DateRange,
    persons: int,
    price_per_night: float,
) -> dict[str, Any]:
    """Build the createReservation request body.

    Args:
        user_id: Guest making the reservation.
        property_id: Property being booked.
        date_range: Committed check-in/check-out range.
        persons: Number of travellers.
        price_per_night: Nightly price of the property.

    Returns:
        JSON-serializable request body.

    Raises:
        ValueError: If persons < 1, the price is negative or the stay has no nights.
    """
    if persons < 1:
        raise ValueError("At least one person is required")

    quote = quote_stay(date_range, price_per_night)
    if quote.nights < 1:
        raise ValueError("Check-out must be at least one night after check-in")

    return {
        "reservationUser": user_id,
        "propertyBooked": property_id,
        "checkInDate": format_timestamp(quote.check_in),
        "checkOutDate": format_timestamp(quote.check_out),
        "payment": quote.payment,
        "persons": persons,
        "days": quote.nights,
    }
