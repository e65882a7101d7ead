"""Domain Pricing - pure price calculation for a stay"""
from datetime import date
from decimal import Decimal
from typing import Optional

from domain.exceptions import InvalidReservation
from domain.value_objects import DateRange


def calculate_nights(check_in: date, check_out: date) -> int:
    """Whole days between check-in and check-out"""
    return DateRange(check_in=check_in, check_out=check_out).nights()


def calculate_total_price(check_in: date, check_out: date, nightly_rate: Decimal) -> Decimal:
    """Total price of a stay: nights x nightly rate"""
    rate = Decimal(nightly_rate)
    if rate < 0:
        raise InvalidReservation(["nightly rate must not be negative"])
    return calculate_nights(check_in, check_out) * rate


def resolve_nightly_rate(
    override: Optional[Decimal],
    hotel_rate: Optional[Decimal],
    default_rate: Decimal
) -> Decimal:
    """Pick the rate to charge.

    A caller supplied override always wins, zero included. Without one the
    hotel's own rate applies when it has been configured (positive), and the
    system default otherwise.
    """
    if override is not None:
        return Decimal(override)
    if hotel_rate is not None and Decimal(hotel_rate) > 0:
        return Decimal(hotel_rate)
    return Decimal(default_rate)
