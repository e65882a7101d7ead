"""Domain Enums"""
from enum import Enum

from domain.exceptions import InvalidStatusValue


class ReservationStatus(str, Enum):
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    CANCELLED = "Cancelled"

    @classmethod
    def parse(cls, value: str) -> "ReservationStatus":
        """Parse a status name, ignoring case"""
        candidate = (value or "").strip().lower()
        for status in cls:
            if status.value.lower() == candidate:
                return status
        raise InvalidStatusValue(value, cls.accepted_values())

    @classmethod
    def accepted_values(cls) -> list:
        return [status.value for status in cls]
