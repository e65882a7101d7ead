"""Domain Entities - Aggregates"""
from pydantic import BaseModel, Field
from datetime import datetime, date, timezone
from typing import Optional, List
from decimal import Decimal

from domain.enums import ReservationStatus
from domain.exceptions import AlreadyCancelled, InvalidReservation, InvalidHotel
from domain.pricing import calculate_nights, calculate_total_price
from domain.value_objects import DateRange


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Hotel(BaseModel):
    """Hotel Entity, owned by the hotel directory"""

    # Identity (assigned by the store)
    id: Optional[int] = None

    name: str = ""
    city: str = ""
    address: str = ""
    phone: str = ""
    nightly_rate: Decimal = Decimal("0")

    # Metadata
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    class Config:
        from_attributes = True

    def is_valid_hotel(self) -> bool:
        return not self.validation_errors()

    def validation_errors(self) -> List[str]:
        errors = []
        if not self.name.strip():
            errors.append("name is required")
        if not self.city.strip():
            errors.append("city is required")
        if not self.address.strip():
            errors.append("address is required")
        if self.nightly_rate < 0:
            errors.append("nightly_rate must not be negative")
        return errors

    def ensure_valid(self) -> None:
        errors = self.validation_errors()
        if errors:
            raise InvalidHotel(errors)


class Reservation(BaseModel):
    """Reservation Aggregate Root Entity"""

    # Identity (assigned by the store)
    id: Optional[int] = None

    # Reference to the hotel directory
    hotel_id: int

    guest_name: str
    guest_email: str
    check_in_date: date
    check_out_date: date
    room_number: int

    status: ReservationStatus = ReservationStatus.PENDING
    total_price: Decimal = Decimal("0")

    # Metadata
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    # Related hotel, only present when it was loaded alongside the reservation
    hotel: Optional[Hotel] = Field(default=None, exclude=True)

    class Config:
        from_attributes = True

    # ==================== FACTORY METHOD ====================
    @staticmethod
    def create(
        hotel_id: int,
        guest_name: str,
        guest_email: str,
        check_in_date: date,
        check_out_date: date,
        room_number: int
    ) -> "Reservation":
        """Build a pending reservation and validate it"""
        reservation = Reservation(
            hotel_id=hotel_id,
            guest_name=(guest_name or "").strip(),
            guest_email=(guest_email or "").strip(),
            check_in_date=check_in_date,
            check_out_date=check_out_date,
            room_number=room_number,
            status=ReservationStatus.PENDING
        )
        reservation.ensure_valid()
        return reservation

    # ==================== PRICING ====================
    def apply_nightly_rate(self, nightly_rate: Decimal) -> Decimal:
        """Set total_price from the stay length and the given rate"""
        self.total_price = calculate_total_price(
            self.check_in_date, self.check_out_date, nightly_rate
        )
        return self.total_price

    # ==================== STATE TRANSITION METHODS ====================
    def cancel(self) -> None:
        """Soft-cancel; a reservation can only be cancelled once"""
        if self.status == ReservationStatus.CANCELLED:
            raise AlreadyCancelled(self.id)

        self.status = ReservationStatus.CANCELLED
        self.updated_at = _utcnow()

    def change_status(self, new_status: ReservationStatus) -> None:
        """Overwrite the status. Any transition is allowed, including
        leaving Cancelled or setting the current status again."""
        self.status = new_status
        self.updated_at = _utcnow()

    # ==================== QUERY METHODS ====================
    def is_valid_reservation(self) -> bool:
        return not self.validation_errors()

    def validation_errors(self) -> List[str]:
        errors = []
        if not self.guest_name.strip():
            errors.append("guest_name is required")
        if not self.guest_email.strip():
            errors.append("guest_email is required")
        if not self.date_range.is_ordered():
            errors.append("check_out_date must be after check_in_date")
        return errors

    def ensure_valid(self) -> None:
        errors = self.validation_errors()
        if errors:
            raise InvalidReservation(errors)

    @property
    def date_range(self) -> DateRange:
        return DateRange(check_in=self.check_in_date, check_out=self.check_out_date)

    def get_nights(self) -> int:
        """Get number of nights"""
        return calculate_nights(self.check_in_date, self.check_out_date)

    @property
    def hotel_name(self) -> Optional[str]:
        return self.hotel.name if self.hotel else None

    def detached(self) -> "Reservation":
        """Copy without the loaded hotel, as the store keeps it"""
        return self.model_copy(update={"hotel": None}, deep=True)
