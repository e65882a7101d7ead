"""Application Services - Business use cases"""
import logging
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import List, Optional

from domain.repositories import HotelRepository, ReservationRepository
from domain.entities import Hotel, Reservation
from domain.enums import ReservationStatus
from domain.exceptions import (
    AlreadyCancelled, HotelNotFound, InvalidHotel, InvalidReservation,
    InvalidStatusValue, ReservationNotFound
)
from domain.pricing import resolve_nightly_rate
from domain.value_objects import ReservationStats

logger = logging.getLogger("hotel_reservation.reservations")
hotel_logger = logging.getLogger("hotel_reservation.hotels")


class ReservationService:
    """Service for Reservation business use cases.

    Sequences hotel lookup, validation, pricing, persistence and status
    changes. Holds no state of its own between calls.

    Status changes are a plain read-modify-write against the store: two
    concurrent calls on the same reservation are last-writer-wins.
    """

    def __init__(self,
                 repository: ReservationRepository,
                 hotel_repository: HotelRepository,
                 default_nightly_rate: Decimal):
        self.repository = repository
        self.hotel_repository = hotel_repository
        self.default_nightly_rate = Decimal(default_nightly_rate)

    async def _require_hotel(self, hotel_id: int) -> Hotel:
        hotel = await self.hotel_repository.get_by_id(hotel_id)
        if hotel is None:
            logger.warning("Hotel %s not found", hotel_id)
            raise HotelNotFound(hotel_id)
        return hotel

    async def create_reservation(
        self,
        hotel_id: int,
        guest_name: str,
        guest_email: str,
        check_in_date: date,
        check_out_date: date,
        room_number: int,
        price_per_night: Optional[Decimal] = None
    ) -> Reservation:
        """Create a pending reservation for an existing hotel"""
        logger.info("Creating reservation for hotel %s", hotel_id)

        # The hotel must exist before anything is validated or stored
        hotel = await self._require_hotel(hotel_id)

        try:
            reservation = Reservation.create(
                hotel_id=hotel_id,
                guest_name=guest_name,
                guest_email=guest_email,
                check_in_date=check_in_date,
                check_out_date=check_out_date,
                room_number=room_number
            )
            nightly_rate = resolve_nightly_rate(
                price_per_night, hotel.nightly_rate, self.default_nightly_rate
            )
            reservation.apply_nightly_rate(nightly_rate)
        except InvalidReservation as e:
            logger.warning("Rejected reservation for hotel %s: %s", hotel_id, e)
            raise

        logger.info(
            "Total price %s (%s nights x %s/night)",
            reservation.total_price, reservation.get_nights(), nightly_rate
        )

        await self.repository.add(reservation)

        reservation.hotel = hotel
        logger.info("Reservation %s created for hotel %s", reservation.id, hotel_id)
        return reservation

    async def get_reservation(self, reservation_id: int) -> Reservation:
        """Get reservation by ID"""
        logger.info("Fetching reservation %s", reservation_id)
        reservation = await self.repository.get_by_id(reservation_id)
        if reservation is None:
            logger.warning("Reservation %s not found", reservation_id)
            raise ReservationNotFound(reservation_id)
        return reservation

    async def get_reservations_by_email(self, email: str) -> List[Reservation]:
        """Get all reservations made with an email address"""
        logger.info("Fetching reservations for email %s", email)
        return await self.repository.list_by_guest_email(email)

    async def get_reservations_by_hotel(self, hotel_id: int) -> List[Reservation]:
        """Get all reservations of a hotel"""
        logger.info("Fetching reservations for hotel %s", hotel_id)
        hotel = await self._require_hotel(hotel_id)

        reservations = await self.repository.list_by_hotel(hotel_id)
        for reservation in reservations:
            reservation.hotel = hotel
        return reservations

    async def get_pending_reservations(self) -> List[Reservation]:
        """Get reservations waiting for an admin decision"""
        return await self.repository.list_by_status(ReservationStatus.PENDING)

    async def get_hotel_stats(self, hotel_id: int) -> ReservationStats:
        """Count, revenue and average price over a hotel's reservations"""
        reservations = await self.get_reservations_by_hotel(hotel_id)
        return ReservationStats.from_prices(r.total_price for r in reservations)

    async def cancel_reservation(self, reservation_id: int) -> bool:
        """Cancel a reservation. Returns False when it does not exist."""
        logger.info("Cancelling reservation %s", reservation_id)

        reservation = await self.repository.get_by_id(reservation_id)
        if reservation is None:
            logger.warning("Reservation %s not found for cancellation", reservation_id)
            return False

        try:
            reservation.cancel()
        except AlreadyCancelled:
            logger.warning("Reservation %s is already cancelled", reservation_id)
            raise

        await self.repository.update(reservation)
        logger.info("Reservation %s cancelled", reservation_id)
        return True

    async def update_status(self, reservation_id: int, status: str) -> Reservation:
        """Overwrite the status of a reservation"""
        logger.info("Setting status of reservation %s to %r", reservation_id, status)

        reservation = await self.get_reservation(reservation_id)

        try:
            new_status = ReservationStatus.parse(status)
        except InvalidStatusValue:
            logger.warning("Unknown status %r for reservation %s", status, reservation_id)
            raise

        reservation.change_status(new_status)
        await self.repository.update(reservation)
        return reservation


class HotelService:
    """Service for the hotel directory"""

    def __init__(self,
                 repository: HotelRepository,
                 reservation_repository: Optional[ReservationRepository] = None):
        self.repository = repository
        self.reservation_repository = reservation_repository

    async def get_all_hotels(self) -> List[Hotel]:
        hotel_logger.info("Fetching all hotels")
        return await self.repository.get_all()

    async def get_hotel(self, hotel_id: int) -> Hotel:
        hotel_logger.info("Fetching hotel %s", hotel_id)
        hotel = await self.repository.get_by_id(hotel_id)
        if hotel is None:
            hotel_logger.warning("Hotel %s not found", hotel_id)
            raise HotelNotFound(hotel_id)
        return hotel

    async def create_hotel(
        self,
        name: str,
        city: str,
        address: str,
        phone: str = "",
        nightly_rate: Decimal = Decimal("0")
    ) -> Hotel:
        """Register a new hotel"""
        hotel_logger.info("Creating hotel %s", name)
        hotel = Hotel(
            name=(name or "").strip(),
            city=(city or "").strip(),
            address=(address or "").strip(),
            phone=(phone or "").strip(),
            nightly_rate=nightly_rate
        )
        try:
            hotel.ensure_valid()
        except InvalidHotel as e:
            hotel_logger.warning("Rejected hotel: %s", e)
            raise

        await self.repository.add(hotel)
        hotel_logger.info("Hotel %s created", hotel.id)
        return hotel

    async def update_hotel(
        self,
        hotel_id: int,
        name: str,
        city: str,
        address: str,
        phone: str = "",
        nightly_rate: Decimal = Decimal("0")
    ) -> Hotel:
        """Replace the details of a hotel"""
        hotel_logger.info("Updating hotel %s", hotel_id)
        hotel = await self.get_hotel(hotel_id)

        hotel.name = (name or "").strip()
        hotel.city = (city or "").strip()
        hotel.address = (address or "").strip()
        hotel.phone = (phone or "").strip()
        hotel.nightly_rate = Decimal(nightly_rate)
        hotel.updated_at = datetime.now(timezone.utc)

        try:
            hotel.ensure_valid()
        except InvalidHotel as e:
            hotel_logger.warning("Rejected update of hotel %s: %s", hotel_id, e)
            raise

        return await self.repository.update(hotel)

    async def delete_hotel(self, hotel_id: int) -> bool:
        """Delete a hotel together with its reservations"""
        hotel_logger.info("Deleting hotel %s", hotel_id)
        if await self.repository.get_by_id(hotel_id) is None:
            hotel_logger.warning("Hotel %s not found", hotel_id)
            return False

        if self.reservation_repository is not None:
            removed = await self.reservation_repository.delete_by_hotel(hotel_id)
            hotel_logger.info("Removed %s reservations of hotel %s", removed, hotel_id)
        return await self.repository.delete(hotel_id)
