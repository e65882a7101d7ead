"""In-Memory Repository Implementations"""
from itertools import count
from typing import Optional, List, Dict

from domain.repositories import HotelRepository, ReservationRepository
from domain.entities import Hotel, Reservation
from domain.enums import ReservationStatus


class InMemoryHotelRepository(HotelRepository):
    """In-memory implementation of HotelRepository"""

    def __init__(self):
        self._storage: Dict[int, Hotel] = {}
        self._ids = count(1)

    async def get_by_id(self, hotel_id: int) -> Optional[Hotel]:
        """Find hotel by ID"""
        hotel = self._storage.get(hotel_id)
        return hotel.model_copy(deep=True) if hotel else None

    async def get_all(self) -> List[Hotel]:
        """Find all hotels"""
        return [h.model_copy(deep=True) for h in self._storage.values()]

    async def add(self, hotel: Hotel) -> Hotel:
        """Save hotel to memory with a new ID"""
        hotel.id = next(self._ids)
        self._storage[hotel.id] = hotel.model_copy(deep=True)
        return hotel

    async def update(self, hotel: Hotel) -> Hotel:
        """Update hotel"""
        if hotel.id in self._storage:
            self._storage[hotel.id] = hotel.model_copy(deep=True)
            return hotel
        raise KeyError(f"Hotel {hotel.id} is not stored")

    async def delete(self, hotel_id: int) -> bool:
        """Delete hotel"""
        if hotel_id in self._storage:
            del self._storage[hotel_id]
            return True
        return False


class InMemoryReservationRepository(ReservationRepository):
    """In-memory implementation of ReservationRepository.

    When given the hotel repository, lookups by ID and by guest email load
    the related hotel onto each reservation. Lookups by hotel and by status
    do not.
    """

    def __init__(self, hotel_repository: Optional[HotelRepository] = None):
        self._storage: Dict[int, Reservation] = {}
        self._ids = count(1)
        self._hotels = hotel_repository

    async def _with_hotel(self, reservation: Reservation) -> Reservation:
        if self._hotels is not None:
            reservation.hotel = await self._hotels.get_by_id(reservation.hotel_id)
        return reservation

    async def get_by_id(self, reservation_id: int) -> Optional[Reservation]:
        """Find reservation by ID"""
        stored = self._storage.get(reservation_id)
        if stored is None:
            return None
        return await self._with_hotel(stored.model_copy(deep=True))

    async def add(self, reservation: Reservation) -> Reservation:
        """Save reservation to memory with a new ID"""
        reservation.id = next(self._ids)
        self._storage[reservation.id] = reservation.detached()
        return reservation

    async def update(self, reservation: Reservation) -> Reservation:
        """Update reservation"""
        if reservation.id in self._storage:
            self._storage[reservation.id] = reservation.detached()
            return reservation
        raise KeyError(f"Reservation {reservation.id} is not stored")

    async def list_by_guest_email(self, email: str) -> List[Reservation]:
        """Find reservations by exact guest email"""
        return [
            await self._with_hotel(r.model_copy(deep=True))
            for r in self._storage.values() if r.guest_email == email
        ]

    async def list_by_hotel(self, hotel_id: int) -> List[Reservation]:
        """Find reservations of a hotel"""
        return [r.model_copy(deep=True) for r in self._storage.values() if r.hotel_id == hotel_id]

    async def list_by_status(self, status: ReservationStatus) -> List[Reservation]:
        """Find reservations in a given status"""
        return [r.model_copy(deep=True) for r in self._storage.values() if r.status == status]

    async def delete_by_hotel(self, hotel_id: int) -> int:
        """Remove every reservation of a hotel"""
        doomed = [rid for rid, r in self._storage.items() if r.hotel_id == hotel_id]
        for rid in doomed:
            del self._storage[rid]
        return len(doomed)
