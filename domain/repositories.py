"""Domain Repository Interfaces"""
from abc import ABC, abstractmethod
from typing import Optional, List

from domain.entities import Hotel, Reservation
from domain.enums import ReservationStatus


class HotelRepository(ABC):
    """Repository interface for the hotel directory"""

    @abstractmethod
    async def get_by_id(self, hotel_id: int) -> Optional[Hotel]:
        """Find hotel by ID"""
        pass

    @abstractmethod
    async def get_all(self) -> List[Hotel]:
        """Find all hotels"""
        pass

    @abstractmethod
    async def add(self, hotel: Hotel) -> Hotel:
        """Store a new hotel and assign its ID"""
        pass

    @abstractmethod
    async def update(self, hotel: Hotel) -> Hotel:
        """Update hotel"""
        pass

    @abstractmethod
    async def delete(self, hotel_id: int) -> bool:
        """Delete hotel"""
        pass


class ReservationRepository(ABC):
    """Repository interface for Reservation Aggregate"""

    @abstractmethod
    async def get_by_id(self, reservation_id: int) -> Optional[Reservation]:
        """Find reservation by ID"""
        pass

    @abstractmethod
    async def add(self, reservation: Reservation) -> Reservation:
        """Store a new reservation and assign its ID"""
        pass

    @abstractmethod
    async def update(self, reservation: Reservation) -> Reservation:
        """Update reservation"""
        pass

    @abstractmethod
    async def list_by_guest_email(self, email: str) -> List[Reservation]:
        """Find reservations by exact guest email"""
        pass

    @abstractmethod
    async def list_by_hotel(self, hotel_id: int) -> List[Reservation]:
        """Find reservations of a hotel"""
        pass

    @abstractmethod
    async def list_by_status(self, status: ReservationStatus) -> List[Reservation]:
        """Find reservations in a given status"""
        pass

    @abstractmethod
    async def delete_by_hotel(self, hotel_id: int) -> int:
        """Remove every reservation of a hotel, returns how many"""
        pass
