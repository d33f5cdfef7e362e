"""Domain Repository Interfaces"""
from abc import ABC, abstractmethod
from typing import AsyncContextManager, List, Optional

from domain.entities import Hotel, Room, Booking


class HotelRepository(ABC):
    """Repository interface for Hotel Aggregate (hotels and their rooms)"""

    @abstractmethod
    async def save(self, hotel: Hotel) -> Hotel:
        """Save hotel, assigning an id to a new one"""
        pass

    @abstractmethod
    async def find_by_id(self, hotel_id: int) -> Optional[Hotel]:
        """Find hotel by ID"""
        pass

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[Hotel]:
        """Find hotel by name, ignoring case"""
        pass

    @abstractmethod
    async def find_all(self) -> List[Hotel]:
        """Find all hotels"""
        pass

    @abstractmethod
    async def find_rooms(self, hotel_id: int) -> List[Room]:
        """List the rooms of a hotel"""
        pass

    @abstractmethod
    async def find_room(self, hotel_id: int, room_id: int) -> Optional[Room]:
        """Find a room by its composite key"""
        pass

    @abstractmethod
    async def delete(self, hotel_id: int) -> bool:
        """Delete hotel together with its rooms"""
        pass

    @abstractmethod
    async def delete_all(self) -> None:
        """Delete every hotel and room"""
        pass


class BookingRepository(ABC):
    """Repository interface for Booking records"""

    @abstractmethod
    async def save(self, booking: Booking) -> Booking:
        """Insert booking; raises DuplicateBookingReferenceError on a taken reference"""
        pass

    @abstractmethod
    async def find_by_reference(self, reference: str) -> Optional[Booking]:
        """Find booking by its reference"""
        pass

    @abstractmethod
    async def find_by_room(self, hotel_id: int, room_id: int) -> List[Booking]:
        """Find all bookings of a room"""
        pass

    @abstractmethod
    async def delete_by_hotel(self, hotel_id: int) -> int:
        """Delete the bookings of a hotel, returning how many were removed"""
        pass

    @abstractmethod
    async def delete_all(self) -> None:
        """Delete every booking"""
        pass

    @abstractmethod
    def lock_room(self, hotel_id: int, room_id: int) -> AsyncContextManager:
        """Critical section for reading and inserting the bookings of one room"""
        pass
