"""In-Memory Repository Implementations"""
import asyncio
import itertools
import logging
from typing import Optional, List, Dict, Tuple

from domain.repositories import HotelRepository, BookingRepository
from domain.entities import Hotel, Room, Booking
from domain.exceptions import DuplicateBookingReferenceError

logger = logging.getLogger(__name__)


class InMemoryHotelRepository(HotelRepository):
    """In-memory implementation of HotelRepository"""

    def __init__(self):
        self._storage: Dict[int, Hotel] = {}
        self._ids = itertools.count(1)

    async def save(self, hotel: Hotel) -> Hotel:
        """Save hotel to memory"""
        if hotel.hotel_id is None:
            hotel.hotel_id = next(self._ids)
        self._storage[hotel.hotel_id] = hotel
        return hotel

    async def find_by_id(self, hotel_id: int) -> Optional[Hotel]:
        """Find hotel by ID"""
        return self._storage.get(hotel_id)

    async def find_by_name(self, name: str) -> Optional[Hotel]:
        """Find hotel by name, ignoring case"""
        for hotel in self._storage.values():
            if hotel.has_name(name):
                return hotel
        return None

    async def find_all(self) -> List[Hotel]:
        """Find all hotels"""
        return list(self._storage.values())

    async def find_rooms(self, hotel_id: int) -> List[Room]:
        """List the rooms of a hotel"""
        hotel = self._storage.get(hotel_id)
        if not hotel:
            return []
        return list(hotel.rooms)

    async def find_room(self, hotel_id: int, room_id: int) -> Optional[Room]:
        """Find a room by hotel and room ID"""
        hotel = self._storage.get(hotel_id)
        if not hotel:
            return None
        return hotel.find_room(room_id)

    async def delete(self, hotel_id: int) -> bool:
        """Delete hotel; its rooms go with it"""
        if hotel_id in self._storage:
            del self._storage[hotel_id]
            return True
        return False

    async def delete_all(self) -> None:
        self._storage.clear()


class InMemoryBookingRepository(BookingRepository):
    """In-memory implementation of BookingRepository"""

    def __init__(self):
        self._storage: Dict[int, Booking] = {}
        self._by_reference: Dict[str, int] = {}
        self._locks: Dict[Tuple[int, int], asyncio.Lock] = {}
        self._ids = itertools.count(1)

    async def save(self, booking: Booking) -> Booking:
        """Insert booking, enforcing reference uniqueness"""
        if booking.booking_reference in self._by_reference:
            logger.warning("Booking reference collision on %s", booking.booking_reference)
            raise DuplicateBookingReferenceError(booking.booking_reference)

        booking.booking_id = next(self._ids)
        self._storage[booking.booking_id] = booking
        self._by_reference[booking.booking_reference] = booking.booking_id
        return booking

    async def find_by_reference(self, reference: str) -> Optional[Booking]:
        """Find booking by reference"""
        booking_id = self._by_reference.get(reference)
        if booking_id is None:
            return None
        return self._storage.get(booking_id)

    async def find_by_room(self, hotel_id: int, room_id: int) -> List[Booking]:
        """Find bookings of a room"""
        return [
            b for b in self._storage.values()
            if b.hotel_id == hotel_id and b.room_id == room_id
        ]

    async def delete_by_hotel(self, hotel_id: int) -> int:
        """Delete every booking of a hotel"""
        doomed = [b for b in self._storage.values() if b.hotel_id == hotel_id]
        for booking in doomed:
            del self._storage[booking.booking_id]
            del self._by_reference[booking.booking_reference]
        self._drop_locks(lambda key: key[0] == hotel_id)
        return len(doomed)

    async def delete_all(self) -> None:
        self._storage.clear()
        self._by_reference.clear()
        self._drop_locks(lambda key: True)

    def lock_room(self, hotel_id: int, room_id: int) -> asyncio.Lock:
        """One lock per room, created on first use"""
        return self._locks.setdefault((hotel_id, room_id), asyncio.Lock())

    def _drop_locks(self, matches) -> None:
        # A held lock stays until its holder releases it
        for key in [k for k, lock in self._locks.items() if matches(k) and not lock.locked()]:
            del self._locks[key]
