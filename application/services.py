"""Application Services - Business use cases"""
import itertools
import logging
import random
from datetime import date, datetime
from typing import List, Optional, Sequence, Union

from domain.repositories import HotelRepository, BookingRepository
from domain.entities import Hotel, Room, Booking, HOTEL_NAME_MAX_LENGTH
from domain.enums import RoomType
from domain.exceptions import (
    InvalidArgumentError, NotFoundError, CapacityExceededError, ConflictError,
    DuplicateBookingReferenceError
)
from domain.value_objects import (
    DateRange, normalize_date, generate_booking_reference
)

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime]


def _require_text(value: Optional[str], field_name: str) -> str:
    if value is None or not value.strip():
        raise InvalidArgumentError([f"{field_name} is required"])
    return value.strip()


def _validate_stay(start_date: DateLike, end_date: DateLike, number_of_guests: int) -> DateRange:
    """Normalize the requested stay, reporting every broken constraint at once"""
    start = normalize_date(start_date)
    end = normalize_date(end_date)

    errors = []
    if end <= start:
        errors.append("End date must be after start date")
    if number_of_guests <= 0:
        errors.append("Number of guests must be greater than 0")
    if errors:
        raise InvalidArgumentError(errors)

    return DateRange(start_date=start, end_date=end)


class HotelService:
    """Service for Hotel and Room use cases"""

    def __init__(self, repository: HotelRepository, booking_repo: BookingRepository):
        self.repository = repository
        self.booking_repo = booking_repo

    async def find_hotel_by_name(self, name: str) -> Optional[Hotel]:
        """Case-insensitive exact match; None when absent"""
        name = _require_text(name, "Hotel name")
        return await self.repository.find_by_name(name)

    async def get_all_hotels(self) -> List[Hotel]:
        """Get all hotels with their rooms"""
        return await self.repository.find_all()

    async def get_rooms_for_hotel(self, hotel_name: str) -> List[Room]:
        """Get rooms of the hotel with the given name"""
        hotel = await self.find_hotel_by_name(hotel_name)
        if not hotel:
            raise NotFoundError(f"Hotel with name {hotel_name} not found")
        return await self.repository.find_rooms(hotel.hotel_id)

    async def create_hotel(self, name: str, room_types: Sequence[RoomType] = ()) -> Hotel:
        """Create a hotel with rooms numbered 1..n in the given order"""
        name = _require_text(name, "Hotel name")
        if len(name) > HOTEL_NAME_MAX_LENGTH:
            raise InvalidArgumentError(
                [f"Hotel name must be at most {HOTEL_NAME_MAX_LENGTH} characters"]
            )

        if await self.repository.find_by_name(name):
            raise ConflictError(f"Hotel with name '{name}' already exists")

        hotel = await self.repository.save(Hotel(name=name))
        for room_type in room_types:
            hotel.add_room(room_type)
        hotel = await self.repository.save(hotel)

        logger.info("Created hotel %s (%s) with %d rooms", hotel.hotel_id, hotel.name, len(hotel.rooms))
        return hotel

    async def delete_hotel(self, hotel_id: int) -> None:
        """Delete hotel, its rooms and the bookings made for them"""
        hotel = await self.repository.find_by_id(hotel_id)
        if not hotel:
            raise NotFoundError(f"Hotel {hotel_id} not found")

        removed = await self.booking_repo.delete_by_hotel(hotel_id)
        await self.repository.delete(hotel_id)
        logger.info(
            "Deleted hotel %s with %d rooms and %d bookings", hotel_id, len(hotel.rooms), removed
        )


class BookingService:
    """Service for availability search and booking admission"""

    def __init__(self,
                 hotel_repo: HotelRepository,
                 repository: BookingRepository,
                 max_reference_attempts: int = 5):
        self.hotel_repo = hotel_repo
        self.repository = repository
        self.max_reference_attempts = max_reference_attempts

    async def get_available_rooms(
        self,
        hotel_id: int,
        start_date: DateLike,
        end_date: DateLike,
        number_of_guests: int
    ) -> List[Room]:
        """Rooms of the hotel that fit the party and are free for the whole stay"""
        date_range = _validate_stay(start_date, end_date, number_of_guests)

        available = []
        for room in await self.hotel_repo.find_rooms(hotel_id):
            if not room.can_accommodate(number_of_guests):
                continue
            bookings = await self.repository.find_by_room(hotel_id, room.room_id)
            if room.is_free_for(date_range, bookings):
                available.append(room)
        return available

    async def create_booking(
        self,
        room_id: int,
        hotel_id: int,
        number_of_guests: int,
        start_date: DateLike,
        end_date: DateLike
    ) -> Booking:
        """Admit and persist a booking, or raise the reason it was refused"""
        date_range = _validate_stay(start_date, end_date, number_of_guests)

        room = await self.hotel_repo.find_room(hotel_id, room_id)
        if not room:
            logger.info("Booking refused: room %s of hotel %s not found", room_id, hotel_id)
            raise NotFoundError("Room not found")

        # Overlap check and insert must not interleave with another admission on this room
        async with self.repository.lock_room(hotel_id, room_id):
            existing = await self.repository.find_by_room(hotel_id, room_id)
            try:
                booking = room.admit(
                    number_of_guests, date_range, existing,
                    booking_reference=generate_booking_reference()
                )
            except (CapacityExceededError, ConflictError) as e:
                logger.warning("Booking refused for room %s/%s: %s", hotel_id, room_id, e)
                raise

            booking = await self._insert_with_fresh_reference(booking)

        logger.info(
            "Booking %s admitted for room %s/%s from %s to %s",
            booking.booking_reference, hotel_id, room_id,
            date_range.start_date, date_range.end_date
        )
        return booking

    async def _insert_with_fresh_reference(self, booking: Booking) -> Booking:
        for attempt in range(1, self.max_reference_attempts + 1):
            try:
                return await self.repository.save(booking)
            except DuplicateBookingReferenceError:
                logger.warning("Reference collision, attempt %d of %d", attempt, self.max_reference_attempts)
                booking.booking_reference = generate_booking_reference()
        raise ConflictError("Could not allocate a unique booking reference")

    async def get_booking_by_reference(self, reference: str) -> Optional[Booking]:
        """Exact match on reference; None when absent"""
        reference = _require_text(reference, "Booking reference")
        return await self.repository.find_by_reference(reference)


class SeedService:
    """Service for populating and clearing demo data"""

    def __init__(self,
                 hotel_repo: HotelRepository,
                 booking_repo: BookingRepository,
                 min_hotels: int = 10,
                 max_hotels: int = 40,
                 rooms_per_hotel: int = 6,
                 rng: Optional[random.Random] = None):
        self.hotel_repo = hotel_repo
        self.booking_repo = booking_repo
        self.min_hotels = min_hotels
        self.max_hotels = max_hotels
        self.rooms_per_hotel = rooms_per_hotel
        self.rng = rng or random.Random()

    def _room_types_for_hotel(self) -> List[RoomType]:
        """Room types repeated in declaration order up to rooms_per_hotel"""
        return list(itertools.islice(itertools.cycle(RoomType), self.rooms_per_hotel))

    async def seed(self) -> int:
        """Create random hotels; refuses when any hotel already exists"""
        if await self.hotel_repo.find_all():
            raise ConflictError("Data already exists")

        hotel_count = self.rng.randrange(self.min_hotels, self.max_hotels)
        for number in range(1, hotel_count + 1):
            hotel = await self.hotel_repo.save(Hotel(name=f"Hotel{number}"))
            for room_type in self._room_types_for_hotel():
                hotel.add_room(room_type)
            await self.hotel_repo.save(hotel)

        logger.info("Database seeded with %d hotels", hotel_count)
        return hotel_count

    async def reset(self) -> None:
        """Remove all bookings, rooms and hotels"""
        await self.booking_repo.delete_all()
        await self.hotel_repo.delete_all()
        logger.info("Database reset")
