"""Domain Entities - Aggregates"""
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Iterable, List, Optional

from domain.enums import RoomType, capacity_of
from domain.exceptions import CapacityExceededError, ConflictError
from domain.value_objects import DateRange, generate_booking_reference

HOTEL_NAME_MAX_LENGTH = 100


class Booking(BaseModel):
    """Booking Entity - immutable once admitted"""
    model_config = ConfigDict(from_attributes=True)

    # Identity
    booking_id: Optional[int] = None
    booking_reference: str

    # References (hotel_id denormalized from the room)
    room_id: int
    hotel_id: int

    number_of_guests: int = Field(ge=1)
    date_range: DateRange

    created_at: datetime = Field(default_factory=datetime.utcnow)

    @property
    def start_date(self):
        return self.date_range.start_date

    @property
    def end_date(self):
        return self.date_range.end_date

    def overlaps(self, date_range: DateRange) -> bool:
        return self.date_range.overlaps(date_range)


class Room(BaseModel):
    """Room Entity, identified by (hotel_id, room_id)"""
    model_config = ConfigDict(from_attributes=True)

    room_id: int = Field(ge=1)
    hotel_id: int
    room_type: RoomType

    @property
    def capacity(self) -> int:
        """Capacity always follows the room type"""
        return capacity_of(self.room_type)

    # ==================== QUERY METHODS ====================
    def can_accommodate(self, number_of_guests: int) -> bool:
        return number_of_guests <= self.capacity

    def is_free_for(self, date_range: DateRange, bookings: Iterable[Booking]) -> bool:
        """Check that no existing booking shares a night with the period"""
        return all(b.date_range.is_disjoint_from(date_range) for b in bookings)

    # ==================== ADMISSION ====================
    def admit(
        self,
        number_of_guests: int,
        date_range: DateRange,
        bookings: Iterable[Booking],
        booking_reference: Optional[str] = None
    ) -> Booking:
        """Build the booking for this room or reject the request.

        Capacity is checked before overlap, so an oversized party is refused
        with CapacityExceededError even when the dates are also taken.
        """
        if not self.can_accommodate(number_of_guests):
            raise CapacityExceededError(number_of_guests, self.capacity)

        if any(b.overlaps(date_range) for b in bookings):
            raise ConflictError("Room is already booked for the given dates")

        return Booking(
            booking_reference=booking_reference or generate_booking_reference(),
            room_id=self.room_id,
            hotel_id=self.hotel_id,
            number_of_guests=number_of_guests,
            date_range=date_range
        )


class Hotel(BaseModel):
    """Hotel Aggregate Root Entity - owns its rooms"""
    model_config = ConfigDict(from_attributes=True)

    hotel_id: Optional[int] = None
    name: str = Field(min_length=1, max_length=HOTEL_NAME_MAX_LENGTH)
    rooms: List[Room] = []

    def add_room(self, room_type: RoomType) -> Room:
        """Append a room numbered after the current last one"""
        if self.hotel_id is None:
            raise ValueError("Hotel must be saved before rooms are added")

        next_id = max((r.room_id for r in self.rooms), default=0) + 1
        room = Room(room_id=next_id, hotel_id=self.hotel_id, room_type=room_type)
        self.rooms.append(room)
        return room

    def find_room(self, room_id: int) -> Optional[Room]:
        for room in self.rooms:
            if room.room_id == room_id:
                return room
        return None

    def has_name(self, name: str) -> bool:
        """Case-insensitive name comparison"""
        return self.name.casefold() == name.casefold()
