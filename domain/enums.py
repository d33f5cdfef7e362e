"""Domain Enums"""
from enum import Enum


class RoomType(str, Enum):
    SINGLE = "Single"
    DOUBLE = "Double"
    DELUXE = "Deluxe"

    @property
    def capacity(self) -> int:
        return capacity_of(self)


ROOM_CAPACITY = {
    RoomType.SINGLE: 1,
    RoomType.DOUBLE: 2,
    RoomType.DELUXE: 3,
}


def capacity_of(room_type: RoomType) -> int:
    """Maximum number of guests a room of the given type can hold"""
    return ROOM_CAPACITY[RoomType(room_type)]
