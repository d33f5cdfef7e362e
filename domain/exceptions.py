"""Domain Exceptions"""
from typing import List, Optional


class DomainException(Exception):
    """Base exception for booking domain errors"""
    pass


class InvalidArgumentError(DomainException):
    """Malformed or semantically invalid input, always caller-correctable"""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


class NotFoundError(DomainException):
    """Referenced hotel, room or booking does not exist"""
    pass


class CapacityExceededError(DomainException):
    """More guests than the room can hold"""

    def __init__(self, number_of_guests: int, capacity: int):
        self.number_of_guests = number_of_guests
        self.capacity = capacity
        super().__init__(
            f"Number of guests ({number_of_guests}) exceeds room capacity ({capacity})"
        )


class ConflictError(DomainException):
    """Request collides with existing state (overlapping dates, duplicate names)"""
    pass


class DuplicateBookingReferenceError(ConflictError):
    """Booking reference already taken by another booking"""

    def __init__(self, reference: str, message: Optional[str] = None):
        self.reference = reference
        super().__init__(message or f"Booking reference {reference} already exists")
