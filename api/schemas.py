"""API Schemas - Request and Response DTOs"""
from pydantic import BaseModel, Field
from datetime import date, datetime
from typing import List, Union

from domain.enums import RoomType


# ============================================================================
# HOTEL SCHEMAS
# ============================================================================

class CreateHotelRequest(BaseModel):
    """Create hotel request DTO"""
    name: str
    room_types: List[RoomType] = Field(default=[], description="Room types in room-number order")


class RoomResponse(BaseModel):
    """Room response DTO"""
    id: int
    hotel_id: int
    type: str
    capacity: int


class HotelResponse(BaseModel):
    """Hotel summary response DTO"""
    id: int
    name: str


class HotelDetailResponse(HotelResponse):
    """Hotel with its rooms"""
    rooms: List[RoomResponse]


# ============================================================================
# BOOKING SCHEMAS
# ============================================================================

class CreateBookingRequest(BaseModel):
    """Create booking request DTO; time of day is discarded from the dates"""
    room_id: int
    hotel_id: int
    number_of_guests: int
    start_date: Union[datetime, date]
    end_date: Union[datetime, date]


class BookingResponse(BaseModel):
    """Booking response DTO"""
    booking_reference: str
    room_id: int
    hotel_id: int
    number_of_guests: int
    start_date: date
    end_date: date


# ============================================================================
# ADMIN SCHEMAS
# ============================================================================

class MessageResponse(BaseModel):
    """Plain status message"""
    message: str


class SeedResponse(MessageResponse):
    hotels_created: int
