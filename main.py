from fastapi import FastAPI, HTTPException, Depends, Response
from datetime import date, datetime
from typing import List, Union

from api.schemas import (
    # Hotels
    CreateHotelRequest, HotelResponse, HotelDetailResponse, RoomResponse,
    # Bookings
    CreateBookingRequest, BookingResponse,
    # Admin
    MessageResponse, SeedResponse
)
from api.dependencies import get_hotel_service, get_booking_service, get_seed_service
from application.services import HotelService, BookingService, SeedService
from domain.enums import RoomType
from domain.exceptions import (
    InvalidArgumentError, NotFoundError, CapacityExceededError, ConflictError
)
from infrastructure import config
from infrastructure.logging_config import configure_logging

configure_logging(config.LOG_LEVEL)

app = FastAPI(
    title=config.APP_TITLE,
    description="Hotel, room and booking API with availability search",
    version=config.APP_VERSION
)

# ============================================================================
# HEALTH & ENUM REFERENCE ENDPOINTS
# ============================================================================

@app.get("/api/health", tags=["Health"])
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "message": "API is running"}

@app.get("/api/enums/room-type", tags=["Enum Reference"])
async def get_room_types():
    """Get all RoomType values with the capacity each implies"""
    return {
        "values": {item.value: item.capacity for item in RoomType},
        "description": "Room types and capacities: Single=1, Double=2, Deluxe=3"
    }

# ============================================================================
# ADMIN ENDPOINTS
# ============================================================================

@app.post("/api/hotels/seed", response_model=SeedResponse, tags=["Admin"])
async def seed_data(service: SeedService = Depends(get_seed_service)):
    """Seed the store with random hotels and rooms"""
    try:
        count = await service.seed()
        return SeedResponse(message=f"Database seeded with {count} hotels.", hotels_created=count)
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))

@app.post("/api/hotels/reset", response_model=MessageResponse, tags=["Admin"])
async def reset_data(service: SeedService = Depends(get_seed_service)):
    """Clear all hotels, rooms and bookings"""
    await service.reset()
    return MessageResponse(message="Database reset.")

# ============================================================================
# HOTEL ENDPOINTS
# ============================================================================

@app.get("/api/hotels", response_model=List[HotelDetailResponse], tags=["Hotels"])
async def get_all_hotels(service: HotelService = Depends(get_hotel_service)):
    """Get all hotels with their rooms"""
    hotels = await service.get_all_hotels()
    return [_hotel_to_detail_response(h) for h in hotels]

@app.post("/api/hotels", response_model=HotelDetailResponse, status_code=201, tags=["Hotels"])
async def create_hotel(
    request: CreateHotelRequest,
    service: HotelService = Depends(get_hotel_service)
):
    """Create a hotel with the given room types"""
    try:
        hotel = await service.create_hotel(request.name, request.room_types)
        return _hotel_to_detail_response(hotel)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))

@app.get("/api/hotels/search", response_model=HotelResponse, tags=["Hotels"])
async def search_hotel(
    name: str = "",
    service: HotelService = Depends(get_hotel_service)
):
    """Find a hotel by name, ignoring case"""
    try:
        hotel = await service.find_hotel_by_name(name)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not hotel:
        raise HTTPException(status_code=404, detail=f"Hotel with name '{name}' not found.")
    return _hotel_to_response(hotel)

@app.delete("/api/hotels/{hotel_id}", status_code=204, tags=["Hotels"])
async def delete_hotel(
    hotel_id: int,
    service: HotelService = Depends(get_hotel_service)
):
    """Delete a hotel together with its rooms and their bookings"""
    try:
        await service.delete_hotel(hotel_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)

@app.get("/api/hotels/{hotel_name}/rooms", response_model=List[RoomResponse], tags=["Hotels"])
async def get_hotel_rooms(
    hotel_name: str,
    service: HotelService = Depends(get_hotel_service)
):
    """Get all rooms of a hotel looked up by name"""
    try:
        rooms = await service.get_rooms_for_hotel(hotel_name)
        return [_room_to_response(r) for r in rooms]
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@app.get("/api/hotels/{hotel_id}/available-rooms", response_model=List[RoomResponse], tags=["Hotels"])
async def get_available_rooms(
    hotel_id: int,
    start_date: Union[datetime, date],
    end_date: Union[datetime, date],
    number_of_guests: int,
    service: BookingService = Depends(get_booking_service)
):
    """Rooms free for the whole stay that hold the number of guests"""
    try:
        rooms = await service.get_available_rooms(hotel_id, start_date, end_date, number_of_guests)
        return [_room_to_response(r) for r in rooms]
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))

# ============================================================================
# BOOKING ENDPOINTS
# ============================================================================

@app.post("/api/bookings", response_model=BookingResponse, status_code=201, tags=["Bookings"])
async def create_booking(
    request: CreateBookingRequest,
    service: BookingService = Depends(get_booking_service)
):
    """Book a room for a date range"""
    try:
        booking = await service.create_booking(
            room_id=request.room_id,
            hotel_id=request.hotel_id,
            number_of_guests=request.number_of_guests,
            start_date=request.start_date,
            end_date=request.end_date
        )
        return _booking_to_response(booking)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except (CapacityExceededError, ConflictError) as e:
        raise HTTPException(status_code=409, detail=str(e))

@app.get("/api/bookings/{reference}", response_model=BookingResponse, tags=["Bookings"])
async def get_booking(
    reference: str,
    service: BookingService = Depends(get_booking_service)
):
    """Get booking by reference"""
    try:
        booking = await service.get_booking_by_reference(reference)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not booking:
        raise HTTPException(status_code=404, detail=f"Booking with reference '{reference}' not found.")
    return _booking_to_response(booking)

# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def _hotel_to_response(hotel) -> HotelResponse:
    """Convert Hotel entity to HotelResponse"""
    return HotelResponse(id=hotel.hotel_id, name=hotel.name)

def _hotel_to_detail_response(hotel) -> HotelDetailResponse:
    """Convert Hotel entity to HotelDetailResponse"""
    return HotelDetailResponse(
        id=hotel.hotel_id,
        name=hotel.name,
        rooms=[_room_to_response(r) for r in hotel.rooms]
    )

def _room_to_response(room) -> RoomResponse:
    """Convert Room entity to RoomResponse"""
    return RoomResponse(
        id=room.room_id,
        hotel_id=room.hotel_id,
        type=room.room_type.value,
        capacity=room.capacity
    )

def _booking_to_response(booking) -> BookingResponse:
    """Convert Booking entity to BookingResponse"""
    return BookingResponse(
        booking_reference=booking.booking_reference,
        room_id=booking.room_id,
        hotel_id=booking.hotel_id,
        number_of_guests=booking.number_of_guests,
        start_date=booking.start_date,
        end_date=booking.end_date
    )

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.HOST, port=config.PORT)
