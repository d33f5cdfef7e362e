"""API Dependencies - Repository and service wiring"""
import random

from application.services import HotelService, BookingService, SeedService
from infrastructure import config
from infrastructure.repositories.in_memory_repositories import (
    InMemoryHotelRepository, InMemoryBookingRepository
)

# Process-wide repositories
hotel_repo = InMemoryHotelRepository()
booking_repo = InMemoryBookingRepository()


def get_hotel_service() -> HotelService:
    return HotelService(hotel_repo, booking_repo)


def get_booking_service() -> BookingService:
    return BookingService(
        hotel_repo,
        booking_repo,
        max_reference_attempts=config.BOOKING_REFERENCE_MAX_ATTEMPTS
    )


def get_seed_service() -> SeedService:
    return SeedService(
        hotel_repo,
        booking_repo,
        min_hotels=config.SEED_MIN_HOTELS,
        max_hotels=config.SEED_MAX_HOTELS,
        rooms_per_hotel=config.ROOMS_PER_HOTEL,
        rng=random.Random(config.SEED_RANDOM_SEED)
    )
