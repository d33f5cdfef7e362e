"""Domain Value Objects"""
from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from datetime import date, datetime
from typing import Union
from uuid import uuid4

BOOKING_REFERENCE_LENGTH = 8


def normalize_date(value: Union[date, datetime]) -> date:
    """Drop any time-of-day component"""
    if isinstance(value, datetime):
        return value.date()
    return value


def generate_booking_reference() -> str:
    """Generate an 8-character uppercase alphanumeric booking reference"""
    return uuid4().hex[:BOOKING_REFERENCE_LENGTH].upper()


class DateRange(BaseModel):
    """Value Object for a half-open stay period [start_date, end_date)"""
    model_config = ConfigDict(frozen=True)

    start_date: date
    end_date: date

    @field_validator('start_date', 'end_date', mode='before')
    @classmethod
    def strip_time(cls, v):
        return normalize_date(v)

    @model_validator(mode='after')
    def end_after_start(self):
        if self.end_date <= self.start_date:
            raise ValueError('End date must be after start date')
        return self

    def nights(self) -> int:
        """Calculate number of nights"""
        return (self.end_date - self.start_date).days

    def overlaps(self, other: "DateRange") -> bool:
        """True when both periods share at least one night"""
        return self.start_date < other.end_date and self.end_date > other.start_date

    def is_disjoint_from(self, other: "DateRange") -> bool:
        """True when one period ends on or before the other starts"""
        return self.end_date <= other.start_date or self.start_date >= other.end_date
