from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import datetime, date
from decimal import Decimal
from enum import Enum

class BookingStatus(str, Enum):
    """Booking status values written by this service"""
    CONFIRMED = "Confirmed"

class BookingStage(str, Enum):
    """Forward-only stages a booking passes through before it is stored"""
    DRAFT = "draft"
    PRICED = "priced"
    CODED = "coded"
    SEATED = "seated"
    PERSISTED = "persisted"

class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"

# Passenger Information
class PassengerInfo(BaseModel):
    """Passenger details captured on the booking form.

    Fields are deliberately loose here; the booking service validates them so
    that a bad form yields one ValidationError rather than a schema error.
    """
    name: str = ""
    age: Optional[int] = None
    gender: Optional[str] = None

    @field_validator("age", mode="before")
    @classmethod
    def blank_age_is_missing(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

class BookingRequest(BaseModel):
    """Request to book one passenger on a train"""
    train_id: str
    travel_date: date
    travel_class: Optional[str] = None
    passenger: PassengerInfo
    request_id: Optional[str] = Field(None, max_length=64, description="Client idempotency key")

class TrainSummary(BaseModel):
    train_number: str
    train_name: str
    source_station: str
    destination_station: str
    departure_time: str
    arrival_time: str

    class Config:
        from_attributes = True

class Booking(BaseModel):
    """A stored booking as returned to its owner or a PNR lookup"""
    id: str
    pnr: str
    user_id: str
    train_id: str
    passenger_name: str
    passenger_age: int
    passenger_gender: str
    travel_date: date
    travel_class: str
    seat_number: Optional[str] = None
    fare_paid: Decimal
    booking_status: str
    created_at: datetime
    train: Optional[TrainSummary] = None

    class Config:
        from_attributes = True

class BookingList(BaseModel):
    total: int
    bookings: List[Booking]
