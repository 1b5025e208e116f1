from pydantic import BaseModel, Field
from typing import List, Optional, Dict
from datetime import date, datetime
from decimal import Decimal
from enum import Enum

class ClassTag(str, Enum):
    """Travel class tags offered on a train"""
    SLEEPER = "sleeper"
    THIRD_AC = "3ac"
    SECOND_AC = "2ac"
    FIRST_AC = "1ac"

class TrainBase(BaseModel):
    train_number: str
    train_name: str
    source_station: str
    destination_station: str
    departure_time: str
    arrival_time: str
    duration: str
    base_fare: Decimal = Field(..., gt=0)
    available_classes: Dict[str, bool] = {}
    runs_on: List[str] = []
    total_seats: int = 72

class Train(TrainBase):
    id: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class ClassFare(BaseModel):
    """Fare for one travel class on a train"""
    travel_class: str
    fare: Decimal

class TrainOffer(BaseModel):
    """A train annotated with the fare of every class it offers"""
    train: Train
    travel_date: Optional[date] = None
    available_classes: List[str]
    fares: List[ClassFare]

class TrainSearchResponse(BaseModel):
    source: str
    destination: str
    travel_date: Optional[date] = None
    total: int
    offers: List[TrainOffer]

class FareQuoteRequest(BaseModel):
    base_fare: Decimal = Field(..., gt=0)
    travel_class: str

class FareQuoteResponse(BaseModel):
    base_fare: Decimal
    travel_class: str
    multiplier: Decimal
    fare: Decimal
    currency: str = "INR"
