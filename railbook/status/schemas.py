from pydantic import BaseModel
from typing import Optional
from datetime import datetime

class StatusView(BaseModel):
    """Live status of a train, possibly synthesized when no telemetry exists"""
    train_number: str
    train_name: str
    source_station: str
    destination_station: str
    current_station: Optional[str] = None
    expected_arrival: Optional[str] = None
    actual_arrival: Optional[str] = None
    delay_minutes: Optional[int] = 0
    status: str
    last_updated: Optional[datetime] = None
    journey_progress: int
    is_delayed: bool = False
    is_estimated: bool = False
    refresh_interval_seconds: int = 30
