"""
Live Train Status Module

Looks up a train by number and projects its most recent status row into a
status view. When no status has been reported yet an estimated "On Time"
view is returned instead of an error.

Key Components:
- service.py: Status projection, fallback view and journey progress
- router.py: FastAPI endpoint for status lookup
- schemas.py: Pydantic model of the status view
"""

from .router import router
from .service import TrainStatusService, parse_duration, parse_time_of_day
from .schemas import StatusView

__all__ = [
    "router",
    "TrainStatusService",
    "parse_duration",
    "parse_time_of_day",
    "StatusView"
]
