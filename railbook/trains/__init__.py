"""
Train Search & Fares Module

Finds trains for a route and prices them per travel class.

Key Components:
- fare_service.py: Class multiplier table and fare calculation policy
- matching.py: Station name matching policies (substring, exact)
- service.py: Train queries and the offer builder
- router.py: FastAPI endpoints for search, single-train offers and fare quotes
- schemas.py: Pydantic models for trains, offers and fare quotes
"""

from .router import router, fares_router
from .fare_service import FareCalculator, calculate_fare, CLASS_MULTIPLIERS
from .matching import StationMatcher, SubstringStationMatcher, ExactStationMatcher, get_station_matcher
from .service import TrainStore, TrainSearchService
from .schemas import ClassTag, TrainOffer, ClassFare, TrainSearchResponse

__all__ = [
    "router",
    "fares_router",
    "FareCalculator",
    "calculate_fare",
    "CLASS_MULTIPLIERS",
    "StationMatcher",
    "SubstringStationMatcher",
    "ExactStationMatcher",
    "get_station_matcher",
    "TrainStore",
    "TrainSearchService",
    "ClassTag",
    "TrainOffer",
    "ClassFare",
    "TrainSearchResponse"
]
