"""
Booking Module

Creates bookings against a unique reservation code (PNR) and serves them back
by code or by owner.

Key Components:
- allocation.py: Reservation code generation and seat label allocation
- booking_service.py: Booking lifecycle (validate, price, code, seat, store)
- router.py: FastAPI endpoints for booking and PNR lookup
- schemas.py: Pydantic models for booking requests and stored bookings

A booking is confirmed the moment it is stored; there is no pending or
payment-hold state and no cancellation path.
"""

from .router import router
from .allocation import ReservationCodeGenerator, generate_reservation_code, allocate_seat
from .booking_service import BookingService, BookingStore
from .schemas import (
    BookingRequest, Booking, BookingList, BookingStatus, BookingStage,
    PassengerInfo, Gender
)

__all__ = [
    "router",
    "ReservationCodeGenerator",
    "generate_reservation_code",
    "allocate_seat",
    "BookingService",
    "BookingStore",
    "BookingRequest",
    "Booking",
    "BookingList",
    "BookingStatus",
    "BookingStage",
    "PassengerInfo",
    "Gender"
]
