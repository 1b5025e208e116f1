from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session
from typing import Any, Dict, Optional

from railbook.database import get_db
from railbook.auth.dependencies import get_current_user_id
from railbook.bookings.schemas import Booking, BookingList
from railbook.bookings.booking_service import BookingService

router = APIRouter()

@router.post("", response_model=Booking, status_code=status.HTTP_201_CREATED)
def create_booking(
    form: Dict[str, Any] = Body(...),
    user_id: Optional[str] = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Book a ticket for the signed-in user.

    The body follows BookingRequest; it is validated after sign-in is checked.
    """
    return BookingService(db).create_booking(user_id, form)

@router.get("/me", response_model=BookingList)
def get_my_bookings(
    user_id: Optional[str] = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """List the signed-in user's bookings, newest first"""
    bookings = BookingService(db).get_user_bookings(user_id)
    return BookingList(total=len(bookings), bookings=bookings)

@router.get("/pnr/{pnr}", response_model=Booking)
def get_booking_by_pnr(
    pnr: str,
    db: Session = Depends(get_db)
):
    """Look up a booking by its reservation code"""
    return BookingService(db).get_booking_by_pnr(pnr)
