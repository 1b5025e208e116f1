from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional
from datetime import date

from railbook.config import settings
from railbook.database import get_db
from railbook.trains.schemas import TrainOffer, TrainSearchResponse, FareQuoteRequest, FareQuoteResponse
from railbook.trains.service import TrainSearchService
from railbook.trains.fare_service import FareCalculator

router = APIRouter()
fares_router = APIRouter()

@router.get("/search", response_model=TrainSearchResponse)
def search_trains(
    source: str = Query("", description="Source station name (partial, case-insensitive)"),
    destination: str = Query("", description="Destination station name (partial, case-insensitive)"),
    travel_date: Optional[date] = Query(None, description="Date of journey"),
    db: Session = Depends(get_db)
):
    """Search trains by route and list the fare for each class"""
    offers = TrainSearchService(db).search(source, destination, travel_date)
    return TrainSearchResponse(
        source=source,
        destination=destination,
        travel_date=travel_date,
        total=len(offers),
        offers=offers
    )

@router.get("/{train_id}/offer", response_model=TrainOffer)
def get_train_offer(
    train_id: str,
    travel_date: Optional[date] = Query(None, description="Date of journey"),
    db: Session = Depends(get_db)
):
    """Get a single train with its per-class fares"""
    return TrainSearchService(db).get_offer(train_id, travel_date)

@fares_router.post("/quote", response_model=FareQuoteResponse)
def quote_fare(request: FareQuoteRequest):
    """Price a base fare for a travel class"""
    calculator = FareCalculator(settings.UNKNOWN_CLASS_POLICY)
    return FareQuoteResponse(
        base_fare=request.base_fare,
        travel_class=request.travel_class,
        multiplier=calculator.multiplier_for(request.travel_class),
        fare=calculator.calculate_fare(request.base_fare, request.travel_class)
    )
