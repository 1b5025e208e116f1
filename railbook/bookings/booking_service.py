import logging
import random
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError as SchemaError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from railbook.config import settings
from railbook.exceptions import (
    AuthenticationRequired, NotFound, ValidationError, UniquenessViolation, PersistenceError,
    describe_validation_errors
)
from railbook.models import Booking
from railbook.bookings.allocation import ReservationCodeGenerator, allocate_seat
from railbook.bookings.schemas import BookingRequest, BookingStage, BookingStatus, Gender
from railbook.trains.fare_service import FareCalculator
from railbook.trains.service import TrainStore

logger = logging.getLogger(__name__)

MIN_PASSENGER_AGE = 1
MAX_PASSENGER_AGE = 120


class BookingStore:
    """Insert and lookup queries for bookings"""

    @staticmethod
    def insert_booking(db: Session, booking: Booking) -> Booking:
        """Commit a new booking, rolling back completely on failure"""
        pnr = booking.pnr
        try:
            db.add(booking)
            db.commit()
        except IntegrityError as e:
            db.rollback()
            raise UniquenessViolation() from e
        except SQLAlchemyError as e:
            db.rollback()
            raise PersistenceError() from e

        # The row is committed from here on; a failed reload must not report the booking as lost
        try:
            db.refresh(booking)
        except SQLAlchemyError as e:
            logger.warning("Booking %s committed but could not be reloaded: %s", pnr, e)
        return booking

    @staticmethod
    def find_by_pnr(db: Session, pnr: str) -> Optional[Booking]:
        return (
            db.query(Booking)
            .options(joinedload(Booking.train))
            .filter(Booking.pnr == pnr)
            .first()
        )

    @staticmethod
    def find_by_user(db: Session, user_id: str) -> List[Booking]:
        return (
            db.query(Booking)
            .options(joinedload(Booking.train))
            .filter(Booking.user_id == user_id)
            .order_by(Booking.created_at.desc(), Booking.id)
            .all()
        )

    @staticmethod
    def find_by_request(db: Session, user_id: str, request_id: str) -> Optional[Booking]:
        return (
            db.query(Booking)
            .filter(Booking.user_id == user_id, Booking.request_id == request_id)
            .first()
        )


class BookingService:
    """Turns a purchase request into a confirmed, stored booking"""

    def __init__(
        self,
        db: Session,
        fare_calculator: Optional[FareCalculator] = None,
        code_generator: Optional[ReservationCodeGenerator] = None,
        rng: Optional[random.Random] = None
    ):
        self.db = db
        self.fare_calculator = fare_calculator or FareCalculator(settings.UNKNOWN_CLASS_POLICY)
        self.code_generator = code_generator or ReservationCodeGenerator(db, rng=rng)
        self.rng = rng
        self.max_attempts = settings.PNR_MAX_ATTEMPTS

    def create_booking(
        self,
        user_id: Optional[str],
        request: Union[BookingRequest, Dict[str, Any]]
    ) -> Booking:
        """Book one passenger and return the stored booking.

        ``request`` may be the raw submitted form; it is only parsed once the
        caller is known to be signed in. Either exactly one booking row with
        status "Confirmed" exists afterwards, or an exception is raised and
        nothing was written.
        """
        if not user_id:
            raise AuthenticationRequired("Please login to book tickets")

        if not isinstance(request, BookingRequest):
            request = self.parse_request(request)

        if request.request_id:
            existing = BookingStore.find_by_request(self.db, user_id, request.request_id)
            if existing:
                logger.info("Replayed booking request %s -> PNR %s", request.request_id, existing.pnr)
                return existing

        stage = BookingStage.DRAFT
        name, age, gender, travel_class = self._validate(request)

        train = TrainStore.get_train(self.db, request.train_id)
        if not train:
            raise NotFound("Train not found")

        fare = self.fare_calculator.calculate_fare(train.base_fare, travel_class)
        stage = BookingStage.PRICED
        logger.debug("Booking train %s class=%s stage=%s fare=%s", train.train_number, travel_class, stage.value, fare)

        for attempt in range(1, self.max_attempts + 1):
            try:
                pnr = self.code_generator.next_code()
                stage = BookingStage.CODED
                seat_number = allocate_seat(travel_class, rng=self.rng, slots=settings.SEAT_SLOTS_PER_CLASS)
                stage = BookingStage.SEATED

                booking = Booking(
                    pnr=pnr,
                    user_id=user_id,
                    train_id=request.train_id,
                    passenger_name=name,
                    passenger_age=age,
                    passenger_gender=gender,
                    travel_date=request.travel_date,
                    travel_class=travel_class,
                    seat_number=seat_number,
                    fare_paid=fare,
                    booking_status=BookingStatus.CONFIRMED.value,
                    request_id=request.request_id
                )
                BookingStore.insert_booking(self.db, booking)
            except UniquenessViolation:
                logger.warning("Booking insert collided at stage=%s (attempt %d/%d)", stage.value, attempt, self.max_attempts)
                if request.request_id:
                    existing = BookingStore.find_by_request(self.db, user_id, request.request_id)
                    if existing:
                        return existing
                continue
            except SQLAlchemyError as e:
                self.db.rollback()
                logger.error("Storage failure while booking at stage=%s: %s", stage.value, e)
                raise PersistenceError() from e

            stage = BookingStage.PERSISTED
            logger.info(
                "Booking %s stage=%s PNR=%s train=%s seat=%s fare=%s",
                booking.id, stage.value, booking.pnr, train.train_number, booking.seat_number, booking.fare_paid
            )
            return booking

        logger.error("Giving up after %d reservation code collisions", self.max_attempts)
        raise PersistenceError()

    def get_booking_by_pnr(self, pnr: str) -> Booking:
        pnr = (pnr or "").strip()
        if len(pnr) != settings.PNR_LENGTH:
            raise ValidationError(f"Please enter a valid {settings.PNR_LENGTH}-digit PNR")

        booking = BookingStore.find_by_pnr(self.db, pnr)
        if not booking:
            raise NotFound("No booking found with this PNR")
        return booking

    def get_user_bookings(self, user_id: Optional[str]) -> List[Booking]:
        if not user_id:
            raise AuthenticationRequired()
        return BookingStore.find_by_user(self.db, user_id)

    @staticmethod
    def parse_request(form: Dict[str, Any]) -> BookingRequest:
        try:
            return BookingRequest.model_validate(form)
        except SchemaError as e:
            raise ValidationError(describe_validation_errors(e.errors())) from e

    def _validate(self, request: BookingRequest):
        passenger = request.passenger
        errors = []

        name = (passenger.name or "").strip()
        if not name:
            errors.append("Passenger name is required")

        age = passenger.age
        if age is None or not MIN_PASSENGER_AGE <= age <= MAX_PASSENGER_AGE:
            errors.append(f"Age must be between {MIN_PASSENGER_AGE} and {MAX_PASSENGER_AGE}")

        gender = (passenger.gender or "").strip().lower()
        if gender not in {g.value for g in Gender}:
            errors.append("Please select a gender")

        travel_class = (request.travel_class or "").strip().lower()
        if not travel_class:
            errors.append("Please select a travel class")
        elif not self.fare_calculator.is_known_class(travel_class) and self.fare_calculator.unknown_class_policy == "reject":
            errors.append(f"Unknown travel class '{travel_class}'")

        if errors:
            raise ValidationError("; ".join(errors))

        return name, age, gender, travel_class
