import logging
from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from railbook.config import settings
from railbook.exceptions import NotFound
from railbook.models import Train, TrainStatus
from railbook.trains.fare_service import FareCalculator, CLASS_MULTIPLIERS
from railbook.trains.matching import StationMatcher, get_station_matcher
from railbook.trains.schemas import ClassFare, TrainOffer, Train as TrainSchema

logger = logging.getLogger(__name__)


class TrainStore:
    """Read-only queries over trains and their live status rows"""

    @staticmethod
    def find_trains(
        db: Session,
        source: str,
        destination: str,
        matcher: Optional[StationMatcher] = None
    ) -> List[Train]:
        matcher = matcher or get_station_matcher(settings.STATION_MATCH_MODE)
        query = db.query(Train)
        query = matcher.apply(query, Train.source_station, source)
        query = matcher.apply(query, Train.destination_station, destination)
        return query.order_by(Train.train_number, Train.id).all()

    @staticmethod
    def get_train(db: Session, train_id: str) -> Optional[Train]:
        return db.query(Train).filter(Train.id == train_id).first()

    @staticmethod
    def get_train_by_number(db: Session, train_number: str) -> Optional[Train]:
        return db.query(Train).filter(Train.train_number == train_number).first()

    @staticmethod
    def latest_status(db: Session, train_id: str) -> Optional[TrainStatus]:
        return (
            db.query(TrainStatus)
            .filter(TrainStatus.train_id == train_id)
            .order_by(TrainStatus.last_updated.desc())
            .first()
        )


def offered_classes(train: Train) -> List[str]:
    """Class tags flagged available on a train, in fare-table order"""
    flags = train.available_classes or {}
    known = [tag for tag in CLASS_MULTIPLIERS if flags.get(tag)]
    extra = sorted(tag for tag, offered in flags.items() if offered and tag not in CLASS_MULTIPLIERS)
    return known + extra


class TrainSearchService:
    """Builds fare-priced offers for a route query"""

    def __init__(
        self,
        db: Session,
        fare_calculator: Optional[FareCalculator] = None,
        matcher: Optional[StationMatcher] = None
    ):
        self.db = db
        self.fare_calculator = fare_calculator or FareCalculator(settings.UNKNOWN_CLASS_POLICY)
        self.matcher = matcher or get_station_matcher(settings.STATION_MATCH_MODE)

    def search(self, source: str = "", destination: str = "", travel_date: Optional[date] = None) -> List[TrainOffer]:
        """Find trains for a route and price every class they offer.

        Each side is matched independently and an empty side matches every
        train. ``travel_date`` does not filter; it is carried on each offer.
        """
        trains = TrainStore.find_trains(self.db, source, destination, matcher=self.matcher)
        logger.info(
            "Train search source=%r destination=%r date=%s -> %d trains",
            source, destination, travel_date, len(trains)
        )
        return [self.build_offer(train, travel_date) for train in trains]

    def get_offer(self, train_id: str, travel_date: Optional[date] = None) -> TrainOffer:
        train = TrainStore.get_train(self.db, train_id)
        if not train:
            raise NotFound("Train not found")
        return self.build_offer(train, travel_date)

    def build_offer(self, train: Train, travel_date: Optional[date] = None) -> TrainOffer:
        classes = offered_classes(train)
        fares = []
        for travel_class in classes:
            if self.fare_calculator.unknown_class_policy == "reject" and not self.fare_calculator.is_known_class(travel_class):
                # Unpriceable under the reject policy, so not sellable
                continue
            fares.append(ClassFare(
                travel_class=travel_class,
                fare=self.fare_calculator.calculate_fare(train.base_fare, travel_class)
            ))

        return TrainOffer(
            train=TrainSchema.model_validate(train),
            travel_date=travel_date,
            available_classes=[fare.travel_class for fare in fares],
            fares=fares
        )
