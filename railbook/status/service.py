import logging
import re
from datetime import datetime, timedelta
from typing import Callable, Optional

from sqlalchemy.orm import Session

from railbook.config import settings
from railbook.exceptions import NotFound
from railbook.models import Train, TrainStatus
from railbook.status.schemas import StatusView
from railbook.trains.service import TrainStore

logger = logging.getLogger(__name__)

FALLBACK_STATION = "En Route"
FALLBACK_STATUS = "On Time"
FALLBACK_TRAIN_NAME = "Train Details Not Available"
PLACEHOLDER = "-"

_DURATION_PATTERNS = [
    re.compile(r"^\s*(?P<h>\d+)\s*h(?:\s*(?P<m>\d+)\s*m)?\s*$", re.IGNORECASE),
    re.compile(r"^\s*(?P<h>\d+):(?P<m>\d{2})\s*$"),
    re.compile(r"^\s*(?P<m>\d+)\s*m(?:in)?\s*$", re.IGNORECASE),
]


def parse_duration(value: Optional[str]) -> Optional[timedelta]:
    """Parse '16h 30m', '16h', '16:30' or '45m'"""
    for pattern in _DURATION_PATTERNS:
        match = pattern.match(value or "")
        if match:
            parts = match.groupdict()
            return timedelta(hours=int(parts.get("h") or 0), minutes=int(parts.get("m") or 0))
    return None


def parse_time_of_day(value: Optional[str]) -> Optional[timedelta]:
    """Offset since midnight of an 'HH:MM' string"""
    match = re.match(r"^\s*(\d{1,2}):(\d{2})", value or "")
    if not match:
        return None
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        return None
    return timedelta(hours=hours, minutes=minutes)


class TrainStatusService:
    """Projects stored status rows into the view shown for a train"""

    def __init__(self, db: Session, clock: Callable[[], datetime] = datetime.now):
        self.db = db
        self.clock = clock
        self.progress_mode = settings.JOURNEY_PROGRESS_MODE
        self.fixed_progress = settings.FIXED_JOURNEY_PROGRESS

    def project_status(self, train_number: str) -> StatusView:
        train_number = (train_number or "").strip()
        train = TrainStore.get_train_by_number(self.db, train_number)
        if not train:
            raise NotFound("Train not found")

        latest = TrainStore.latest_status(self.db, train.id)
        if latest is None:
            logger.info("No status rows for train %s, showing estimated status", train_number)
            return self._fallback_view(train)

        return self._status_view(train, latest)

    def journey_progress(self, train: Train) -> int:
        """Percent of the journey covered.

        ``fixed`` mode returns a constant illustrative figure. ``elapsed``
        mode compares time since today's departure with the scheduled
        duration and falls back to the fixed figure when either cannot be
        parsed.
        """
        if self.progress_mode != "elapsed":
            return self.fixed_progress

        departure = parse_time_of_day(train.departure_time)
        duration = parse_duration(train.duration)
        if departure is None or not duration:
            return self.fixed_progress

        now = self.clock()
        since_midnight = timedelta(hours=now.hour, minutes=now.minute, seconds=now.second)
        # Departed today, or yesterday for overnight runs
        elapsed = (since_midnight - departure) % timedelta(days=1)
        progress = int(elapsed / duration * 100)
        return max(0, min(100, progress))

    def _status_view(self, train: Train, row: TrainStatus) -> StatusView:
        delay = row.delay_minutes
        return StatusView(
            train_number=train.train_number,
            train_name=train.train_name,
            source_station=train.source_station,
            destination_station=train.destination_station,
            current_station=row.current_station,
            expected_arrival=row.expected_arrival,
            actual_arrival=row.actual_arrival,
            delay_minutes=delay,
            status=row.status,
            last_updated=row.last_updated,
            journey_progress=self.journey_progress(train),
            is_delayed=bool(delay and delay > 0),
            is_estimated=False,
            refresh_interval_seconds=settings.STATUS_REFRESH_SECONDS
        )

    def _fallback_view(self, train: Train) -> StatusView:
        return StatusView(
            train_number=train.train_number,
            train_name=FALLBACK_TRAIN_NAME,
            source_station=PLACEHOLDER,
            destination_station=PLACEHOLDER,
            current_station=FALLBACK_STATION,
            delay_minutes=0,
            status=FALLBACK_STATUS,
            journey_progress=self.fixed_progress,
            is_delayed=False,
            is_estimated=True,
            refresh_interval_seconds=settings.STATUS_REFRESH_SECONDS
        )
