import logging
import random
import secrets
from typing import Callable, Optional

from sqlalchemy.orm import Session

from railbook.config import settings
from railbook.exceptions import UniquenessViolation
from railbook.models import Booking

logger = logging.getLogger(__name__)

_system_random = secrets.SystemRandom()


def generate_reservation_code(
    is_taken: Callable[[str], bool],
    rng: Optional[random.Random] = None,
    length: int = 10,
    max_attempts: int = 5
) -> str:
    """Draw a random digit string of ``length`` that ``is_taken`` rejects.

    The first digit is never zero so the code survives being read back as a
    number. Raises ``UniquenessViolation`` after ``max_attempts`` collisions.
    """
    rng = rng or _system_random
    for attempt in range(1, max_attempts + 1):
        code = str(rng.randint(1, 9)) + "".join(str(rng.randint(0, 9)) for _ in range(length - 1))
        if not is_taken(code):
            return code
        logger.warning("Reservation code collision on attempt %d", attempt)
    raise UniquenessViolation()


def allocate_seat(travel_class: str, rng: Optional[random.Random] = None, slots: int = 72) -> str:
    """Seat label such as ``3AC-17``; the number is uniform over [1, slots]"""
    rng = rng or _system_random
    return f"{travel_class.upper()}-{rng.randint(1, slots)}"


class ReservationCodeGenerator:
    """Issues reservation codes not used by any stored booking"""

    def __init__(self, db: Session, rng: Optional[random.Random] = None):
        self.db = db
        self.rng = rng
        self.length = settings.PNR_LENGTH
        self.max_attempts = settings.PNR_MAX_ATTEMPTS

    def is_taken(self, code: str) -> bool:
        return self.db.query(Booking.id).filter(Booking.pnr == code).first() is not None

    def next_code(self) -> str:
        return generate_reservation_code(
            self.is_taken,
            rng=self.rng,
            length=self.length,
            max_attempts=self.max_attempts
        )
