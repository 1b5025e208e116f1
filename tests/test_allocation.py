import random
import re
from datetime import date
from decimal import Decimal

import pytest

from railbook.bookings.allocation import ReservationCodeGenerator, allocate_seat, generate_reservation_code
from railbook.exceptions import UniquenessViolation
from railbook.models import Booking


def test_code_is_ten_digits(rng):
    code = generate_reservation_code(lambda c: False, rng=rng)
    assert len(code) == 10
    assert code.isdigit()
    assert code[0] != "0"


def test_codes_are_unique_against_issued_set(rng):
    issued = set()
    for _ in range(500):
        code = generate_reservation_code(lambda c: c in issued, rng=rng)
        assert code not in issued
        issued.add(code)
    assert len(issued) == 500


def test_skips_taken_codes():
    taken = {
        generate_reservation_code(lambda c: False, rng=random.Random(7)),
    }
    calls = []

    def is_taken(code):
        calls.append(code)
        return code in taken

    code = generate_reservation_code(is_taken, rng=random.Random(7))
    assert code not in taken
    assert len(calls) == 2


def test_gives_up_after_max_attempts(rng):
    with pytest.raises(UniquenessViolation):
        generate_reservation_code(lambda c: True, rng=rng, max_attempts=3)


def test_seat_label_format_and_range(rng):
    numbers = set()
    for _ in range(2000):
        label = allocate_seat("3ac", rng=rng)
        match = re.fullmatch(r"3AC-(\d+)", label)
        assert match
        numbers.add(int(match.group(1)))
    assert min(numbers) == 1
    assert max(numbers) == 72


def test_seat_label_uses_uppercase_class(rng):
    assert allocate_seat("sleeper", rng=rng).startswith("SLEEPER-")


def test_generator_checks_stored_bookings(db, trains, user):
    db.add(Booking(
        pnr="4100000001",
        user_id=user.id,
        train_id=trains["12301"].id,
        passenger_name="Asha Verma",
        passenger_age=30,
        passenger_gender="female",
        travel_date=date(2026, 11, 1),
        travel_class="3ac",
        seat_number="3AC-5",
        fare_paid=Decimal("1500.00"),
    ))
    db.commit()

    generator = ReservationCodeGenerator(db, rng=random.Random(3))
    assert generator.is_taken("4100000001")
    assert not generator.is_taken("4100000002")

    code = generator.next_code()
    assert len(code) == 10
    assert code != "4100000001"
