import re
from datetime import date, datetime, timedelta
from decimal import Decimal

import pytest
from sqlalchemy.exc import OperationalError

from railbook.bookings.booking_service import BookingService
from railbook.bookings.schemas import BookingRequest, PassengerInfo
from railbook.config import settings
from railbook.exceptions import AuthenticationRequired, NotFound, PersistenceError, ValidationError
from railbook.models import Booking
from railbook.trains.fare_service import FareCalculator

TRAVEL_DATE = date(2026, 11, 20)


def booking_request(train, travel_class="3ac", name="Asha Verma", age=30, gender="female", **extra):
    return BookingRequest(
        train_id=train.id,
        travel_date=TRAVEL_DATE,
        travel_class=travel_class,
        passenger=PassengerInfo(name=name, age=age, gender=gender),
        **extra
    )


class ScriptedCodes:
    """Code generator stand-in that hands out a fixed sequence"""

    def __init__(self, codes):
        self.codes = list(codes)

    def next_code(self):
        return self.codes.pop(0)


def count_bookings(db):
    return db.query(Booking).count()


def test_confirmed_booking_scenario(db, trains, user, rng):
    booking = BookingService(db, rng=rng).create_booking(user.id, booking_request(trains["12301"]))

    assert booking.fare_paid == Decimal("1500.00")
    assert booking.booking_status == "Confirmed"
    assert len(booking.pnr) == 10
    match = re.fullmatch(r"3AC-(\d+)", booking.seat_number)
    assert match and 1 <= int(match.group(1)) <= 72
    assert booking.user_id == user.id
    assert booking.travel_date == TRAVEL_DATE
    assert count_bookings(db) == 1


def test_unauthenticated_booking_creates_nothing(db, trains):
    with pytest.raises(AuthenticationRequired):
        BookingService(db).create_booking(None, booking_request(trains["12301"]))
    assert count_bookings(db) == 0


def test_raw_form_is_parsed_after_login_check(db, trains, user):
    form = {"train_id": trains["12301"].id, "travel_date": "not a date", "passenger": {"age": "x"}}
    with pytest.raises(AuthenticationRequired):
        BookingService(db).create_booking(None, form)
    with pytest.raises(ValidationError) as excinfo:
        BookingService(db).create_booking(user.id, form)
    assert "travel_date" in excinfo.value.message
    assert count_bookings(db) == 0


def test_unknown_train(db, trains, user):
    request = BookingRequest(
        train_id="missing",
        travel_date=TRAVEL_DATE,
        travel_class="3ac",
        passenger=PassengerInfo(name="Asha", age=30, gender="female"),
    )
    with pytest.raises(NotFound):
        BookingService(db).create_booking(user.id, request)


@pytest.mark.parametrize("age", [0, 121, None])
def test_age_out_of_range_is_rejected(db, trains, user, age):
    with pytest.raises(ValidationError):
        BookingService(db).create_booking(user.id, booking_request(trains["12301"], age=age))
    assert count_bookings(db) == 0


@pytest.mark.parametrize("age", [1, 120])
def test_age_bounds_are_inclusive(db, trains, user, age):
    booking = BookingService(db).create_booking(user.id, booking_request(trains["12301"], age=age))
    assert booking.passenger_age == age


@pytest.mark.parametrize("field, value", [
    ("name", "   "),
    ("gender", ""),
    ("gender", "unknown"),
    ("travel_class", None),
    ("travel_class", ""),
])
def test_incomplete_form_is_rejected(db, trains, user, field, value):
    with pytest.raises(ValidationError):
        BookingService(db).create_booking(user.id, booking_request(trains["12301"], **{field: value}))
    assert count_bookings(db) == 0


def test_unknown_class_charged_base_fare_by_default(db, trains, user):
    booking = BookingService(db).create_booking(user.id, booking_request(trains["12301"], travel_class="chair"))
    assert booking.fare_paid == Decimal("1000.00")
    assert booking.seat_number.startswith("CHAIR-")


def test_unknown_class_rejected_under_reject_policy(db, trains, user):
    service = BookingService(db, fare_calculator=FareCalculator("reject"))
    with pytest.raises(ValidationError):
        service.create_booking(user.id, booking_request(trains["12301"], travel_class="chair"))
    assert count_bookings(db) == 0


def test_round_trip_by_pnr(db, trains, user, rng):
    created = BookingService(db, rng=rng).create_booking(user.id, booking_request(trains["12951"], travel_class="1ac"))
    pnr, booking_id = created.pnr, created.id
    db.expire_all()

    found = BookingService(db).get_booking_by_pnr(pnr)
    assert found.id == booking_id
    assert found.pnr == pnr
    assert found.fare_paid == Decimal("2850.00")
    assert found.travel_class == "1ac"
    assert found.passenger_name == "Asha Verma"
    assert found.passenger_gender == "female"
    assert found.seat_number == created.seat_number
    assert found.train.train_number == "12951"


def test_codes_are_unique_across_bookings(db, trains, user, rng):
    service = BookingService(db, rng=rng)
    pnrs = [service.create_booking(user.id, booking_request(trains["12002"])).pnr for _ in range(40)]
    assert len(set(pnrs)) == 40
    assert all(len(pnr) == 10 for pnr in pnrs)


def test_collision_is_retried_with_fresh_code(db, trains, user, rng):
    first = BookingService(db, rng=rng).create_booking(user.id, booking_request(trains["12301"]))

    service = BookingService(db, code_generator=ScriptedCodes([first.pnr, "5555555555"]), rng=rng)
    second = service.create_booking(user.id, booking_request(trains["12301"], name="Ravi Kumar", gender="male"))

    assert second.pnr == "5555555555"
    assert count_bookings(db) == 2


def test_persistent_collisions_fail_without_partial_booking(db, trains, user, rng, monkeypatch):
    first = BookingService(db, rng=rng).create_booking(user.id, booking_request(trains["12301"]))
    monkeypatch.setattr(settings, "PNR_MAX_ATTEMPTS", 3)

    service = BookingService(db, code_generator=ScriptedCodes([first.pnr] * 3), rng=rng)
    with pytest.raises(PersistenceError):
        service.create_booking(user.id, booking_request(trains["12301"]))
    assert count_bookings(db) == 1


def test_storage_failure_rolls_back(db, trains, user, monkeypatch):
    def broken_commit():
        raise OperationalError("INSERT", {}, Exception("database is locked"))

    monkeypatch.setattr(db, "commit", broken_commit)
    with pytest.raises(PersistenceError):
        BookingService(db).create_booking(user.id, booking_request(trains["12301"]))
    monkeypatch.undo()

    assert count_bookings(db) == 0


def test_reload_failure_after_commit_keeps_booking(db, trains, user, monkeypatch):
    def broken_refresh(instance, *args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("connection lost"))

    monkeypatch.setattr(db, "refresh", broken_refresh)
    booking = BookingService(db).create_booking(user.id, booking_request(trains["12301"]))
    monkeypatch.undo()

    assert booking.booking_status == "Confirmed"
    assert count_bookings(db) == 1
    assert db.query(Booking).one().pnr == booking.pnr


def test_request_id_makes_booking_idempotent(db, trains, user):
    service = BookingService(db)
    first = service.create_booking(user.id, booking_request(trains["12301"], request_id="req-1"))
    again = service.create_booking(user.id, booking_request(trains["12301"], request_id="req-1"))

    assert again.id == first.id
    assert count_bookings(db) == 1


def test_user_bookings_newest_first(db, trains, user):
    service = BookingService(db)
    older = service.create_booking(user.id, booking_request(trains["12301"]))
    newer = service.create_booking(user.id, booking_request(trains["12002"]))
    older.created_at = datetime(2026, 1, 1, 8, 0)
    newer.created_at = datetime(2026, 1, 1, 8, 0) + timedelta(hours=1)
    db.commit()

    bookings = service.get_user_bookings(user.id)
    assert [b.pnr for b in bookings] == [newer.pnr, older.pnr]
    assert service.get_user_bookings("someone-else") == []


def test_user_bookings_require_login(db):
    with pytest.raises(AuthenticationRequired):
        BookingService(db).get_user_bookings(None)


@pytest.mark.parametrize("pnr", ["", "12345", "12345678901"])
def test_pnr_lookup_requires_ten_characters(db, pnr):
    with pytest.raises(ValidationError):
        BookingService(db).get_booking_by_pnr(pnr)


def test_pnr_lookup_not_found(db):
    with pytest.raises(NotFound):
        BookingService(db).get_booking_by_pnr("9999999999")
