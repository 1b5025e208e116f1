from datetime import date
from decimal import Decimal

import pytest

from railbook.exceptions import NotFound
from railbook.trains.fare_service import FareCalculator
from railbook.trains.matching import ExactStationMatcher, SubstringStationMatcher, get_station_matcher
from railbook.trains.service import TrainSearchService


def numbers(offers):
    return [offer.train.train_number for offer in offers]


def test_empty_query_returns_every_train(db, trains):
    offers = TrainSearchService(db).search("", "")
    assert sorted(numbers(offers)) == sorted(trains)


def test_source_only_matches_substring_case_insensitively(db, trains):
    offers = TrainSearchService(db).search("Delhi", "")
    assert numbers(offers) == ["12002", "12301"]

    offers = TrainSearchService(db).search("dElHi", "")
    assert numbers(offers) == ["12002", "12301"]


def test_destination_only(db, trains):
    offers = TrainSearchService(db).search("", "delhi")
    assert numbers(offers) == ["12627", "12951"]


def test_both_sides_filter_independently(db, trains):
    offers = TrainSearchService(db).search("new delhi", "howrah")
    assert numbers(offers) == ["12301"]


def test_no_match_is_empty_not_an_error(db, trains):
    assert TrainSearchService(db).search("Jammu", "Puri") == []


def test_wildcard_characters_are_literal(db, trains):
    assert TrainSearchService(db).search("%", "") == []
    assert TrainSearchService(db).search("_", "") == []


def test_travel_date_is_carried_but_does_not_filter(db, trains):
    travel_date = date(2026, 12, 25)
    offers = TrainSearchService(db).search("", "", travel_date)
    assert len(offers) == len(trains)
    assert all(offer.travel_date == travel_date for offer in offers)


def test_ordering_is_stable(db, trains):
    service = TrainSearchService(db)
    assert numbers(service.search("", "")) == numbers(service.search("", ""))


def test_offer_prices_each_available_class(db, trains):
    offer = TrainSearchService(db).search("new delhi", "howrah")[0]
    assert offer.available_classes == ["sleeper", "3ac"]
    assert {f.travel_class: f.fare for f in offer.fares} == {
        "sleeper": Decimal("1000.00"),
        "3ac": Decimal("1500.00"),
    }


def test_classes_flagged_false_are_not_offered(db, trains):
    offer = TrainSearchService(db).get_offer(trains["12002"].id)
    assert offer.available_classes == ["sleeper", "3ac"]


def test_unknown_class_flag_priced_by_policy(db, make_train):
    train = make_train("22001", "Pune Junction", "Nagpur", "500.00", {"sleeper": True, "chair": True})

    offer = TrainSearchService(db).get_offer(train.id)
    assert {f.travel_class: f.fare for f in offer.fares}["chair"] == Decimal("500.00")

    offer = TrainSearchService(db, fare_calculator=FareCalculator("reject")).get_offer(train.id)
    assert offer.available_classes == ["sleeper"]


def test_get_offer_unknown_train(db, trains):
    with pytest.raises(NotFound):
        TrainSearchService(db).get_offer("no-such-train")


def test_exact_matcher_needs_whole_name(db, trains):
    service = TrainSearchService(db, matcher=ExactStationMatcher())
    assert service.search("Delhi", "") == []
    assert numbers(service.search("NEW DELHI", "")) == ["12002", "12301"]


def test_matcher_lookup():
    assert isinstance(get_station_matcher("substring"), SubstringStationMatcher)
    assert isinstance(get_station_matcher("exact"), ExactStationMatcher)
    with pytest.raises(ValueError):
        get_station_matcher("fuzzy")
