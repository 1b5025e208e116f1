import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Optional, Union

from railbook.exceptions import ValidationError
from railbook.trains.schemas import ClassTag

logger = logging.getLogger(__name__)

CLASS_MULTIPLIERS: Dict[str, Decimal] = {
    ClassTag.SLEEPER.value: Decimal("1.0"),
    ClassTag.THIRD_AC.value: Decimal("1.5"),
    ClassTag.SECOND_AC.value: Decimal("2.0"),
    ClassTag.FIRST_AC.value: Decimal("3.0"),
}

DEFAULT_MULTIPLIER = Decimal("1.0")
CURRENCY_PRECISION = Decimal("0.01")

POLICY_DEFAULT = "default"
POLICY_REJECT = "reject"


def _class_key(travel_class: Union[str, ClassTag, None]) -> str:
    if isinstance(travel_class, ClassTag):
        return travel_class.value
    return (travel_class or "").strip().lower()


class FareCalculator:
    """Prices a train's base fare for a travel class.

    ``unknown_class_policy`` decides what happens with a class tag outside
    the multiplier table: ``"default"`` charges the base fare (x1.0),
    ``"reject"`` raises ``ValidationError``.
    """

    def __init__(self, unknown_class_policy: str = POLICY_DEFAULT):
        if unknown_class_policy not in (POLICY_DEFAULT, POLICY_REJECT):
            raise ValueError(f"Unknown fare policy: {unknown_class_policy}")
        self.unknown_class_policy = unknown_class_policy

    def is_known_class(self, travel_class: Union[str, ClassTag, None]) -> bool:
        return _class_key(travel_class) in CLASS_MULTIPLIERS

    def multiplier_for(self, travel_class: Union[str, ClassTag, None]) -> Decimal:
        key = _class_key(travel_class)
        multiplier = CLASS_MULTIPLIERS.get(key)
        if multiplier is not None:
            return multiplier

        if self.unknown_class_policy == POLICY_REJECT:
            raise ValidationError(f"Unknown travel class '{travel_class}'")

        logger.warning("Unknown travel class %r, charging base fare", travel_class)
        return DEFAULT_MULTIPLIER

    def calculate_fare(self, base_fare: Union[Decimal, int, str], travel_class: Union[str, ClassTag, None]) -> Decimal:
        base = Decimal(str(base_fare))
        if base <= 0:
            raise ValidationError("Base fare must be positive")

        fare = base * self.multiplier_for(travel_class)
        return fare.quantize(CURRENCY_PRECISION, rounding=ROUND_HALF_UP)


def calculate_fare(
    base_fare: Union[Decimal, int, str],
    travel_class: Union[str, ClassTag, None],
    unknown_class_policy: Optional[str] = None
) -> Decimal:
    """Module-level shortcut over ``FareCalculator``"""
    return FareCalculator(unknown_class_policy or POLICY_DEFAULT).calculate_fare(base_fare, travel_class)
