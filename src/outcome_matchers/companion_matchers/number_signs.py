"""Matchers for the sign of a number."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from numbers import Real

from hamcrest.core.base_matcher import BaseMatcher
from hamcrest.core.description import Description


class Sign(str, Enum):
    """Required sign of the matched number."""

    POSITIVE = "positive"
    NEGATIVE = "negative"


@dataclass(frozen=True, eq=False)
class SignMatcher(BaseMatcher[Real | Decimal]):
    """Matches real numbers and decimals strictly above (or below) zero; zero matches neither."""

    sign: Sign

    def _matches(self, item: object) -> bool:
        if not isinstance(item, Real | Decimal) or isinstance(item, bool):
            return False
        if self.sign is Sign.POSITIVE:
            return item > 0
        return item < 0

    def describe_to(self, description: Description) -> None:
        description.append_text(f"a {self.sign.value} number")


def is_positive() -> SignMatcher:
    return SignMatcher(Sign.POSITIVE)


def is_negative() -> SignMatcher:
    return SignMatcher(Sign.NEGATIVE)
