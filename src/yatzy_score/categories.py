from __future__ import annotations

from enum import Enum

from yatzy_score.exceptions import InvalidCategoryError
from yatzy_score.validators import validate_face


class Category(Enum):
    ONES = 0
    TWOS = 1
    THREES = 2
    FOURS = 3
    FIVES = 4
    SIXES = 5
    ONE_PAIR = 6
    TWO_PAIRS = 7
    THREE_OF_A_KIND = 8
    FOUR_OF_A_KIND = 9
    SMALL_STRAIGHT = 10
    LARGE_STRAIGHT = 11
    FULL_HOUSE = 12
    CHANCE = 13
    YATZY = 14

    @property
    def is_upper(self) -> bool:
        return self.value <= Category.SIXES.value

    @property
    def face(self) -> int | None:
        """Target face of an upper-section category, None for the lower section."""
        if self.is_upper:
            return self.value + 1
        return None

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()

    @classmethod
    def upper(cls, n: int) -> Category:
        """Upper-section category scoring the dice showing ``n``."""
        return cls(validate_face(n) - 1)

    @classmethod
    def from_name(cls, name: str) -> Category:
        """Parse "two_pairs", "Two Pairs" or "two-pairs" into a member."""
        key = str(name).strip().upper().replace("-", "_").replace(" ", "_")
        try:
            return cls[key]
        except KeyError:
            raise InvalidCategoryError(f"unknown category: {name!r}") from None


UPPER_CATEGORIES = [c for c in Category if c.is_upper]
LOWER_CATEGORIES = [c for c in Category if not c.is_upper]
CATEGORY_COUNT = len(Category)
