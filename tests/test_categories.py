"""Tests for categories.py."""

import pytest

from yatzy_score.categories import (
    CATEGORY_COUNT,
    LOWER_CATEGORIES,
    UPPER_CATEGORIES,
    Category,
)
from yatzy_score.exceptions import InvalidCategoryError


def test_fifteen_categories():
    assert CATEGORY_COUNT == 15
    assert [c.value for c in Category] == list(range(15))


def test_sections():
    assert UPPER_CATEGORIES == [
        Category.ONES, Category.TWOS, Category.THREES,
        Category.FOURS, Category.FIVES, Category.SIXES,
    ]
    assert len(LOWER_CATEGORIES) == 9
    assert Category.YATZY in LOWER_CATEGORIES


def test_face():
    assert Category.ONES.face == 1
    assert Category.SIXES.face == 6
    assert Category.CHANCE.face is None


def test_upper():
    for n in range(1, 7):
        assert Category.upper(n).face == n


@pytest.mark.parametrize("n", [0, 7])
def test_upper_out_of_range(n):
    with pytest.raises(InvalidCategoryError):
        Category.upper(n)


@pytest.mark.parametrize("name", ["two_pairs", "Two Pairs", "two-pairs", " TWO_PAIRS "])
def test_from_name(name):
    assert Category.from_name(name) is Category.TWO_PAIRS


def test_from_name_unknown():
    with pytest.raises(InvalidCategoryError, match="unknown category"):
        Category.from_name("aces")


def test_label():
    assert Category.THREE_OF_A_KIND.label == "Three Of A Kind"
    assert Category.YATZY.label == "Yatzy"
