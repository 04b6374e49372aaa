"""Scandinavian Yatzy score engine."""

from yatzy_score.categories import CATEGORY_COUNT, LOWER_CATEGORIES, UPPER_CATEGORIES, Category
from yatzy_score.exceptions import InvalidCategoryError, InvalidRollError, YatzyScoreError
from yatzy_score.occurrences import count_faces, occurrence_groups, occurrence_profile
from yatzy_score.scoring import (
    chance,
    four_of_a_kind,
    full_house,
    large_straight,
    one_pair,
    score,
    score_all,
    small_straight,
    three_of_a_kind,
    two_pairs,
    upper,
    yatzy,
)

__version__ = "0.1.0"
