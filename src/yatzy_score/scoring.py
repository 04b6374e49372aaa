"""Scandinavian Yatzy scoring rules: 15 categories.

Every function takes a roll of five dice (any sequence of ints in 1-6,
numpy arrays included) and returns a plain non-negative int. Rolls are
validated on entry; see ``yatzy_score.validators``.

The occurrence categories (pairs, n-of-a-kind, full house) check the
exact shape of the occurrence profile rather than searching every
grouping, so a full house is not four of a kind and a yatzy is neither
two pairs nor a full house. When two groups are the same size the lower
face comes first, which makes ``one_pair`` score the lower of two pairs.
"""

from __future__ import annotations

from yatzy_score import config
from yatzy_score.categories import Category
from yatzy_score.exceptions import InvalidCategoryError
from yatzy_score.logger import YatzyLogger
from yatzy_score.occurrences import group_sizes, occurrence_groups
from yatzy_score.validators import validate_face, validate_roll

logger = YatzyLogger(__name__).get_logger()

# shapes (group sizes, largest first) that hold two distinct pairs
TWO_PAIR_SHAPES = ((3, 2), (2, 2, 1))
FULL_HOUSE_SHAPE = (3, 2)
YATZY_SHAPE = (5,)


# private cores take an already validated roll
def _upper(n: int, dice: tuple[int, ...]) -> int:
    return sum(die for die in dice if die == n)


def _chance(dice):
    return sum(dice)


def _yatzy(dice):
    if group_sizes(occurrence_groups(dice)) == YATZY_SHAPE:
        return config.YATZY_SCORE
    return 0


def _small_straight(dice):
    if tuple(sorted(dice)) == config.SMALL_STRAIGHT_FACES:
        return config.SMALL_STRAIGHT_SCORE
    return 0


def _large_straight(dice):
    if tuple(sorted(dice)) == config.LARGE_STRAIGHT_FACES:
        return config.LARGE_STRAIGHT_SCORE
    return 0


def _n_of_a_kind(dice, n: int) -> int:
    # only the largest group is considered
    face, count = occurrence_groups(dice)[0]
    if count >= n:
        return n * face
    return 0


def _four_of_a_kind(dice):
    return _n_of_a_kind(dice, 4)


def _three_of_a_kind(dice):
    return _n_of_a_kind(dice, 3)


def _one_pair(dice):
    return _n_of_a_kind(dice, 2)


def _two_pairs(dice):
    groups = occurrence_groups(dice)
    if group_sizes(groups) in TWO_PAIR_SHAPES:
        (first, _), (second, _) = groups[:2]
        return 2 * first + 2 * second
    return 0


def _full_house(dice):
    groups = occurrence_groups(dice)
    if group_sizes(groups) == FULL_HOUSE_SHAPE:
        (three, _), (pair, _) = groups
        return 3 * three + 2 * pair
    return 0


def upper(n: int, dice) -> int:
    """Sum of the dice showing ``n``."""
    return _upper(validate_face(n), validate_roll(dice))


def chance(dice) -> int:
    return _chance(validate_roll(dice))


def yatzy(dice) -> int:
    return _yatzy(validate_roll(dice))


def small_straight(dice) -> int:
    return _small_straight(validate_roll(dice))


def large_straight(dice) -> int:
    return _large_straight(validate_roll(dice))


def four_of_a_kind(dice) -> int:
    return _four_of_a_kind(validate_roll(dice))


def three_of_a_kind(dice) -> int:
    return _three_of_a_kind(validate_roll(dice))


def one_pair(dice) -> int:
    return _one_pair(validate_roll(dice))


def two_pairs(dice) -> int:
    return _two_pairs(validate_roll(dice))


def full_house(dice) -> int:
    return _full_house(validate_roll(dice))


LOWER_SECTION_SCORERS = {
    Category.ONE_PAIR: _one_pair,
    Category.TWO_PAIRS: _two_pairs,
    Category.THREE_OF_A_KIND: _three_of_a_kind,
    Category.FOUR_OF_A_KIND: _four_of_a_kind,
    Category.SMALL_STRAIGHT: _small_straight,
    Category.LARGE_STRAIGHT: _large_straight,
    Category.FULL_HOUSE: _full_house,
    Category.CHANCE: _chance,
    Category.YATZY: _yatzy,
}


def resolve_category(category) -> Category:
    """Accept a Category member or its name; anything else is an InvalidCategoryError."""
    if isinstance(category, Category):
        return category
    if isinstance(category, str):
        return Category.from_name(category)
    raise InvalidCategoryError(f"not a category: {category!r}")


def _score(category: Category, dice: tuple[int, ...]) -> int:
    if category.is_upper:
        points = _upper(category.face, dice)
    else:
        points = LOWER_SECTION_SCORERS[category](dice)
    logger.debug("%-16s %s -> %d", category.name, list(dice), points)
    return points


def score(category, dice) -> int:
    """
    Calculates the score for a specific category based on the dice set.

    :param category: The category to score, a Category or its name.
    :param dice: Five integers in 1..6.
    :return: The score for the category.
    """
    return _score(resolve_category(category), validate_roll(dice))


def score_all(dice) -> dict[Category, int]:
    """Score the roll in every category, in scoresheet order."""
    dice = validate_roll(dice)
    return {category: _score(category, dice) for category in Category}
