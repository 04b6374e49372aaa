"""Dice set enumeration and precomputed category score tables.

Enumerates all C(10,5)=252 sorted 5-dice multisets from {1..6}, their
probabilities for a single throw of five dice, and scores[252][15] with
columns in Category order.
"""

from __future__ import annotations

from itertools import combinations_with_replacement
from math import factorial

import numpy as np

from yatzy_score import config
from yatzy_score.categories import CATEGORY_COUNT, Category
from yatzy_score.logger import YatzyLogger
from yatzy_score.occurrences import count_faces
from yatzy_score.scoring import score_all
from yatzy_score.validators import validate_roll

logger = YatzyLogger(__name__).get_logger()


def build_all_dice_sets() -> tuple[np.ndarray, np.ndarray]:
    """Enumerate all 252 sorted 5-dice multisets and build 5D reverse lookup.

    Returns:
        all_dice_sets: (252, 5) int32 array of sorted dice
        index_lookup: (6, 6, 6, 6, 6) int32 reverse lookup table
    """
    # combinations_with_replacement yields each multiset once, already sorted
    all_dice_sets = np.array(
        list(combinations_with_replacement(config.FACES, config.DICE_COUNT)), dtype=np.int32)
    assert len(all_dice_sets) == config.NUM_DICE_SETS

    index_lookup = np.full((len(config.FACES),) * config.DICE_COUNT, -1, dtype=np.int32)
    index_lookup[tuple((all_dice_sets - config.MIN_FACE).T)] = np.arange(len(all_dice_sets))
    return all_dice_sets, index_lookup


def find_dice_set_index(index_lookup: np.ndarray, dice) -> int:
    """Map a roll, in any order, to its index in the sorted enumeration (0-251)."""
    offsets = tuple(die - config.MIN_FACE for die in sorted(validate_roll(dice)))
    return int(index_lookup[offsets])


def compute_dice_set_probabilities(all_dice_sets: np.ndarray) -> np.ndarray:
    """P(throwing five dice lands on each sorted set). Multinomial formula."""
    probs = np.zeros(len(all_dice_sets), dtype=np.float64)
    total_outcomes = 6.0**config.DICE_COUNT
    for i, dice in enumerate(all_dice_sets):
        fc = count_faces(dice)
        denominator = 1
        for f in config.FACES:
            denominator *= factorial(int(fc[f]))
        probs[i] = factorial(config.DICE_COUNT) / denominator / total_outcomes
    return probs


def precompute_all_scores(all_dice_sets: np.ndarray) -> np.ndarray:
    """Precompute scores[252][15] for all dice sets and categories."""
    scores = np.zeros((len(all_dice_sets), CATEGORY_COUNT), dtype=np.int32)
    for i, dice in enumerate(all_dice_sets):
        row = score_all(dice)
        scores[i] = [row[category] for category in Category]
    logger.info("precomputed %d x %d score table", *scores.shape)
    return scores


def max_category_scores(scores: np.ndarray) -> dict[Category, int]:
    return {c: int(scores[:, c.value].max()) for c in Category}


def expected_category_scores(scores: np.ndarray, probs: np.ndarray) -> dict[Category, float]:
    """Expected score of each category for a single throw of five dice."""
    expected = probs @ scores
    return {c: float(expected[c.value]) for c in Category}
