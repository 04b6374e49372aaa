"""Shared fixtures for score engine tests."""
from __future__ import annotations

import itertools

import pytest

from yatzy_score.tables import build_all_dice_sets, precompute_all_scores


@pytest.fixture(scope="session")
def dice_data():
    all_dice_sets, index_lookup = build_all_dice_sets()
    return all_dice_sets, index_lookup


@pytest.fixture(scope="session")
def score_table(dice_data):
    all_dice_sets, _ = dice_data
    return precompute_all_scores(all_dice_sets)


@pytest.fixture(scope="session")
def sorted_rolls(dice_data):
    """All 252 distinct rolls as lists of plain ints."""
    all_dice_sets, _ = dice_data
    return [[int(d) for d in dice] for dice in all_dice_sets]


@pytest.fixture
def every_roll():
    """All 6**5 ordered rolls."""
    return itertools.product(range(1, 7), repeat=5)
