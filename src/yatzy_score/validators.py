"""Input checks shared by every scoring function.

Each validator returns the normalized value (a tuple of plain ints for a
roll) so callers never score the raw, possibly numpy-typed, input.
"""
from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from yatzy_score import config
from yatzy_score.exceptions import InvalidCategoryError, InvalidRollError


def _is_integer(value) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, np.integer))


def validate_roll(dice) -> tuple[int, ...]:
    if isinstance(dice, np.ndarray):
        if dice.ndim != 1:
            raise InvalidRollError(dice, f"expected a flat array, got shape {dice.shape}")
        dice = dice.tolist()
    if isinstance(dice, (str, bytes)) or not isinstance(dice, Sequence):
        raise InvalidRollError(dice, "expected a sequence of dice")
    if len(dice) != config.DICE_COUNT:
        raise InvalidRollError(dice, f"expected {config.DICE_COUNT} dice, got {len(dice)}")
    for die in dice:
        if not _is_integer(die):
            raise InvalidRollError(dice, f"die {die!r} is not an integer")
        if not config.is_valid_face(die):
            raise InvalidRollError(
                dice, f"die {die} outside {config.MIN_FACE}..{config.MAX_FACE}")
    return tuple(int(die) for die in dice)


def validate_face(n) -> int:
    # target face of an upper section category
    if not _is_integer(n) or not config.is_valid_face(n):
        raise InvalidCategoryError(
            f"upper section target must be a face in {config.MIN_FACE}..{config.MAX_FACE}, got {n!r}")
    return int(n)
