"""Occurrence profile: the roll grouped by face, largest groups first.

All functions operate on validated rolls (tuples of ints in 1..6) and
use face_counts[7] (index 0 unused, indices 1-6 are counts) as the
underlying histogram.
"""

from __future__ import annotations

import numpy as np


def count_faces(dice) -> np.ndarray:
    """Count occurrences of each face value (1-6). Returns array of length 7 (index 0 unused)."""
    return np.bincount(np.asarray(dice, dtype=np.int64), minlength=7).astype(np.int32)


def occurrence_groups(dice) -> list[tuple[int, int]]:
    """(face, count) for every face present, by descending count then ascending face."""
    fc = count_faces(dice)
    groups = [(face, int(fc[face])) for face in range(1, 7) if fc[face] > 0]
    # sorted() is stable, so equal counts keep ascending face order
    return sorted(groups, key=lambda group: group[1], reverse=True)


def group_sizes(groups) -> tuple[int, ...]:
    return tuple(count for _, count in groups)


def occurrence_shape(dice) -> tuple[int, ...]:
    """Group sizes in profile order, e.g. (3, 2) for a full house."""
    return group_sizes(occurrence_groups(dice))


def occurrence_profile(dice) -> list[int]:
    """Flatten the occurrence groups back into five face values.

    >>> occurrence_profile([2, 4, 6, 2, 6])
    [2, 2, 6, 6, 4]
    """
    profile = []
    for face, count in occurrence_groups(dice):
        profile.extend([face] * count)
    return profile
