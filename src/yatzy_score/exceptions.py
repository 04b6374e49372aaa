"""Errors raised when a roll or category cannot be scored."""


class YatzyScoreError(ValueError):
    """Base class for every scoring input error."""


class InvalidRollError(YatzyScoreError):
    """The roll is not five integers in [1, 6]."""

    def __init__(self, roll, reason):
        self.roll = roll
        self.reason = reason
        super().__init__(f"invalid roll {roll!r}: {reason}")


class InvalidCategoryError(YatzyScoreError):
    """The category, or the target face of an upper category, is unknown."""
