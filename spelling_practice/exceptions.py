"""Exceptions raised by the word store.

Both are recoverable conditions: the practice session turns them into
notices and the store is left untouched.
"""


class SpellingPracticeError(Exception):
    """Base class for spelling practice errors."""


class WordValidationError(SpellingPracticeError, ValueError):
    """Raised when required input is missing or yields no words."""


class InsufficientDataError(SpellingPracticeError):
    """Raised when the store holds fewer words than a test needs."""

    def __init__(self, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__(
            f"need at least {required} words to generate a test, only {available} stored"
        )
