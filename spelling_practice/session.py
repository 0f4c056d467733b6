"""Practice session wrapping a Word Store for the presentation layer.

Every user action returns a Notice describing its outcome. The store keeps
its own return values and exceptions, so the core stays testable without a
user interface.
"""

from enum import Enum

from loguru import logger
from pydantic import BaseModel

from spelling_practice.exceptions import InsufficientDataError, WordValidationError
from spelling_practice.word_store import DEFAULT_TEST_SIZE, NO_WORDS, WordStore


class NoticeKind(str, Enum):
    """Outcome category of a user action."""

    SUCCESS = "success"
    VALIDATION_ERROR = "validation_error"
    INSUFFICIENT_DATA = "insufficient_data"


class Notice(BaseModel):
    """Transient message shown to the user after an action."""

    kind: NoticeKind
    title: str
    message: str

    @property
    def is_error(self) -> bool:
        return self.kind is not NoticeKind.SUCCESS


MISSING_INPUT_NOTICE = Notice(
    kind=NoticeKind.VALIDATION_ERROR,
    title="Oops!",
    message="Please enter a week number and some words.",
)
NO_WORDS_NOTICE = Notice(
    kind=NoticeKind.VALIDATION_ERROR,
    title="No words found",
    message="Please enter at least one word.",
)


def parse_week(week_text: str | None) -> int | None:
    """Parse the week field, returning None when it is blank or not an integer."""
    if week_text is None or not week_text.strip():
        return None
    try:
        return int(week_text.strip())
    except ValueError:
        logger.debug(f"Week field is not an integer: {week_text!r}")
        return None


class PracticeSession:
    """State of one practice session: the store, selected week and last test.

    Attributes:
        store: The Word Store owned by this session
        test_size: Number of words in a generated test
        selected_week: Week most recently chosen for viewing
        test_words: Words of the most recently generated test
    """

    def __init__(self, store: WordStore, test_size: int = DEFAULT_TEST_SIZE):
        self.store = store
        self.test_size = test_size
        self.selected_week: int | None = None
        self.test_words: list[str] = []

    def add_words(self, week_text: str | None, raw_text: str | None) -> Notice:
        """Add words typed into the Add view.

        Args:
            week_text: Contents of the week number field
            raw_text: Contents of the words field, one word per line
        """
        week = parse_week(week_text)
        try:
            added = self.store.add_words(week, raw_text)
        except WordValidationError as e:
            if str(e) == NO_WORDS:
                return NO_WORDS_NOTICE
            return MISSING_INPUT_NOTICE

        return Notice(
            kind=NoticeKind.SUCCESS,
            title="Words added!",
            message=f"Added {added} words to week {week}.",
        )

    def weeks(self) -> list[int]:
        """Weeks available in the View view, most recent first."""
        return self.store.list_weeks()

    def select_week(self, week: int) -> list[str]:
        """Select a week and return its words."""
        self.selected_week = week
        return self.store.words_for_week(week)

    def generate_test(self) -> Notice:
        """Generate a new random test, replacing ``test_words`` on success."""
        try:
            words = self.store.sample_test(self.test_size)
        except InsufficientDataError as e:
            logger.info(f"Test not generated: {e}")
            return Notice(
                kind=NoticeKind.INSUFFICIENT_DATA,
                title="Need more words",
                message=f"You need at least {self.test_size} words to generate a test.",
            )

        self.test_words = words
        return Notice(
            kind=NoticeKind.SUCCESS,
            title="Test ready!",
            message=f"Here are {self.test_size} random words to practice.",
        )
