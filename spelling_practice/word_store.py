"""Word Store holding weekly spelling words.

The store is an ordered, append-only list of (word, week) entries. It is
loaded once from slot storage and written back in full after every
successful ingestion. Week lists, per-week word lists and practice tests are
all derived from the entry list.
"""

import random
from typing import Annotated

from loguru import logger
from pydantic import BaseModel, ConfigDict, StringConstraints, TypeAdapter, ValidationError

from spelling_practice.exceptions import InsufficientDataError, WordValidationError
from spelling_practice.storage import SlotStorage
from spelling_practice.word_list import split_words

DEFAULT_SLOT = "spellingWords"
DEFAULT_TEST_SIZE = 10

MISSING_INPUT = "missing week or text"
NO_WORDS = "no words found"


class WordEntry(BaseModel):
    """A single spelling word tagged with the week it was assigned."""

    model_config = ConfigDict(frozen=True)

    word: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    week: int


_ENTRIES = TypeAdapter(list[WordEntry])


class WordStore:
    """Ordered collection of spelling words backed by a storage slot.

    Attributes:
        storage: Slot storage the entries are persisted to
        slot: Name of the slot holding the entries
    """

    def __init__(
        self,
        storage: SlotStorage,
        entries: list[WordEntry] | None = None,
        slot: str = DEFAULT_SLOT,
    ):
        self.storage = storage
        self.slot = slot
        self._entries: list[WordEntry] = list(entries or [])

    @classmethod
    def load(cls, storage: SlotStorage, slot: str = DEFAULT_SLOT) -> "WordStore":
        """Load the store from its persisted snapshot.

        A missing slot, or a payload that is not a JSON array of
        ``{"word": ..., "week": ...}`` objects, yields an empty store.
        """
        payload = storage.read(slot)
        if payload is None:
            logger.info(f"No saved words in slot '{slot}', starting with an empty store")
            return cls(storage, slot=slot)

        try:
            entries = _ENTRIES.validate_json(payload)
        except ValidationError as e:
            logger.warning(
                f"Saved words in slot '{slot}' could not be read, starting with an empty store: "
                f"{e.error_count()} error(s)"
            )
            return cls(storage, slot=slot)

        logger.info(f"Loaded {len(entries)} word(s) from slot '{slot}'")
        return cls(storage, entries, slot=slot)

    @property
    def entries(self) -> list[WordEntry]:
        """Copy of all entries in insertion order."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def save(self) -> None:
        """Persist the full entry list to the storage slot."""
        self.storage.write(self.slot, _ENTRIES.dump_json(self._entries))
        logger.debug(f"Saved {len(self._entries)} word(s) to slot '{self.slot}'")

    def add_words(self, week: int | None, raw_text: str | None) -> int:
        """Add the words in ``raw_text`` to the given week.

        Args:
            week: Week number the words belong to. Any integer is accepted.
            raw_text: Words separated by line breaks

        Returns:
            Number of words added

        Raises:
            WordValidationError: If the week or text is missing, or the
                text contains no words. The store is left unchanged.
        """
        if week is None or raw_text is None or not raw_text.strip():
            logger.debug(f"Rejected word input: {MISSING_INPUT}")
            raise WordValidationError(MISSING_INPUT)

        words = split_words(raw_text)
        if not words:
            logger.debug(f"Rejected word input: {NO_WORDS}")
            raise WordValidationError(NO_WORDS)

        self._entries.extend(WordEntry(word=word, week=week) for word in words)
        self.save()

        logger.info(f"Added {len(words)} word(s) to week {week}")
        return len(words)

    def list_weeks(self) -> list[int]:
        """Return the distinct week numbers, most recent first."""
        return sorted({entry.week for entry in self._entries}, reverse=True)

    def words_for_week(self, week: int) -> list[str]:
        """Return the words of one week in the order they were added."""
        return [entry.word for entry in self._entries if entry.week == week]

    def sample_test(
        self, count: int = DEFAULT_TEST_SIZE, rng: random.Random | None = None
    ) -> list[str]:
        """Draw a random practice test from all stored words.

        The entries are shuffled uniformly and the first ``count`` words are
        returned, so no entry is picked twice.

        Args:
            count: Number of words in the test
            rng: Random source. Defaults to the operating system's generator.

        Raises:
            ValueError: If count is less than 1
            InsufficientDataError: If fewer than ``count`` words are stored
        """
        if count < 1:
            msg = "count must be at least 1"
            raise ValueError(msg)

        if len(self._entries) < count:
            raise InsufficientDataError(count, len(self._entries))

        shuffled = list(self._entries)
        (rng or random.SystemRandom()).shuffle(shuffled)

        logger.debug(f"Drew a test of {count} word(s) from {len(shuffled)}")
        return [entry.word for entry in shuffled[:count]]
