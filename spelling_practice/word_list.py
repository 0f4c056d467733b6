"""Word list parsing for spelling word ingestion.

This module turns free text (typed in or read from a file) into the list of
words that gets added to a week.
"""

from pathlib import Path

from loguru import logger


def split_words(raw_text: str) -> list[str]:
    """Split free text into words, one per line.

    Only newlines separate words; other control characters stay inside the
    word. Each line is stripped of surrounding whitespace and blank lines are
    skipped. Case and inner spacing are kept as typed, and duplicates are
    kept.

    Args:
        raw_text: Text with one word (or phrase) per line

    Returns:
        List of words in the order they appear

    Example:
        >>> split_words("apple\\n\\n  banana \\n")
        ['apple', 'banana']
    """
    words = [line.strip() for line in raw_text.split("\n")]
    words = [word for word in words if word]
    logger.debug(f"Parsed {len(words)} word(s) from input text")
    return words


def read_word_file(file_path: str | Path) -> str:
    """Read the text of a word list file.

    Args:
        file_path: Path to a UTF-8 text file with one word per line

    Returns:
        The file contents

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid UTF-8
    """
    path = Path(file_path)

    if not path.is_file():
        error_msg = f"Word list file not found: {file_path}"
        logger.error(error_msg)
        raise FileNotFoundError(error_msg)

    logger.info(f"Loading word list from: {file_path}")

    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        logger.error(f"Failed to decode file with UTF-8 encoding: {file_path}")
        encoding_error_msg = f"File encoding error: {e}"
        raise ValueError(encoding_error_msg) from e
