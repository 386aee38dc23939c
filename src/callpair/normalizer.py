"""Text normalization helpers for comment descriptions and code snippets."""

import logging
import re

logger = logging.getLogger(__name__)

_LEADING_ASTERISKS_RE = re.compile(r"^[^\S\n]*\*+(?:[^\S\n]*\*+)*", re.MULTILINE)
_WHITESPACE_RE = re.compile(r"\s+")


def replace_newline(text: str) -> str:
    """Convert CRLF line endings to LF."""
    return text.replace("\r\n", "\n")


def normalize_comment(text: str) -> str:
    """Normalize a selected description to a single clean line.

    Comment-block decoration (leading ``*`` on each line) and stray trailing
    asterisks left by the comment parser are replaced with spaces, then all
    whitespace runs are collapsed and the result is trimmed.

    Args:
        text: Description text selected from a parsed comment.

    Returns:
        Normalized description without newlines or repeated whitespace.
    """
    text = _LEADING_ASTERISKS_RE.sub(" ", text)
    text = _strip_trailing_asterisks(text)
    text = _WHITESPACE_RE.sub(" ", text)
    return text.strip()


def _strip_trailing_asterisks(text: str) -> str:
    """Replace a trailing run of asterisks and whitespace with one space."""
    stripped = text.rstrip()
    if not stripped.endswith("*"):
        return text
    while stripped.endswith("*"):
        stripped = stripped.rstrip("*").rstrip()
    logger.debug(f"Removed trailing asterisks (removed_chars={len(text) - len(stripped)})")
    return stripped + " "


def normalize_code(code: str) -> str:
    """Collapse code to one line.

    Args:
        code: Raw code block.

    Returns:
        Code with every whitespace run, newlines included, replaced by one space.
    """
    return _WHITESPACE_RE.sub(" ", replace_newline(code))


def count_words(text: str) -> int:
    """Count words separated by single spaces in normalized text."""
    return len(text.split(" "))
