# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Selection of a single description from a parsed documentation comment."""

import logging

from callpair.comment_parser import CommentParser, ParsedComment
from callpair.normalizer import replace_newline

logger = logging.getLogger(__name__)

PRIORITY_TAGS: tuple[str, ...] = ("@notice", "@dev", "@return")


def select_description(parsed: ParsedComment) -> str | None:
    """Select the most informative description of a parsed comment.

    Tags are scanned in document order and the body of the first tag named
    in ``PRIORITY_TAGS`` wins, regardless of which priority name it carries.
    Tags with fewer than two segments are skipped. Without a matching tag the
    free-text description is returned.

    Args:
        parsed: Parsed documentation comment.

    Returns:
        Selected description text, or ``None`` if the comment has neither a
        matching tag nor a free-text description.
    """
    for tag in parsed.tags:
        if tag.name is None:
            continue
        if tag.name in PRIORITY_TAGS:
            return tag.body
    return parsed.description


def extract_description(parser: CommentParser, raw_comment: str) -> str | None:
    """Parse a raw comment and select its description.

    Args:
        parser: Documentation comment parser.
        raw_comment: Comment text as found in the input record.

    Returns:
        Selected description text, or ``None`` when nothing usable exists.
    """
    parsed = parser.parse(replace_newline(raw_comment))
    description = select_description(parsed)
    if description is None:
        logger.debug(
            f"Comment has no usable description (tags={len(parsed.tags)} chars={len(raw_comment)})"
        )
    return description
