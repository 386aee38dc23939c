# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Documentation comment parser contract and tree-sitter implementation."""

import logging
from dataclasses import dataclass
from typing import Protocol

import tree_sitter_jsdoc
from tree_sitter import Language, Node, Parser

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommentTag:
    """Represent one tag of a documentation comment.

    Attributes:
        segments: Texts of the tag's child nodes in source order. The first
            segment is the tag name (``@notice``), the second its body.
    """

    segments: tuple[str, ...]

    @property
    def name(self) -> str | None:
        """Return the tag name, or ``None`` for tags with fewer than two segments."""
        return self.segments[0] if len(self.segments) >= 2 else None

    @property
    def body(self) -> str | None:
        """Return the tag body, or ``None`` for tags with fewer than two segments."""
        return self.segments[1] if len(self.segments) >= 2 else None


@dataclass(frozen=True)
class ParsedComment:
    """Represent the description and tags of one documentation comment.

    Attributes:
        description: Free-text description, ``None`` when absent.
        tags: Tags in document order.
    """

    description: str | None
    tags: tuple[CommentTag, ...]


class CommentParser(Protocol):
    """Define the documentation comment parsing contract."""

    def parse(self, text: str) -> ParsedComment:
        """Parse raw comment text into a description and tags."""


class TreeSitterCommentParser:
    """Parse ``/** ... */`` comments with the tree-sitter JSDoc grammar."""

    def __init__(self) -> None:
        self._parser = Parser(Language(tree_sitter_jsdoc.language()))

    def parse(self, text: str) -> ParsedComment:
        """Parse one documentation comment.

        Only direct children of the ``document`` root are considered: the
        first ``description`` node and every ``tag`` node.

        Args:
            text: Raw comment text, including its ``/**`` and ``*/`` markers.

        Returns:
            Parsed comment structure.
        """
        source = text.encode("utf-8")
        tree = self._parser.parse(source)
        description: str | None = None
        tags: list[CommentTag] = []
        for node in tree.root_node.children:
            if node.type == "description" and description is None:
                description = _node_text(node, source)
            elif node.type == "tag":
                tags.append(
                    CommentTag(
                        segments=tuple(_node_text(child, source) for child in node.children)
                    )
                )
        if tree.root_node.has_error:
            logger.debug(
                f"Comment parsed with syntax errors (tags={len(tags)} "
                f"has_description={description is not None})"
            )
        return ParsedComment(description=description, tags=tuple(tags))


def _node_text(node: Node, source: bytes) -> str:
    return source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")
