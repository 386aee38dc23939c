# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Unit tests for comment and code normalization."""

import re
import time

import pytest

from callpair.normalizer import (
    count_words,
    normalize_code,
    normalize_comment,
    replace_newline,
)


def test_normalize_comment_strips_leading_block_decoration() -> None:
    text = "Transfers tokens\n * to the given\n * recipient address"

    assert normalize_comment(text) == "Transfers tokens to the given recipient address"


def test_normalize_comment_strips_repeated_leading_asterisks() -> None:
    assert normalize_comment("** first line\n  *** second line") == "first line second line"


def test_normalize_comment_strips_trailing_asterisks() -> None:
    assert normalize_comment("Returns the balance  **  ") == "Returns the balance"
    assert normalize_comment("Returns the balance\n *") == "Returns the balance"


def test_normalize_comment_keeps_inner_asterisks() -> None:
    assert normalize_comment("Computes a * b for inputs") == "Computes a * b for inputs"


def test_normalize_comment_collapses_whitespace_and_trims() -> None:
    assert normalize_comment("  one\t two \r\n\n three  ") == "one two three"


@pytest.mark.parametrize(
    "text",
    [
        "* * decorated start",
        "ends with stars * *",
        "\n *\n * @notice nested\n *   body  \n */",
        "   ",
        "",
        "a*\n* b",
        "plain text",
    ],
)
def test_normalize_comment_is_idempotent_and_clean(text: str) -> None:
    once = normalize_comment(text)

    assert normalize_comment(once) == once
    assert "\n" not in once
    assert not re.search(r"\s{2,}", once)
    assert once == once.strip()


def test_normalize_code_collapses_to_single_line_without_trimming() -> None:
    code = "function a() {\r\n    return 1;\r\n}\n"

    assert normalize_code(code) == "function a() { return 1; } "


def test_replace_newline_only_touches_crlf() -> None:
    assert replace_newline("a\r\nb\nc\rd") == "a\nb\nc\rd"


def test_count_words_splits_on_single_spaces() -> None:
    assert count_words("one two three four") == 4
    assert count_words("single") == 1
    assert count_words("") == 1


def test_normalize_comment_keeps_decoration_stripping_per_line() -> None:
    text = "First line\n\n   \n  ** second\n\t* third *"

    assert normalize_comment(text) == "First line second third"


@pytest.mark.parametrize(
    "text",
    [
        "a" + " " * 200_000 + "b",
        "a" + "\n" * 200_000 + "b",
        "a" + " *" * 100_000 + " b",
        "a" + "\n *" * 100_000,
    ],
)
def test_normalize_comment_runs_in_linear_time_on_long_runs(text: str) -> None:
    started = time.monotonic()

    normalize_comment(text)

    assert time.monotonic() - started < 1.0
