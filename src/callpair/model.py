# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Domain models for call-pair input and output records."""

import json
from dataclasses import asdict, dataclass

INPUT_FIELD_COUNT = 5


class RecordFormatError(ValueError):
    """Represent a structurally malformed input line."""


@dataclass(frozen=True)
class InputRecord:
    """Represent one caller/callee pair read from an input line.

    Attributes:
        caller_code: Raw caller source code.
        caller_comment: Raw caller documentation comment.
        callee_code: Raw callee source code.
        callee_comment: Raw callee documentation comment.
        label: Opaque relationship label, passed through unmodified.
    """

    caller_code: str
    caller_comment: str
    callee_code: str
    callee_comment: str
    label: object


@dataclass(frozen=True)
class OutputRecord:
    """Represent one accepted dataset record.

    Attributes:
        caller_code: Single-line caller code.
        caller_comm: Normalized caller description.
        callee_code: Single-line callee code.
        callee_comm: Normalized callee description.
        label: Label copied from the input record.
    """

    caller_code: str
    caller_comm: str
    callee_code: str
    callee_comm: str
    label: object

    def to_json_line(self) -> str:
        """Serialize the record as one compact JSON line, newline included."""
        return (
            json.dumps(
                asdict(self), ensure_ascii=False, allow_nan=False, separators=(",", ":")
            )
            + "\n"
        )


def parse_input_line(line: str) -> InputRecord:
    """Parse one line-delimited JSON input line.

    Args:
        line: Non-empty input line without its line terminator.

    Returns:
        Parsed input record.

    Raises:
        RecordFormatError: If the line is not a JSON array of five elements
            whose first four elements are strings, uses the non-standard
            ``NaN``/``Infinity`` constants, or holds text (such as a lone
            surrogate escape) that cannot be encoded as UTF-8.
    """
    try:
        payload = json.loads(line, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise RecordFormatError(f"Invalid JSON: {exc}") from exc
    try:
        json.dumps(payload, ensure_ascii=False).encode("utf-8")
    except UnicodeEncodeError as exc:
        raise RecordFormatError(f"Record is not encodable as UTF-8: {exc}") from exc
    if not isinstance(payload, list) or len(payload) != INPUT_FIELD_COUNT:
        raise RecordFormatError(
            f"Expected a JSON array of {INPUT_FIELD_COUNT} elements, got {type(payload).__name__}"
            + (f" of length {len(payload)}" if isinstance(payload, list) else "")
        )
    caller_code, caller_comment, callee_code, callee_comment, label = payload
    for name, value in (
        ("caller_code", caller_code),
        ("caller_comment", caller_comment),
        ("callee_code", callee_code),
        ("callee_comment", callee_comment),
    ):
        if not isinstance(value, str):
            raise RecordFormatError(
                f"Field {name} must be a string, got {type(value).__name__}"
            )
    return InputRecord(
        caller_code=caller_code,
        caller_comment=caller_comment,
        callee_code=callee_code,
        callee_comment=callee_comment,
        label=label,
    )


def _reject_constant(name: str) -> object:
    raise RecordFormatError(f"Invalid JSON constant: {name}")
