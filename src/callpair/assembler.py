# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Filtering and assembly of output records."""

import logging
from dataclasses import dataclass
from typing import Literal

from callpair.model import InputRecord, OutputRecord
from callpair.normalizer import count_words, normalize_code, normalize_comment

logger = logging.getLogger(__name__)

RejectionReason = Literal["missing_description", "insufficient_length"]

DEFAULT_MIN_WORDS = 4


@dataclass(frozen=True)
class AssemblyResult:
    """Represent the outcome of assembling one record.

    Exactly one of ``record`` and ``rejection`` is set.
    """

    record: OutputRecord | None
    rejection: RejectionReason | None = None

    @property
    def accepted(self) -> bool:
        return self.record is not None


class RecordAssembler:
    """Validate selected descriptions and build output records."""

    def __init__(self, min_words: int = DEFAULT_MIN_WORDS) -> None:
        """Initialize the assembler.

        Args:
            min_words: Minimum word count both normalized descriptions need.

        Raises:
            ValueError: If ``min_words`` is not greater than zero.
        """
        if min_words <= 0:
            raise ValueError("min_words must be > 0")
        self._min_words = min_words

    def assemble(
        self,
        record: InputRecord,
        caller_description: str | None,
        callee_description: str | None,
    ) -> AssemblyResult:
        """Build an output record or report why the input was rejected.

        Args:
            record: Parsed input record.
            caller_description: Description selected from the caller comment.
            callee_description: Description selected from the callee comment.

        Returns:
            Assembly result carrying either the output record or a rejection.
        """
        if caller_description is None or callee_description is None:
            logger.debug(
                f"Record rejected (reason=missing_description "
                f"caller={caller_description is not None} callee={callee_description is not None})"
            )
            return AssemblyResult(record=None, rejection="missing_description")

        caller_comm = normalize_comment(caller_description)
        callee_comm = normalize_comment(callee_description)
        if (
            count_words(caller_comm) < self._min_words
            or count_words(callee_comm) < self._min_words
        ):
            logger.debug(
                f"Record rejected (reason=insufficient_length min_words={self._min_words} "
                f"caller_words={count_words(caller_comm)} callee_words={count_words(callee_comm)})"
            )
            return AssemblyResult(record=None, rejection="insufficient_length")

        return AssemblyResult(
            record=OutputRecord(
                caller_code=normalize_code(record.caller_code),
                caller_comm=caller_comm,
                callee_code=normalize_code(record.callee_code),
                callee_comm=callee_comm,
                label=record.label,
            )
        )
