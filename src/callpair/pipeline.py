# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Line-stream pipeline turning call-pair input lines into dataset records."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from types import TracebackType
from typing import Literal, TextIO

from callpair.assembler import AssemblyResult, RecordAssembler
from callpair.comment_parser import CommentParser
from callpair.model import OutputRecord, RecordFormatError, parse_input_line
from callpair.selector import extract_description

logger = logging.getLogger(__name__)

PipelineStatus = Literal["done", "halted"]


@dataclass(frozen=True)
class PipelineSummary:
    """Represent the outcome of one pipeline run.

    Attributes:
        status: ``done`` when every line was processed, ``halted`` after a
            structurally malformed line.
        total_lines: Number of lines in the input source.
        blank_lines: Number of empty lines skipped.
        accepted: Number of records written to the output sink.
        rejected_missing: Records skipped because a description was absent.
        rejected_short: Records skipped because a description was too short.
        halted_line: 1-based line number of the malformed line, if halted.
        error: Error message of the malformed line, if halted.
    """

    status: PipelineStatus
    total_lines: int
    blank_lines: int
    accepted: int
    rejected_missing: int
    rejected_short: int
    halted_line: int | None = None
    error: str | None = None


class PipelineContext:
    """Own the input source and output sink of one run.

    The output sink is truncated on entry and both handles are closed on
    exit, whether the run completes or halts.
    """

    def __init__(self, input_path: Path, output_path: Path) -> None:
        self.input_path = input_path
        self.output_path = output_path
        self._source: TextIO | None = None
        self._sink: TextIO | None = None

    def __enter__(self) -> "PipelineContext":
        self._source = self.input_path.open("r", encoding="utf-8")
        try:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)
            self._sink = self.output_path.open("w", encoding="utf-8", newline="\n")
        except OSError:
            self._source.close()
            self._source = None
            raise
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._sink is not None:
            self._sink.close()
            self._sink = None
        if self._source is not None:
            self._source.close()
            self._source = None

    def count_lines(self) -> int:
        """Count input lines and rewind the source."""
        source = self._require_source()
        total = sum(1 for _ in source)
        source.seek(0)
        return total

    def lines(self) -> Iterator[str]:
        """Yield input lines without their terminators."""
        for line in self._require_source():
            yield line.rstrip("\n")

    def write(self, record: OutputRecord) -> None:
        """Append one record to the output sink."""
        if self._sink is None:
            raise RuntimeError("Pipeline context is not open")
        self._sink.write(record.to_json_line())

    def _require_source(self) -> TextIO:
        if self._source is None:
            raise RuntimeError("Pipeline context is not open")
        return self._source


class CallPairPipeline:
    """Stream input records through description extraction and filtering."""

    def __init__(
        self,
        parser: CommentParser,
        assembler: RecordAssembler | None = None,
        progress_every: int = 1,
    ) -> None:
        """Initialize the pipeline.

        Args:
            parser: Documentation comment parser shared by every record.
            assembler: Record filter and assembler; defaults to a four-word
                minimum.
            progress_every: Log an accepted-record line every N accepted
                records.

        Raises:
            ValueError: If ``progress_every`` is not greater than zero.
        """
        if progress_every <= 0:
            raise ValueError("progress_every must be > 0")
        self._parser = parser
        self._assembler = assembler or RecordAssembler()
        self._progress_every = progress_every

    def run(self, input_path: Path, output_path: Path) -> PipelineSummary:
        """Process every line of the input file.

        Processing stops at the first structurally malformed line; records
        accepted before it stay in the output file.

        Args:
            input_path: Line-delimited JSON input file.
            output_path: Output file, created or truncated.

        Returns:
            Run summary.

        Raises:
            OSError: If the input cannot be read or the output cannot be written.
        """
        blank = accepted = rejected_missing = rejected_short = 0
        with PipelineContext(input_path, output_path) as context:
            total = context.count_lines()
            logger.info(f"Input loaded (path={input_path} lines={total})")
            for line_no, line in enumerate(context.lines(), start=1):
                if not line:
                    blank += 1
                    continue
                try:
                    result = self.process_line(line)
                except RecordFormatError as exc:
                    logger.error(
                        f"Halting on malformed line (line={line_no} error={exc} content={line!r})"
                    )
                    return PipelineSummary(
                        status="halted",
                        total_lines=total,
                        blank_lines=blank,
                        accepted=accepted,
                        rejected_missing=rejected_missing,
                        rejected_short=rejected_short,
                        halted_line=line_no,
                        error=str(exc),
                    )
                if result.record is None:
                    if result.rejection == "missing_description":
                        rejected_missing += 1
                    else:
                        rejected_short += 1
                    continue
                context.write(result.record)
                accepted += 1
                if accepted % self._progress_every == 0:
                    logger.info(
                        f"Record accepted (index={line_no - 1} line={line_no} accepted={accepted})"
                    )

        logger.info(
            f"Pipeline completed (lines={total} accepted={accepted} "
            f"rejected_missing={rejected_missing} rejected_short={rejected_short})"
        )
        return PipelineSummary(
            status="done",
            total_lines=total,
            blank_lines=blank,
            accepted=accepted,
            rejected_missing=rejected_missing,
            rejected_short=rejected_short,
        )

    def process_line(self, line: str) -> AssemblyResult:
        """Turn one non-empty input line into an assembly result.

        Args:
            line: Input line without its terminator.

        Returns:
            Assembly result for the line.

        Raises:
            RecordFormatError: If the line is structurally malformed.
        """
        record = parse_input_line(line)
        caller_description = extract_description(self._parser, record.caller_comment)
        callee_description = extract_description(self._parser, record.callee_comment)
        return self._assembler.assemble(record, caller_description, callee_description)
