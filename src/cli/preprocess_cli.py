# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""CLI for building call-pair datasets from documented caller/callee pairs."""

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler

from callpair.assembler import DEFAULT_MIN_WORDS, RecordAssembler
from callpair.comment_parser import CommentParser, TreeSitterCommentParser
from callpair.pipeline import CallPairPipeline, PipelineSummary

logger = logging.getLogger(__name__)

DEFAULT_INPUT_PATH = "data/scrl_call/test.jsonl"
DEFAULT_OUTPUT_PATH = "data/scrl_call/out.jsonl"


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application logging with Rich handler.

    Args:
        level: Logging severity threshold.
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser.

    Returns:
        Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(prog="callpair")
    parser.add_argument(
        "--input",
        default=DEFAULT_INPUT_PATH,
        help="Line-delimited JSON file of [caller_code, caller_comment, callee_code, callee_comment, label].",
    )
    parser.add_argument(
        "--output",
        default=DEFAULT_OUTPUT_PATH,
        help="Output JSONL file; created or truncated.",
    )
    parser.add_argument(
        "--min-words",
        type=int,
        default=DEFAULT_MIN_WORDS,
        help="Minimum word count of both normalized descriptions.",
    )
    parser.add_argument(
        "--progress-batch-size",
        type=int,
        default=1,
        help="Emit a progress line every N accepted records.",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging."
    )
    return parser


def run(
    argv: list[str],
    stdout: TextIO,
    stderr: TextIO,
    comment_parser: CommentParser | None = None,
) -> int:
    """Run the preprocessing command.

    Args:
        argv: CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.
        comment_parser: Optional parser override; the tree-sitter JSDoc
            parser is used when omitted.

    Returns:
        Exit code: 0 when the run completed, 1 when it halted on a malformed
        line, 2 on usage or I/O errors.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit:
        logger.warning(f"Argument parsing failed (argv={argv})")
        return 2
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    input_path = Path(args.input)
    output_path = Path(args.output)
    if not input_path.is_file():
        logger.warning(f"Input file does not exist (path={input_path})")
        stderr.write(f"Input file does not exist: {input_path}\n")
        return 2
    try:
        assembler = RecordAssembler(min_words=args.min_words)
    except ValueError as exc:
        logger.warning(f"Invalid minimum word count (min_words={args.min_words} error={exc})")
        stderr.write("min-words must be > 0\n")
        return 2
    if args.progress_batch_size <= 0:
        logger.warning(
            f"Invalid progress batch size (progress_batch_size={args.progress_batch_size})"
        )
        stderr.write("progress-batch-size must be > 0\n")
        return 2

    pipeline = CallPairPipeline(
        parser=comment_parser or TreeSitterCommentParser(),
        assembler=assembler,
        progress_every=args.progress_batch_size,
    )
    try:
        summary = pipeline.run(input_path=input_path, output_path=output_path)
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning(
            f"Pipeline I/O failure (input={input_path} output={output_path} error={exc})"
        )
        stderr.write(f"Failed to process {input_path}: {exc}\n")
        return 2

    _write_summary(summary=summary, output_path=output_path, stdout=stdout)
    if summary.status == "halted":
        stderr.write(
            f"Halted on malformed line {summary.halted_line}: {summary.error}\n"
        )
        return 1
    return 0


def _write_summary(summary: PipelineSummary, output_path: Path, stdout: TextIO) -> None:
    """Write a one-line run summary.

    Args:
        summary: Pipeline run summary.
        output_path: Output file written by the run.
        stdout: Standard output stream.
    """
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    console.print(
        f"status={summary.status} lines={summary.total_lines} "
        f"accepted={summary.accepted} rejected_missing={summary.rejected_missing} "
        f"rejected_short={summary.rejected_short} output={output_path}",
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


def main() -> None:
    """Run the CLI application and exit."""
    configure_logging()
    exit_code = run(sys.argv[1:], stdout=sys.stdout, stderr=sys.stderr)
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
