# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Public import surface for call-pair dataset preprocessing."""

from callpair.assembler import AssemblyResult, RecordAssembler
from callpair.comment_parser import (
    CommentParser,
    CommentTag,
    ParsedComment,
    TreeSitterCommentParser,
)
from callpair.model import InputRecord, OutputRecord, RecordFormatError, parse_input_line
from callpair.normalizer import normalize_code, normalize_comment
from callpair.pipeline import CallPairPipeline, PipelineContext, PipelineSummary
from callpair.selector import PRIORITY_TAGS, extract_description, select_description

__all__ = [
    "AssemblyResult",
    "CallPairPipeline",
    "CommentParser",
    "CommentTag",
    "InputRecord",
    "OutputRecord",
    "PRIORITY_TAGS",
    "ParsedComment",
    "PipelineContext",
    "PipelineSummary",
    "RecordAssembler",
    "RecordFormatError",
    "TreeSitterCommentParser",
    "extract_description",
    "normalize_code",
    "normalize_comment",
    "parse_input_line",
    "select_description",
]
