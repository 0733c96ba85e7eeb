"""Comparison pipeline: split -> line diff -> pair -> summarize"""

import logging
from pathlib import Path

from lcsdiff.core.diff import diff_lines
from lcsdiff.core.models import Comparison
from lcsdiff.core.pairing import resolve_pairs
from lcsdiff.core.render import build_summary
from lcsdiff.core.utils.text import split_lines
from lcsdiff.util.fs import read_text_file

logger = logging.getLogger(__name__)


def _check_size(label: str, lines: list[str], max_lines: int) -> None:
    """Reject inputs over max_lines (0 = unlimited) before the O(m*n) table is built."""
    if max_lines and len(lines) > max_lines:
        raise ValueError(f"{label} input has {len(lines)} lines, exceeding max_lines={max_lines}")


def run_compare(original_text: str, modified_text: str, max_lines: int = 0) -> Comparison:
    """Diff two texts line by line and resolve modified pairs."""
    for label, text in (("original", original_text), ("modified", modified_text)):
        if not isinstance(text, str):
            raise TypeError(f"{label} text must be str, got {type(text).__name__}")

    original_lines = split_lines(original_text)
    modified_lines = split_lines(modified_text)
    _check_size("original", original_lines, max_lines)
    _check_size("modified", modified_lines, max_lines)

    ops = diff_lines(original_lines, modified_lines)
    items = resolve_pairs(ops)
    summary = build_summary(original_lines, modified_lines, ops, items)
    logger.info(
        "Compared %d vs %d lines: %d same, %d added, %d removed, %d changed pairs",
        summary.original_total, summary.modified_total,
        summary.same, summary.added, summary.removed, summary.changed_pairs,
    )
    return Comparison(
        original_lines=original_lines,
        modified_lines=modified_lines,
        ops=ops,
        items=items,
        summary=summary,
    )


def run_compare_files(
    original_path: Path,
    modified_path: Path,
    encoding: str = "utf-8",
    max_lines: int = 0,
    ) -> Comparison:
    """Read two files and compare them. Raises ValueError for unreadable or oversized input."""
    original_text = read_text_file(original_path, encoding)
    modified_text = read_text_file(modified_path, encoding)
    return run_compare(original_text, modified_text, max_lines)
