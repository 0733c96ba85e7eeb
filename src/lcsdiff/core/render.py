"""Text rendering of edit scripts: prefixed lines, word highlights, summary"""

from collections.abc import Sequence

import typer

from lcsdiff.core.diff import diff_tokens
from lcsdiff.core.models import DiffSummary, ModifiedPair, Op, OpKind, Plain
from lcsdiff.core.pairing import count_pairs


PREFIXES = {OpKind.added: "+ ", OpKind.removed: "- ", OpKind.same: "  "}
LINE_COLORS = {OpKind.added: typer.colors.GREEN, OpKind.removed: typer.colors.RED}
MARKERS = {OpKind.added: ("{+", "+}"), OpKind.removed: ("[-", "-]")}


def prefix_for(kind: OpKind) -> str:
    """Visible prefix for a diff line of this kind."""
    return PREFIXES[kind]


def count_kind(ops: Sequence[Op], kind: OpKind) -> int:
    """Count operations of one kind in an edit script."""
    return sum(1 for op in ops if op.kind == kind)


def _highlight(token: str, kind: OpKind, color: bool) -> str:
    if color:
        return typer.style(token, fg=LINE_COLORS[kind], bold=True, underline=True)
    start, end = MARKERS[kind]
    return f"{start}{token}{end}"


def render_tokens(tokens: Sequence[Op[str]], focus: OpKind, color: bool = False) -> str:
    """Join same tokens plus tokens of the focus kind; focus tokens are highlighted.

    Zero-length tokens are skipped.
    """
    parts = []
    for token in tokens:
        if not token.value:
            continue
        if token.kind == OpKind.same:
            parts.append(token.value)
        elif token.kind == focus:
            parts.append(_highlight(token.value, focus, color))
    return "".join(parts)


def render_plain(op: Op[str], color: bool = False) -> str:
    """Render one line operation with its prefix."""
    line = prefix_for(op.kind) + op.value
    if color and op.kind in LINE_COLORS:
        return typer.style(line, fg=LINE_COLORS[op.kind])
    return line


def render_pair(pair: ModifiedPair, color: bool = False) -> tuple[str, str]:
    """Return (old_line, new_line) for a modified pair with word-level highlights."""
    tokens = diff_tokens(pair.old, pair.new)
    old_line = prefix_for(OpKind.removed) + render_tokens(tokens, OpKind.removed, color)
    new_line = prefix_for(OpKind.added) + render_tokens(tokens, OpKind.added, color)
    return old_line, new_line


def render_items(
    items: Sequence[Plain | ModifiedPair],
    color: bool = False,
    word_diff: bool = True,
    ) -> list[str]:
    """Render a resolved diff view to display lines (no trailing newlines)."""
    lines = []
    for item in items:
        if isinstance(item, Plain):
            lines.append(render_plain(item.op, color))
        elif word_diff:
            lines.extend(render_pair(item, color))
        else:
            lines.append(render_plain(Op(OpKind.removed, item.old), color))
            lines.append(render_plain(Op(OpKind.added, item.new), color))
    return lines


def build_summary(
    original_lines: Sequence[str],
    modified_lines: Sequence[str],
    ops: Sequence[Op[str]],
    items: Sequence[Plain | ModifiedPair],
    ) -> DiffSummary:
    """Count line totals, per-kind operations, and modified pairs."""
    return DiffSummary(
        original_total=len(original_lines),
        modified_total=len(modified_lines),
        same=count_kind(ops, OpKind.same),
        added=count_kind(ops, OpKind.added),
        removed=count_kind(ops, OpKind.removed),
        changed_pairs=count_pairs(items),
    )


def format_summary(summary: DiffSummary) -> str:
    """One-line summary text shown after a comparison."""
    return (
        f"Original: {summary.original_total} lines | "
        f"Modified: {summary.modified_total} lines | "
        f"Same: {summary.same} | "
        f"Added: {summary.added} | "
        f"Removed: {summary.removed} | "
        f"Changed pairs: {summary.changed_pairs}"
    )
