"""JSON report of a comparison"""

from lcsdiff.core.diff import diff_tokens
from lcsdiff.core.models import Comparison, ModifiedPair, Plain


def build_item(item: Plain | ModifiedPair) -> dict:
    """Serialize one plain line or modified pair (pairs carry their word-level ops)."""
    if isinstance(item, Plain):
        return {"type": item.op.kind.value, "value": item.op.value}
    return {
        "type": "modified",
        "old": item.old,
        "new": item.new,
        "tokens": [{"type": t.kind.value, "value": t.value} for t in diff_tokens(item.old, item.new)],
    }


def build_report(comparison: Comparison) -> dict:
    """Build the JSON-serializable report: summary counts plus the ordered resolved lines."""
    return {
        "summary": comparison.summary.model_dump(),
        "lines": [build_item(item) for item in comparison.items],
    }
