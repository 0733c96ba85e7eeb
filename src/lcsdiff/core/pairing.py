"""Group adjacent removed/added line operations into modified pairs"""

import logging
from collections.abc import Iterator, Sequence

from lcsdiff.core.models import ModifiedPair, Op, OpKind, Plain

logger = logging.getLogger(__name__)


def iter_pairs(ops: Sequence[Op[str]]) -> Iterator[Plain | ModifiedPair]:
    """Yield plain ops and modified pairs in one greedy left-to-right pass.

    A removed/added neighbour pair (in either order) is consumed together and
    never reconsidered; old is always the removed value, new the added one.
    """
    i = 0
    while i < len(ops):
        current = ops[i]
        nxt = ops[i + 1] if i + 1 < len(ops) else None

        if nxt is not None and current.kind == OpKind.removed and nxt.kind == OpKind.added:
            yield ModifiedPair(old=current.value, new=nxt.value)
            i += 2
        elif nxt is not None and current.kind == OpKind.added and nxt.kind == OpKind.removed:
            yield ModifiedPair(old=nxt.value, new=current.value)
            i += 2
        else:
            yield Plain(current)
            i += 1


def resolve_pairs(ops: Sequence[Op[str]]) -> list[Plain | ModifiedPair]:
    """Materialize iter_pairs over a line-level edit script."""
    items = list(iter_pairs(ops))
    logger.debug("Resolved %d ops into %d items (%d pairs)", len(ops), len(items), count_pairs(items))
    return items


def count_pairs(items: Sequence[Plain | ModifiedPair]) -> int:
    """Return how many modified pairs a resolved view contains."""
    return sum(1 for item in items if isinstance(item, ModifiedPair))
