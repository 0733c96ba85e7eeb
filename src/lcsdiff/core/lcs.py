"""Generic LCS edit script shared by the line and word differs

The table is a flat buffer indexed ``i * (n + 1) + j``. Backtracking prefers
a removal from ``a`` whenever both neighbours hold the same LCS length, so a
substituted run reads added-then-removed once the script is reversed.
"""

import logging
import operator
from collections.abc import Callable, Sequence
from typing import TypeVar

from lcsdiff.core.models import Op, OpKind

logger = logging.getLogger(__name__)

T = TypeVar("T")


def lcs_table(a: Sequence[T], b: Sequence[T], equal: Callable[[T, T], bool] = operator.eq) -> list[int]:
    """Return the (len(a)+1) x (len(b)+1) LCS length table as one flat row-major list."""
    m, n = len(a), len(b)
    width = n + 1
    dp = [0] * ((m + 1) * width)

    for i in range(1, m + 1):
        row, prev = i * width, (i - 1) * width
        ai = a[i - 1]
        for j in range(1, n + 1):
            if equal(ai, b[j - 1]):
                dp[row + j] = dp[prev + j - 1] + 1
            else:
                up, left = dp[prev + j], dp[row + j - 1]
                dp[row + j] = up if up >= left else left
    return dp


def diff_sequences(a: Sequence[T], b: Sequence[T], equal: Callable[[T, T], bool] = operator.eq) -> list[Op[T]]:
    """Return the edit script turning a into b; its same ops form a longest common subsequence."""
    m, n = len(a), len(b)
    width = n + 1
    logger.debug("LCS table %dx%d", m + 1, width)
    dp = lcs_table(a, b, equal)

    ops: list[Op[T]] = []
    i, j = m, n
    while i > 0 and j > 0:
        if equal(a[i - 1], b[j - 1]):
            ops.append(Op(OpKind.same, a[i - 1]))
            i -= 1
            j -= 1
        elif dp[(i - 1) * width + j] >= dp[i * width + j - 1]:
            ops.append(Op(OpKind.removed, a[i - 1]))
            i -= 1
        else:
            ops.append(Op(OpKind.added, b[j - 1]))
            j -= 1

    while i > 0:
        ops.append(Op(OpKind.removed, a[i - 1]))
        i -= 1
    while j > 0:
        ops.append(Op(OpKind.added, b[j - 1]))
        j -= 1

    ops.reverse()
    return ops
