"""Line-level and word-level differs built on the shared LCS engine"""

import operator
from collections.abc import Sequence

from lcsdiff.core.lcs import diff_sequences
from lcsdiff.core.models import Op
from lcsdiff.core.utils.text import tokenize_words


def diff_lines(a: Sequence[str], b: Sequence[str]) -> list[Op[str]]:
    """Classify each line as same/added/removed. No pairing is done here."""
    return diff_sequences(a, b, operator.eq)


def diff_tokens(old_line: str, new_line: str) -> list[Op[str]]:
    """Word/whitespace token diff between the two halves of a modified pair."""
    return diff_sequences(tokenize_words(old_line), tokenize_words(new_line), operator.eq)
