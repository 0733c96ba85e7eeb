"""Line splitting and word tokenization for diff inputs"""

import re


LINE_BREAK_RE = re.compile(r'\r?\n')
# ECMAScript \s: Python's Unicode \s also matches \x1c-\x1f and \x85 but not \ufeff
WHITESPACE_RE = re.compile(r'([\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+)')


def split_lines(text: str) -> list[str]:
    """Split text on \\n or \\r\\n boundaries. Empty text is zero lines, not one empty line."""
    if text == '':
        return []
    return LINE_BREAK_RE.split(text)


def tokenize_words(line: str) -> list[str]:
    """Split a line into alternating word and whitespace tokens; joining them restores the line.

    Leading/trailing whitespace produces an empty edge token, which renderers skip.
    """
    if line == '':
        return []
    return WHITESPACE_RE.split(line)
