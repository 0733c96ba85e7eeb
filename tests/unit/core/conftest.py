"""Shared fixtures for core unit tests"""

import pytest


ORIGINAL_TEXT = """\
The quick brown fox
jumps over
the lazy dog.

Unchanged tail line"""

MODIFIED_TEXT = """\
The quick red fox
jumps over
the  lazy cat.
A brand new line

Unchanged tail line"""


@pytest.fixture(name="original_text")
def original_text_fixture():
    return ORIGINAL_TEXT


@pytest.fixture(name="modified_text")
def modified_text_fixture():
    return MODIFIED_TEXT
