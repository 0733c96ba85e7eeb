"""Root test configuration: isolate tests from the caller's config and environment"""

import os

import pytest


@pytest.fixture(autouse=True)
def clean_env(tmp_path, monkeypatch):
    """Run each test from an empty tmp directory with no LCSDIFF_* env vars set."""
    for name in list(os.environ):
        if name.startswith("LCSDIFF_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
