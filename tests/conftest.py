"""Shared fixtures."""

import pytest

from jsontree.core.sample import SAMPLE_DOCUMENT


@pytest.fixture
def sample_document():
    return SAMPLE_DOCUMENT


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep user environment overrides out of the tests."""
    for name in ("JSONTREE_LEVEL_WIDTH", "JSONTREE_LEVEL_HEIGHT", "JSONTREE_THEME"):
        monkeypatch.delenv(name, raising=False)
