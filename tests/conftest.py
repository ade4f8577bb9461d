"""Shared fixtures for as-tree tests."""

from __future__ import annotations

import pytest

PROG = "as-tree"


@pytest.fixture
def argv() -> list[str]:
    """Argument list holding only the program name."""
    return [PROG]
