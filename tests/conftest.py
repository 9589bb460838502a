"""Shared test fixtures."""

import io

import pytest


@pytest.fixture
def sink() -> io.StringIO:
    """In-memory text sink for console channels."""
    return io.StringIO()
