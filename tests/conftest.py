"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def sample_payload() -> bytes:
    """Sample binary payload for testing."""
    return b"hello world"


@pytest.fixture
def sample_encoded() -> str:
    """Canonical base32 encoding of sample_payload."""
    return "d1jprv3f41vpywkccg"
