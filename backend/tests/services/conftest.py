"""Service test fixtures - handlers wired to an in-memory store."""

import pytest

from tests.services.fake_store import FakeContentStore


@pytest.fixture
def store():
    return FakeContentStore()
