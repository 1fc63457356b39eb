"""Shared test fixtures."""

import itertools
from datetime import datetime, timedelta, timezone

import pytest
import structlog

from chronicle.models import RawCommit

BASE_DATE = datetime(2025, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def make_commit():
    """Build RawCommit objects with unique hashes and predictable dates."""
    counter = itertools.count(1)

    def _make(message, tag=None, day=0, hash=None):
        return RawCommit(
            hash=hash or f"{next(counter):040x}",
            author_date=BASE_DATE + timedelta(days=day),
            tag=tag,
            message=message,
        )

    return _make


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo logging configuration done by CLI runs."""
    yield
    structlog.reset_defaults()
