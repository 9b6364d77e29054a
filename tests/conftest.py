"""Pytest configuration and fixtures."""

import re
import tempfile
from datetime import datetime, timezone
from pathlib import Path

import pytest

from hoon import UNDEFINED, MemoryStore


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def memory_store():
    """Empty in-memory store."""
    return MemoryStore()


@pytest.fixture
def special_values():
    """Values that plain JSON cannot carry, keyed by a description."""
    return {
        "undefined": UNDEFINED,
        "nan": float("nan"),
        "pattern": re.compile("ab+c"),
        "naive_date": datetime(2024, 1, 2, 3, 4, 5, 678000),
        "aware_date": datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
        "undefined_string": "undefined",
        "nan_string": "NaN",
        "pattern_string": "/ab/",
        "date_string": "2024-01-02T03:04:05",
    }


@pytest.fixture
def nested_value():
    """A value mixing every kind at several depths."""
    return {
        "user": {
            "name": "Alice",
            "nickname": UNDEFINED,
            "score": float("nan"),
            "tags": ["a", UNDEFINED, "undefined", None, True, 3.5],
            "filter": re.compile(r"^\d+$"),
            "joined": datetime(2023, 5, 17, 12, 0, 0),
        },
        "history": [
            {"when": datetime(2023, 6, 1, 8, 30), "note": "NaN"},
            [re.compile("x"), "/x/", 0, -12],
        ],
        "empty": {},
        "nothing": [],
    }
