"""Shared fixtures for moodlog tests."""

from datetime import datetime

import mongomock
import pytest
from fastapi.testclient import TestClient

from moodlog.db.entry_store import MoodEntryStore, get_entry_store
from moodlog.models.entry import MoodEntry

# Monday; October 2026 starts on a Thursday
NOW = datetime(2026, 10, 19, 12, 0)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def make_entry():
    def _make(timestamp, mood="Good", energy=5, note=""):
        return MoodEntry(timestamp=timestamp, mood=mood, energy=energy, note=note)
    return _make


@pytest.fixture
def store():
    collection = mongomock.MongoClient().db.mood_entries
    return MoodEntryStore(collection)


@pytest.fixture
def client(store):
    from moodlog.main import app

    app.dependency_overrides[get_entry_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
