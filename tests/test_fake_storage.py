"""
Unit tests for the fake storage implementation.

These tests verify that the fake storage:
- Behaves like a real storage for reads and writes
- Supports seeding and reset for test isolation
- Simulates failures when asked to
"""
import pytest

from domain.errors import PersistenceError
from tests.fakes import FakeWorkoutStorage, create_storage, cycling_entry, running_entry

# All tests in this module are pure logic tests - mark as unit
pytestmark = pytest.mark.unit


class TestFakeWorkoutStorage:
    """Tests for FakeWorkoutStorage."""

    def test_starts_empty(self):
        storage = FakeWorkoutStorage()
        assert storage.read() is None
        assert storage.write_count == 0

    def test_write_and_read(self):
        storage = FakeWorkoutStorage()
        storage.write([running_entry()])
        assert storage.read() == [running_entry()]
        assert storage.write_count == 1

    def test_seed_accepts_malformed_payloads(self):
        storage = FakeWorkoutStorage()
        storage.seed({"not": "a list"})
        assert storage.read() == {"not": "a list"}

    def test_fail_writes(self):
        storage = create_storage(running_entry())
        storage.fail_writes = True

        with pytest.raises(PersistenceError):
            storage.write([])

        assert storage.read() == [running_entry()]

    def test_fail_reads(self):
        storage = FakeWorkoutStorage()
        storage.fail_reads = True
        with pytest.raises(PersistenceError):
            storage.read()

    def test_reset(self):
        storage = create_storage(running_entry())
        storage.write([])
        storage.fail_writes = True

        storage.reset()

        assert storage.read() is None
        assert storage.write_count == 0
        assert storage.fail_writes is False


class TestFactories:
    """Tests for factory helpers."""

    def test_entries_are_independent(self):
        first = running_entry()
        first["distance"] = 1
        assert running_entry()["distance"] == 5.0

    def test_overrides(self):
        assert cycling_entry(id="x", clicks=0)["id"] == "x"

    def test_create_storage_without_entries_is_unwritten(self):
        assert create_storage().read() is None
