"""
Tests for the storage port definition.

These tests verify that:
1. The Protocol definition is valid and importable
2. The Protocol defines the expected methods
3. Every implementation satisfies the Protocol contract
"""
import inspect

import pytest
from typing import runtime_checkable

# All tests in this module are pure logic tests - mark as unit
pytestmark = pytest.mark.unit


class TestWorkoutStorageProtocol:
    """Test WorkoutStorage protocol definition."""

    def test_import(self):
        """WorkoutStorage should be importable from the ports package."""
        from application.ports import WorkoutStorage
        assert WorkoutStorage is not None

    def test_has_required_methods(self):
        """WorkoutStorage should define read and write."""
        from application.ports import WorkoutStorage

        for method_name in ("read", "write"):
            assert hasattr(WorkoutStorage, method_name), \
                f"WorkoutStorage should have method '{method_name}'"

    def test_write_method_signature(self):
        """write() takes the full record list."""
        from application.ports.workout_storage import WorkoutStorage

        params = list(inspect.signature(WorkoutStorage.write).parameters)
        assert params == ["self", "records"]

    def test_read_method_signature(self):
        """read() takes no arguments."""
        from application.ports.workout_storage import WorkoutStorage

        params = list(inspect.signature(WorkoutStorage.read).parameters)
        assert params == ["self"]

    @pytest.mark.parametrize("kind", ["json_file", "in_memory", "fake"])
    def test_implementations_satisfy_protocol(self, kind, tmp_path):
        """All storages pass a runtime Protocol check."""
        from application.ports.workout_storage import WorkoutStorage
        from infrastructure.storage import InMemoryWorkoutStorage, JsonFileWorkoutStorage
        from tests.fakes import FakeWorkoutStorage

        implementations = {
            "json_file": lambda: JsonFileWorkoutStorage(tmp_path / "workouts.json"),
            "in_memory": InMemoryWorkoutStorage,
            "fake": FakeWorkoutStorage,
        }

        checkable = runtime_checkable(WorkoutStorage)
        assert isinstance(implementations[kind](), checkable)
