"""
Unit tests for backend/main.py
"""

import pytest
from unittest.mock import patch

from application.workout_store import WorkoutStore
from backend.main import _init_sentry, build_storage, create_store
from backend.settings import Settings
from infrastructure.storage import InMemoryWorkoutStorage, JsonFileWorkoutStorage
from tests.fakes import create_storage, running_entry


@pytest.mark.unit
class TestCreateStore:
    """Test the create_store() factory function."""

    def test_returns_store(self):
        """create_store() should return a WorkoutStore."""
        settings = Settings(environment="test", storage_backend="memory", _env_file=None)
        store = create_store(settings=settings)
        assert isinstance(store, WorkoutStore)
        assert len(store) == 0

    def test_uses_default_settings_when_none_provided(self):
        """create_store() should use get_settings() when no settings provided."""
        with patch("backend.main.get_settings") as mock_get_settings:
            mock_get_settings.return_value = Settings(
                environment="test", storage_backend="memory", _env_file=None
            )

            store = create_store(settings=None)

            mock_get_settings.assert_called_once()
            assert isinstance(store, WorkoutStore)

    def test_loads_injected_storage(self):
        """create_store() loads persisted workouts from the given storage."""
        settings = Settings(environment="test", _env_file=None)
        store = create_store(settings=settings, storage=create_storage(running_entry()))
        assert [w.id for w in store] == ["run-1"]

    def test_load_can_be_skipped(self):
        """load=False leaves the store empty."""
        settings = Settings(environment="test", _env_file=None)
        storage = create_storage(running_entry())

        store = create_store(settings=settings, storage=storage, load=False)

        assert len(store) == 0
        assert storage.read_count == 0

    def test_configures_logging(self):
        """create_store() configures logging from settings."""
        settings = Settings(environment="test", storage_backend="memory", _env_file=None)
        with patch("backend.main.configure_logging") as mock_configure:
            create_store(settings=settings)
        mock_configure.assert_called_once_with(settings)


@pytest.mark.unit
class TestBuildStorage:
    """Test storage selection."""

    def test_memory_backend(self):
        settings = Settings(storage_backend="memory", _env_file=None)
        assert isinstance(build_storage(settings), InMemoryWorkoutStorage)

    def test_file_backend(self, tmp_path):
        target = tmp_path / "workouts.json"
        settings = Settings(workouts_storage_path=target, _env_file=None)

        storage = build_storage(settings)

        assert isinstance(storage, JsonFileWorkoutStorage)
        assert storage.path == target


@pytest.mark.unit
class TestSentry:
    """Test Sentry initialization."""

    def test_init_sentry_skipped_when_no_dsn(self):
        """Sentry should not initialize without a DSN."""
        settings = Settings(sentry_dsn=None, _env_file=None)

        with patch("backend.main.sentry_sdk.init") as mock_init:
            _init_sentry(settings)
            mock_init.assert_not_called()

    def test_init_sentry_called_when_dsn_provided(self):
        """Sentry should initialize when a DSN is configured."""
        settings = Settings(
            sentry_dsn="https://test@sentry.io/123",
            environment="staging",
            _env_file=None,
        )

        with patch("backend.main.sentry_sdk.init") as mock_init:
            _init_sentry(settings)
            mock_init.assert_called_once_with(
                dsn="https://test@sentry.io/123",
                environment="staging",
            )

    def test_init_sentry_skipped_in_test_environment(self):
        """The test environment never reports to Sentry, even with a DSN."""
        settings = Settings(
            sentry_dsn="https://test@sentry.io/123",
            environment="test",
            _env_file=None,
        )

        with patch("backend.main.sentry_sdk.init") as mock_init:
            create_store(settings=settings, storage=create_storage())
            mock_init.assert_not_called()
