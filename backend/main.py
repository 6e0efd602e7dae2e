"""
Store factory for the workout log.

This module wires settings, logging, error tracking and the storage
adapter into a ready-to-use WorkoutStore. The factory pattern allows for:
- Easy testing with custom settings or an injected storage
- Multiple independent stores in one process
- Clear separation of wiring from the domain and application layers

Usage:
    from backend.main import create_store
    from backend.settings import Settings

    # Default store (uses get_settings())
    store = create_store()

    # Test store with custom settings
    test_settings = Settings(environment="test", storage_backend="memory", _env_file=None)
    test_store = create_store(settings=test_settings)
"""

import logging
from typing import Optional

import sentry_sdk

from application.ports import WorkoutStorage
from application.workout_store import WorkoutStore
from backend.logging_config import configure_logging
from backend.settings import Settings, get_settings
from infrastructure.storage import InMemoryWorkoutStorage, JsonFileWorkoutStorage

logger = logging.getLogger(__name__)


def create_store(
    settings: Optional[Settings] = None,
    storage: Optional[WorkoutStorage] = None,
    *,
    load: bool = True,
) -> WorkoutStore:
    """
    Create and configure a WorkoutStore instance.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.
        storage: Optional storage adapter. If not provided, one is built from
                 settings.storage_backend.
        load: Whether to load persisted workouts before returning.

    Returns:
        Configured WorkoutStore instance.

    Raises:
        PersistenceError: If load is requested and the storage cannot be read.
    """
    if settings is None:
        settings = get_settings()

    configure_logging(settings)

    _init_sentry(settings)

    if storage is None:
        storage = build_storage(settings)

    store = WorkoutStore(storage=storage)
    if load:
        store.load()
    return store


def build_storage(settings: Settings) -> WorkoutStorage:
    """Build the storage adapter selected by settings."""
    if settings.storage_backend == "memory":
        logger.info("Using in-memory workout storage")
        return InMemoryWorkoutStorage()

    logger.info(f"Using workout file {settings.workouts_storage_path}")
    return JsonFileWorkoutStorage(settings.workouts_storage_path)


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured, never in the test environment."""
    if settings.is_test:
        logger.debug("Sentry disabled in test environment")
        return
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
        )
        logger.info("Sentry initialized for workout log")
