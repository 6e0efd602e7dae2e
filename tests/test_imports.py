"""Verify all modules can be imported without errors."""
import pytest

# All tests in this module are pure import checks - mark as unit tests
pytestmark = pytest.mark.unit


def test_domain_imports():
    """Import domain modules to catch bad import paths."""
    import domain
    import domain.errors
    import domain.models
    import domain.models.workout
    import domain.converters
    import domain.converters.storage_converters


def test_application_imports():
    """Import application modules."""
    import application
    import application.ports
    import application.ports.workout_storage
    import application.sort_state
    import application.workout_store


def test_infrastructure_imports():
    """Import storage adapters."""
    import infrastructure
    import infrastructure.storage
    import infrastructure.storage.json_file_storage
    import infrastructure.storage.memory_storage


def test_backend_imports():
    """Import settings, logging and wiring."""
    import backend.logging_config
    import backend.main
    import backend.settings
