"""
Infrastructure Layer for the workout log.

This package contains concrete implementations of the storage port:
- storage/: JSON file and in-memory implementations
"""

# Re-export storage adapters for convenient access
from infrastructure.storage import (
    InMemoryWorkoutStorage,
    JsonFileWorkoutStorage,
)

__all__ = [
    "InMemoryWorkoutStorage",
    "JsonFileWorkoutStorage",
]
