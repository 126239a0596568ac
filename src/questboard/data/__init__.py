"""Data layer utilities for loading JSON definitions and local storage."""

from .errors import DataError, DataLoadError, DataValidationError
from .local_store import KeyValueStore, LocalStore
from .paths import get_definitions_path, get_package_root

__all__ = [
    "DataError",
    "DataLoadError",
    "DataValidationError",
    "KeyValueStore",
    "LocalStore",
    "get_definitions_path",
    "get_package_root",
]
