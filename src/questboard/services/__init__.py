"""Service layer exports."""

from .errors import SaveLoadError
from .progress_service import ProgressService, ProgressState, ProgressView
from .progress_store import STORAGE_KEY, ProgressStore
from .save_service import SaveService

__all__ = [
    "SaveLoadError",
    "ProgressService",
    "ProgressState",
    "ProgressView",
    "ProgressStore",
    "STORAGE_KEY",
    "SaveService",
]
