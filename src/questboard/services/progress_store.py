"""Best-effort persistence of progress snapshots in a key-value store."""
from __future__ import annotations

import json
import logging

from questboard.data.errors import DataError
from questboard.data.local_store import KeyValueStore
from questboard.domain.quest_state import ProgressSnapshot
from questboard.services.errors import SaveLoadError
from questboard.services.save_service import SaveService

STORAGE_KEY = "unity-quest-progress"

logger = logging.getLogger(__name__)


class ProgressStore:
    """Loads and saves the progress snapshot under a single fixed key.

    Neither operation raises: unreadable data loads as ``None`` and failed
    writes are logged and dropped. Without a backend both are no-ops.
    """

    def __init__(
        self,
        backend: KeyValueStore | None,
        *,
        save_service: SaveService | None = None,
        key: str = STORAGE_KEY,
    ) -> None:
        self._backend = backend
        self._save_service = save_service or SaveService()
        self._key = key

    @property
    def available(self) -> bool:
        return self._backend is not None

    def load(self) -> ProgressSnapshot | None:
        """Return the stored snapshot, or None when absent or unreadable."""
        if self._backend is None:
            return None
        try:
            raw = self._backend.get_item(self._key)
        except (OSError, DataError) as exc:
            logger.warning("Unable to read stored progress: %s", exc)
            return None
        if raw is None:
            logger.debug("No stored progress under '%s'", self._key)
            return None
        try:
            return self._save_service.deserialize(json.loads(raw))
        except (ValueError, RecursionError, SaveLoadError) as exc:
            logger.warning("Ignoring unreadable stored progress: %s", exc)
            return None

    def save(self, snapshot: ProgressSnapshot) -> None:
        """Write the snapshot; failures are logged, never raised."""
        if self._backend is None:
            return
        payload = self._save_service.serialize(snapshot)
        try:
            self._backend.set_item(self._key, json.dumps(payload, ensure_ascii=False))
        except OSError as exc:
            logger.error("Failed to save progress: %s", exc)
            return
        logger.debug("Saved progress for %d quests", len(snapshot.quests))
