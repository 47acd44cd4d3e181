"""Template usage-count storage."""

import json
import os
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from prompt_studio.utils.logger import get_logger

logger = get_logger()


class UsageStore(ABC):
    """Integer usage counters keyed by template id."""

    @abstractmethod
    def increment(self, template_id: str) -> int:
        """Increment a counter and return its new value."""
        pass

    @abstractmethod
    def get(self, template_id: str) -> int:
        """Return the counter for a template (0 when unseen)."""
        pass

    @abstractmethod
    def all(self) -> dict[str, int]:
        """Return a copy of every counter."""
        pass


class InMemoryUsageStore(UsageStore):
    """Process-local usage counters."""

    def __init__(self, initial: Optional[dict[str, int]] = None):
        self._counts: dict[str, int] = dict(initial or {})
        self._lock = threading.Lock()

    def increment(self, template_id: str) -> int:
        with self._lock:
            self._counts[template_id] = self._counts.get(template_id, 0) + 1
            return self._counts[template_id]

    def get(self, template_id: str) -> int:
        with self._lock:
            return self._counts.get(template_id, 0)

    def all(self) -> dict[str, int]:
        with self._lock:
            return dict(self._counts)


class JsonUsageStore(InMemoryUsageStore):
    """Usage counters persisted to a JSON file after every increment."""

    def __init__(self, path: Path):
        """Initialize storage.

        Args:
            path: JSON file holding a ``{template_id: count}`` object.
        """
        self.path = Path(path)
        super().__init__(self._load())

    def _load(self) -> dict[str, int]:
        """Read counters from disk, treating a missing or corrupt file as empty."""
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r") as f:
                data = json.load(f)
            return {str(k): int(v) for k, v in data.items()}
        except (OSError, ValueError, AttributeError) as e:
            logger.warning(f"Failed to load usage counts from {self.path}: {e}")
            return {}

    def increment(self, template_id: str) -> int:
        # Counter update and file write happen under one lock so writes stay ordered
        with self._lock:
            self._counts[template_id] = self._counts.get(template_id, 0) + 1
            count = self._counts[template_id]
            self._save(dict(self._counts))
        return count

    def _save(self, counts: dict[str, int]) -> None:
        """Write counters to a temp file and swap it into place."""
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w") as f:
                json.dump(counts, f, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.error(f"Failed to save usage counts to {self.path}: {e}")
            raise
