"""File-backed profile store."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from diet_planner.services.profiles import ProfileStore

_logger = logging.getLogger(__name__)


@dataclass
class JsonFileProfileStore(ProfileStore):
    """Keeps the current profile as one JSON document on disk."""

    path: Path

    def load(self) -> dict[str, object] | None:
        """Read the stored profile; unreadable files count as empty."""
        if not self.path.exists():
            return None
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            _logger.warning("Failed to parse stored profile at %s", self.path)
            return None
        if not isinstance(payload, dict):
            return None
        return payload

    def save(self, payload: dict[str, object]) -> None:
        """Write the profile atomically."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
        tmp_path.replace(self.path)

    def clear(self) -> None:
        """Delete the profile file."""
        self.path.unlink(missing_ok=True)
