from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class Store:
    """
    Persistence port: whole-value load/store keyed by collection name.
    No partial updates, no locking; the last store() for a collection wins.
    """
    def load(self, collection: str, default: Any) -> Any:
        raise NotImplementedError

    def store(self, collection: str, value: Any) -> None:
        raise NotImplementedError


@dataclass
class JsonFileStore(Store):
    """
    One JSON file per collection under data_dir (<data_dir>/<collection>.json).
    Each store() overwrites the entire file.
    """
    data_dir: Path

    def path_for(self, collection: str) -> Path:
        return self.data_dir / f"{collection}.json"

    def load(self, collection: str, default: Any) -> Any:
        path = self.path_for(collection)
        if not path.exists():
            return default
        try:
            with path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError):
            logger.warning("Could not read %s, using default", path, exc_info=True)
            return default

    def store(self, collection: str, value: Any) -> None:
        path = self.path_for(collection)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(value, indent=2), encoding="utf-8")
        except (OSError, TypeError, ValueError):
            # In-memory state stays authoritative; the file catches up on the next write.
            logger.exception("Failed to write %s", path)
