"""
Client-side key/value storage for the API key.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Callable, Dict, List, Mapping, Optional

logger = logging.getLogger(__name__)

StorageListener = Callable[[str, Optional[str]], None]


class KeyStore:
    """A small JSON file of named string entries.

    Other processes (another browser tab's session, a second app instance) may
    write the same file; ``poll`` re-reads it and tells subscribers which
    entries changed.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self._listeners: List[StorageListener] = []
        self._values = self._read()

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable key store %s: %s", self.path, e)
            return {}
        if not isinstance(payload, Mapping):
            return {}
        return {str(k): v for k, v in payload.items() if isinstance(v, str)}

    def _write(self, values: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(values, indent=2), encoding="utf-8")
        self._values = dict(values)

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self._values.get(name, default)

    def set(self, name: str, value: str) -> None:
        values = self._read()
        values[name] = value
        self._write(values)

    def remove(self, name: str) -> None:
        values = self._read()
        if values.pop(name, None) is not None:
            self._write(values)
        else:
            self._values.pop(name, None)

    def subscribe(self, listener: StorageListener) -> Callable[[], None]:
        """Register a change listener; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def poll(self) -> List[str]:
        """Reload the file and notify listeners of entries changed since the last read."""
        previous = self._values
        current = self._read()
        self._values = current

        changed = sorted(
            name for name in set(previous) | set(current)
            if previous.get(name) != current.get(name)
        )
        for name in changed:
            for listener in list(self._listeners):
                listener(name, current.get(name))
        return changed
