# stores.py
# In-memory user configuration, kept apart from the face registry to avoid circular imports.

import threading
from typing import Any, Dict, Optional

from faces import config_key


class UserConfig:
    """Key/value store the settings panel writes and the face resolver reads."""

    def __init__(self, values: Optional[Dict[str, Any]] = None):
        self._values: Dict[str, Any] = dict(values or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            return self._values.get(key)

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._values[key] = value

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._values.pop(key, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._values.clear()

    # Convenience for face attributes
    def set_override(self, slug: str, attribute: str, value: Any) -> None:
        self.set(config_key(slug, attribute), value)

    def clear_override(self, slug: str, attribute: str) -> bool:
        return self.delete(config_key(slug, attribute))


USER_CONFIG = UserConfig()  # style_<slug>_<attribute> -> value
