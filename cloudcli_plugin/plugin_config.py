"""Plugin-specific configuration stored beside the plugin install."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from cloudcli_core.fileio import write_json_atomic

from .errors import PluginConfigError, PluginConfigInvalidDataError

logger = logging.getLogger(__name__)

_MISSING = object()


class PluginConfig:
    """Key/value document read lazily from a JSON file.

    Construction never touches the file system; the document is read on the
    first access and every ``set``/``erase`` writes it back.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._data: dict[str, Any] | None = None

    def _document(self) -> dict[str, Any]:
        if self._data is None:
            self._data = self._read()
        return self._data

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise PluginConfigError(f"unable to read plugin config at {self.path}") from exc
        if not raw.strip():
            return {}
        try:
            document = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise PluginConfigError(f"plugin config at {self.path} is not valid JSON") from exc
        if not isinstance(document, dict):
            raise PluginConfigError(f"plugin config at {self.path} must be a JSON object")
        logger.debug("loaded plugin config from %s", self.path)
        return document

    def _write(self) -> None:
        try:
            write_json_atomic(self.path, self._document(), prefix=".plugin-config-")
        except (OSError, TypeError, ValueError) as exc:
            raise PluginConfigError(f"unable to write plugin config at {self.path}") from exc

    # ---------- Public API ----------

    def keys(self) -> list[str]:
        return sorted(self._document())

    def exists(self, key: str) -> bool:
        return key in self._document()

    def get(self, key: str) -> Any | None:
        return self._document().get(key)

    def get_with_default(self, key: str, default: Any) -> Any:
        return self._document().get(key, default)

    def set(self, key: str, value: Any) -> None:
        document = self._document()
        previous = document.get(key, _MISSING)
        document[key] = value
        try:
            self._write()
        except PluginConfigError:
            if previous is _MISSING:
                del document[key]
            else:
                document[key] = previous
            raise

    def erase(self, key: str) -> None:
        document = self._document()
        if key not in document:
            return
        previous = document.pop(key)
        try:
            self._write()
        except PluginConfigError:
            document[key] = previous
            raise

    def get_string(self, key: str, default: str = "") -> str:
        return self._typed(key, default, str, "str")

    def get_bool(self, key: str, default: bool = False) -> bool:
        return self._typed(key, default, bool, "bool")

    def get_int(self, key: str, default: int = 0) -> int:
        value = self._document().get(key, _MISSING)
        if value is _MISSING:
            return default
        if isinstance(value, bool):
            raise PluginConfigInvalidDataError(key, "int", value)
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        raise PluginConfigInvalidDataError(key, "int", value)

    def get_float(self, key: str, default: float = 0.0) -> float:
        value = self._document().get(key, _MISSING)
        if value is _MISSING:
            return default
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
        raise PluginConfigInvalidDataError(key, "float", value)

    def get_string_list(self, key: str, default: list[str] | None = None) -> list[str]:
        value = self._document().get(key, _MISSING)
        if value is _MISSING:
            return list(default or [])
        if isinstance(value, list) and all(isinstance(item, str) for item in value):
            return list(value)
        raise PluginConfigInvalidDataError(key, "list[str]", value)

    def get_string_map(self, key: str, default: dict[str, str] | None = None) -> dict[str, str]:
        value = self._document().get(key, _MISSING)
        if value is _MISSING:
            return dict(default or {})
        if isinstance(value, dict) and all(isinstance(item, str) for item in value.values()):
            return dict(value)
        raise PluginConfigInvalidDataError(key, "dict[str, str]", value)

    def _typed(self, key: str, default: Any, expected: type, label: str) -> Any:
        value = self._document().get(key, _MISSING)
        if value is _MISSING:
            return default
        if not isinstance(value, expected):
            raise PluginConfigInvalidDataError(key, label, value)
        return value
