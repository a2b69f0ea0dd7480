"""Preference stores: string key-value storage persisted between sessions."""

from __future__ import annotations

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class PreferenceStoreError(Exception):
    """Raised when the backing file of a preference store is unusable."""

    def __init__(self, message: str, path: Path) -> None:
        self.path = path
        super().__init__(message)


class InMemoryPreferenceStore:
    """Preference store backed by a dict. Nothing survives the process."""

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(values or {})

    def has_key(self, key: str) -> bool:
        return key in self._values

    def get_string(self, key: str, default: str | None = None) -> str | None:
        return self._values.get(key, default)

    def set_string(self, key: str, value: str) -> None:
        self._values[key] = value

    def delete_key(self, key: str) -> None:
        self._values.pop(key, None)


class JsonFilePreferenceStore:
    """Preference store kept as a JSON object in a file.

    The file (and its parent directory) is created on the first write.
    Every read goes back to disk so separate processes see each other's
    writes.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise PreferenceStoreError(
                f"Preference file is not valid JSON: {self.path} "
                f"(line {e.lineno}, column {e.colno}): {e.msg}",
                self.path,
            )
        except OSError as e:
            raise PreferenceStoreError(
                f"Error reading preference file {self.path}: {e}", self.path
            )
        if not isinstance(data, dict):
            raise PreferenceStoreError(
                f"Preference file must contain a JSON object: {self.path}", self.path
            )
        return data

    def _write(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")
        logger.debug(f"Wrote {len(data)} preference(s) to {self.path}")

    def has_key(self, key: str) -> bool:
        return key in self._read()

    def get_string(self, key: str, default: str | None = None) -> str | None:
        value = self._read().get(key, default)
        if value is not None and not isinstance(value, str):
            raise PreferenceStoreError(
                f"Preference '{key}' in {self.path} is not a string", self.path
            )
        return value

    def set_string(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def delete_key(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)
