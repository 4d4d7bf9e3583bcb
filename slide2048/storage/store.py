"""
Key-value string stores.

``JsonFileStore`` keeps a flat JSON object of strings on disk and plays the part of the browser's local
storage for the desktop game. ``MemoryStore`` is used when nothing should touch the disk.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class StorageError(OSError):
    """Raised when a store cannot be read or written."""


class KeyValueStore(Protocol):
    """Minimal string store."""

    def get(self, key: str) -> str | None:
        """Return the value stored under ``key``, or None."""

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``."""


class MemoryStore:
    """Store living in a dictionary."""

    def __init__(self, values: dict[str, str] | None = None):
        self._values: dict[str, str] = dict(values or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = str(value)


class JsonFileStore:
    """
    Store persisted as a JSON object in a file.

    Parameters
    ----------
    path : Path or str
        Location of the JSON file. It is created on the first write.

    Notes
    -----
    - The file is read lazily on first access and cached.
    - Every write rewrites the whole file through a temporary file, so a crash never leaves half a file.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self._values: dict[str, str] | None = None

    def _load(self) -> dict[str, str]:
        if self._values is not None:
            return self._values

        if not self.path.exists():
            self._values = {}
            return self._values

        try:
            with self.path.open('r', encoding='utf-8') as handle:
                content = json.load(handle)
        except (OSError, ValueError) as error:
            raise StorageError(f'Cannot read store {self.path}: {error}') from error

        if not isinstance(content, dict):
            raise StorageError(f'Store {self.path} does not hold a JSON object')

        self._values = {str(key): str(value) for key, value in content.items()}
        logger.debug('Loaded %d keys from %s', len(self._values), self.path)
        return self._values

    def get(self, key: str) -> str | None:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        values = dict(self._load())
        values[key] = str(value)

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            descriptor, temporary = tempfile.mkstemp(dir=self.path.parent, prefix=f'.{self.path.name}.')
            try:
                with os.fdopen(descriptor, 'w', encoding='utf-8') as handle:
                    json.dump(values, handle, indent=2, sort_keys=True)
                os.replace(temporary, self.path)
            except BaseException:
                Path(temporary).unlink(missing_ok=True)
                raise
        except OSError as error:
            raise StorageError(f'Cannot write store {self.path}: {error}') from error

        self._values = values
