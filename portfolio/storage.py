# portfolio/storage.py
import logging
import threading
from pathlib import Path
from typing import Dict, Optional, Union

from typing_extensions import Protocol


logger = logging.getLogger(__name__)


class BlobStore(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class MemoryBlobStore:
    """Key/value blob store kept in a dict. Used by tests and ephemeral runs."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def keys(self):
        return list(self._data)


class JsonFileBlobStore:
    """Blob store writing one ``<key>.json`` file per key.

    Reads and writes are synchronised with a ``threading.Lock`` since the
    HTTP server may call into the store from worker threads. The
    directory is created on the first write. I/O errors propagate to the
    caller.
    """

    def __init__(self, directory: Union[str, Path]) -> None:
        self.directory = Path(directory)
        self._lock = threading.Lock()

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        with self._lock:
            if not path.exists():
                return None
            with path.open("r", encoding="utf-8") as f:
                return f.read()

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        with self._lock:
            self.directory.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8") as f:
                f.write(value)
        logger.debug("Wrote %d bytes to %s", len(value), path)
