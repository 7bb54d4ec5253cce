"""
Storage backends holding the raw user document.

A backend only moves text; parsing and validation live in ``UserStore``.
"""
import logging
import os
import stat
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from userpanel.core.errors import StoreReadError, StoreWriteError

logger = logging.getLogger(__name__)


class StorageBackend(ABC):
    """Interface for reading and replacing the whole user document."""

    @abstractmethod
    def read(self) -> Optional[str]:
        """Return the document text, or None if it does not exist yet."""

    @abstractmethod
    def write(self, data: str) -> None:
        """Replace the whole document with ``data``."""


class JsonFileBackend(StorageBackend):
    """
    Document stored as a file on disk.

    Writes go to a temporary file in the same directory which is then
    renamed over the target, so a reader sees either the old or the new
    document, never a partial one.

    The replacement keeps the permissions of the file it replaces; a new
    document gets ``DEFAULT_MODE``.
    """

    DEFAULT_MODE = 0o644

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def read(self) -> Optional[str]:
        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StoreReadError(f"Cannot read {self.path}: {e}") from e

    def write(self, data: str) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=self.path.parent,
                prefix=f".{self.path.stem}_",
                suffix=".tmp",
            )
        except OSError as e:
            raise StoreWriteError(f"Cannot write {self.path}: {e}") from e

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(data)
                fh.flush()
                os.fsync(fh.fileno())
            os.chmod(tmp_path, self._target_mode())
            os.replace(tmp_path, self.path)
        except OSError as e:
            try:
                os.unlink(tmp_path)
            except OSError:
                logger.debug("Temporary file %s already gone", tmp_path)
            raise StoreWriteError(f"Cannot write {self.path}: {e}") from e

    def _target_mode(self) -> int:
        try:
            return stat.S_IMODE(self.path.stat().st_mode)
        except FileNotFoundError:
            return self.DEFAULT_MODE

    def __repr__(self) -> str:
        return f"JsonFileBackend({str(self.path)!r})"


class MemoryBackend(StorageBackend):
    """Document kept in memory, for tests and throwaway runs."""

    def __init__(self, initial: Optional[str] = None):
        self.data = initial

    def read(self) -> Optional[str]:
        return self.data

    def write(self, data: str) -> None:
        self.data = data
