from __future__ import annotations

import os
from typing import Dict, List

from .constants import STAGE_MARK
from .errors import FileWriteError, StageError


def stage_name(part: str, depth: int) -> str:
    """Bracket ``part`` with ``depth`` stage markers on each side: ``_p_``, ``__p__``..."""
    mark = STAGE_MARK * depth
    return f"{mark}{os.path.basename(part)}{mark}"


class MemoryStage:
    """Holds intermediate per-entry buffers in memory, keyed by stage name."""

    def __init__(self):
        self._buffers: Dict[str, bytearray] = {}

    def put(self, name: str, data: bytes) -> str:
        self._buffers[name] = bytearray(data)
        return name

    def read(self, name: str) -> bytes:
        try:
            return bytes(self._buffers[name])
        except KeyError:
            raise StageError(f"No staged buffer named {name!r}") from None

    def take(self, name: str) -> bytes:
        try:
            return bytes(self._buffers.pop(name))
        except KeyError:
            raise StageError(f"No staged buffer named {name!r}") from None

    def patch(self, name: str, offset: int, data: bytes) -> None:
        buf = self._buffers.get(name)
        if buf is None:
            raise StageError(f"No staged buffer named {name!r}")
        buf[offset:offset + len(data)] = data

    def remove(self, name: str) -> None:
        if self._buffers.pop(name, None) is None:
            raise StageError(f"No staged buffer named {name!r}")

    def names(self) -> List[str]:
        return list(self._buffers)

    def discard(self) -> None:
        self._buffers.clear()


class DiskStage:
    """Spools intermediate buffers to files under ``root``.

    Every handle is closed before the file it refers to is removed.
    """

    def __init__(self, root: str):
        self.root = root
        self._names: List[str] = []

    def _path(self, name: str) -> str:
        return os.path.join(self.root, name)

    def put(self, name: str, data: bytes) -> str:
        try:
            with open(self._path(name), "wb") as fh:
                fh.write(data)
        except OSError as exc:
            raise FileWriteError(f"Cannot write stage file {self._path(name)}: {exc}") from exc
        if name not in self._names:
            self._names.append(name)
        return name

    def read(self, name: str) -> bytes:
        try:
            with open(self._path(name), "rb") as fh:
                return fh.read()
        except FileNotFoundError:
            raise StageError(f"No staged file named {name!r}") from None
        except OSError as exc:
            raise FileWriteError(f"Cannot read stage file {self._path(name)}: {exc}") from exc

    def take(self, name: str) -> bytes:
        data = self.read(name)
        self.remove(name)
        return data

    def patch(self, name: str, offset: int, data: bytes) -> None:
        try:
            with open(self._path(name), "r+b") as fh:
                fh.seek(offset)
                fh.write(data)
        except FileNotFoundError:
            raise StageError(f"No staged file named {name!r}") from None
        except OSError as exc:
            raise FileWriteError(f"Cannot patch stage file {self._path(name)}: {exc}") from exc

    def remove(self, name: str) -> None:
        try:
            os.remove(self._path(name))
        except FileNotFoundError:
            raise StageError(f"No staged file named {name!r}") from None
        except OSError as exc:
            raise FileWriteError(f"Cannot remove stage file {self._path(name)}: {exc}") from exc
        if name in self._names:
            self._names.remove(name)

    def names(self) -> List[str]:
        return list(self._names)

