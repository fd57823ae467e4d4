"""Local files and directories as components see them."""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import BinaryIO, Optional, Union

PathLike = Union[str, os.PathLike]


def _require_open(path: Optional[Path], what: str) -> Path:
    if path is None:
        raise ValueError(f"no {what} is open")
    return path


class LocalFile:
    """A file on the local file system.

    Its attributes are read once, when it is opened.
    """

    def __init__(self) -> None:
        self._path: Optional[Path] = None
        self._stat: Optional[os.stat_result] = None

    @property
    def path(self) -> Optional[Path]:
        return self._path

    def open(self, path: PathLike) -> bool:
        """Point at ``path``; the file need not exist."""
        self._path = Path(path)
        try:
            self._stat = self._path.stat()
        except OSError:
            self._stat = None
        return True

    def close(self) -> bool:
        self._path = None
        self._stat = None
        return True

    def _is_dir(self) -> bool:
        return self._stat is not None and stat.S_ISDIR(self._stat.st_mode)

    def exists(self) -> bool:
        return self._stat is not None

    def can_read(self) -> bool:
        """True for an existing entry that is not a directory."""
        return self._stat is not None and not self._is_dir()

    def can_write(self) -> bool:
        """True for an existing entry that is neither a directory nor read-only."""
        if self._stat is None or self._is_dir():
            return False
        return bool(self._stat.st_mode & stat.S_IWUSR)

    def stream_reader(self, make: bool = False) -> BinaryIO:
        """Open the file for reading; with ``make`` a missing file is created first."""
        path = _require_open(self._path, "file")
        if make:
            path.touch(exist_ok=True)
        return path.open("rb")

    def stream_writer(self, truncate: bool = True) -> BinaryIO:
        """Open the file for writing, emptying it or appending to it."""
        path = _require_open(self._path, "file")
        return path.open("wb" if truncate else "ab")

    def __enter__(self) -> "LocalFile":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class LocalDirectory:
    """A directory on the local file system that hands out the files in it."""

    def __init__(self) -> None:
        self._path: Optional[Path] = None

    @property
    def path(self) -> Optional[Path]:
        return self._path

    def open(self, path: PathLike, make: bool = False) -> bool:
        """Point at ``path``; a missing directory is created with ``make``, else an error."""
        text = os.fspath(path)
        target = Path(text)
        if not os.path.exists(text):
            if not make:
                raise FileNotFoundError(f"directory does not exist: {text}")
            target.mkdir(parents=True, exist_ok=True)
        if text and text[-1] in "/\\":
            text = text[:-1]
        self._path = Path(text) if text else target
        return True

    def close(self) -> bool:
        self._path = None
        return True

    def get_file(self, relative_path: PathLike) -> LocalFile:
        """A :class:`LocalFile` for ``relative_path`` inside this directory."""
        path = _require_open(self._path, "directory")
        local = LocalFile()
        local.open(path / relative_path)
        return local

    def __enter__(self) -> "LocalDirectory":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()