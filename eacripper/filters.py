"""File-type filters for open and save dialogs."""

from __future__ import annotations

from typing import Iterable, Optional


class FileDialogFilter:
    """An ordered list of ``(description, pattern)`` pairs."""

    def __init__(self, entries: Optional[Iterable[tuple[str, str]]] = None) -> None:
        self._entries: list[tuple[str, str]] = [
            (name, ext) for name, ext in (entries or ())
        ]

    @property
    def entries(self) -> list[tuple[str, str]]:
        """A copy of the pairs held."""
        return list(self._entries)

    def add(self, name: str, ext: str) -> bool:
        """Append one filter."""
        self._entries.append((name, ext))
        return True

    def extend(self, entries: Iterable[tuple[str, str]]) -> bool:
        """Append several filters in order."""
        self._entries.extend((name, ext) for name, ext in entries)
        return True

    def cd_filter(self) -> list[tuple[str, str]]:
        """The filters as ``(name, spec)`` pairs, as a common file dialog takes them."""
        return list(self._entries)

    def ofn_filter(self) -> str:
        """The filters as one NUL-separated string, ended by three extra NULs."""
        parts = "".join(f"{name} ({ext})\0{ext}\0" for name, ext in self._entries)
        return parts + "\0" * 3

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(list(self._entries))