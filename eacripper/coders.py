"""Registries of the archive and music coders that components provide."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Generic, Hashable, Optional, TypeVar

K = TypeVar("K", bound=Hashable)


class CoderType(IntEnum):
    DECODER = 0
    INCUE_DECODER = 1
    ENCODER = 2


@dataclass(frozen=True)
class CoderInformation:
    """What a coder says about itself.

    For decoders ``extension`` and ``mime`` may hold several values joined
    by ``;``; for encoders each holds a single value.
    """

    name: str
    extension: str = ""
    mime: str = ""


class CoderManager(Generic[K]):
    """Maps coder keys to the allocators that create the coders."""

    def __init__(self) -> None:
        self._coders: dict[K, Any] = {}

    def coders(self) -> list[K]:
        """All registered keys in sorted order."""
        return sorted(self._coders)

    def add_coder(self, key: K, allocator: Any) -> bool:
        """Register ``allocator`` under ``key``; an existing key is kept and False returned."""
        if key in self._coders:
            return False
        self._coders[key] = allocator
        return True

    def get_coder(self, key: K) -> Optional[Any]:
        """The allocator for ``key``, or None."""
        return self._coders.get(key)


class ArchiveCoderManager(CoderManager[str]):
    """Archive extractors keyed by name."""


MusicKey = tuple[str, CoderType]


def _split(text: str) -> list[str]:
    return [part for part in text.split(";") if part]


class MusicCoderManager(CoderManager[MusicKey]):
    """Music decoders and encoders keyed by ``(name, type)``.

    Also indexes them by file extension and MIME type. Allocated coders must
    expose an ``info`` attribute holding a :class:`CoderInformation`.
    """

    def __init__(self) -> None:
        super().__init__()
        self._ext_map: dict[MusicKey, str] = {}
        self._mime_map: dict[MusicKey, str] = {}

    @staticmethod
    def _info_of(allocator: Any) -> CoderInformation:
        coder = allocator.alloc()
        try:
            return coder.info
        finally:
            allocator.free(coder)

    def add_coder(self, key: tuple[str, int], allocator: Any) -> bool:
        """Register a coder; an in-cue decoder is also registered as a plain decoder."""
        name, raw_type = key
        coder_type = CoderType(raw_type)
        if coder_type is CoderType.INCUE_DECODER:
            self.add_coder((name, CoderType.DECODER), allocator)

        info = self._info_of(allocator)
        if coder_type is CoderType.ENCODER:
            exts, mimes = [info.extension], [info.mime]
        else:
            exts, mimes = _split(info.extension), _split(info.mime)
        for ext in exts:
            self._ext_map.setdefault((ext, coder_type), name)
        for mime in mimes:
            self._mime_map.setdefault((mime, coder_type), name)

        return super().add_coder((name, coder_type), allocator)

    def coder_by_extension(self, ext: str, coder_type: int) -> str:
        """Name of the coder for ``ext``, or an empty string."""
        return self._ext_map.get((ext, CoderType(coder_type)), "")

    def coder_by_mime(self, mime: str, coder_type: int) -> str:
        """Name of the coder for ``mime``, or an empty string."""
        return self._mime_map.get((mime, CoderType(coder_type)), "")

    def extensions(self) -> list[MusicKey]:
        """Known ``(extension, type)`` pairs in sorted order."""
        return sorted(self._ext_map)

    def mimes(self) -> list[MusicKey]:
        """Known ``(mime, type)`` pairs in sorted order."""
        return sorted(self._mime_map)