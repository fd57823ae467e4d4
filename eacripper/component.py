"""Pieces a component uses to describe itself and to create its coder objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

SDK_VERSION = "2.0.0"

T = TypeVar("T")


class Allocator(Generic[T]):
    """Creates objects with ``factory`` and keeps track of those still in use."""

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._live: list[T] = []

    def alloc(self) -> T:
        """Create a new object."""
        obj = self._factory()
        self._live.append(obj)
        return obj

    def free(self, obj: T) -> None:
        """Release an object made by :meth:`alloc`."""
        for index, live in enumerate(self._live):
            if live is obj:
                del self._live[index]
                return
        raise ValueError("object was not allocated by this allocator")

    @property
    def live(self) -> int:
        """Number of objects allocated and not yet freed."""
        return len(self._live)


@dataclass(frozen=True)
class ComponentInfo:
    """Name, version and build details a component reports to the application."""

    name: str
    version: str
    sdk_version: str = SDK_VERSION
    debug: bool = False