"""A callable holder that may be empty, with an explicit invoke step."""

from __future__ import annotations

from typing import Any, Callable, Optional, Union


class EmptyDelegateError(RuntimeError):
    """Raised when an empty delegate is invoked."""


class Delegate:
    """Wraps a callable, or nothing at all.

    A delegate is true when it holds a callable. Invoking an empty delegate
    raises :class:`EmptyDelegateError`.
    """

    __slots__ = ("_fn",)

    def __init__(self, fn: Union[Callable[..., Any], "Delegate", None] = None) -> None:
        if isinstance(fn, Delegate):
            fn = fn._fn
        if fn is not None and not callable(fn):
            raise TypeError(f"{fn!r} is not callable")
        self._fn: Optional[Callable[..., Any]] = fn

    def invoke(self, *args: Any) -> Any:
        """Call the held callable with ``args`` and return its result."""
        if self._fn is None:
            raise EmptyDelegateError("delegate holds no callable")
        return self._fn(*args)

    def __call__(self, *args: Any) -> Any:
        return self.invoke(*args)

    def __bool__(self) -> bool:
        return self._fn is not None

    def clear(self) -> None:
        """Drop the held callable."""
        self._fn = None

    def __repr__(self) -> str:
        return f"Delegate({self._fn!r})"