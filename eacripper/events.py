"""Named event listeners attached to a window-like object."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable, Union

from .delegate import Delegate


@dataclass
class WindowEventArgs:
    """What a listener is told about a window message."""

    window: Any = None
    window_handle: Any = None
    message: int = 0
    w_param: int = 0
    l_param: int = 0


Listener = Union[Callable[[WindowEventArgs], bool], Delegate]


class EventDispatcher:
    """Keeps listeners by event name and runs them in the order they were added."""

    def __init__(self) -> None:
        self._events: defaultdict[str, list[Delegate]] = defaultdict(list)

    def add_event_listener(self, name: str, listener: Listener) -> bool:
        """Append ``listener`` to the listeners of ``name``."""
        self._events[name].append(Delegate(listener))
        return True

    def run_event_listener(self, name: str, args: WindowEventArgs) -> bool:
        """Run the listeners of ``name``; stop and return False at the first falsy result."""
        for listener in self._events.get(name, ()):
            if not listener.invoke(args):
                return False
        return True

    def invoke(self, fn: Union[Callable[[], Any], Delegate]) -> Any:
        """Run ``fn`` at once and return its result."""
        return Delegate(fn).invoke()