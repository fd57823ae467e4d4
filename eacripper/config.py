"""Application settings stored as ``name=value`` lines in a UTF-16 file."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Optional, Union

CONF_FILE_NAME = "EACRipper.conf"

_BOM = "\ufeff"
_ENCODING = "utf-16-le"
_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_HEX_DIGITS = "0123456789ABCDEF"


def _hex_digit(ch: str) -> int:
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "A" <= ch <= "F":
        return ord(ch) - ord("A") + 10
    if "a" <= ch <= "f":
        return ord(ch) - ord("a") + 10
    return 0xFF


def _check_int64(value: int) -> int:
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"{value} does not fit in a signed 64-bit integer")
    return value


class Configure:
    """A settings map loaded from ``path`` and written back when changed."""

    def __init__(self, path: Union[str, os.PathLike, None] = None) -> None:
        self.path = Path(path) if path is not None else Path.cwd() / CONF_FILE_NAME
        self._values: dict[str, str] = {}
        self._changed = False
        self.load()

    @property
    def changed(self) -> bool:
        """Whether there are changes not yet written."""
        return self._changed

    def load(self) -> None:
        """Merge the settings in the file into this map; a missing file is ignored."""
        try:
            raw = self.path.read_bytes()
        except OSError:
            return
        raw = raw[: len(raw) - len(raw) % 2]
        text = raw.decode(_ENCODING, errors="replace").split("\0", 1)[0]
        if text.startswith(_BOM):
            text = text[1:]
        for line in text.split("\n"):
            name, sep, value = line.partition("=")
            if not sep:
                continue
            self.set(name.strip(), value.strip(), False)

    def save(self) -> bool:
        """Write the settings if they changed; return True when the file was written."""
        if not self._changed:
            return False
        body = _BOM + "".join(
            f"{name}={value}\n" for name, value in sorted(self._values.items())
        )
        self.path.write_bytes(body.encode(_ENCODING, errors="surrogatepass"))
        self._changed = False
        return True

    def exists(self, name: str) -> bool:
        return name in self._values

    def get(self, name: str, default: str = "") -> str:
        return self._values.get(name, default)

    def get_int(self, name: str, default: int = 0) -> int:
        """The value of ``name`` as a signed 64-bit integer, or ``default`` if unset."""
        value = self._values.get(name)
        if value is None:
            return default
        if not _INT_RE.fullmatch(value):
            raise ValueError(f"setting {name!r} is not an integer: {value!r}")
        return _check_int64(int(value))

    def get_binary(self, name: str) -> bytes:
        """Decode the value of ``name`` from pairs of hexadecimal digits."""
        text = self.get(name)
        return bytes(
            ((_hex_digit(hi) << 4) | _hex_digit(lo)) & 0xFF
            for hi, lo in zip(text[0::2], text[1::2])
        )

    def set(self, name: str, value: str, mark_changed: bool = True) -> None:
        """Store ``value``; the changed flag becomes ``mark_changed``."""
        self._values[name] = value
        self._changed = mark_changed

    def set_int(self, name: str, value: int, mark_changed: bool = True) -> None:
        self.set(name, str(_check_int64(int(value))), mark_changed)

    def set_binary(self, name: str, data: bytes) -> None:
        """Store ``data`` as upper-case hexadecimal digits."""
        self.set(
            name,
            "".join(_HEX_DIGITS[b >> 4] + _HEX_DIGITS[b & 0x0F] for b in bytes(data)),
        )

    def remove(self, name: str) -> None:
        if self._values.pop(name, None) is not None:
            self._changed = True

    def __enter__(self) -> "Configure":
        return self

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        self.save()
        return None