"""Conversion between byte strings and text, and character set detection."""

from __future__ import annotations

import codecs
import locale
from encodings.aliases import aliases
from functools import lru_cache
from typing import Optional

from charset_normalizer import from_bytes

_BOM = "\ufeff"
CP_ACP = 0

_PREFERRED = ("UTF-8", "Shift_JIS", "ISO-8859-1", "UTF-16", "UTF-16LE", "UTF-16BE")
AUTO_DETECT = "Auto-detect"


def _utf16_units(text: str) -> int:
    return len(text.encode("utf-16-le", errors="surrogatepass")) // 2


def _codepage_encoding(codepage: int) -> str:
    if codepage == CP_ACP:
        name = locale.getpreferredencoding(False)
    elif codepage == 65001:
        name = "utf-8"
    else:
        name = f"cp{codepage}"
    return codecs.lookup(name).name


def _text_codec(name: str) -> str:
    """Canonical name of a text codec; LookupError if there is none."""
    info = codecs.lookup(name)
    if not getattr(info, "_is_text_encoding", True):
        raise LookupError(f"{name!r} is not a text encoding")
    return info.name


def _decode(encoding: str, data: bytes) -> str:
    return bytes(data).decode(encoding, errors="replace")


def _encode(encoding: str, text: str) -> bytes:
    return text.encode(encoding, errors="replace")


class CodepageConverter:
    """Converts text through a Windows code page number; 0 is the system default."""

    def __init__(self, codepage: int = CP_ACP) -> None:
        self.codepage = codepage

    @property
    def codepage(self) -> int:
        return self._codepage

    @codepage.setter
    def codepage(self, value: int) -> None:
        self._encoding = _codepage_encoding(int(value))
        self._codepage = int(value)

    def converted_length_to_utf16(self, data: bytes) -> int:
        """Number of UTF-16 code units ``data`` decodes to."""
        return _utf16_units(self.decode(data))

    def converted_length_from_utf16(self, text: str) -> int:
        """Number of bytes ``text`` encodes to."""
        return len(self.encode(text))

    def decode(self, data: bytes) -> str:
        return _decode(self._encoding, data)

    def encode(self, text: str) -> bytes:
        return _encode(self._encoding, text)

    def __repr__(self) -> str:
        return f"CodepageConverter({self._codepage!r})"


class CharsetConverter:
    """Converts text through a named character set; unencodable text becomes ``?``."""

    def __init__(self, charset: str = "UTF-8") -> None:
        self.charset = charset

    @property
    def charset(self) -> str:
        return self._charset

    @charset.setter
    def charset(self, value: str) -> None:
        self._encoding = _text_codec(value)
        self._charset = value

    def converted_length_to_utf16(self, data: bytes) -> int:
        """Number of UTF-16 code units ``data`` decodes to."""
        return _utf16_units(_decode(self._encoding, data))

    def converted_length_from_utf16(self, text: str) -> int:
        """Number of bytes ``text`` encodes to."""
        return len(self.encode(text))

    def decode(self, data: bytes) -> str:
        """Decode ``data``, dropping a leading byte order mark."""
        text = _decode(self._encoding, data)
        return text[1:] if text.startswith(_BOM) else text

    def encode(self, text: str) -> bytes:
        return _encode(self._encoding, text)

    def __repr__(self) -> str:
        return f"CharsetConverter({self._charset!r})"


class CharsetDetector:
    """Guesses the character set of a byte string."""

    def detect(self, data: bytes) -> Optional[CharsetConverter]:
        """A converter for the guessed character set, or None if none is found."""
        data = bytes(data)
        if data[:2] == b"\xff\xfe":
            name = "UTF-16LE"
        elif data[:2] == b"\xfe\xff":
            name = "UTF-16BE"
        else:
            best = from_bytes(data.split(b"\0", 1)[0]).best()
            if best is None:
                return None
            name = best.encoding
        try:
            return CharsetConverter(name)
        except LookupError:
            return None


@lru_cache(maxsize=None)
def _charset_list() -> tuple[str, ...]:
    names = set()
    for alias in set(aliases.values()):
        try:
            name = _text_codec(alias)
            "a".encode(name)
        except (LookupError, UnicodeError, TypeError, ValueError):
            continue
        names.add(name)
    return tuple(sorted(names))


def available_charsets() -> list[str]:
    """Names of the text character sets this system can convert."""
    return list(_charset_list())


def charset_choices() -> list[str]:
    """Choices for an encoding picker: auto-detect, common sets, then the rest sorted."""
    preferred = {_text_codec(name) for name in _PREFERRED}
    rest = [name for name in _charset_list() if name not in preferred]
    return [AUTO_DETECT, *_PREFERRED, *rest]