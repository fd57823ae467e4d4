# eacripper

Building blocks shared by a CD ripping application and its plug-in
components. It is a library with no user interface.

## Modules

- `eacripper.identifiers`: `ERUUID`, a 16-byte service identifier.
  `ERUUID.parse(text)` reads hex digits and skips everything else,
  `ERUUID.from_fields(val1, val2, val3, val4, node)` builds one from its
  fields, and `to_string()` gives the upper-case
  `XXXXXXXX-XXXX-XXXX-XXXX-XXXXXXXXXXXX` form. `packed()` returns the data as
  two 64-bit integers, and ordering compares those. The module also holds the
  service identifiers `LOCAL_FILE`, `LOCAL_DIRECTORY`,
  `STRING_CODEPAGE_CONVERTER`, `STRING_CHARSET_CONVERTER` and
  `CHARSET_DETECTOR`.
- `eacripper.component`: `Allocator` makes objects with a factory and counts
  the ones not yet freed. `ComponentInfo` holds a component's name, version,
  SDK version (`SDK_VERSION`, `"2.0.0"`) and debug flag.
- `eacripper.delegate`: `Delegate` is a callable holder that can be empty.
  Invoking an empty one raises `EmptyDelegateError`.
- `eacripper.events`: `EventDispatcher` keeps named listeners. It runs them in
  the order they were added and stops at the first one that returns a false
  value. `WindowEventArgs` carries the message data.
- `eacripper.config`: `Configure` is a `name=value` settings file, stored as
  UTF-16LE with a byte order mark. It defaults to `EACRipper.conf` in the
  current directory. It supports signed 64-bit integers (`get_int`, `set_int`)
  and hex-encoded binary values (`get_binary`, `set_binary`). `save()` writes
  the file only when something has changed, and leaving a `with` block calls
  `save()`.
- `eacripper.filters`: `FileDialogFilter` is an ordered list of
  `(description, pattern)` pairs. `cd_filter()` gives the pairs, and
  `ofn_filter()` gives one NUL-separated string.
- `eacripper.coders`: `CoderManager`, `ArchiveCoderManager` and
  `MusicCoderManager`. Music coders are keyed by `(name, CoderType)` and can be
  looked up by extension (`coder_by_extension`) or MIME type (`coder_by_mime`).
  An in-cue decoder is also registered as a plain decoder.
- `eacripper.charsets`: `CharsetConverter` works with a named character set.
  It replaces text it cannot encode and drops a leading byte order mark when
  decoding. `CodepageConverter` works with a Windows code page number: 0 means
  the locale's encoding and 65001 means UTF-8. `CharsetDetector` recognises
  UTF-16 byte order marks and otherwise guesses with charset-normalizer.
  `available_charsets()` lists the text codecs on the system.
  `charset_choices()` lists `"Auto-detect"`, the common sets, and then the
  rest in sorted order.
- `eacripper.files`: `LocalFile` reads a file's attributes when it is opened
  and gives binary streams for reading or writing. `LocalDirectory` opens a
  directory (creating it with `make=True`, otherwise raising
  `FileNotFoundError`) and gives a `LocalFile` for a path inside it.
- `eacripper.application`: `Application.get_service(uuid)` hands out
  converters, files and directories, and keeps the objects it creates in a
  `ServicePointerManager` until `remove_service` is called. The charset
  detector is shared. An unknown UUID raises `UnknownServiceError`. The
  decoder and encoder registers are attributes of the application, not
  services looked up by UUID. `ServiceFactory` is a context manager that gets a
  service and releases it when the block ends.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from eacripper.identifiers import ERUUID

uuid = ERUUID.parse("0C2AD544-B29B-4744-9286-A4822686985E")
print(uuid.to_string())   # 0C2AD544-B29B-4744-9286-A4822686985E
```

```python
from eacripper.config import Configure

with Configure("EACRipper.conf") as conf:
    conf.set_int("LastTrack", 3)
    conf.set_binary("WindowPlacement", b"\x01\xab")
    print(conf.get("Missing", "default"))
```

```python
from eacripper.charsets import CharsetDetector, charset_choices

converter = CharsetDetector().detect(b"\xff\xfeA\x00B\x00")
print(converter.decode(b"\xff\xfeA\x00B\x00"))   # AB
print(charset_choices()[:3])   # ['Auto-detect', 'UTF-8', 'Shift_JIS']
```

```python
from eacripper.application import Application, ServiceFactory
from eacripper.identifiers import STRING_CHARSET_CONVERTER

app = Application()
with ServiceFactory(app, STRING_CHARSET_CONVERTER) as conv:
    print(conv.encode("abc"))   # b'abc'
```

## What it does not do

The package has no windows, dialogs or command-line program. It does not read
or write audio, rip discs, or load component libraries from disk. Components
are registered as Python objects through `Allocator` and the register classes.
Decoding and encoding music is left to the coders that are registered.