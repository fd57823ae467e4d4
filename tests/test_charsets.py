import pytest

from eacripper.charsets import (
    AUTO_DETECT,
    CharsetConverter,
    CharsetDetector,
    CodepageConverter,
    available_charsets,
    charset_choices,
)


def test_default_charset_is_utf8():
    assert CharsetConverter().charset == "UTF-8"


def test_lengths_match_documented_examples():
    cv = CharsetConverter("UTF-8")
    assert cv.converted_length_to_utf16(b"ABCD") == 4
    assert cv.converted_length_from_utf16("\uac00\uac01") == 6


def test_round_trip_utf8():
    cv = CharsetConverter("UTF-8")
    text = "가나다 abc"
    assert cv.decode(cv.encode(text)) == text


def test_decode_strips_bom():
    assert CharsetConverter("UTF-8").decode(b"\xef\xbb\xbfabc") == "abc"


def test_unencodable_becomes_question_mark():
    assert CharsetConverter("US-ASCII").encode("a\uac00") == b"a?"


def test_unknown_charset_raises_and_keeps_old():
    cv = CharsetConverter("UTF-8")
    with pytest.raises(LookupError):
        cv.charset = "no-such-charset"
    assert cv.charset == "UTF-8"
    with pytest.raises(LookupError):
        CharsetConverter("no-such-charset")


def test_non_text_codec_rejected():
    with pytest.raises(LookupError):
        CharsetConverter("base64")


def test_codepage_converter():
    assert CodepageConverter(1252).encode("\xe9") == b"\xe9"
    cv = CodepageConverter(65001)
    assert cv.decode("\xe9".encode("utf-8")) == "\xe9"
    assert cv.codepage == 65001


def test_codepage_invalid_raises():
    with pytest.raises(LookupError):
        CodepageConverter(99999)


def test_detect_utf16_boms():
    d = CharsetDetector()
    le = d.detect(b"\xff\xfea\x00")
    be = d.detect(b"\xfe\xff\x00a")
    assert le.charset == "UTF-16LE"
    assert le.decode(b"\xff\xfea\x00") == "a"
    assert be.charset == "UTF-16BE"
    assert be.decode(b"\xfe\xff\x00a") == "a"


def test_detect_plain_text_round_trips():
    data = b"hello world, this is plain text"
    cv = CharsetDetector().detect(data)
    assert cv.decode(data) == data.decode("ascii")


def test_charset_choices_order_and_uniqueness():
    choices = charset_choices()
    assert choices[:7] == [
        AUTO_DETECT, "UTF-8", "Shift_JIS", "ISO-8859-1", "UTF-16", "UTF-16LE", "UTF-16BE",
    ]
    assert "utf-8" not in choices
    assert len(choices) == len(set(choices))
    assert choices[7:] == sorted(choices[7:])


def test_available_charsets_are_usable():
    names = available_charsets()
    assert names == sorted(names)
    for name in names[:20]:
        assert CharsetConverter(name).decode(b"a") == "a" or name.startswith("utf")