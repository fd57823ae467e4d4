import pytest

from eacripper.config import CONF_FILE_NAME, Configure


def _write(path, text):
    path.write_bytes(("\ufeff" + text).encode("utf-16-le"))


def test_missing_file_is_empty(tmp_path):
    conf = Configure(tmp_path / "none.conf")
    assert conf.exists("a") is False
    assert conf.get("a", "dflt") == "dflt"
    assert conf.changed is False


def test_load_trims_and_skips(tmp_path):
    path = tmp_path / "c.conf"
    _write(path, "  alpha = one \r\nnoequals\nbeta=x=y\n")
    conf = Configure(path)
    assert conf.get("alpha") == "one"
    assert conf.get("beta") == "x=y"
    assert conf.exists("noequals") is False
    assert conf.changed is False


def test_save_round_trip(tmp_path):
    path = tmp_path / "c.conf"
    conf = Configure(path)
    conf.set("zeta", "last")
    conf.set_int("count", -12)
    conf.set_binary("blob", b"\x00\x7f\xab")
    assert conf.save() is True
    data = path.read_bytes()
    assert data[:2] == b"\xff\xfe"
    text = data.decode("utf-16-le")[1:]
    lines = [line for line in text.split("\n") if line]
    assert lines == sorted(lines)

    again = Configure(path)
    assert again.get("zeta") == "last"
    assert again.get_int("count") == -12
    assert again.get_binary("blob") == b"\x00\x7f\xab"


def test_save_without_changes_does_nothing(tmp_path):
    path = tmp_path / "c.conf"
    conf = Configure(path)
    assert conf.save() is False
    assert not path.exists()


def test_get_int_default_and_error(tmp_path):
    conf = Configure(tmp_path / "c.conf")
    assert conf.get_int("n", 5) == 5
    conf.set("n", "abc")
    with pytest.raises(ValueError):
        conf.get_int("n")


def test_set_int_out_of_range(tmp_path):
    conf = Configure(tmp_path / "c.conf")
    with pytest.raises(ValueError):
        conf.set_int("n", 2**63)


def test_get_binary_parsing(tmp_path):
    conf = Configure(tmp_path / "c.conf")
    conf.set("b", "0aFF1")
    assert conf.get_binary("b") == b"\x0a\xff"
    assert conf.get_binary("missing") == b""


def test_set_binary_upper_hex(tmp_path):
    conf = Configure(tmp_path / "c.conf")
    conf.set_binary("b", b"\xab\x01")
    assert conf.get("b") == "AB01"


def test_remove(tmp_path):
    path = tmp_path / "c.conf"
    _write(path, "k=v\n")
    conf = Configure(path)
    conf.remove("absent")
    assert conf.changed is False
    conf.remove("k")
    assert conf.exists("k") is False
    assert conf.changed is True


def test_set_unmarked_clears_changed(tmp_path):
    conf = Configure(tmp_path / "c.conf")
    conf.set("a", "1")
    assert conf.changed is True
    conf.set("b", "2", False)
    assert conf.changed is False


def test_context_manager_saves(tmp_path):
    path = tmp_path / "c.conf"
    with Configure(path) as conf:
        conf.set("key", "value")
    assert Configure(path).get("key") == "value"


def test_default_path_name(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    conf = Configure()
    assert conf.path.name == CONF_FILE_NAME