from eacripper.filters import FileDialogFilter


def test_empty_filter_string_is_three_nuls():
    assert FileDialogFilter().ofn_filter() == "\0\0\0"


def test_single_entry_filter_string():
    f = FileDialogFilter([("Cue sheet", "*.cue")])
    assert f.ofn_filter() == "Cue sheet (*.cue)\0*.cue\0\0\0\0"


def test_add_and_extend_keep_order():
    f = FileDialogFilter()
    assert f.add("A", "*.a") is True
    assert f.extend([("B", "*.b"), ("C", "*.c")]) is True
    assert f.cd_filter() == [("A", "*.a"), ("B", "*.b"), ("C", "*.c")]
    assert len(f) == 3


def test_ofn_filter_parts_match_cd_filter():
    pairs = [("Wave", "*.wav"), ("All", "*.*")]
    f = FileDialogFilter(pairs)
    pieces = f.ofn_filter().split("\0")
    assert pieces[:4] == ["Wave (*.wav)", "*.wav", "All (*.*)", "*.*"]
    assert f.ofn_filter().endswith("\0\0\0")


def test_constructor_copies_entries():
    pairs = [("X", "*.x")]
    f = FileDialogFilter(pairs)
    pairs.append(("Y", "*.y"))
    assert f.cd_filter() == [("X", "*.x")]


def test_cd_filter_returns_copy():
    f = FileDialogFilter([("X", "*.x")])
    f.cd_filter().append(("Y", "*.y"))
    assert f.cd_filter() == [("X", "*.x")]