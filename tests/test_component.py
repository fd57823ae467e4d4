import dataclasses

import pytest

from eacripper.component import SDK_VERSION, Allocator, ComponentInfo


class _Thing:
    pass


def test_alloc_uses_factory():
    allocator = Allocator(_Thing)
    first = allocator.alloc()
    second = allocator.alloc()
    assert isinstance(first, _Thing)
    assert first is not second
    assert allocator.live == 2


def test_free_releases():
    allocator = Allocator(list)
    obj = allocator.alloc()
    allocator.free(obj)
    assert allocator.live == 0


def test_free_by_identity():
    allocator = Allocator(list)
    a = allocator.alloc()
    b = allocator.alloc()
    allocator.free(b)
    assert allocator.live == 1
    allocator.free(a)
    assert allocator.live == 0


def test_free_unknown_raises():
    allocator = Allocator(list)
    with pytest.raises(ValueError):
        allocator.free([])


def test_double_free_raises():
    allocator = Allocator(_Thing)
    obj = allocator.alloc()
    allocator.free(obj)
    with pytest.raises(ValueError):
        allocator.free(obj)


def test_info_defaults():
    info = ComponentInfo("Wave", "1.0")
    assert info.sdk_version == SDK_VERSION == "2.0.0"
    assert info.debug is False
    assert info.name == "Wave"
    assert info.version == "1.0"


def test_info_frozen():
    info = ComponentInfo("Wave", "1.0", "2.0.0", True)
    assert info.debug is True
    with pytest.raises(dataclasses.FrozenInstanceError):
        info.name = "Other"