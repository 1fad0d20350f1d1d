# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io

import pytest

from deltaupdate.utils import (
    is_same_value, shallow_clone, as_path, join_path, read_json, write_json,
    EXPLICIT_MISSING_FILE,
)


def test_is_same_value_scalars():
    assert is_same_value(1, 1)
    assert is_same_value("a", "a")
    assert is_same_value(None, None)
    assert not is_same_value(1, 2)
    assert not is_same_value(1, 1.5)
    assert not is_same_value(1, True)
    assert not is_same_value(None, 0)


def test_is_same_value_numbers():
    assert is_same_value(1, 1.0)
    assert is_same_value(0.0, 0)
    assert not is_same_value(1.0, True)
    assert not is_same_value(0, False)
    assert not is_same_value(float("nan"), float("nan"))


def test_is_same_value_containers_by_identity():
    d = {"a": 1}
    l = [1]
    assert is_same_value(d, d)
    assert is_same_value(l, l)
    assert not is_same_value(d, {"a": 1})
    assert not is_same_value(l, [1])
    assert not is_same_value({1}, {1})
    # Immutable sequences compare by value
    assert is_same_value((1, 2), (1, 2))


def test_shallow_clone():
    inner = [1]
    d = {"a": inner}
    c = shallow_clone(d)
    assert c == d
    assert c is not d
    assert c["a"] is inner


def test_as_path():
    assert as_path(None) == ()
    assert as_path("a") == ("a",)
    assert as_path("a/b") == ("a/b",)
    assert as_path(0) == (0,)
    assert as_path(["a", 0]) == ("a", 0)
    assert as_path(("a",)) == ("a",)


def test_join_path():
    assert join_path() == "/"
    assert join_path(()) == "/"
    assert join_path("a", 0) == "/a/0"
    assert join_path(("a", "b")) == "/a/b"


def test_read_json_null_file():
    assert read_json(EXPLICIT_MISSING_FILE) == {}
    assert read_json(EXPLICIT_MISSING_FILE, on_null='none') is None
    with pytest.raises(ValueError):
        read_json(EXPLICIT_MISSING_FILE, on_null='nothing')


def test_write_json_sorted(tmpdir):
    fn = str(tmpdir.join('out.json'))
    write_json({"b": 1, "a": [1]}, fn, indent=None)
    with io.open(fn, encoding='utf8') as f:
        assert f.read() == '{"a": [1], "b": 1}\n'
    with io.open(fn, encoding='utf8') as f:
        assert read_json(f) == {"a": [1], "b": 1}


def test_write_json_file_object():
    out = io.StringIO()
    write_json([1], out, indent=None)
    assert out.getvalue() == "[1]\n"
