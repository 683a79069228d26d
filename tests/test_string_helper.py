import pytest

from kon.string_helper import StringSplitter


@pytest.mark.parametrize("text", ["", ";", ";;"])
def test_empty(text):
    splitter = StringSplitter(text, ";")
    assert next(splitter, None) is None
    assert list(splitter) == []


@pytest.mark.parametrize("text", ["abc", ";abc", ";;abc", ";;abc;", ";;abc;;"])
def test_one(text):
    splitter = StringSplitter(text, ";")
    assert next(splitter) == "abc"
    with pytest.raises(StopIteration):
        next(splitter)


@pytest.mark.parametrize("text", [";;abc;;defg", ";;abc;;defg;;"])
def test_two(text):
    splitter = StringSplitter(text, ";")
    assert next(splitter) == "abc"
    assert next(splitter) == "defg"
    with pytest.raises(StopIteration):
        next(splitter)


def test_iteration_collects_fields():
    assert list(StringSplitter("a,,bc,d,", ",")) == ["a", "bc", "d"]


def test_bytes_input():
    assert list(StringSplitter(b"x y  z", b" ")) == [b"x", b"y", b"z"]


def test_exhausted_stays_exhausted():
    splitter = StringSplitter("a", ";")
    assert list(splitter) == ["a"]
    assert list(splitter) == []


def test_delimiter_must_be_single_character():
    with pytest.raises(ValueError):
        StringSplitter("a;;b", ";;")