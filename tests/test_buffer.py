import pytest

from nouzen.buffer import BoundedBuffer


def test_new_buffer_is_empty():
    buf = BoundedBuffer(16)
    assert buf.getvalue() == b""
    assert len(buf) == 0


def test_appends_accumulate_in_order():
    buf = BoundedBuffer(16)
    buf.append(b"abc")
    buf.append(b"def")
    assert buf.getvalue() == b"abcdef"
    assert len(buf) == 6


def test_fills_up_to_size_minus_one():
    buf = BoundedBuffer(5)
    buf.append(b"abcd")
    assert buf.getvalue() == b"abcd"


def test_overflow_raises_and_keeps_contents():
    buf = BoundedBuffer(5)
    buf.append(b"abc")
    with pytest.raises(OverflowError):
        buf.append(b"de")
    assert buf.getvalue() == b"abc"


def test_full_size_does_not_fit():
    buf = BoundedBuffer(4)
    with pytest.raises(OverflowError):
        buf.append(b"abcd")
    assert len(buf) == 0


def test_empty_append_is_allowed_when_full():
    buf = BoundedBuffer(2)
    buf.append(b"x")
    buf.append(b"")
    assert buf.getvalue() == b"x"


def test_invalid_size():
    with pytest.raises(ValueError):
        BoundedBuffer(0)