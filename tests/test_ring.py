import pytest
from bytesupply.errors import ConstructionError, EmptyInputError
from bytesupply.ring import RingBuffer


def test_ring_fill():
    rb = RingBuffer.from_bytes(bytes([1, 2, 3, 4]))
    z = bytearray(10)
    rb.fill(z)
    assert list(z) == [1, 2, 3, 4, 1, 2, 3, 4, 1, 2]
    rb.fill(z)
    assert list(z) == [3, 4, 1, 2, 3, 4, 1, 2, 3, 4]
    assert rb.offset == 0


def test_ring_fill_shorter_than_window():
    rb = RingBuffer.from_bytes(b"abcdef")
    assert rb.read(2) == b"ab"
    assert rb.read(3) == b"cde"
    assert rb.read(3) == b"fab"
    assert rb.offset == 2


def test_ring_fill_empty_output():
    rb = RingBuffer.from_bytes(b"abc")
    rb.skip(1)
    assert rb.read(0) == b""
    assert rb.offset == 1


def test_ring_shrink():
    rb = RingBuffer.from_bytes(bytes([1, 2, 3, 4]))
    z = bytearray(10)
    assert rb.shrink() == 2
    rb.fill(z)
    assert list(z) == [1, 2, 1, 2, 1, 2, 1, 2, 1, 2]
    assert rb.shrink() == 1
    rb.fill(z)
    assert list(z) == [1] * 10


def test_ring_shrink_never_empties_window():
    rb = RingBuffer.from_bytes(b"\x07")
    assert rb.shrink() == 1
    assert rb.read(3) == b"\x07\x07\x07"


def test_ring_shrink_folds_offset():
    rb = RingBuffer.from_bytes(bytes([1, 2, 3, 4, 5, 6, 7, 8]))
    rb.skip(7)
    assert rb.shrink() == 4
    assert rb.offset == 3
    assert list(rb.read(5)) == [4, 1, 2, 3, 4]


def test_ring_skip():
    rb = RingBuffer.from_bytes(bytes([1, 2, 3, 4]))
    z = bytearray(10)
    rb.skip(1)
    rb.fill(z)
    assert list(z) == [2, 3, 4, 1, 2, 3, 4, 1, 2, 3]
    rb.skip(1)
    rb.fill(z)
    assert list(z) == [1, 2, 3, 4, 1, 2, 3, 4, 1, 2]


def test_ring_skip_wraps():
    rb = RingBuffer.from_bytes(b"abc")
    rb.skip(100)
    assert rb.offset == 1
    with pytest.raises(ValueError, match="non-negative"):
        rb.skip(-3)


def test_ring_reset_restores_window():
    rb = RingBuffer.from_bytes(bytes([1, 2, 3, 4]))
    rb.shrink()
    rb.skip(1)
    rb.reset()
    assert rb.offset == 0
    assert rb.virtual_len == 4
    assert list(rb.read(6)) == [1, 2, 3, 4, 1, 2]


def test_ring_empty_region_rejected():
    with pytest.raises(EmptyInputError):
        RingBuffer.from_bytes(b"")
    with pytest.raises(ConstructionError, match="empty region"):
        RingBuffer(bytearray())


def test_ring_region_not_copied():
    data = bytearray(b"abcd")
    rb = RingBuffer.from_bytes(data)
    data[0] = ord("z")
    assert rb.read(4) == b"zbcd"


def test_ring_container_size():
    # Decode-then-modulo is the current size_hint behaviour; whether it is
    # the intended container-size semantics is an open question.
    rb = RingBuffer.from_bytes(bytes([1, 2, 3, 4, 5])).with_container_size_limit(11)
    assert [rb.size_hint() for _ in range(5)] == [9, 1, 2, 6, 1]


def test_ring_size_hint_default_limit():
    rb = RingBuffer.from_bytes(bytes([1, 2, 3]))
    assert rb.container_size_limit == 3
    assert all(0 <= rb.size_hint() < 3 for _ in range(20))
