import pytest

from entropykit.bitstream import BitReader, BitWriter
from entropykit.errors import OutOfDataError, RangeError


def test_write_bits_lsb_first():
    """Bit 0 of the first byte holds the first bit written."""

    w = BitWriter()
    for b in (1, 0, 1):
        w.write_bit(b)
    assert w.flush() == bytes([0b00000101])


def test_full_byte_committed_without_flush_padding():
    w = BitWriter()
    for b in (1, 1, 1, 1, 0, 0, 0, 0):
        w.write_bit(b)
    assert w.flush() == b"\x0f"
    assert w.bit_count == 8


def test_partial_byte_zero_padded():
    w = BitWriter()
    w.write_bits(0xFF, 8)
    w.write_bit(True)
    assert w.flush() == b"\xff\x01"


def test_flush_twice_returns_same_buffer():
    w = BitWriter()
    w.write_bits(0b101, 3)
    first = w.flush()
    second = w.flush()
    assert first == second == b"\x05"


def test_flush_empty():
    assert BitWriter().flush() == b""


def test_write_bits_multibyte_value():
    w = BitWriter()
    w.write_bits(0x1234, 16)
    assert w.flush() == b"\x34\x12"


def test_write_bits_only_low_bits():
    w = BitWriter()
    w.write_bits(0xFF, 4)
    assert w.flush() == b"\x0f"


def test_write_bits_width_out_of_range():
    with pytest.raises(RangeError):
        BitWriter().write_bits(1, 33)
    with pytest.raises(RangeError):
        BitWriter().write_bits(1, -1)


def test_read_bit_sequence():
    r = BitReader(b"\x05")
    assert [r.read_bit() for _ in range(8)] == [1, 0, 1, 0, 0, 0, 0, 0]
    assert r.position == 8


def test_read_bits_reassembles_value():
    r = BitReader(b"\x34\x12")
    assert r.read_bits(16) == 0x1234


def test_writer_reader_agree_on_mixed_widths():
    w = BitWriter()
    w.write_bits(5, 3)
    w.write_bits(0, 2)
    w.write_bits(0x3FF, 10)
    r = BitReader(w.flush())
    assert r.read_bits(3) == 5
    assert r.read_bits(2) == 0
    assert r.read_bits(10) == 0x3FF


def test_read_past_end_raises():
    r = BitReader(b"\x01")
    r.read_bits(8)
    with pytest.raises(OutOfDataError):
        r.read_bit()


def test_read_from_empty_buffer():
    with pytest.raises(OutOfDataError):
        BitReader(b"").read_bit()


def test_out_of_data_is_eof_error():
    with pytest.raises(EOFError):
        BitReader(b"").read_bits(1)
