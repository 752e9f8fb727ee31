"""Bit-level writer and reader over a byte buffer.

Bits are packed LSB-first: the first bit written to a byte occupies bit 0,
the next bit 1, and so on. A partially filled final byte is zero-padded in
its unused high bits on `BitWriter.flush`.

Examples
--------
>>> from entropykit.bitstream import BitWriter, BitReader
>>> w = BitWriter()
>>> for b in (1, 0, 1):
...     w.write_bit(b)
>>> w.flush()
b'\\x05'
>>> BitReader(b"\\x05").read_bits(3)
5
"""

from __future__ import annotations

from entropykit.errors import OutOfDataError, RangeError


_MAX_FIELD_BITS = 32


def _check_width(n_bits: int) -> None:
    if not (0 <= n_bits <= _MAX_FIELD_BITS):
        raise RangeError(f"n_bits must be in [0, {_MAX_FIELD_BITS}], got {n_bits}")


class BitWriter:
    """Accumulates bits into a growing byte buffer."""

    def __init__(self) -> None:
        self._buffer = bytearray()
        self._current: int = 0
        self._bit_pos: int = 0
        self._bit_count: int = 0

    @property
    def bit_count(self) -> int:
        """Number of bits written so far."""

        return self._bit_count

    def write_bit(self, bit: int | bool) -> None:
        """Append one bit; any truthy value is written as 1."""

        if bit:
            self._current |= 1 << self._bit_pos
        self._bit_pos += 1
        self._bit_count += 1
        if self._bit_pos == 8:
            self._buffer.append(self._current)
            self._current = 0
            self._bit_pos = 0

    def write_bits(self, value: int, n_bits: int) -> None:
        """Write the low ``n_bits`` bits of ``value``, least significant first."""

        _check_width(n_bits)
        for i in range(n_bits):
            self.write_bit((value >> i) & 1)

    def flush(self) -> bytes:
        """Commit a partial byte (zero-padded) and return the whole buffer."""

        if self._bit_pos > 0:
            self._buffer.append(self._current)
            self._current = 0
            self._bit_pos = 0
        return bytes(self._buffer)


class BitReader:
    """Reads bits back from a fixed byte buffer in LSB-first order."""

    def __init__(self, data: bytes | bytearray) -> None:
        self._data = bytes(data)
        self._byte_pos: int = 0
        self._bit_pos: int = 0

    @property
    def position(self) -> int:
        """Number of bits consumed so far."""

        return self._byte_pos * 8 + self._bit_pos

    def read_bit(self) -> int:
        """Return the next bit.

        Raises
        ------
        OutOfDataError
            If every bit of the buffer has already been read.
        """

        if self._byte_pos >= len(self._data):
            raise OutOfDataError(
                f"read past end of {len(self._data)}-byte buffer"
            )
        bit = (self._data[self._byte_pos] >> self._bit_pos) & 1
        self._bit_pos += 1
        if self._bit_pos == 8:
            self._bit_pos = 0
            self._byte_pos += 1
        return bit

    def read_bits(self, n_bits: int) -> int:
        """Read ``n_bits`` bits and assemble them LSB-first into an int."""

        _check_width(n_bits)
        value = 0
        for i in range(n_bits):
            value |= self.read_bit() << i
        return value


__all__ = ["BitWriter", "BitReader"]
