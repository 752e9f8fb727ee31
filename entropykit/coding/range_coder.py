"""Static-model binary range coder.

A single global probability estimate for "0" vs "1" is taken from the whole
input, stored in the stream header, and used for every bit. This is a
teaching coder: there is no carry propagation, so a carry out of ``low``
during ``low += split`` is dropped. Inputs whose ``low`` register never
wraps (for instance runs that contain at most one ``1`` bit, or sequences
short enough that no renormalization is needed) always round-trip; longer
mixed inputs may not.

Stream layout (little-endian)
-----------------------------
=======  ===========  =====
Offset   Field        Size
=======  ===========  =====
0        bit count    4
4        count0       4
8        count1       4
12       payload      n
=======  ===========  =====

The final 4 payload bytes hold the last ``low`` register, most significant
byte first.
"""

from __future__ import annotations

from typing import Iterable, NamedTuple
import logging
import struct

from entropykit.config import MASK32, get_config
from entropykit.errors import CorruptHeaderError, RangeError, TruncatedStreamError


_LOGGER = logging.getLogger(__name__)

_HEADER = struct.Struct("<III")


class RangeEncoderState(NamedTuple):
    low: int
    range: int


class RangeDecoderState(NamedTuple):
    low: int
    range: int
    code: int


def _split(range_: int, count0: int, total: int) -> int:
    # range // total must stay >= 1 or a 0 bit collapses the interval to zero
    if total > range_:
        raise RangeError(f"bit count total {total} exceeds coder range {range_}")
    return (range_ // total) * count0


def renormalize_encoder(state: RangeEncoderState, out: bytearray) -> RangeEncoderState:
    """Emit top bytes of ``low`` until ``range`` is back above the threshold."""

    top = get_config().RANGE_TOP
    low, range_ = state
    if range_ == 0:
        raise RangeError("cannot renormalize an empty coding interval")
    while range_ < top:
        out.append(low >> 24)
        low = (low << 8) & MASK32
        range_ = (range_ << 8) & MASK32
    return RangeEncoderState(low, range_)


def renormalize_decoder(
    state: RangeDecoderState, stream: bytes, offset: int
) -> tuple[RangeDecoderState, int]:
    """Shift one payload byte into ``code`` per renormalization step.

    Bytes past the end of ``stream`` read as zero. Returns the new state and
    the updated read offset.
    """

    top = get_config().RANGE_TOP
    low, range_, code = state
    if range_ == 0:
        raise RangeError("cannot renormalize an empty coding interval")
    while range_ < top:
        range_ = (range_ << 8) & MASK32
        low = (low << 8) & MASK32
        next_byte = 0
        if offset < len(stream):
            next_byte = stream[offset]
            offset += 1
        code = ((code << 8) | next_byte) & MASK32
    return RangeDecoderState(low, range_, code), offset


def encode_bit(
    state: RangeEncoderState, bit: int, count0: int, total: int
) -> RangeEncoderState:
    """Narrow the interval for one bit (no renormalization)."""

    low, range_ = state
    split = _split(range_, count0, total)
    if bit == 0:
        return RangeEncoderState(low, split)
    return RangeEncoderState((low + split) & MASK32, range_ - split)


def decode_bit(
    state: RangeDecoderState, count0: int, total: int
) -> tuple[int, RangeDecoderState]:
    """Decide one bit from ``code`` and narrow the interval accordingly."""

    low, range_, code = state
    split = _split(range_, count0, total)
    rel = (code - low) & MASK32
    if rel < split:
        return 0, RangeDecoderState(low, split, code)
    return 1, RangeDecoderState((low + split) & MASK32, range_ - split, code)


def arith_encode_bits(bits: Iterable[int]) -> bytes:
    """Compress a bit sequence and return the self-describing stream.

    Any non-zero element counts as a ``1`` bit. An empty input still yields
    the 12-byte header followed by the 4 flush bytes.

    Raises
    ------
    RangeError
        If ``count0 + count1`` exceeds ``RANGE_TOP`` (2**24), where a single
        interval split would round down to zero.
    """

    cfg = get_config()
    values = [1 if b else 0 for b in bits]
    num_bits = len(values)

    count1 = sum(values)
    count0 = num_bits - count1
    # A zero count would give that bit value an empty interval
    count0 = max(count0, 1)
    count1 = max(count1, 1)
    total = count0 + count1
    if total > cfg.RANGE_TOP:
        raise RangeError(
            f"too many bits for the range coder: count0 + count1 = {total} exceeds {cfg.RANGE_TOP}"
        )

    out = bytearray(_HEADER.pack(num_bits, count0, count1))

    state = RangeEncoderState(0, cfg.RANGE_INITIAL)
    for b in values:
        state = encode_bit(state, b, count0, total)
        state = renormalize_encoder(state, out)

    low = state.low
    for _ in range(cfg.STATE_BYTES):
        out.append(low >> 24)
        low = (low << 8) & MASK32

    _LOGGER.debug(
        "range-coded %d bits (count0=%d, count1=%d) into %d bytes",
        num_bits,
        count0,
        count1,
        len(out),
    )
    return bytes(out)


def arith_decode_bits(stream: bytes | bytearray) -> list[int]:
    """Invert `arith_encode_bits`.

    Raises
    ------
    TruncatedStreamError
        If the stream is shorter than the header plus 4 state bytes.
    CorruptHeaderError
        If either stored count is zero or the counts sum past ``RANGE_TOP``.
    """

    cfg = get_config()
    data = bytes(stream)
    if len(data) < cfg.RANGE_HEADER_SIZE:
        raise TruncatedStreamError(
            f"range-coded stream too short for header: {len(data)} bytes"
        )

    num_bits, count0, count1 = _HEADER.unpack_from(data, 0)
    if count0 == 0 or count1 == 0:
        raise CorruptHeaderError(
            f"invalid bit counts in header: count0={count0}, count1={count1}"
        )
    total = count0 + count1
    if total > cfg.RANGE_TOP:
        raise CorruptHeaderError(
            f"bit counts in header exceed the coder range: count0={count0}, count1={count1}"
        )

    offset = cfg.RANGE_HEADER_SIZE
    if offset + cfg.STATE_BYTES > len(data):
        raise TruncatedStreamError("range-coded stream has no state bytes")

    code = 0
    for _ in range(cfg.STATE_BYTES):
        code = (code << 8) | data[offset]
        offset += 1

    state = RangeDecoderState(0, cfg.RANGE_INITIAL, code)
    bits: list[int] = []
    for _ in range(num_bits):
        bit, state = decode_bit(state, count0, total)
        bits.append(bit)
        state, offset = renormalize_decoder(state, data, offset)

    _LOGGER.debug("decoded %d bits from %d-byte range stream", num_bits, len(data))
    return bits


__all__ = [
    "RangeEncoderState",
    "RangeDecoderState",
    "encode_bit",
    "decode_bit",
    "renormalize_encoder",
    "renormalize_decoder",
    "arith_encode_bits",
    "arith_decode_bits",
]
