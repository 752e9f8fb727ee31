"""Static-model rANS coder over the 4-symbol alphabet.

The raw histogram of the input is normalized to ``TOTFREQ = 4096`` and
written into the header; the symbols are then pushed onto a single 32-bit
state ``x`` in reverse input order, so the decoder pops them back out in
forward order.

Stream layout (little-endian)
-----------------------------
=======  ===========  =====
Offset   Field        Size
=======  ===========  =====
0        N            4
4        freq[0]      2
6        freq[1]      2
8        freq[2]      2
10       freq[3]      2
12       payload      n
=======  ===========  =====

The final 4 bytes of the stream hold the last encoder state, least
significant byte first. Renormalization bytes are read back from the tail
toward the header.

References
----------
- Duda (2013): Asymmetric numeral systems.
- Giesen: ryg_rans public-domain reference coder.
"""

from __future__ import annotations

from typing import Iterable, Sequence
import logging
import struct

from entropykit.alphabet import QUATERNARY_ALPHABET
from entropykit.config import ALPHABET_SIZE, get_config
from entropykit.errors import CorruptHeaderError, RangeError, TruncatedStreamError


_LOGGER = logging.getLogger(__name__)

_HEADER = struct.Struct("<I4H")


def build_frequency_table(counts: Sequence[int]) -> tuple[int, ...]:
    """Normalize a raw 4-bin histogram to frequencies summing to TOTFREQ.

    Each count is scaled by ``count * TOTFREQ // sum``; an absent symbol or
    one that scales to zero gets frequency 1. A shortfall is added to symbol
    0, an excess is removed one unit at a time from the currently largest
    frequency (lowest index on ties), never going below 1.

    Raises
    ------
    RangeError
        If ``counts`` does not have 4 non-negative entries or sums to zero.
    """

    totfreq = get_config().RANS_TOTFREQ
    raw = [int(c) for c in counts]
    if len(raw) != ALPHABET_SIZE:
        raise RangeError(f"expected {ALPHABET_SIZE} counts, got {len(raw)}")
    if any(c < 0 for c in raw):
        raise RangeError(f"counts must be non-negative: {raw!r}")
    total = sum(raw)
    if total == 0:
        raise RangeError("cannot build a frequency table from an empty histogram")

    freqs = [max(1, c * totfreq // total) if c > 0 else 1 for c in raw]

    current = sum(freqs)
    if current < totfreq:
        freqs[0] += totfreq - current
    elif current > totfreq:
        excess = current - totfreq
        while excess > 0:
            k = max(range(ALPHABET_SIZE), key=lambda i: (freqs[i], -i))
            if freqs[k] <= 1:
                break
            freqs[k] -= 1
            excess -= 1
    return tuple(freqs)


def build_cumulative_table(freqs: Sequence[int]) -> tuple[int, ...]:
    """Return prefix sums: ``cum[0] = 0``, ``cum[k] = cum[k-1] + freq[k-1]``."""

    cum = [0] * len(freqs)
    for k in range(1, len(freqs)):
        cum[k] = cum[k - 1] + freqs[k - 1]
    return tuple(cum)


def _symbol_counts(symbols: Sequence[int]) -> list[int]:
    counts = [0] * ALPHABET_SIZE
    for s in symbols:
        counts[s] += 1
    return counts


def rans_encode(symbols: Iterable[int]) -> bytes:
    """Compress ``symbols`` into a self-describing rANS stream.

    An empty input produces an empty buffer with no header.

    Raises
    ------
    RangeError
        If any symbol is outside [0, 3].
    """

    cfg = get_config()
    seq = QUATERNARY_ALPHABET.validate(symbols)
    n = len(seq)
    if n == 0:
        return b""

    freqs = build_frequency_table(_symbol_counts(seq))
    cum = build_cumulative_table(freqs)

    out = bytearray(_HEADER.pack(n, *freqs))

    rans_l = cfg.RANS_L
    totfreq = cfg.RANS_TOTFREQ
    # Upper bound on x before encoding a symbol of frequency f is
    # x_max_base * f, which keeps every state in [RANS_L, RANS_L << 8).
    x_max_base = (rans_l >> cfg.RANS_TOTFREQ_BITS) << 8

    x = rans_l
    for s in reversed(seq):
        f = freqs[s]
        c = cum[s]
        x_max = x_max_base * f
        while x >= x_max:
            out.append(x & 0xFF)
            x >>= 8
        x = (x // f) * totfreq + (x % f) + c

    for _ in range(cfg.STATE_BYTES):
        out.append(x & 0xFF)
        x >>= 8

    _LOGGER.debug(
        "rANS-coded %d symbols with freqs=%s into %d bytes", n, freqs, len(out)
    )
    return bytes(out)


def read_header(stream: bytes | bytearray) -> tuple[int, tuple[int, ...], tuple[int, ...]]:
    """Parse and check the rANS header.

    Returns ``(n_symbols, freqs, cum)``.

    Raises
    ------
    TruncatedStreamError
        If the stream is shorter than the 12-byte header.
    CorruptHeaderError
        If a frequency is zero or the frequencies do not sum to TOTFREQ.
    """

    cfg = get_config()
    if len(stream) < cfg.RANS_HEADER_SIZE:
        raise TruncatedStreamError(
            f"rANS stream too short for header: {len(stream)} bytes"
        )
    n, *freq_list = _HEADER.unpack_from(stream, 0)
    freqs = tuple(freq_list)
    for k, f in enumerate(freqs):
        if f == 0:
            raise CorruptHeaderError(f"zero frequency for symbol {k} in header")
    cum = build_cumulative_table(freqs)
    total = cum[-1] + freqs[-1]
    if total != cfg.RANS_TOTFREQ:
        raise CorruptHeaderError(
            f"header frequencies sum to {total}, expected {cfg.RANS_TOTFREQ}"
        )
    return n, freqs, cum


def rans_decode(stream: bytes | bytearray) -> list[int]:
    """Invert `rans_encode`.

    An empty buffer decodes to an empty list.

    Raises
    ------
    TruncatedStreamError
        If the header or the final state bytes are missing.
    CorruptHeaderError
        If the header frequencies are invalid.
    """

    cfg = get_config()
    data = bytes(stream)
    if not data:
        return []

    n, freqs, cum = read_header(data)
    if n == 0:
        return []

    data_start = cfg.RANS_HEADER_SIZE
    if len(data) < data_start + cfg.STATE_BYTES:
        raise TruncatedStreamError("rANS stream has no final state bytes")

    idx = len(data) - cfg.STATE_BYTES
    x = int.from_bytes(data[idx:], "little")

    rans_l = cfg.RANS_L
    totfreq = cfg.RANS_TOTFREQ
    out = [0] * n
    # The encoder pushed symbols last-to-first, so they pop first-to-last
    for i in range(n):
        x_div, x_mod = divmod(x, totfreq)
        s = 0
        for k in range(ALPHABET_SIZE):
            if cum[k] <= x_mod < cum[k] + freqs[k]:
                s = k
                break
        out[i] = s
        x = freqs[s] * x_div + (x_mod - cum[s])
        while x < rans_l and idx > data_start:
            idx -= 1
            x = (x << 8) | data[idx]

    _LOGGER.debug("decoded %d symbols from %d-byte rANS stream", n, len(data))
    return out


__all__ = [
    "build_frequency_table",
    "build_cumulative_table",
    "read_header",
    "rans_encode",
    "rans_decode",
]
