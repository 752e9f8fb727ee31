"""Fixed binarization codebooks for the 4-symbol alphabet.

Two codebooks map each symbol to a prefix-free sequence of bins:

- ``EFFICIENT``: truncated unary, short codes for the frequent symbol 0
  (0 -> 0, 1 -> 10, 2 -> 110, 3 -> 1110).
- ``INEFFICIENT``: the reversed length assignment, deliberately giving the
  longest code to symbol 0 (0 -> 1110, 1 -> 110, 2 -> 10, 3 -> 0).

On a source skewed toward symbol 0 the efficient codebook produces far fewer
bins, which is what the comparison report demonstrates.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping

from entropykit.alphabet import QUATERNARY_ALPHABET
from entropykit.bitstream import BitWriter
from entropykit.errors import RangeError


Codebook = Mapping[int, tuple[int, ...]]

EFFICIENT_CODEBOOK: Codebook = MappingProxyType(
    {
        0: (0,),
        1: (1, 0),
        2: (1, 1, 0),
        3: (1, 1, 1, 0),
    }
)

INEFFICIENT_CODEBOOK: Codebook = MappingProxyType(
    {
        0: (1, 1, 1, 0),
        1: (1, 1, 0),
        2: (1, 0),
        3: (0,),
    }
)


class Binarization(str, Enum):
    """Selects one of the two codebooks."""

    EFFICIENT = "efficient"
    INEFFICIENT = "inefficient"

    @property
    def codebook(self) -> Codebook:
        if self is Binarization.EFFICIENT:
            return EFFICIENT_CODEBOOK
        return INEFFICIENT_CODEBOOK


def _resolve(binarization: Binarization | str) -> Binarization:
    if isinstance(binarization, Binarization):
        return binarization
    try:
        return Binarization(str(binarization).lower())
    except ValueError:
        choices = ", ".join(b.value for b in Binarization)
        raise RangeError(
            f"Unknown binarization {binarization!r}; expected one of: {choices}"
        ) from None


def binarize_symbol(
    symbol: int, binarization: Binarization | str = Binarization.EFFICIENT
) -> tuple[int, ...]:
    """Return the bin sequence for a single ``symbol``.

    Raises
    ------
    RangeError
        If ``symbol`` is not in [0, 3] or the binarization name is unknown.
    """

    symbol = QUATERNARY_ALPHABET.check_symbol(symbol)
    return _resolve(binarization).codebook[symbol]


def binarize_sequence(
    symbols: Iterable[int], binarization: Binarization | str = Binarization.EFFICIENT
) -> list[int]:
    """Concatenate the codes of ``symbols`` into one flat bin list."""

    codebook = _resolve(binarization).codebook
    bits: list[int] = []
    for s in symbols:
        s = QUATERNARY_ALPHABET.check_symbol(s)
        bits.extend(codebook[s])
    return bits


def pack_bits_to_bytes(bits: Iterable[int]) -> bytes:
    """Pack ``bits`` LSB-first into bytes; no header is written."""

    writer = BitWriter()
    for b in bits:
        writer.write_bit(b != 0)
    return writer.flush()


__all__ = [
    "Binarization",
    "Codebook",
    "EFFICIENT_CODEBOOK",
    "INEFFICIENT_CODEBOOK",
    "binarize_symbol",
    "binarize_sequence",
    "pack_bits_to_bytes",
]
