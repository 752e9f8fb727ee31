"""Symbol alphabet definition for the 4-ary entropy coders.

This module defines the `SymbolAlphabet` class and the single alphabet used
throughout the project. Both coders, the binarizer and the statistics helpers
validate their input against it.

Examples
--------
>>> from entropykit.alphabet import QUATERNARY_ALPHABET
>>> QUATERNARY_ALPHABET.size
4
>>> QUATERNARY_ALPHABET.log2_size
2.0
>>> QUATERNARY_ALPHABET.validate([0, 3, 1])
[0, 3, 1]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable
import math
import numbers
import operator

from entropykit.errors import RangeError


@dataclass(frozen=True)
class SymbolAlphabet:
    """A finite integer symbol set ``0 .. size-1``.

    Parameters
    ----------
    symbols:
        Immutable ordered collection of the integer symbols.
    name:
        Human-friendly name, e.g., "Quaternary-4".
    """

    symbols: tuple[int, ...]
    name: str

    @property
    def size(self) -> int:
        """Number of symbols M in the alphabet."""

        return len(self.symbols)

    @property
    def log2_size(self) -> float:
        """log2(M): bits required to code one symbol uniformly."""

        return math.log2(self.size)

    def is_valid_symbol(self, symbol: object) -> bool:
        """Return True if ``symbol`` is an integer member of the alphabet.

        Any `numbers.Integral` counts as an integer (numpy integers included);
        ``bool`` and non-integral numbers such as ``1.0`` do not.
        """

        # bool is an int subclass but never a symbol
        if isinstance(symbol, bool) or not isinstance(symbol, numbers.Integral):
            return False
        return 0 <= operator.index(symbol) < self.size

    def check_symbol(self, symbol: int) -> int:
        """Return ``symbol`` as a plain int, raising `RangeError` if it is invalid."""

        if not self.is_valid_symbol(symbol):
            raise RangeError(
                f"symbol out of range (0..{self.size - 1}): {symbol!r}"
            )
        return operator.index(symbol)

    def validate(self, symbols: Iterable[int]) -> list[int]:
        """Return ``symbols`` as a list of plain ints after checking every element.

        Raises
        ------
        RangeError
            If any element is not a member of the alphabet.
        """

        items = list(symbols)
        invalid = [s for s in items if not self.is_valid_symbol(s)]
        if invalid:
            raise RangeError(
                f"Found {len(invalid)} out-of-alphabet symbols, e.g., {invalid[:10]!r}"
            )
        return [operator.index(s) for s in items]


QUATERNARY_ALPHABET = SymbolAlphabet(symbols=(0, 1, 2, 3), name="Quaternary-4")
