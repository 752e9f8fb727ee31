"""Empirical entropy statistics for symbol and bin sequences.

All functions return 0.0 for empty input rather than raising, since the
comparison report treats an empty source as carrying no information.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from entropykit.alphabet import QUATERNARY_ALPHABET


def symbol_counts(symbols: Sequence[int]) -> np.ndarray:
    """Return a length-4 integer array of per-symbol counts."""

    seq = QUATERNARY_ALPHABET.validate(symbols)
    return np.bincount(np.asarray(seq, dtype=np.int64), minlength=QUATERNARY_ALPHABET.size)


def _entropy_from_counts(counts: np.ndarray) -> float:
    total = counts.sum()
    if total == 0:
        return 0.0
    p = counts[counts > 0] / total
    return float(-(p * np.log2(p)).sum())


def symbol_entropy(symbols: Sequence[int]) -> float:
    """Empirical entropy H = -sum p log2 p in bits/symbol."""

    return _entropy_from_counts(symbol_counts(symbols))


def _bin_counts(bits: Sequence[int]) -> np.ndarray:
    arr = np.asarray([1 if b else 0 for b in bits], dtype=np.int64)
    return np.bincount(arr, minlength=2)


def binary_entropy(bits: Sequence[int]) -> float:
    """Empirical entropy of a bin sequence in bits/bin."""

    return _entropy_from_counts(_bin_counts(bits))


def lps_probability(bits: Sequence[int]) -> float:
    """Observed probability of the less probable bin value."""

    counts = _bin_counts(bits)
    total = counts.sum()
    if total == 0:
        return 0.0
    return float(counts.min() / total)


def ideal_binarized_rate(bits: Sequence[int], n_symbols: int) -> float:
    """Ideal static-model rate in bits/symbol: bin entropy times bins/symbol."""

    if n_symbols <= 0:
        return 0.0
    return binary_entropy(bits) * (len(bits) / n_symbols)


__all__ = [
    "symbol_counts",
    "symbol_entropy",
    "binary_entropy",
    "lps_probability",
    "ideal_binarized_rate",
]
