"""Binarization, binary range coding and rANS coding.

Public API:
- Binarization, binarize_symbol, binarize_sequence, pack_bits_to_bytes
- arith_encode_bits, arith_decode_bits
- build_frequency_table, build_cumulative_table, rans_encode, rans_decode
"""

from __future__ import annotations

from entropykit.coding.binarization import (
    Binarization,
    EFFICIENT_CODEBOOK,
    INEFFICIENT_CODEBOOK,
    binarize_symbol,
    binarize_sequence,
    pack_bits_to_bytes,
)
from entropykit.coding.range_coder import arith_encode_bits, arith_decode_bits
from entropykit.coding.rans import (
    build_frequency_table,
    build_cumulative_table,
    rans_encode,
    rans_decode,
)

__all__ = [
    "Binarization",
    "EFFICIENT_CODEBOOK",
    "INEFFICIENT_CODEBOOK",
    "binarize_symbol",
    "binarize_sequence",
    "pack_bits_to_bytes",
    "arith_encode_bits",
    "arith_decode_bits",
    "build_frequency_table",
    "build_cumulative_table",
    "rans_encode",
    "rans_decode",
]
