"""
entropykit: entropy coding for a fixed 4-symbol alphabet.

Provides LSB-first bitstream primitives, two binarization codebooks, a
static-model binary range coder and a static-model rANS coder, plus a small
report comparing them against the empirical symbol entropy.
"""

__all__ = [
    "QUATERNARY_ALPHABET",
    "Config",
    "__version__",
    # Bitstream
    "BitWriter",
    "BitReader",
    # Coding
    "Binarization",
    "binarize_symbol",
    "binarize_sequence",
    "pack_bits_to_bytes",
    "arith_encode_bits",
    "arith_decode_bits",
    "build_frequency_table",
    "rans_encode",
    "rans_decode",
    # Errors
    "EntropyCodingError",
    "RangeError",
    "TruncatedStreamError",
    "CorruptHeaderError",
    "OutOfDataError",
    # Report (lazy-imported via __getattr__)
    "compare_codings",
    "format_report",
    "generate_source",
]

__version__ = "0.1.0"

from typing import Any

from entropykit.alphabet import QUATERNARY_ALPHABET
from entropykit.config import Config
from entropykit.bitstream import BitWriter, BitReader
from entropykit.coding import (
    Binarization,
    binarize_symbol,
    binarize_sequence,
    pack_bits_to_bytes,
    arith_encode_bits,
    arith_decode_bits,
    build_frequency_table,
    rans_encode,
    rans_decode,
)
from entropykit.errors import (
    EntropyCodingError,
    RangeError,
    TruncatedStreamError,
    CorruptHeaderError,
    OutOfDataError,
)


def __getattr__(name: str) -> Any:  # lazy attribute access to keep numpy out of coder imports
    if name == "compare_codings":
        from entropykit.report import compare_codings as _cc

        return _cc
    if name == "format_report":
        from entropykit.report import format_report as _fr

        return _fr
    if name == "generate_source":
        from entropykit.source import generate_source as _gs

        return _gs
    raise AttributeError(f"module 'entropykit' has no attribute {name!r}")
