"""Exception hierarchy for the bitstream primitives and entropy coders.

Every error aborts the encode/decode call it occurs in; none are retried.
The value-type errors also derive from ``ValueError`` so that callers which
only know about builtin exceptions still catch them.
"""

from __future__ import annotations


class EntropyCodingError(Exception):
    """Base class for all entropykit errors."""


class RangeError(EntropyCodingError, ValueError):
    """A symbol or field value lies outside its defined domain."""


class TruncatedStreamError(EntropyCodingError, ValueError):
    """A stream is shorter than its header or state-initialization bytes."""


class CorruptHeaderError(EntropyCodingError, ValueError):
    """A parsed header field is structurally invalid."""


class OutOfDataError(EntropyCodingError, EOFError):
    """A bit-level read ran past the end of the input buffer."""


__all__ = [
    "EntropyCodingError",
    "RangeError",
    "TruncatedStreamError",
    "CorruptHeaderError",
    "OutOfDataError",
]
