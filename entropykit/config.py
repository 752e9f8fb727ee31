"""Centralized configuration for the entropy coders and the demo driver.

Defines immutable defaults for the fixed-point coder parameters, stream
layout sizes, and the synthetic source used by ``entropykit demo`` so that
every encode/decode call and every report is reproducible.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Config:
    """Immutable configuration defaults for the project."""

    # Alphabet
    ALPHABET_SIZE: int = 4

    # Binary range coder
    RANGE_INITIAL: int = 0xFFFFFFFF
    RANGE_TOP: int = 1 << 24
    RANGE_HEADER_SIZE: int = 12

    # rANS
    RANS_L: int = 1 << 23
    RANS_TOTFREQ_BITS: int = 12
    RANS_TOTFREQ: int = 1 << 12
    RANS_HEADER_SIZE: int = 12

    # Both coders flush a 32-bit state register
    STATE_BYTES: int = 4

    # Demo source
    DEFAULT_NUM_SYMBOLS: int = 1000
    DEFAULT_SEED: int = 12345
    DEFAULT_SOURCE_PROBABILITIES: tuple[float, float, float, float] = (0.7, 0.1, 0.1, 0.1)


# Convenience re-exports and constants
MASK32: int = 0xFFFFFFFF
ALPHABET_SIZE: int = Config.ALPHABET_SIZE
RANS_L: int = Config.RANS_L
RANS_TOTFREQ: int = Config.RANS_TOTFREQ
RANGE_TOP: int = Config.RANGE_TOP
SUPPORTED_REPORT_FORMATS: list[str] = ["table", "markdown", "csv", "json"]


_CONFIG_SINGLETON: Optional[Config] = None


def get_config() -> Config:
    """Return a singleton `Config` instance."""

    global _CONFIG_SINGLETON
    if _CONFIG_SINGLETON is None:
        _CONFIG_SINGLETON = Config()
    return _CONFIG_SINGLETON
