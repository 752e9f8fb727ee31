import pytest

from entropykit.errors import RangeError
from entropykit.statistics import (
    binary_entropy,
    ideal_binarized_rate,
    lps_probability,
    symbol_counts,
    symbol_entropy,
)


def test_symbol_counts():
    assert symbol_counts([0, 0, 3]).tolist() == [2, 0, 0, 1]
    assert symbol_counts([]).tolist() == [0, 0, 0, 0]


def test_symbol_counts_rejects_bad_symbol():
    with pytest.raises(RangeError):
        symbol_counts([0, 7])


def test_symbol_entropy_uniform():
    assert symbol_entropy([0, 1, 2, 3]) == pytest.approx(2.0)


def test_symbol_entropy_constant():
    assert symbol_entropy([2] * 10) == 0.0


def test_symbol_entropy_skewed():
    symbols = [0] * 7 + [1, 2, 3]
    assert symbol_entropy(symbols) == pytest.approx(1.3567796, rel=1e-6)


def test_binary_entropy():
    assert binary_entropy([0, 1]) == pytest.approx(1.0)
    assert binary_entropy([1, 1, 1]) == 0.0
    assert binary_entropy([]) == 0.0


def test_lps_probability():
    assert lps_probability([0, 0, 0, 1]) == pytest.approx(0.25)
    assert lps_probability([1, 1, 1, 0]) == pytest.approx(0.25)
    assert lps_probability([]) == 0.0


def test_ideal_binarized_rate():
    assert ideal_binarized_rate([0, 1, 0, 1], 2) == pytest.approx(2.0)
    assert ideal_binarized_rate([], 0) == 0.0
