import pytest

from entropykit.errors import RangeError
from entropykit.source import generate_source


def test_length_and_alphabet():
    symbols = generate_source(1000)
    assert len(symbols) == 1000
    assert set(symbols) <= {0, 1, 2, 3}
    assert all(type(s) is int for s in symbols)


def test_deterministic_for_seed():
    assert generate_source(200, seed=7) == generate_source(200, seed=7)


def test_different_seeds_differ():
    assert generate_source(200, seed=1) != generate_source(200, seed=2)


def test_default_distribution_skew():
    symbols = generate_source(10000, seed=123)
    share0 = symbols.count(0) / len(symbols)
    assert 0.65 < share0 < 0.75


def test_degenerate_distribution():
    assert generate_source(50, (0.0, 0.0, 1.0, 0.0), seed=1) == [2] * 50


def test_zero_length():
    assert generate_source(0) == []


def test_negative_length():
    with pytest.raises(RangeError):
        generate_source(-1)


@pytest.mark.parametrize(
    "probs",
    [
        (0.5, 0.5),
        (0.5, 0.5, 0.5, -0.5),
        (0.3, 0.3, 0.3, 0.3),
    ],
)
def test_invalid_probabilities(probs):
    with pytest.raises(RangeError):
        generate_source(10, probs)
