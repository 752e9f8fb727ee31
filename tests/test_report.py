import copy
import json

import pytest

from entropykit.errors import RangeError
from entropykit.report import (
    RANGE_CODER_NOTE,
    compare_codings,
    format_report,
    format_table_ascii,
    format_table_csv,
    format_table_markdown,
)
from entropykit.source import generate_source


@pytest.fixture(scope="module")
def result() -> dict:
    return compare_codings(generate_source(1000, seed=12345))


def test_compare_codings_structure(result: dict):
    assert result["num_symbols"] == 1000
    assert sum(result["symbol_counts"]) == 1000
    assert set(result) >= {"symbol_entropy", "efficient", "inefficient", "rans", "winner"}


def test_efficient_uses_fewer_bins(result: dict):
    assert result["efficient"]["bins"] < result["inefficient"]["bins"]
    assert result["efficient"]["bins_per_symbol"] < result["inefficient"]["bins_per_symbol"]


def test_rans_roundtrip_and_rate(result: dict):
    rans = result["rans"]
    assert rans["roundtrip"] is True
    assert rans["coded_rate"] == pytest.approx(8.0 * rans["coded_bytes"] / 1000)
    assert rans["coded_rate"] >= result["symbol_entropy"] - 0.05


def test_cabac_state_matches_observed_probability(result: dict):
    eff = result["efficient"]
    assert 0 <= eff["cabac_state"] < 64
    assert eff["cabac_probability_error"] == pytest.approx(
        abs(eff["observed_lps_probability"] - eff["cabac_lps_probability"])
    )


def test_ideal_rate_not_below_entropy(result: dict):
    """A static bin model cannot beat the symbol entropy."""

    assert result["efficient"]["ideal_rate"] >= result["symbol_entropy"] - 1e-9
    assert result["inefficient"]["ideal_rate"] >= result["symbol_entropy"] - 1e-9


def test_winner_choice(result: dict):
    diff_rans = abs(result["rans"]["coded_rate"] - result["symbol_entropy"])
    diff_eff = abs(result["efficient"]["ideal_rate"] - result["symbol_entropy"])
    expected = "rans" if diff_rans < diff_eff else "efficient binarization"
    assert result["winner"] == expected


def test_format_table_ascii(result: dict):
    text = format_table_ascii(result)
    assert "Scheme" in text
    assert "efficient binarization" in text
    assert "Winner" in text


def test_format_markdown(result: dict):
    text = format_table_markdown(result)
    assert "| Scheme |" in text
    assert "| --- |" in text


def test_format_csv(result: dict):
    lines = format_table_csv(result).splitlines()
    assert lines[0].startswith("scheme,")
    assert len(lines) == 4
    assert lines[3].startswith("rans,")


def test_format_json_roundtrips(result: dict):
    parsed = json.loads(format_report(result, "json"))
    assert parsed["winner"] == result["winner"]
    assert parsed["rans"]["coded_bytes"] == result["rans"]["coded_bytes"]


def test_format_report_case_insensitive(result: dict):
    assert format_report(result, "MARKDOWN") == format_table_markdown(result)


def test_format_report_unknown(result: dict):
    with pytest.raises(RangeError):
        format_report(result, "html")


def _with_range_roundtrip(result: dict, ok: bool) -> dict:
    patched = copy.deepcopy(result)
    patched["efficient"]["roundtrip"] = True
    patched["inefficient"]["roundtrip"] = ok
    return patched


@pytest.mark.parametrize("formatter", [format_table_ascii, format_table_markdown])
def test_range_coder_failure_note(result: dict, formatter):
    failed = formatter(_with_range_roundtrip(result, False))
    assert failed.splitlines()[-1] == RANGE_CODER_NOTE
    assert "carries" in RANGE_CODER_NOTE

    passed = formatter(_with_range_roundtrip(result, True))
    assert RANGE_CODER_NOTE not in passed
