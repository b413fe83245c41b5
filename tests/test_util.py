import pytest

from rltoolkit.util import check_interval, format_float, summary_from_keys


def test_check_interval_accepts_bounds():
    check_interval(0.0, 0.0, 1.0, "alpha")
    check_interval(1.0, 0.0, 1.0, "alpha")
    with pytest.raises(ValueError):
        check_interval(1.5, 0.0, 1.0, "alpha")


def test_check_interval_message_names_variable():
    with pytest.raises(ValueError, match=r"Invalid value for `gamma`\. Must be in the interval"):
        check_interval(-0.1, 0.0, 1.0, "gamma")


def test_format_float_fixed_notation():
    assert format_float(0.5, 2) == "0.50"


def test_format_float_scientific_notation():
    assert format_float(0.001, 2) == "1.00e-3"


@pytest.mark.parametrize("value", [0.5, 12.25, 0.001, 3e-7, 0.0])
def test_format_float_round_trips(value):
    text = format_float(value, 4)
    assert float(text) == pytest.approx(value, rel=1e-3, abs=1e-12)


def test_format_float_non_finite():
    assert format_float(float("nan"), 3) == "NaN"
    assert format_float(float("inf"), 3) == "inf"
    assert format_float(float("-inf"), 3) == "-inf"


def test_summary_from_keys_zeroed_and_sorted():
    summary = summary_from_keys(["reward", "score", "steps"][::-1])
    assert list(summary) == ["reward", "score", "steps"]
    assert all(v == 0.0 for v in summary.values())