"""Tests for opacity formatting."""

import pytest

from aurasvg.utils.formatting import format_opacity


@pytest.mark.parametrize(
    "percent, expected",
    [(0, "0.00"), (5, "0.05"), (9, "0.09"), (30, "0.30"), (39, "0.39"), (69, "0.69"), (90, "0.90"), (100, "1.00")],
)
def test_two_decimal_places(percent, expected):
    assert format_opacity(percent) == expected


def test_negative_rejected():
    with pytest.raises(ValueError):
        format_opacity(-1)
