from decimal import Decimal

from cre_setup.units import (
    bps_to_percent,
    format_decimal,
    percent_to_bps,
    to_raw_amount,
    to_ui_amount,
)


def test_bps_percent_round_trip() -> None:
    for bps in range(0, 10_001):
        assert percent_to_bps(bps_to_percent(bps)) == bps


def test_amount_round_trip() -> None:
    for raw in (0, 1, 999_999, 1_000_000, 1000 * 10**6, 2**64 - 1):
        assert to_raw_amount(to_ui_amount(raw)) == raw
    assert to_raw_amount(to_ui_amount(12345, decimals=2), decimals=2) == 12345


def test_known_values() -> None:
    assert bps_to_percent(9000) == Decimal(90)
    assert bps_to_percent(25) == Decimal("0.25")
    assert percent_to_bps("8") == 800
    assert to_ui_amount(1000 * 10**6) == Decimal(1000)
    assert to_raw_amount("0.000001") == 1


def test_format_decimal_strips_zeros_without_exponent() -> None:
    assert format_decimal(bps_to_percent(9000)) == "90"
    assert format_decimal(bps_to_percent(25)) == "0.25"
    assert format_decimal(bps_to_percent(0)) == "0"
    assert format_decimal(to_ui_amount(1_000_000 * 10**6)) == "1000000"
