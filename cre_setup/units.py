"""Scaled-integer <-> human-readable conversions.

Rates are stored on-chain in basis points (9000 = 90%), token amounts in the
mint's smallest unit (10**decimals per token). Decimal keeps both exact.
"""

from decimal import Decimal
from typing import Union

from cre_setup.constants import BPS_PER_PERCENT, USDC_DECIMALS

Number = Union[int, str, Decimal]


def bps_to_percent(bps: int) -> Decimal:
    return Decimal(bps) / BPS_PER_PERCENT


def percent_to_bps(percent: Number) -> int:
    return int(Decimal(percent) * BPS_PER_PERCENT)


def to_ui_amount(raw: int, decimals: int = USDC_DECIMALS) -> Decimal:
    return Decimal(raw).scaleb(-decimals)


def to_raw_amount(amount: Number, decimals: int = USDC_DECIMALS) -> int:
    return int(Decimal(amount).scaleb(decimals))


def format_decimal(value: Decimal) -> str:
    """90.00 -> "90", 0.250 -> "0.25", 1E+6 -> "1000000"."""
    return format(Decimal(value).normalize(), "f")
