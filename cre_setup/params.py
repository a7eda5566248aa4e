# cre_setup/params.py

from dataclasses import astuple, dataclass, fields
from typing import List, Tuple

from cre_setup.constants import MAX_BPS, USDC_DECIMALS, USDC_SYMBOL
from cre_setup.units import bps_to_percent, format_decimal, to_raw_amount, to_ui_amount

U8_MAX  = 2**8 - 1
U64_MAX = 2**64 - 1


@dataclass(frozen=True)
class PlatformParams:
    """
    Arguments of loan_core's `initialize` instruction, in instruction order.
    Rates are basis points, loan amounts are smallest USDC units.
    """

    max_ltv: int
    min_loan_amount: int
    max_loan_amount: int
    origination_fee: int
    servicing_fee: int
    min_interest_rate: int
    default_interest_rate: int
    late_fee_rate: int
    grace_period_days: int

    RATE_FIELDS = (
        "max_ltv",
        "origination_fee",
        "servicing_fee",
        "min_interest_rate",
        "default_interest_rate",
        "late_fee_rate",
    )

    @classmethod
    def from_record(cls, record) -> "PlatformParams":
        """Pick the parameter fields out of a fetched PlatformConfig account."""
        return cls(**{f.name: getattr(record, f.name) for f in fields(cls)})

    def instruction_args(self) -> Tuple[int, ...]:
        return astuple(self)

    def validate(self) -> "PlatformParams":
        for name in self.RATE_FIELDS:
            value = getattr(self, name)
            if not 0 <= value <= MAX_BPS:
                raise ValueError(f"{name} must be within 0..{MAX_BPS} basis points, got {value}")
        for name in ("min_loan_amount", "max_loan_amount"):
            value = getattr(self, name)
            if not 0 <= value <= U64_MAX:
                raise ValueError(f"{name} must fit in a u64, got {value}")
        if self.min_loan_amount > self.max_loan_amount:
            raise ValueError("min_loan_amount exceeds max_loan_amount")
        if not 0 <= self.grace_period_days <= U8_MAX:
            raise ValueError(f"grace_period_days must fit in a u8, got {self.grace_period_days}")
        return self

    def report_lines(self, decimals: int = USDC_DECIMALS) -> List[str]:
        def pct(bps):
            return f"{format_decimal(bps_to_percent(bps))}%"

        def usdc(raw):
            return f"{format_decimal(to_ui_amount(raw, decimals))} {USDC_SYMBOL}"

        return [
            f"Max LTV: {pct(self.max_ltv)}",
            f"Min Loan Amount: {usdc(self.min_loan_amount)}",
            f"Max Loan Amount: {usdc(self.max_loan_amount)}",
            f"Origination Fee: {pct(self.origination_fee)}",
            f"Servicing Fee: {pct(self.servicing_fee)}",
            f"Min Interest Rate: {pct(self.min_interest_rate)}",
            f"Default Interest Rate: {pct(self.default_interest_rate)}",
            f"Late Fee Rate: {pct(self.late_fee_rate)}",
            f"Grace Period: {self.grace_period_days} days",
        ]


DEFAULT_PARAMS = PlatformParams(
    max_ltv=9000,                           # 90.00%
    min_loan_amount=to_raw_amount(1000),    # 1,000 USDC
    max_loan_amount=to_raw_amount(1_000_000),  # 1,000,000 USDC
    origination_fee=100,                    # 1.00%
    servicing_fee=25,                       # 0.25%
    min_interest_rate=800,                  # 8.00%
    default_interest_rate=1000,             # 10.00%
    late_fee_rate=500,                      # 5.00%
    grace_period_days=10,
)
