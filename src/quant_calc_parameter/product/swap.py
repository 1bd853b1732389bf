from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from quant_calc_parameter.product.trade import Trade
from quant_calc_parameter.util import to_optional_date


@dataclass(frozen=True)
class SwapTrade(Trade):
    """Fixed/float interest rate swap trade (terms only, no pricing)."""

    # Core economics
    pay_receive: str = "pay"  # "pay" fixed / receive float by convention
    effective_date: Optional[date] = None
    maturity_date: Optional[date] = None
    notional: float = 1.0
    currency: str = "USD"

    # Fixed leg
    fixed_rate: Optional[float] = None
    fixed_frequency: str = "6M"

    # Floating leg
    float_index: Optional[str] = None  # e.g., "SOFR", "USD-LIBOR-3M"
    float_frequency: str = "3M"

    def __post_init__(self) -> None:
        object.__setattr__(self, "effective_date", to_optional_date(self.effective_date))
        object.__setattr__(self, "maturity_date", to_optional_date(self.maturity_date))

    def validate(self) -> None:
        pr = str(self.pay_receive).lower()
        if pr not in {"pay", "receive"}:
            raise ValueError(f"pay_receive must be 'pay' or 'receive'; got {self.pay_receive!r}")
        if self.maturity_date is None:
            raise ValueError("maturity_date is required")
        if self.effective_date is not None and self.maturity_date <= self.effective_date:
            raise ValueError("maturity_date must be after effective_date")
