from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any, Optional

from quant_calc_parameter.basics.standard_id import StandardId, to_standard_id
from quant_calc_parameter.basics.target import CalculationTarget
from quant_calc_parameter.util import to_optional_date


@dataclass(frozen=True)
class TradeInfo:
    """
    Identity and metadata of a trade.

    Ids may be given as `StandardId` or 'scheme~value' strings; dates as anything
    `util.to_date` accepts.
    """
    id: Optional[StandardId] = None
    counterparty: Optional[StandardId] = None
    trade_date: Optional[date] = None
    settlement_date: Optional[date] = None

    def __post_init__(self) -> None:
        if self.id is not None:
            object.__setattr__(self, "id", to_standard_id(self.id))
        if self.counterparty is not None:
            object.__setattr__(self, "counterparty", to_standard_id(self.counterparty))
        object.__setattr__(self, "trade_date", to_optional_date(self.trade_date))
        object.__setattr__(self, "settlement_date", to_optional_date(self.settlement_date))

        if (
            self.trade_date is not None
            and self.settlement_date is not None
            and self.settlement_date < self.trade_date
        ):
            raise ValueError(
                f"settlement_date {self.settlement_date} must not be before trade_date {self.trade_date}"
            )

    @classmethod
    def empty(cls) -> "TradeInfo":
        return cls()

    def with_counterparty(self, counterparty: Any) -> "TradeInfo":
        return replace(self, counterparty=counterparty)


@dataclass(frozen=True)
class Trade(CalculationTarget):
    """Base trade. Anything that is a `Trade` exposes `info.counterparty`."""

    info: TradeInfo = field(default_factory=TradeInfo.empty)

    @property
    def counterparty(self) -> Optional[StandardId]:
        return self.info.counterparty
