from __future__ import annotations

from dataclasses import dataclass

from quant_calc_parameter.basics.standard_id import StandardId, to_standard_id
from quant_calc_parameter.basics.target import CalculationTarget


@dataclass(frozen=True)
class Position(CalculationTarget):
    """A holding of a security. Not a trade, so it carries no counterparty."""

    security_id: StandardId
    quantity: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "security_id", to_standard_id(self.security_id))
        object.__setattr__(self, "quantity", float(self.quantity))
