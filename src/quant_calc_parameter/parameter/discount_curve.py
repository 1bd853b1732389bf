from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, FrozenSet, Iterable, Optional

import QuantLib as ql

from quant_calc_parameter.util import get_day_count, to_date, to_ql_date

from .parameter import CalculationParameter

if TYPE_CHECKING:
    from quant_calc_parameter.basics.measure import Measure
    from quant_calc_parameter.basics.target import CalculationTarget


class FlatDiscountCurve:
    """Flat continuously-compounded discount curve anchored at a reference date."""

    def __init__(
        self,
        rate: float,
        reference_date: Any,
        *,
        currency: str = "USD",
        day_count: str = "ACT365F",
    ) -> None:
        self.rate = float(rate)
        self.reference_date = to_date(reference_date)
        self.currency = currency
        self.day_count_name = day_count

        self._day_count = get_day_count(day_count)
        self._curve = ql.FlatForward(to_ql_date(self.reference_date), self.rate, self._day_count)
        self._handle = ql.YieldTermStructureHandle(self._curve)

    @property
    def handle(self) -> ql.YieldTermStructureHandle:
        return self._handle

    def discount(self, d: Any) -> float:
        return float(self._curve.discount(to_ql_date(d)))

    def zero_rate(self, d: Any) -> float:
        zr = self._curve.zeroRate(to_ql_date(d), self._day_count, ql.Continuous, ql.Annual)
        return float(zr.rate())

    # QuantLib objects do not pickle; rebuild the curve from its inputs.
    def __getstate__(self) -> dict:
        return {
            "rate": self.rate,
            "reference_date": self.reference_date,
            "currency": self.currency,
            "day_count": self.day_count_name,
        }

    def __setstate__(self, state: dict) -> None:
        state = dict(state)
        self.__init__(state.pop("rate"), state.pop("reference_date"), **state)

    def _key(self) -> tuple:
        return (self.rate, self.reference_date, self.currency, self.day_count_name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FlatDiscountCurve):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"FlatDiscountCurve(rate={self.rate}, reference_date={self.reference_date}, "
            f"currency={self.currency!r}, day_count={self.day_count_name!r})"
        )


@dataclass(frozen=True)
class DiscountCurveParameter(CalculationParameter):
    """Selects the discount curve to use.

    If `measures` is given the parameter only applies to those measures and
    `filter` returns None for any other.
    """

    name: str
    curve: FlatDiscountCurve
    measures: Optional[FrozenSet["Measure"]] = field(default=None)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("DiscountCurveParameter requires a name.")
        if self.curve is None:
            raise ValueError("DiscountCurveParameter requires a curve.")
        if self.measures is not None:
            object.__setattr__(self, "measures", frozenset(self.measures))

    @classmethod
    def flat(
        cls,
        name: str,
        rate: float,
        reference_date: Any,
        *,
        currency: str = "USD",
        day_count: str = "ACT365F",
        measures: Iterable["Measure"] | None = None,
    ) -> "DiscountCurveParameter":
        curve = FlatDiscountCurve(rate, reference_date, currency=currency, day_count=day_count)
        return cls(name=name, curve=curve, measures=None if measures is None else frozenset(measures))

    def filter(self, target: "CalculationTarget", measure: "Measure") -> Optional["DiscountCurveParameter"]:
        if self.measures is not None and measure not in self.measures:
            return None
        return self
