from __future__ import annotations

import re
from dataclasses import dataclass

_NAME_PATTERN = re.compile(r"[A-Za-z0-9]+")


@dataclass(frozen=True)
class Measure:
    """Names what is being calculated, e.g. present value."""

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not _NAME_PATTERN.fullmatch(self.name):
            raise ValueError(f"Measure name must be non-empty and alphanumeric. Got {self.name!r}.")

    @classmethod
    def of(cls, name: str) -> "Measure":
        return cls(name=name)

    def __str__(self) -> str:
        return self.name


class Measures:
    """Standard measures."""

    PRESENT_VALUE = Measure("PresentValue")
    PV01_CALIBRATED_SUM = Measure("PV01CalibratedSum")
    PAR_RATE = Measure("ParRate")
    CURRENCY_EXPOSURE = Measure("CurrencyExposure")
    CASH_FLOWS = Measure("CashFlows")
