from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from quant_calc_parameter.basics.measure import Measure
    from quant_calc_parameter.basics.target import CalculationTarget


class CalculationParameter:
    """Base class for calculation parameters (curve choices, model settings, etc.).

    A parameter declares its category through `query_type`, which callers use to
    look it up, and decides per target and measure whether it applies via
    `filter`.
    """

    # Non-data descriptor: dataclass subclasses may declare `query_type` as a field.
    @cached_property
    def query_type(self) -> Any:
        """The category of this parameter. Defaults to the concrete class."""
        return type(self)

    def filter(self, target: "CalculationTarget", measure: "Measure") -> Optional["CalculationParameter"]:
        """Return the parameter to use for this target and measure, or None if it does not apply."""
        return self


def query_type_name(query_type: Any) -> str:
    """Readable name of a category, whether it is a class or a tag value."""
    return getattr(query_type, "__name__", None) or str(query_type)
