"""Calculation parameter that routes on the counterparty of a trade.

A `TradeCounterpartyCalculationParameter` can be used anywhere a plain
`CalculationParameter` is expected. For each target it picks one underlying
parameter:

- a trade whose counterparty has an entry uses that entry
- anything else (unknown counterparty, no counterparty, not a trade) uses the default

and hands the `filter` decision to the chosen parameter.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Tuple

import pandas as pd

from quant_calc_parameter.basics.standard_id import StandardId, to_standard_id
from quant_calc_parameter.product.trade import Trade

from .parameter import CalculationParameter, query_type_name

if TYPE_CHECKING:
    from quant_calc_parameter.basics.measure import Measure
    from quant_calc_parameter.basics.target import CalculationTarget

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TradeCounterpartyCalculationParameter(CalculationParameter):
    """Selects the underlying parameter by trade counterparty.

    Prefer `of(...)`, which derives `query_type` from the default parameter.
    `parameters` is held as a read-only copy of the mapping passed in.
    """

    query_type: Any = field()
    parameters: Mapping[StandardId, CalculationParameter]
    default_parameter: CalculationParameter

    def __post_init__(self) -> None:
        if self.query_type is None:
            raise ValueError("query_type must not be None")
        if self.parameters is None:
            raise ValueError("parameters must not be None")
        if self.default_parameter is None:
            raise ValueError("default_parameter must not be None")
        if not self.parameters:
            raise ValueError("parameters must be a non-empty mapping of counterparty -> parameter")

        for value in (*self.parameters.values(), self.default_parameter):
            if value is None:
                raise ValueError("parameters must not contain None values")
            if value.query_type != self.query_type:
                raise ValueError(
                    f"Map contained a parameter '{value!r}' that did not match "
                    f"the expected query type '{query_type_name(self.query_type)}'"
                )

        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))

    @classmethod
    def of(
        cls,
        parameters: Mapping[Any, CalculationParameter],
        default_parameter: CalculationParameter,
    ) -> "TradeCounterpartyCalculationParameter":
        """Build from a counterparty -> parameter mapping and a default.

        Keys may be `StandardId` or 'scheme~value' strings.
        """
        if not parameters:
            raise ValueError("parameters must be a non-empty mapping of counterparty -> parameter")
        if default_parameter is None:
            raise ValueError("default_parameter must not be None")

        keyed: Dict[StandardId, CalculationParameter] = {}
        for key, value in parameters.items():
            cpty = to_standard_id(key)
            if cpty in keyed:
                raise ValueError(f"Duplicate counterparty {cpty} in parameters")
            keyed[cpty] = value

        obj = cls(default_parameter.query_type, keyed, default_parameter)
        logger.debug(
            "Built counterparty parameter for %s with %d counterparties",
            query_type_name(obj.query_type),
            len(keyed),
        )
        return obj

    # --- selection ---
    def filter(self, target: "CalculationTarget", measure: "Measure") -> Optional[CalculationParameter]:
        if not isinstance(target, Trade):
            logger.debug("Target %s is not a trade; using default for %s", type(target).__name__, measure)
            return self.default_parameter.filter(target, measure)

        cpty = target.info.counterparty
        if cpty is None:
            logger.debug("Trade has no counterparty; using default for %s", measure)
            return self.default_parameter.filter(target, measure)

        chosen = self.parameters.get(cpty)
        if chosen is None:
            logger.debug("Counterparty %s not mapped; using default for %s", cpty, measure)
            return self.default_parameter.filter(target, measure)

        logger.debug("Counterparty %s matched for %s", cpty, measure)
        return chosen.filter(target, measure)

    # --- introspection ---
    @classmethod
    def property_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def to_frame(self) -> pd.DataFrame:
        """Routing table, one row per counterparty followed by the default row."""
        rows: List[Dict[str, Any]] = [
            {
                "counterparty": str(cpty),
                "parameter": repr(param),
                "is_default": False,
            }
            for cpty, param in sorted(self.parameters.items(), key=lambda kv: str(kv[0]))
        ]
        rows.append(
            {
                "counterparty": None,
                "parameter": repr(self.default_parameter),
                "is_default": True,
            }
        )
        return pd.DataFrame(rows, columns=["counterparty", "parameter", "is_default"])

    # --- value semantics ---
    def __hash__(self) -> int:
        return hash((self.query_type, frozenset(self.parameters.items()), self.default_parameter))

    def __reduce__(self) -> Tuple[Any, ...]:
        # mappingproxy does not pickle; rebuild from a plain dict
        return (type(self), (self.query_type, dict(self.parameters), self.default_parameter))


__all__ = ["TradeCounterpartyCalculationParameter"]
