from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Dict, Iterable, Mapping, Optional, Tuple

from .parameter import CalculationParameter, query_type_name

if TYPE_CHECKING:
    from quant_calc_parameter.basics.measure import Measure
    from quant_calc_parameter.basics.target import CalculationTarget

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculationParameters:
    """
    The set of parameters a calculation run is configured with, at most one per query type.

    Callers look a parameter up by its `query_type` and the result is whatever that
    parameter's `filter` decides for the target and measure.
    """

    parameters: Mapping[Any, CalculationParameter] = field(default_factory=dict)

    def __post_init__(self) -> None:
        parameters = dict(self.parameters or {})
        for query_type, param in parameters.items():
            if param is None:
                raise ValueError("parameters must not contain None")
            if param.query_type != query_type:
                raise ValueError(
                    f"Parameter {param!r} is keyed under '{query_type_name(query_type)}' "
                    f"but has query type '{query_type_name(param.query_type)}'"
                )
        object.__setattr__(self, "parameters", MappingProxyType(parameters))

    @classmethod
    def empty(cls) -> "CalculationParameters":
        return cls()

    @classmethod
    def of(cls, *parameters: CalculationParameter) -> "CalculationParameters":
        """Build from parameters; two parameters with the same query type is an error."""
        return cls.of_list(parameters)

    @classmethod
    def of_list(cls, parameters: Iterable[CalculationParameter]) -> "CalculationParameters":
        keyed: Dict[Any, CalculationParameter] = {}
        for param in parameters:
            if param is None:
                raise ValueError("parameters must not contain None")
            if param.query_type in keyed:
                raise ValueError(
                    f"Duplicate parameter for query type '{query_type_name(param.query_type)}'"
                )
            keyed[param.query_type] = param
        return cls(keyed)

    def __len__(self) -> int:
        return len(self.parameters)

    def __contains__(self, query_type: object) -> bool:
        return query_type in self.parameters

    def find_parameter(
        self,
        query_type: Any,
        target: "CalculationTarget",
        measure: "Measure",
    ) -> Optional[CalculationParameter]:
        """The parameter of `query_type` that applies to this target and measure, if any."""
        param = self.parameters.get(query_type)
        if param is None:
            logger.debug("No parameter configured for %s", query_type_name(query_type))
            return None
        return param.filter(target, measure)

    def filter(self, target: "CalculationTarget", measure: "Measure") -> "CalculationParameters":
        """Resolve every parameter for one target and measure, dropping those that do not apply."""
        resolved: Dict[Any, CalculationParameter] = {}
        for query_type, param in self.parameters.items():
            chosen = param.filter(target, measure)
            if chosen is not None:
                resolved[query_type] = chosen
        return CalculationParameters(resolved)

    def combined_with(self, other: "CalculationParameters") -> "CalculationParameters":
        """Merge two sets; on a clash the parameter from this set is kept."""
        merged = dict(other.parameters)
        merged.update(self.parameters)
        return CalculationParameters(merged)

    def __hash__(self) -> int:
        return hash(frozenset(self.parameters.items()))

    def __reduce__(self) -> Tuple[Any, ...]:
        return (type(self), (dict(self.parameters),))

    def __repr__(self) -> str:
        names = ", ".join(query_type_name(q) for q in self.parameters)
        return f"CalculationParameters([{names}])"
