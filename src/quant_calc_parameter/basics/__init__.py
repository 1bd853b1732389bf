from .measure import Measure, Measures
from .standard_id import StandardId, to_standard_id
from .target import CalculationTarget

__all__ = ["CalculationTarget", "Measure", "Measures", "StandardId", "to_standard_id"]
