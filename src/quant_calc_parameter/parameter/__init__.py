from .parameter import CalculationParameter
from .counterparty import TradeCounterpartyCalculationParameter
from .discount_curve import DiscountCurveParameter, FlatDiscountCurve
from .parameters import CalculationParameters

__all__ = [
    "CalculationParameter",
    "CalculationParameters",
    "DiscountCurveParameter",
    "FlatDiscountCurve",
    "TradeCounterpartyCalculationParameter",
]
