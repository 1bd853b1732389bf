import logging

from .basics import CalculationTarget, Measure, Measures, StandardId
from .parameter import (
    CalculationParameter,
    CalculationParameters,
    DiscountCurveParameter,
    FlatDiscountCurve,
    TradeCounterpartyCalculationParameter,
)
from .product import Position, SwapTrade, Trade, TradeInfo

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CalculationParameter",
    "CalculationParameters",
    "CalculationTarget",
    "DiscountCurveParameter",
    "FlatDiscountCurve",
    "Measure",
    "Measures",
    "Position",
    "StandardId",
    "SwapTrade",
    "Trade",
    "TradeCounterpartyCalculationParameter",
    "TradeInfo",
]
