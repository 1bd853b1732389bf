from .position import Position
from .swap import SwapTrade
from .trade import Trade, TradeInfo

__all__ = ["Position", "SwapTrade", "Trade", "TradeInfo"]
