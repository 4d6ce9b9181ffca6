"""Trade-off analysis: why the ranking came out the way it did."""

from .tradeoffs import analyze_trade_offs

__all__ = ["analyze_trade_offs"]
