"""
Quotes — котировки сделок и проекции кривой поверх движка
"""

from src.quotes.projections import (
    CHART_MIN_RESERVE_USD,
    CHART_RESERVE_MULTIPLIER,
    RESERVE_MILESTONES_USD,
    RESERVE_ZOOM_TARGETS_USD,
    chart_supply_window,
    next_milestone,
    sample_curve,
)
from src.quotes.trade_quotes import (
    DEFAULT_QUOTE_CONFIG,
    QuoteConfig,
    buy_price_impact_pct,
    quote_buy,
    quote_sell,
    sell_price_impact_pct,
)

__all__ = [
    # Trade quotes
    "QuoteConfig",
    "DEFAULT_QUOTE_CONFIG",
    "quote_buy",
    "quote_sell",
    "buy_price_impact_pct",
    "sell_price_impact_pct",
    # Projections
    "RESERVE_MILESTONES_USD",
    "RESERVE_ZOOM_TARGETS_USD",
    "CHART_RESERVE_MULTIPLIER",
    "CHART_MIN_RESERVE_USD",
    "next_milestone",
    "chart_supply_window",
    "sample_curve",
]
