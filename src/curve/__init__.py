"""
Bonding Curve Engine

Цена, стоимость выпуска, обратные функции и выплаты при продаже.
"""

from src.curve.bonding_curve import (
    SEARCH_ITERATIONS_DEFAULT,
    SUPPLY_OVERSHOOT_TOLERANCE,
    cost_to_mint,
    reserve_value,
    search_supply,
    sell_proceeds,
    sell_value_gross,
    spot_price,
    supply_at_price,
    supply_at_reserve_value,
    tokens_for_amount,
)

__all__ = [
    # Constants
    "SEARCH_ITERATIONS_DEFAULT",
    "SUPPLY_OVERSHOOT_TOLERANCE",
    # Forward
    "spot_price",
    "cost_to_mint",
    "reserve_value",
    # Inverse
    "tokens_for_amount",
    "supply_at_reserve_value",
    "supply_at_price",
    "search_supply",
    # Sell
    "sell_value_gross",
    "sell_proceeds",
]
