"""
Contract Validation Module

Модуль для валидации JSON контрактов котировок bonding curve.
"""

from src.core.contracts.validators import (
    BuyQuoteValidator,
    ContractValidator,
    MilestoneValidator,
    SchemaLoader,
    SellQuoteValidator,
    validate_buy_quote,
    validate_milestone,
    validate_sell_quote,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BuyQuoteValidator",
    "SellQuoteValidator",
    "MilestoneValidator",
    # Functions
    "validate_buy_quote",
    "validate_sell_quote",
    "validate_milestone",
]
