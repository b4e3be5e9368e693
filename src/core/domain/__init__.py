"""
Domain models and value objects.

Contains curve parameters, unit conversions and quote models.
"""

from src.core.domain.curve_params import (
    CURVE_A_SCALED,
    CURVE_B_SCALED,
    CURVE_C_SCALED,
    CURVE_SCALE,
    DEFAULT_CURVE_PARAMS,
    MAX_TOKEN_SUPPLY,
    TOKEN_DECIMALS,
    USD_DECIMALS,
    CurveParams,
)
from src.core.domain.quote import (
    BuyQuote,
    CurvePoint,
    Milestone,
    SellQuote,
    TradeSide,
)
from src.core.domain.units import (
    circulating_supply,
    quarks_to_tokens,
    tokens_to_quarks,
    usd_base_to_whole,
    usd_whole_to_base,
)

__all__ = [
    # Curve params
    "CURVE_SCALE",
    "CURVE_A_SCALED",
    "CURVE_B_SCALED",
    "CURVE_C_SCALED",
    "MAX_TOKEN_SUPPLY",
    "TOKEN_DECIMALS",
    "USD_DECIMALS",
    "CurveParams",
    "DEFAULT_CURVE_PARAMS",
    # Units module
    "quarks_to_tokens",
    "tokens_to_quarks",
    "usd_base_to_whole",
    "usd_whole_to_base",
    "circulating_supply",
    # Quote models
    "TradeSide",
    "BuyQuote",
    "SellQuote",
    "Milestone",
    "CurvePoint",
]
