"""
Display formatting shared by every consumer of curve results.
"""

from src.core.display.formatting import (
    format_reserve_label,
    format_token_amount,
    format_usd,
    usd_decimals_for,
)

__all__ = [
    "format_reserve_label",
    "format_token_amount",
    "format_usd",
    "usd_decimals_for",
]
