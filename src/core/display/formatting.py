"""
Formatting — Отображение USD и количеств токенов

Все вызывающие получают одинаковые строки для одинаковых значений.
Округление — ROUND_DOWN (усечение), разделитель тысяч — запятая.

Уровни точности USD (по величине суммы):
    amount < 0.01  → 6 знаков   ($0.001234)
    amount < 1     → 4 знака    ($0.1234)
    иначе          → 3 знака    ($1,234.500)
"""

from decimal import ROUND_DOWN, Decimal, localcontext
from typing import Final

from src.core.math.numerical_safeguards import (
    CURVE_DECIMAL_CONTEXT,
    NumberLike,
    to_decimal,
)

# =============================================================================
# ПОРОГИ
# =============================================================================

USD_MICRO_THRESHOLD: Final[Decimal] = Decimal("0.01")
USD_MICRO_DECIMALS: Final[int] = 6

USD_CENTS_THRESHOLD: Final[Decimal] = Decimal("1")
USD_CENTS_DECIMALS: Final[int] = 4

USD_DEFAULT_DECIMALS: Final[int] = 3

TOKEN_DEFAULT_DECIMALS: Final[int] = 4

_THOUSAND: Final[Decimal] = Decimal(1_000)
_MILLION: Final[Decimal] = Decimal(1_000_000)


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def _format_grouped(value: Decimal, decimals: int) -> str:
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")

    with localcontext(CURVE_DECIMAL_CONTEXT) as ctx:
        # quantize требует precision ≥ числу цифр результата
        ctx.prec = max(ctx.prec, value.adjusted() + decimals + 1)
        quantized = value.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_DOWN)

    # -0.000000 после усечения отображается как 0.000000
    if quantized.is_zero():
        quantized = abs(quantized)

    return f"{quantized:,f}"


def usd_decimals_for(amount: Decimal) -> int:
    """
    Количество знаков после запятой для суммы USD.

    Examples:
        >>> usd_decimals_for(Decimal("0.005"))
        6
        >>> usd_decimals_for(Decimal("0.5"))
        4
        >>> usd_decimals_for(Decimal("5"))
        3
    """
    if amount < USD_MICRO_THRESHOLD:
        return USD_MICRO_DECIMALS
    if amount < USD_CENTS_THRESHOLD:
        return USD_CENTS_DECIMALS
    return USD_DEFAULT_DECIMALS


def format_usd(amount: NumberLike) -> str:
    """
    Сумма USD для отображения.

    Examples:
        >>> format_usd(Decimal("0.000001234"))
        '$0.000001'
        >>> format_usd(1234.5)
        '$1,234.500'
    """
    value = to_decimal(amount, "amount")
    return "$" + _format_grouped(value, usd_decimals_for(value))


def format_token_amount(amount: NumberLike, decimals: int = TOKEN_DEFAULT_DECIMALS) -> str:
    """
    Количество токенов для отображения.

    Examples:
        >>> format_token_amount(Decimal("1234567.891234"))
        '1,234,567.8912'
        >>> format_token_amount(5, decimals=0)
        '5'
    """
    value = to_decimal(amount, "amount")
    return _format_grouped(value, decimals)


def format_reserve_label(amount: NumberLike) -> str:
    """
    Короткая метка reserve value для milestone и zoom.

    Examples:
        >>> format_reserve_label(100)
        '$100'
        >>> format_reserve_label(10_000)
        '$10K'
        >>> format_reserve_label(2_500_000)
        '$2.5M'
    """
    value = to_decimal(amount, "amount")

    with localcontext(CURVE_DECIMAL_CONTEXT):
        if value >= _MILLION:
            scaled, suffix = value / _MILLION, "M"
        elif value >= _THOUSAND:
            scaled, suffix = value / _THOUSAND, "K"
        else:
            scaled, suffix = value, ""

        text = f"{scaled.normalize():f}"

    return f"${text}{suffix}"
