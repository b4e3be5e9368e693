"""
Units — Централизованный модуль конверсии единиц

Единственный допустимый способ преобразований между:
- quarks (наименьшая единица токена, u64 on-chain) и целыми токенами
- base units USD резерва (USDF, 6 знаков) и целыми USD
- балансом vault резерва и circulating supply

ЗАПРЕЩЕНО смешивать единицы без явного конвертера из этого модуля.
Circulating supply вычисляется всеми вызывающими одинаково:
    circulating = max_supply - vault_balance / quarks_per_token
"""

from decimal import ROUND_DOWN, Decimal, localcontext
from typing import Optional

from src.core.domain.curve_params import DEFAULT_CURVE_PARAMS, CurveParams
from src.core.errors import InvalidAmount
from src.core.math.numerical_safeguards import (
    CURVE_DECIMAL_CONTEXT,
    NumberLike,
    validate_non_negative,
)


def _validate_base_units(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidAmount(
            f"{name} must be an integer amount of base units, got {value!r}"
        )
    if value < 0:
        raise InvalidAmount(f"{name} must be non-negative, got {value}")
    return value


# =============================================================================
# QUARKS <-> TOKENS
# =============================================================================


def quarks_to_tokens(quarks: int, params: CurveParams = DEFAULT_CURVE_PARAMS) -> Decimal:
    """
    Конверсия: quarks → целые токены.

    Args:
        quarks: Количество в наименьших единицах токена
        params: Параметры кривой (масштаб токена)

    Returns:
        Количество целых токенов (Decimal, без потерь)

    Examples:
        >>> quarks_to_tokens(15_000_000_000)
        Decimal('1.5')
    """
    _validate_base_units(quarks, "quarks")
    with localcontext(CURVE_DECIMAL_CONTEXT):
        return Decimal(quarks) / Decimal(params.quarks_per_token)


def tokens_to_quarks(tokens: NumberLike, params: CurveParams = DEFAULT_CURVE_PARAMS) -> int:
    """
    Конверсия: целые токены → quarks (округление вниз).

    Examples:
        >>> tokens_to_quarks("1.23456789019")
        12345678901
    """
    amount = validate_non_negative(tokens, "tokens")
    with localcontext(CURVE_DECIMAL_CONTEXT):
        scaled = amount * Decimal(params.quarks_per_token)
        return int(scaled.to_integral_value(rounding=ROUND_DOWN))


# =============================================================================
# USD BASE UNITS <-> WHOLE USD
# =============================================================================


def usd_base_to_whole(base_units: int, params: CurveParams = DEFAULT_CURVE_PARAMS) -> Decimal:
    """
    Конверсия: base units USD резерва → целые USD.

    Examples:
        >>> usd_base_to_whole(1_500_000)
        Decimal('1.5')
    """
    _validate_base_units(base_units, "base_units")
    with localcontext(CURVE_DECIMAL_CONTEXT):
        return Decimal(base_units) / Decimal(params.usd_base_per_whole)


def usd_whole_to_base(whole: NumberLike, params: CurveParams = DEFAULT_CURVE_PARAMS) -> int:
    """
    Конверсия: целые USD → base units (округление вниз).

    Examples:
        >>> usd_whole_to_base("12.3456789")
        12345678
    """
    amount = validate_non_negative(whole, "whole")
    with localcontext(CURVE_DECIMAL_CONTEXT):
        scaled = amount * Decimal(params.usd_base_per_whole)
        return int(scaled.to_integral_value(rounding=ROUND_DOWN))


# =============================================================================
# CIRCULATING SUPPLY
# =============================================================================


def circulating_supply(
    vault_base_units: int,
    max_supply: Optional[NumberLike] = None,
    base_unit_scale: Optional[int] = None,
    params: CurveParams = DEFAULT_CURVE_PARAMS,
) -> Decimal:
    """
    Circulating supply из баланса vault резерва.

    circulating = max_supply - vault_base_units / base_unit_scale

    Args:
        vault_base_units: Баланс vault в quarks (u64 on-chain)
        max_supply: Максимальный выпуск (default: params.max_supply)
        base_unit_scale: quarks на токен (default: params.quarks_per_token)
        params: Параметры кривой

    Returns:
        Circulating supply в целых токенах, в пределах [0, max_supply]

    Raises:
        InvalidAmount: Если vault содержит больше max_supply токенов

    Examples:
        >>> circulating_supply(210_000_000_000_000_000)
        Decimal('0')
        >>> circulating_supply(0)
        Decimal('21000000')
    """
    _validate_base_units(vault_base_units, "vault_base_units")

    supply_cap = (
        params.max_supply
        if max_supply is None
        else validate_non_negative(max_supply, "max_supply")
    )
    scale = params.quarks_per_token if base_unit_scale is None else base_unit_scale
    if isinstance(scale, bool) or not isinstance(scale, int) or scale <= 0:
        raise InvalidAmount(f"base_unit_scale must be a positive integer, got {scale!r}")

    with localcontext(CURVE_DECIMAL_CONTEXT):
        vault_tokens = Decimal(vault_base_units) / Decimal(scale)
        circulating = supply_cap - vault_tokens

    if circulating < 0:
        raise InvalidAmount(
            f"vault holds {vault_tokens} tokens, more than max_supply {supply_cap}"
        )

    return circulating
