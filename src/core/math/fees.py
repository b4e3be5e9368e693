"""
Fees — Комиссии в basis points

Модуль применяет комиссии двух уровней:
- protocol sell fee: удерживается из выплаты при продаже (default 100 bps = 1%)
- front-end buy fee: удерживается из входной суммы USD до конверсии в токены
  (default 33 bps = 0.33%)

Освобождение от buy fee — явный boolean на каждый вызов. Какие mint
освобождены, решает конфигурация (FeeSchedule), а не числовая библиотека.

ФОРМУЛЫ:
    net = amount * (10000 - fee_bps) / 10000
    fee = amount - net
"""

from dataclasses import dataclass, field
from decimal import Decimal, localcontext
from typing import Final

from src.core.errors import InvalidAmount
from src.core.math.numerical_safeguards import (
    CURVE_DECIMAL_CONTEXT,
    NumberLike,
    validate_non_negative,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

BPS_DENOMINATOR: Final[int] = 10_000

# Protocol sell fee (1%)
SELL_FEE_BPS: Final[int] = 100

# Front-end buy fee (0.33%)
BUY_FEE_BPS: Final[int] = 33


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class FeeSchedule:
    """Конфигурация комиссий.

    exempt_mints: mint адреса, покупки которых не облагаются buy fee
    (например, токен, в который конвертируются собранные комиссии).
    """

    sell_fee_bps: int = SELL_FEE_BPS
    buy_fee_bps: int = BUY_FEE_BPS
    exempt_mints: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        validate_fee_bps(self.sell_fee_bps, "sell_fee_bps")
        validate_fee_bps(self.buy_fee_bps, "buy_fee_bps")

    def is_exempt(self, mint: str) -> bool:
        return mint in self.exempt_mints


# =============================================================================
# BPS
# =============================================================================


def validate_fee_bps(fee_bps: int, name: str = "fee_bps") -> int:
    """
    Валидация комиссии в basis points.

    Raises:
        InvalidAmount: Если fee_bps не целое или вне 0..10000
    """
    if isinstance(fee_bps, bool) or not isinstance(fee_bps, int):
        raise InvalidAmount(f"{name} must be an integer, got {fee_bps!r}")

    if fee_bps < 0 or fee_bps > BPS_DENOMINATOR:
        raise InvalidAmount(
            f"{name} must be in [0, {BPS_DENOMINATOR}], got {fee_bps}"
        )

    return fee_bps


def bps_to_fraction(bps: int) -> Decimal:
    """
    Конверсия basis points в дробь.

    Examples:
        >>> bps_to_fraction(100)
        Decimal('0.01')
        >>> bps_to_fraction(33)
        Decimal('0.0033')
    """
    validate_fee_bps(bps, "bps")
    with localcontext(CURVE_DECIMAL_CONTEXT):
        return Decimal(bps) / Decimal(BPS_DENOMINATOR)


def apply_fee_bps(amount: NumberLike, fee_bps: int) -> Decimal:
    """
    Сумма после удержания комиссии.

    net = amount * (10000 - fee_bps) / 10000

    Args:
        amount: Сумма до комиссии (≥ 0)
        fee_bps: Комиссия в basis points

    Returns:
        Сумма после комиссии

    Examples:
        >>> apply_fee_bps(Decimal("1000"), 100)
        Decimal('990')
    """
    value = validate_non_negative(amount, "amount")
    validate_fee_bps(fee_bps)

    with localcontext(CURVE_DECIMAL_CONTEXT):
        return value * Decimal(BPS_DENOMINATOR - fee_bps) / Decimal(BPS_DENOMINATOR)


def fee_amount(amount: NumberLike, fee_bps: int) -> Decimal:
    """
    Размер удерживаемой комиссии: amount - apply_fee_bps(amount, fee_bps).

    Считается как разность, чтобы net + fee == amount точно.
    """
    value = validate_non_negative(amount, "amount")
    net = apply_fee_bps(value, fee_bps)

    with localcontext(CURVE_DECIMAL_CONTEXT):
        return value - net


def net_buy_input(amount: NumberLike, buy_fee_bps: int = BUY_FEE_BPS, fee_exempt: bool = False) -> Decimal:
    """
    Входная сумма USD после front-end buy fee.

    Args:
        amount: USD, которые пользователь тратит
        buy_fee_bps: Buy fee в basis points
        fee_exempt: True для освобождённого от комиссии токена

    Returns:
        Сумма, которая конвертируется в токены по кривой
    """
    if fee_exempt:
        return validate_non_negative(amount, "amount")
    return apply_fee_bps(amount, buy_fee_bps)
