"""Trade Quotes: котировки покупки и продажи против резерва

Порядок расчёта покупки:
1. Валидация намерения (сумма USD > 0)
2. Удержание front-end buy fee (если вызов не освобождён явно)
3. tokens_for_amount по net сумме
4. Средняя цена от полной суммы и price impact относительно spot

Порядок расчёта продажи:
1. Валидация намерения (токены > 0, не больше circulating supply)
2. sell_value_gross → protocol sell fee
3. Средняя цена от net суммы и price impact относительно spot

Нулевые и отрицательные намерения отклоняются InvalidAmount,
в отличие от примитивов кривой, где ноль даёт ровно ноль.
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal, localcontext
from typing import Final

from src.core.domain.curve_params import DEFAULT_CURVE_PARAMS, CurveParams
from src.core.domain.quote import BuyQuote, SellQuote
from src.core.errors import InvalidAmount
from src.core.math.fees import FeeSchedule, apply_fee_bps, net_buy_input
from src.core.math.numerical_safeguards import (
    CURVE_DECIMAL_CONTEXT,
    NumberLike,
    to_decimal,
)
from src.curve.bonding_curve import (
    sell_value_gross,
    spot_price,
    tokens_for_amount,
)

logger = logging.getLogger(__name__)

_HUNDRED: Final[Decimal] = Decimal(100)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class QuoteConfig:
    """Конфигурация котировок."""

    fees: FeeSchedule = field(default_factory=FeeSchedule)
    params: CurveParams = DEFAULT_CURVE_PARAMS


DEFAULT_QUOTE_CONFIG: Final[QuoteConfig] = QuoteConfig()


# =============================================================================
# HELPERS
# =============================================================================


def _validate_intent(amount: NumberLike, name: str) -> Decimal:
    value = to_decimal(amount, name)
    if value <= 0:
        logger.debug("rejected %s=%s: must be positive", name, value)
        raise InvalidAmount(f"{name} must be positive, got {value}")
    return value


def buy_price_impact_pct(avg_price: Decimal, spot: Decimal) -> Decimal:
    """
    Price impact покупки в процентах: (avg - spot) / spot * 100.

    Examples:
        >>> buy_price_impact_pct(Decimal("1.1"), Decimal("1"))
        Decimal('10.0')
    """
    with localcontext(CURVE_DECIMAL_CONTEXT):
        return (avg_price - spot) / spot * _HUNDRED


def sell_price_impact_pct(avg_price: Decimal, spot: Decimal) -> Decimal:
    """
    Price impact продажи в процентах: (spot - avg) / spot * 100.

    Examples:
        >>> sell_price_impact_pct(Decimal("0.9"), Decimal("1"))
        Decimal('10.0')
    """
    with localcontext(CURVE_DECIMAL_CONTEXT):
        return (spot - avg_price) / spot * _HUNDRED


# =============================================================================
# QUOTES
# =============================================================================


def quote_buy(
    circulating_supply: NumberLike,
    usd_amount: NumberLike,
    fee_exempt: bool = False,
    config: QuoteConfig = DEFAULT_QUOTE_CONFIG,
) -> BuyQuote:
    """
    Котировка покупки токенов за usd_amount.

    Args:
        circulating_supply: Текущий circulating supply
        usd_amount: Сумма USD, которую тратит пользователь
        fee_exempt: True, если покупаемый токен освобождён от buy fee
            (решение вызывающего, см. FeeSchedule.is_exempt)
        config: Комиссии и параметры кривой

    Returns:
        BuyQuote

    Raises:
        InvalidAmount: Если usd_amount ≤ 0, сумма слишком мала для выпуска
            одного quark, или покупка выводит supply за max_supply
    """
    supply = to_decimal(circulating_supply, "circulating_supply")
    input_usd = _validate_intent(usd_amount, "usd_amount")
    params = config.params

    applied_fee_bps = 0 if fee_exempt else config.fees.buy_fee_bps
    net_input = net_buy_input(input_usd, config.fees.buy_fee_bps, fee_exempt)

    with localcontext(CURVE_DECIMAL_CONTEXT):
        fee_usd = input_usd - net_input

    tokens_out = tokens_for_amount(supply, net_input, params)
    min_tokens = Decimal(1).scaleb(-params.token_decimals)
    if tokens_out < min_tokens:
        logger.debug("rejected buy of %s USD: less than one quark", input_usd)
        raise InvalidAmount(
            f"usd_amount {input_usd} is too small to mint one quark after fee"
        )

    spot = spot_price(supply, params)

    with localcontext(CURVE_DECIMAL_CONTEXT):
        avg_price = input_usd / tokens_out

    quote = BuyQuote(
        circulating_supply=supply,
        input_usd=input_usd,
        fee_usd=fee_usd,
        net_input_usd=net_input,
        tokens_out=tokens_out,
        avg_price=avg_price,
        spot_price=spot,
        price_impact_pct=buy_price_impact_pct(avg_price, spot),
        fee_bps=applied_fee_bps,
        fee_exempt=fee_exempt,
    )

    logger.debug(
        "buy quote: supply=%s usd_in=%s fee=%s tokens_out=%s impact=%s%%",
        supply,
        input_usd,
        fee_usd,
        tokens_out,
        quote.price_impact_pct,
    )
    return quote


def quote_sell(
    circulating_supply: NumberLike,
    token_amount: NumberLike,
    config: QuoteConfig = DEFAULT_QUOTE_CONFIG,
) -> SellQuote:
    """
    Котировка продажи token_amount токенов.

    Args:
        circulating_supply: Текущий circulating supply
        token_amount: Количество продаваемых токенов
        config: Комиссии и параметры кривой

    Returns:
        SellQuote

    Raises:
        InvalidAmount: Если token_amount ≤ 0
        InsufficientSupply: Если token_amount > circulating_supply
    """
    supply = to_decimal(circulating_supply, "circulating_supply")
    tokens_in = _validate_intent(token_amount, "token_amount")
    params = config.params
    fee_bps = config.fees.sell_fee_bps

    gross = sell_value_gross(supply, tokens_in, params)
    net = apply_fee_bps(gross, fee_bps)
    spot = spot_price(supply, params)

    with localcontext(CURVE_DECIMAL_CONTEXT):
        fee_usd = gross - net
        avg_price = net / tokens_in

    quote = SellQuote(
        circulating_supply=supply,
        tokens_in=tokens_in,
        gross_usd=gross,
        fee_usd=fee_usd,
        net_usd=net,
        avg_price=avg_price,
        spot_price=spot,
        price_impact_pct=sell_price_impact_pct(avg_price, spot),
        fee_bps=fee_bps,
    )

    logger.debug(
        "sell quote: supply=%s tokens_in=%s gross=%s net=%s impact=%s%%",
        supply,
        tokens_in,
        gross,
        net,
        quote.price_impact_pct,
    )
    return quote
