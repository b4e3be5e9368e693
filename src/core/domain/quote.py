"""
Quote — Модели котировок покупки/продажи и проекций кривой

Immutable Pydantic модели результатов движка:
- BuyQuote: USD → токены (с front-end buy fee)
- SellQuote: токены → USD (с protocol sell fee)
- Milestone: следующий reserve milestone и прирост цены до него
- CurvePoint: точка кривой для графиков

Decimal поля сериализуются в JSON как строки
(совместимость с contracts/schema/*.json).
"""

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class TradeSide(str, Enum):
    """Направление сделки против резерва"""

    BUY = "buy"
    SELL = "sell"


# =============================================================================
# QUOTES
# =============================================================================


class BuyQuote(BaseModel):
    """
    Котировка покупки.

    input_usd = net_input_usd + fee_usd точно в CURVE_DECIMAL_CONTEXT
    (precision 60); в контексте Decimal по умолчанию (28 знаков) сумма
    округляется.
    avg_price считается от полной входной суммы, включая fee.
    """

    side: TradeSide = Field(TradeSide.BUY, description="Направление (buy)")
    circulating_supply: Decimal = Field(..., ge=0, description="Supply до сделки")
    input_usd: Decimal = Field(..., gt=0, description="Сумма USD от пользователя")
    fee_usd: Decimal = Field(..., ge=0, description="Удержанная buy fee (USD)")
    net_input_usd: Decimal = Field(
        ..., ge=0, description="USD, конвертируемые по кривой"
    )
    tokens_out: Decimal = Field(..., ge=0, description="Токены к получению")
    avg_price: Decimal = Field(..., ge=0, description="Средняя цена (USD/токен)")
    spot_price: Decimal = Field(..., gt=0, description="Spot price до сделки")
    price_impact_pct: Decimal = Field(
        ..., description="(avg - spot) / spot * 100"
    )
    fee_bps: int = Field(..., ge=0, le=10_000, description="Применённая buy fee")
    fee_exempt: bool = Field(False, description="Освобождение от buy fee")

    model_config = {"frozen": True}


class SellQuote(BaseModel):
    """
    Котировка продажи.

    gross_usd = net_usd + fee_usd точно в CURVE_DECIMAL_CONTEXT
    (precision 60); в контексте Decimal по умолчанию (28 знаков) сумма
    округляется.
    """

    side: TradeSide = Field(TradeSide.SELL, description="Направление (sell)")
    circulating_supply: Decimal = Field(..., ge=0, description="Supply до сделки")
    tokens_in: Decimal = Field(..., gt=0, description="Продаваемые токены")
    gross_usd: Decimal = Field(..., ge=0, description="Выплата до protocol fee")
    fee_usd: Decimal = Field(..., ge=0, description="Удержанная protocol fee")
    net_usd: Decimal = Field(..., ge=0, description="USD к получению")
    avg_price: Decimal = Field(..., ge=0, description="Средняя цена (USD/токен)")
    spot_price: Decimal = Field(..., gt=0, description="Spot price до сделки")
    price_impact_pct: Decimal = Field(
        ..., description="(spot - avg) / spot * 100"
    )
    fee_bps: int = Field(..., ge=0, le=10_000, description="Применённая sell fee")

    model_config = {"frozen": True}


# =============================================================================
# PROJECTIONS
# =============================================================================


class Milestone(BaseModel):
    """Следующий reserve milestone и прирост spot price до него."""

    reserve_target: Decimal = Field(..., gt=0, description="Reserve value (USD)")
    label: str = Field(..., min_length=2, description="Метка ('$1K', '$1M')")
    supply_at_target: Decimal = Field(..., ge=0, description="Supply на milestone")
    price_at_target: Decimal = Field(..., gt=0, description="Spot price на milestone")
    gain_pct: Decimal = Field(..., description="Прирост цены относительно текущей (%)")

    model_config = {"frozen": True}


class CurvePoint(BaseModel):
    """Точка кривой: supply, spot price, reserve value."""

    supply: Decimal = Field(..., ge=0)
    price: Decimal = Field(..., gt=0)
    reserve: Decimal = Field(..., ge=0)

    model_config = {"frozen": True}
