"""
CurveParams — Параметры экспоненциальной bonding curve

Immutable Pydantic модель с константами формы кривой и масштабами единиц.

Кривая:
    R'(S) = a * b * e^(c * S)                  (spot price)
    R(S)  = (a * b / c) * (e^(c * S) - 1)       (reserve value)

Штатные константы задают кривую от $0.01 до $1,000,000 на 21M токенов.
On-chain программа хранит их как целые числа, масштабированные на 10^18;
c совпадает с b.
"""

from decimal import Decimal, localcontext
from typing import Final

from pydantic import BaseModel, Field

from src.core.math.numerical_safeguards import CURVE_DECIMAL_CONTEXT

# =============================================================================
# ON-CHAIN КОНСТАНТЫ
# =============================================================================

# Масштаб целочисленных констант кривой
CURVE_SCALE: Final[int] = 10**18

CURVE_A_SCALED: Final[int] = 11400230149967394933471
CURVE_B_SCALED: Final[int] = 877175273521
CURVE_C_SCALED: Final[int] = CURVE_B_SCALED

# Максимальный выпуск (целые токены)
MAX_TOKEN_SUPPLY: Final[int] = 21_000_000

# Десятичные знаки токена валюты (1 токен = 10^10 quarks)
TOKEN_DECIMALS: Final[int] = 10

# Десятичные знаки базовой валюты резерва (USDF)
USD_DECIMALS: Final[int] = 6


# =============================================================================
# MODEL
# =============================================================================


class CurveParams(BaseModel):
    """
    Параметры кривой и масштабы единиц.

    Immutable модель (frozen=True). Все функции движка принимают её
    явным аргументом, глобального изменяемого состояния нет.
    """

    a: Decimal = Field(..., gt=0, description="Константа a (масштаб цены)")
    b: Decimal = Field(..., gt=0, description="Константа b (множитель цены)")
    c: Decimal = Field(..., gt=0, description="Константа c (скорость экспоненты)")
    max_supply: Decimal = Field(
        ..., gt=0, description="Максимальный выпуск (целые токены)"
    )
    token_decimals: int = Field(
        TOKEN_DECIMALS, ge=0, le=18, description="Десятичные знаки токена"
    )
    usd_decimals: int = Field(
        USD_DECIMALS, ge=0, le=18, description="Десятичные знаки USD резерва"
    )

    model_config = {"frozen": True}

    @classmethod
    def from_scaled(
        cls,
        a_scaled: int,
        b_scaled: int,
        c_scaled: int,
        max_supply: int = MAX_TOKEN_SUPPLY,
        scale: int = CURVE_SCALE,
        token_decimals: int = TOKEN_DECIMALS,
        usd_decimals: int = USD_DECIMALS,
    ) -> "CurveParams":
        """
        Построение параметров из целочисленных on-chain констант.

        Args:
            a_scaled: a * scale
            b_scaled: b * scale
            c_scaled: c * scale
            max_supply: Максимальный выпуск
            scale: Масштаб констант (default: 10^18)

        Returns:
            CurveParams с Decimal константами
        """
        with localcontext(CURVE_DECIMAL_CONTEXT):
            divisor = Decimal(scale)
            return cls(
                a=Decimal(a_scaled) / divisor,
                b=Decimal(b_scaled) / divisor,
                c=Decimal(c_scaled) / divisor,
                max_supply=Decimal(max_supply),
                token_decimals=token_decimals,
                usd_decimals=usd_decimals,
            )

    @property
    def ab(self) -> Decimal:
        """a * b — цена при нулевом supply."""
        with localcontext(CURVE_DECIMAL_CONTEXT):
            return self.a * self.b

    @property
    def ab_over_c(self) -> Decimal:
        """a * b / c — множитель интеграла цены."""
        with localcontext(CURVE_DECIMAL_CONTEXT):
            return self.a * self.b / self.c

    @property
    def quarks_per_token(self) -> int:
        return 10**self.token_decimals

    @property
    def usd_base_per_whole(self) -> int:
        return 10**self.usd_decimals


DEFAULT_CURVE_PARAMS: Final[CurveParams] = CurveParams.from_scaled(
    CURVE_A_SCALED,
    CURVE_B_SCALED,
    CURVE_C_SCALED,
)
