"""
BondingCurve — Экспоненциальная bonding curve и её обратные функции

Модуль вычисляет цену, стоимость выпуска и выплаты по кривой:
- spot price в точке supply
- стоимость выпуска ΔS токенов начиная с S0 (интеграл цены)
- количество токенов за сумму USD (обратная к стоимости)
- выплата при продаже до и после комиссии
- supply по целевому reserve value / цене (closed-form и bounded bisection)

ФОРМУЛЫ:
    price(S)          = a * b * e^(c * S)
    reserve(S)        = (a * b / c) * (e^(c * S) - 1)
    cost(S0, ΔS)      = (a * b / c) * (e^(c * (S0 + ΔS)) - e^(c * S0))
    tokens(S0, V)     = (1 / c) * ln(V / (a * b / c) + e^(c * S0)) - S0
    sell_gross(S0, ΔS) = cost(S0 - ΔS, ΔS)
    sell_net(S0, ΔS)  = sell_gross * (10000 - fee_bps) / 10000
    supply(R)         = ln(R / (a * b / c) + 1) / c
    supply(P)         = ln(P / (a * b)) / c

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. price и reserve строго возрастают на [0, max_supply], reserve(0) = 0
2. Обратные функции совпадают с прямыми в пределах толерантности
3. Supply никогда не выходит за [0, max_supply] (InvalidAmount)
4. Продажа больше circulating supply → InsufficientSupply
5. Все результаты — Decimal; float только внутри float_boundary
6. Разности экспонент считаются через expm1/log1p (без катастрофического
   сокращения при малых ΔS и V)

Все функции чистые: без состояния, без I/O, потокобезопасны.
"""

from decimal import Decimal, localcontext
from typing import Callable, Final

from src.core.domain.curve_params import DEFAULT_CURVE_PARAMS, CurveParams
from src.core.errors import InsufficientSupply, InvalidAmount
from src.core.math.fees import SELL_FEE_BPS, apply_fee_bps
from src.core.math.float_boundary import (
    exp_decimal,
    expm1_decimal,
    ln_decimal,
    log1p_decimal,
)
from src.core.math.numerical_safeguards import (
    CURVE_DECIMAL_CONTEXT,
    ZERO,
    NumberLike,
    clamp,
    validate_in_range,
    validate_non_negative,
)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Количество итераций bisection: 21M / 2^50 ≈ 2e-8 токена
SEARCH_ITERATIONS_DEFAULT: Final[int] = 50

# Допуск выхода за max_supply из-за погрешности float в ln/exp (токены)
SUPPLY_OVERSHOOT_TOLERANCE: Final[Decimal] = Decimal("1e-6")


# =============================================================================
# ВНУТРЕННИЕ ПРИМИТИВЫ
# =============================================================================


def _validate_supply(
    supply: NumberLike, params: CurveParams, name: str = "supply"
) -> Decimal:
    return validate_in_range(supply, name, ZERO, params.max_supply)


def _exp_c_times(supply: Decimal, params: CurveParams) -> Decimal:
    """e^(c * S)"""
    with localcontext(CURVE_DECIMAL_CONTEXT):
        exponent = params.c * supply
    return exp_decimal(exponent)


# =============================================================================
# ПРЯМЫЕ ФУНКЦИИ
# =============================================================================


def spot_price(supply: NumberLike, params: CurveParams = DEFAULT_CURVE_PARAMS) -> Decimal:
    """
    Spot price в точке circulating supply.

    price(S) = a * b * e^(c * S)

    Args:
        supply: Circulating supply (целые токены, [0, max_supply])
        params: Параметры кривой

    Returns:
        Цена в USD за токен

    Raises:
        InvalidAmount: Если supply вне [0, max_supply]

    Examples:
        >>> round(float(spot_price(0)), 6)
        0.01
    """
    s = _validate_supply(supply, params)
    exp_term = _exp_c_times(s, params)

    with localcontext(CURVE_DECIMAL_CONTEXT):
        return params.ab * exp_term


def cost_to_mint(
    from_supply: NumberLike,
    token_delta: NumberLike,
    params: CurveParams = DEFAULT_CURVE_PARAMS,
) -> Decimal:
    """
    Стоимость выпуска token_delta токенов начиная с from_supply.

    cost(S0, ΔS) = (a * b / c) * (e^(c * (S0 + ΔS)) - e^(c * S0))

    Args:
        from_supply: Текущий circulating supply
        token_delta: Количество покупаемых токенов (≥ 0)
        params: Параметры кривой

    Returns:
        Стоимость в USD; ровно 0 при token_delta == 0

    Raises:
        InvalidAmount: Если token_delta < 0 или S0 + ΔS > max_supply
    """
    s0 = _validate_supply(from_supply, params, "from_supply")
    delta = validate_non_negative(token_delta, "token_delta")

    if delta == 0:
        return Decimal(0)

    with localcontext(CURVE_DECIMAL_CONTEXT):
        s1 = s0 + delta

    if s1 > params.max_supply:
        raise InvalidAmount(
            f"minting {delta} tokens from supply {s0} exceeds "
            f"max_supply {params.max_supply}"
        )

    # e^(c * S1) - e^(c * S0) = e^(c * S0) * expm1(c * ΔS)
    exp_s0 = _exp_c_times(s0, params)

    with localcontext(CURVE_DECIMAL_CONTEXT):
        exponent = params.c * delta

    growth = expm1_decimal(exponent)

    with localcontext(CURVE_DECIMAL_CONTEXT):
        return params.ab_over_c * exp_s0 * growth


def reserve_value(supply: NumberLike, params: CurveParams = DEFAULT_CURVE_PARAMS) -> Decimal:
    """
    Reserve value при данном supply: cost_to_mint(0, supply).

    Examples:
        >>> reserve_value(0)
        Decimal('0')
    """
    return cost_to_mint(ZERO, supply, params)


# =============================================================================
# ОБРАТНЫЕ ФУНКЦИИ
# =============================================================================


def tokens_for_amount(
    from_supply: NumberLike,
    usd_amount: NumberLike,
    params: CurveParams = DEFAULT_CURVE_PARAMS,
) -> Decimal:
    """
    Количество токенов, которое выпускается за usd_amount.

    tokens(S0, V) = (1 / c) * ln(V / (a * b / c) + e^(c * S0)) - S0

    Вычисляется как log1p(V / ((a * b / c) * e^(c * S0))) / c, без
    вычитания S0, поэтому малые покупки не теряют точность.

    Args:
        from_supply: Текущий circulating supply
        usd_amount: Сумма USD (≥ 0), уже за вычетом buy fee
        params: Параметры кривой

    Returns:
        Количество токенов; ровно 0 при usd_amount == 0

    Raises:
        InvalidAmount: Если usd_amount < 0 или покупка выводит supply
            за max_supply
    """
    s0 = _validate_supply(from_supply, params, "from_supply")
    amount = validate_non_negative(usd_amount, "usd_amount")

    if amount == 0:
        return Decimal(0)

    exp_s0 = _exp_c_times(s0, params)

    # ln(V / k + e^(c * S0)) - c * S0 = log1p(V / (k * e^(c * S0)))
    with localcontext(CURVE_DECIMAL_CONTEXT):
        ratio = amount / (params.ab_over_c * exp_s0)

    log_term = log1p_decimal(ratio)

    with localcontext(CURVE_DECIMAL_CONTEXT):
        tokens = log_term / params.c
        headroom = params.max_supply - s0

    if tokens > headroom + SUPPLY_OVERSHOOT_TOLERANCE:
        raise InvalidAmount(
            f"usd_amount {amount} buys {tokens} tokens, exceeding remaining "
            f"supply {headroom}"
        )

    return clamp(tokens, ZERO, headroom)


def supply_at_reserve_value(
    target_reserve: NumberLike,
    params: CurveParams = DEFAULT_CURVE_PARAMS,
) -> Decimal:
    """
    Supply, при котором reserve value равен target_reserve (closed form).

    supply(R) = ln(R / (a * b / c) + 1) / c

    Результат ограничен [0, max_supply], как и у bounded search.

    Raises:
        InvalidAmount: Если target_reserve < 0
    """
    reserve = validate_non_negative(target_reserve, "target_reserve")

    if reserve == 0:
        return Decimal(0)

    with localcontext(CURVE_DECIMAL_CONTEXT):
        ratio = reserve / params.ab_over_c

    log_term = log1p_decimal(ratio)

    with localcontext(CURVE_DECIMAL_CONTEXT):
        supply = log_term / params.c

    return clamp(supply, ZERO, params.max_supply)


def supply_at_price(
    target_price: NumberLike,
    params: CurveParams = DEFAULT_CURVE_PARAMS,
) -> Decimal:
    """
    Supply, при котором spot price равен target_price (closed form).

    supply(P) = ln(P / (a * b)) / c

    Цена ниже минимума кривой даёт 0, выше максимума — max_supply.

    Raises:
        InvalidAmount: Если target_price < 0
    """
    price = validate_non_negative(target_price, "target_price")

    floor_price = params.ab
    if price <= floor_price:
        return Decimal(0)

    with localcontext(CURVE_DECIMAL_CONTEXT):
        ratio = price / floor_price

    ln_ratio = ln_decimal(ratio)

    with localcontext(CURVE_DECIMAL_CONTEXT):
        supply = ln_ratio / params.c

    return clamp(supply, ZERO, params.max_supply)


def search_supply(
    evaluate: Callable[[Decimal], Decimal],
    target: NumberLike,
    params: CurveParams = DEFAULT_CURVE_PARAMS,
    iterations: int = SEARCH_ITERATIONS_DEFAULT,
) -> Decimal:
    """
    Bounded bisection по supply на [0, max_supply].

    Используется для составных запросов, у которых нет удобной
    closed-form обратной. evaluate должна быть неубывающей по supply.

    Args:
        evaluate: Функция supply → величина (например, reserve_value)
        target: Целевое значение величины
        params: Параметры кривой (границы поиска)
        iterations: Фиксированное число итераций (default: 50)

    Returns:
        Середина финального интервала [low, high]

    Examples:
        >>> s = search_supply(reserve_value, 1000)
        >>> abs(s - supply_at_reserve_value(1000)) < Decimal("1e-6")
        True
    """
    goal = validate_non_negative(target, "target")

    if iterations <= 0:
        raise ValueError(f"iterations must be positive, got {iterations}")

    low = Decimal(0)
    high = params.max_supply
    two = Decimal(2)

    for _ in range(iterations):
        with localcontext(CURVE_DECIMAL_CONTEXT):
            mid = (low + high) / two
        if evaluate(mid) < goal:
            low = mid
        else:
            high = mid

    with localcontext(CURVE_DECIMAL_CONTEXT):
        return (low + high) / two


# =============================================================================
# ПРОДАЖА
# =============================================================================


def sell_value_gross(
    from_supply: NumberLike,
    token_delta: NumberLike,
    params: CurveParams = DEFAULT_CURVE_PARAMS,
) -> Decimal:
    """
    Выплата за продажу token_delta токенов до комиссии.

    sell_gross(S0, ΔS) = cost(S0 - ΔS, ΔS)

    Raises:
        InsufficientSupply: Если token_delta > from_supply
        InvalidAmount: Если token_delta < 0
    """
    s0 = _validate_supply(from_supply, params, "from_supply")
    delta = validate_non_negative(token_delta, "token_delta")

    if delta > s0:
        raise InsufficientSupply(
            f"cannot sell {delta} tokens: only {s0} in circulation"
        )

    with localcontext(CURVE_DECIMAL_CONTEXT):
        new_supply = s0 - delta

    return cost_to_mint(new_supply, delta, params)


def sell_proceeds(
    from_supply: NumberLike,
    token_delta: NumberLike,
    fee_bps: int = SELL_FEE_BPS,
    params: CurveParams = DEFAULT_CURVE_PARAMS,
) -> Decimal:
    """
    Выплата за продажу token_delta токенов после protocol fee.

    sell_net = sell_gross * (10000 - fee_bps) / 10000

    Args:
        from_supply: Текущий circulating supply
        token_delta: Количество продаваемых токенов
        fee_bps: Комиссия продажи (default: 100 bps = 1%)
        params: Параметры кривой

    Returns:
        USD к получению

    Raises:
        InsufficientSupply: Если token_delta > from_supply
        InvalidAmount: Если token_delta < 0 или fee_bps вне 0..10000
    """
    gross = sell_value_gross(from_supply, token_delta, params)
    return apply_fee_bps(gross, fee_bps)
