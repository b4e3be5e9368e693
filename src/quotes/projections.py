"""Projections: milestones reserve value и выборка кривой для графиков

Milestone — следующий круглый reserve value строго выше текущего
($100, $1K, ..., $10M) и прирост spot price при его достижении.

Выборка кривой строит равномерные точки (supply, price, reserve) на
интервале supply; окно графика по умолчанию показывает ~10x текущий
reserve, но не меньше $1,000.
"""

import logging
from decimal import Decimal, localcontext
from typing import Final, Optional, Sequence

from src.core.display.formatting import format_reserve_label
from src.core.domain.curve_params import DEFAULT_CURVE_PARAMS, CurveParams
from src.core.domain.quote import CurvePoint, Milestone
from src.core.math.numerical_safeguards import (
    CURVE_DECIMAL_CONTEXT,
    NumberLike,
    validate_non_negative,
    validate_positive,
)
from src.curve.bonding_curve import (
    reserve_value,
    spot_price,
    supply_at_reserve_value,
)

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

RESERVE_MILESTONES_USD: Final[tuple[Decimal, ...]] = tuple(
    Decimal(m) for m in (100, 1_000, 10_000, 100_000, 1_000_000, 10_000_000)
)

# Zoom графика по reserve value
RESERVE_ZOOM_TARGETS_USD: Final[tuple[Decimal, ...]] = tuple(
    Decimal(m)
    for m in (
        1_000,
        10_000,
        100_000,
        1_000_000,
        10_000_000,
        100_000_000,
        1_000_000_000,
    )
)

# Окно графика "current": множитель текущего reserve и минимум
CHART_RESERVE_MULTIPLIER: Final[Decimal] = Decimal(10)
CHART_MIN_RESERVE_USD: Final[Decimal] = Decimal(1_000)

CURVE_SAMPLES_DEFAULT: Final[int] = 100

_HUNDRED: Final[Decimal] = Decimal(100)


# =============================================================================
# MILESTONES
# =============================================================================


def next_milestone(
    current_reserve: NumberLike,
    current_price: Optional[NumberLike] = None,
    milestones: Sequence[Decimal] = RESERVE_MILESTONES_USD,
    params: CurveParams = DEFAULT_CURVE_PARAMS,
) -> Optional[Milestone]:
    """
    Следующий milestone строго выше текущего reserve value.

    gain_pct = (price_at_milestone - current_price) / current_price * 100

    Args:
        current_reserve: Текущий reserve value (USD)
        current_price: Текущая spot price; если None — вычисляется по кривой
            в точке текущего reserve
        milestones: Возрастающий список reserve milestones
        params: Параметры кривой

    Returns:
        Milestone или None, если текущий reserve выше последнего milestone
    """
    reserve = validate_non_negative(current_reserve, "current_reserve")

    if current_price is None:
        price_now = spot_price(supply_at_reserve_value(reserve, params), params)
    else:
        price_now = validate_positive(current_price, "current_price")

    target = next((m for m in milestones if m > reserve), None)
    if target is None:
        return None

    supply_at_target = supply_at_reserve_value(target, params)
    price_at_target = spot_price(supply_at_target, params)

    with localcontext(CURVE_DECIMAL_CONTEXT):
        gain_pct = (price_at_target - price_now) / price_now * _HUNDRED

    return Milestone(
        reserve_target=target,
        label=format_reserve_label(target),
        supply_at_target=supply_at_target,
        price_at_target=price_at_target,
        gain_pct=gain_pct,
    )


# =============================================================================
# CURVE SAMPLING
# =============================================================================


def chart_supply_window(
    current_reserve: NumberLike,
    target_reserve: Optional[NumberLike] = None,
    params: CurveParams = DEFAULT_CURVE_PARAMS,
) -> Decimal:
    """
    Верхняя граница supply для графика кривой.

    Без target_reserve окно показывает max(10 * current_reserve, $1,000).

    Returns:
        Supply, при котором reserve value равен целевому (≤ max_supply)
    """
    reserve = validate_non_negative(current_reserve, "current_reserve")

    if target_reserve is None:
        with localcontext(CURVE_DECIMAL_CONTEXT):
            target = max(reserve * CHART_RESERVE_MULTIPLIER, CHART_MIN_RESERVE_USD)
    else:
        target = validate_non_negative(target_reserve, "target_reserve")

    return supply_at_reserve_value(target, params)


def sample_curve(
    supply_max: NumberLike,
    samples: int = CURVE_SAMPLES_DEFAULT,
    supply_min: NumberLike = 0,
    params: CurveParams = DEFAULT_CURVE_PARAMS,
) -> list[CurvePoint]:
    """
    Равномерная выборка кривой на [supply_min, supply_max].

    Returns:
        samples + 1 точек, включая обе границы

    Raises:
        ValueError: Если samples ≤ 0 или supply_min > supply_max
    """
    if samples <= 0:
        raise ValueError(f"samples must be positive, got {samples}")

    low = validate_non_negative(supply_min, "supply_min")
    high = validate_non_negative(supply_max, "supply_max")
    if low > high:
        raise ValueError(f"supply_min {low} must be <= supply_max {high}")

    with localcontext(CURVE_DECIMAL_CONTEXT):
        step = (high - low) / Decimal(samples)

    points = []
    for i in range(samples + 1):
        with localcontext(CURVE_DECIMAL_CONTEXT):
            supply = high if i == samples else low + step * i
        points.append(
            CurvePoint(
                supply=supply,
                price=spot_price(supply, params),
                reserve=reserve_value(supply, params),
            )
        )

    logger.debug("sampled %d curve points on [%s, %s]", len(points), low, high)
    return points
