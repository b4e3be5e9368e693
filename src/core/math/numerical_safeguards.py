"""
Numerical Safeguards — Decimal-контекст и безопасные примитивы

Модуль задаёт границу точности для всех денежных и токенных величин:
- Единый Decimal-контекст движка (precision 60, ROUND_DOWN)
- Приведение входов (int/float/str/Decimal) к Decimal с отказом на NaN/Inf
- Epsilon-сравнения Decimal с относительной и абсолютной толерантностью
- Валидация domain с ошибками InvalidAmount

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не попадают в вычисления (InvalidAmount на входе)
2. float приводится через repr(), а не через двоичное представление
3. Все Decimal-операции движка выполняются в CURVE_DECIMAL_CONTEXT
4. Все операции детерминированы и воспроизводимы
"""

import math
from decimal import ROUND_DOWN, Context, Decimal, InvalidOperation, localcontext
from typing import Final, Optional, Union

from src.core.errors import InvalidAmount

# =============================================================================
# DECIMAL-КОНТЕКСТ
# =============================================================================

# Точность и округление движка.
# ROUND_DOWN: результат никогда не превышает математическое значение,
# цены и выплаты округляются в пользу резерва.
CURVE_PRECISION: Final[int] = 60

CURVE_DECIMAL_CONTEXT: Final[Context] = Context(
    prec=CURVE_PRECISION,
    rounding=ROUND_DOWN,
)

# Тип числовых входов, которые принимает движок
NumberLike = Union[Decimal, int, float, str]

ZERO: Final[Decimal] = Decimal(0)
ONE: Final[Decimal] = Decimal(1)


# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность сравнений Decimal по умолчанию
EPS_DECIMAL_COMPARE_REL: Final[Decimal] = Decimal("1e-9")

# Абсолютная толерантность сравнений Decimal по умолчанию
EPS_DECIMAL_COMPARE_ABS: Final[Decimal] = Decimal("1e-12")


# =============================================================================
# ПРИВЕДЕНИЕ ТИПОВ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечно
    """
    return math.isfinite(value)


def to_decimal(value: NumberLike, name: str = "value") -> Decimal:
    """
    Приведение числового входа к Decimal.

    float приводится через repr() (кратчайшее десятичное представление),
    что совпадает с тем, как числа вводятся пользователем и отображаются.

    Args:
        value: Decimal, int, float или десятичная строка
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        Конечное Decimal значение

    Raises:
        InvalidAmount: Если value NaN/Inf, bool или не парсится как число

    Examples:
        >>> to_decimal(0.1)
        Decimal('0.1')
        >>> to_decimal("21000000")
        Decimal('21000000')
        >>> to_decimal(5)
        Decimal('5')
    """
    if isinstance(value, bool):
        raise InvalidAmount(f"{name} must be numeric, got bool {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        if not is_valid_float(value):
            raise InvalidAmount(f"{name} must be finite (not NaN/Inf), got {value}")
        result = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation:
            raise InvalidAmount(f"{name} is not a decimal number: {value!r}")
    else:
        raise InvalidAmount(
            f"{name} must be Decimal, int, float or str, got {type(value).__name__}"
        )

    if not result.is_finite():
        raise InvalidAmount(f"{name} must be finite (not NaN/Inf), got {result}")

    return result


# =============================================================================
# EPSILON-СРАВНЕНИЯ DECIMAL
# =============================================================================


def is_close_decimal(
    a: Decimal,
    b: Decimal,
    rel_tol: Decimal = EPS_DECIMAL_COMPARE_REL,
    abs_tol: Decimal = EPS_DECIMAL_COMPARE_ABS,
) -> bool:
    """
    Сравнение Decimal с учётом толерантности.

    Алгоритм совпадает с math.isclose:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки

    Examples:
        >>> is_close_decimal(Decimal("1"), Decimal("1.0000000001"))
        True
        >>> is_close_decimal(Decimal("1"), Decimal("1.1"))
        False
    """
    with localcontext(CURVE_DECIMAL_CONTEXT):
        diff = abs(a - b)
        tolerance = max(rel_tol * max(abs(a), abs(b)), abs_tol)
    return diff <= tolerance


def clamp(
    value: Decimal,
    min_value: Optional[Decimal] = None,
    max_value: Optional[Decimal] = None,
) -> Decimal:
    """
    Ограничение значения в заданном диапазоне.

    Examples:
        >>> clamp(Decimal("-1"), Decimal("0"), Decimal("10"))
        Decimal('0')
        >>> clamp(Decimal("15"), Decimal("0"), Decimal("10"))
        Decimal('10')
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


# =============================================================================
# ВАЛИДАЦИЯ И ПРОВЕРКИ
# =============================================================================


def validate_non_negative(value: NumberLike, name: str) -> Decimal:
    """
    Валидация, что значение неотрицательное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value, приведённое к Decimal

    Raises:
        InvalidAmount: Если value < 0 или NaN/Inf
    """
    result = to_decimal(value, name)

    if result < 0:
        raise InvalidAmount(f"{name} must be non-negative, got {result}")

    return result


def validate_positive(value: NumberLike, name: str) -> Decimal:
    """
    Валидация, что значение строго положительное.

    Raises:
        InvalidAmount: Если value <= 0 или NaN/Inf
    """
    result = to_decimal(value, name)

    if result <= 0:
        raise InvalidAmount(f"{name} must be positive, got {result}")

    return result


def validate_in_range(
    value: NumberLike,
    name: str,
    min_value: Optional[Decimal] = None,
    max_value: Optional[Decimal] = None,
) -> Decimal:
    """
    Валидация, что значение в заданном диапазоне (границы включительно).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        value, приведённое к Decimal

    Raises:
        InvalidAmount: Если value вне диапазона или NaN/Inf
    """
    result = to_decimal(value, name)

    if min_value is not None and result < min_value:
        raise InvalidAmount(f"{name} must be >= {min_value}, got {result}")

    if max_value is not None and result > max_value:
        raise InvalidAmount(f"{name} must be <= {max_value}, got {result}")

    return result
