"""
Float Boundary — узкий интерфейс exp/log между Decimal и float

Единственное место движка, где вызываются math.exp, math.expm1,
math.log и math.log1p.
Аргументы экспоненты и логарифма пересекают границу Decimal → float,
результаты возвращаются обратно как Decimal через repr().

Константы кривой предварительно масштабированы так, что c * S ≤ ~18.42
на всём domain [0, max_supply], поэтому штатные вызовы далеки от
переполнения. Проверки ниже превращают выход за пределы float в
DomainOverflow вместо Infinity/NaN.

Для переноса движка на fixed-point или big-decimal реализацию
достаточно заменить функции этого модуля.
"""

import math
from decimal import Decimal
from typing import Final

from src.core.errors import DomainOverflow
from src.core.math.numerical_safeguards import is_valid_float

# =============================================================================
# ГРАНИЦЫ FLOAT
# =============================================================================

# math.exp переполняется при x > ~709.78
MAX_EXP_ARG: Final[float] = 709.0

# Нижняя граница: ниже exp(x) неотличим от нуля в double
MIN_EXP_ARG: Final[float] = -745.0


# =============================================================================
# EXP / LOG
# =============================================================================


def _to_float(value: Decimal, op: str) -> float:
    arg = float(value)
    if not is_valid_float(arg):
        raise DomainOverflow(f"{op} argument {value} is outside float range")
    return arg


def _from_float(value: float, op: str) -> Decimal:
    if not is_valid_float(value):
        raise DomainOverflow(f"{op} produced non-finite result: {value}")
    return Decimal(repr(value))


def exp_decimal(x: Decimal) -> Decimal:
    """
    e^x с аргументом и результатом в Decimal.

    Args:
        x: Показатель экспоненты

    Returns:
        e^x как Decimal (точность double)

    Raises:
        DomainOverflow: Если x вне [MIN_EXP_ARG, MAX_EXP_ARG]

    Examples:
        >>> exp_decimal(Decimal(0))
        Decimal('1.0')
    """
    arg = _to_float(x, "exp")

    if arg > MAX_EXP_ARG or arg < MIN_EXP_ARG:
        raise DomainOverflow(
            f"exp argument {arg} outside safe range [{MIN_EXP_ARG}, {MAX_EXP_ARG}]"
        )

    try:
        result = math.exp(arg)
    except OverflowError:
        raise DomainOverflow(f"exp({arg}) overflowed")

    return _from_float(result, "exp")


def ln_decimal(x: Decimal) -> Decimal:
    """
    Натуральный логарифм с аргументом и результатом в Decimal.

    Args:
        x: Аргумент логарифма (> 0)

    Returns:
        ln(x) как Decimal (точность double)

    Raises:
        DomainOverflow: Если x ≤ 0 или вне диапазона float
    """
    arg = _to_float(x, "log")

    if arg <= 0.0:
        raise DomainOverflow(f"log argument must be positive, got {x}")

    return _from_float(math.log(arg), "log")


def expm1_decimal(x: Decimal) -> Decimal:
    """
    e^x - 1 без потери точности при малых x.

    Для разности e^(c * S1) - e^(c * S0) при малом ΔS прямое вычитание
    двух экспонент теряет значащие цифры; expm1 их сохраняет.

    Raises:
        DomainOverflow: Если x вне [MIN_EXP_ARG, MAX_EXP_ARG]

    Examples:
        >>> expm1_decimal(Decimal(0))
        Decimal('0.0')
    """
    arg = _to_float(x, "expm1")

    if arg > MAX_EXP_ARG or arg < MIN_EXP_ARG:
        raise DomainOverflow(
            f"expm1 argument {arg} outside safe range [{MIN_EXP_ARG}, {MAX_EXP_ARG}]"
        )

    try:
        result = math.expm1(arg)
    except OverflowError:
        raise DomainOverflow(f"expm1({arg}) overflowed")

    return _from_float(result, "expm1")


def log1p_decimal(x: Decimal) -> Decimal:
    """
    ln(1 + x) без потери точности при малых x.

    Raises:
        DomainOverflow: Если x ≤ -1 или вне диапазона float
    """
    arg = _to_float(x, "log1p")

    if arg <= -1.0:
        raise DomainOverflow(f"log1p argument must be > -1, got {x}")

    return _from_float(math.log1p(arg), "log1p")
