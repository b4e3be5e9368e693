"""
Тесты для Float Boundary — exp/log между Decimal и float

Проверяет:
1. Корректность exp/log в безопасном диапазоне
2. DomainOverflow вместо Infinity/NaN
3. Возврат Decimal через repr() (кратчайшее представление)
"""

import math
from decimal import Decimal

import pytest

from src.core.errors import DomainOverflow
from src.core.math.float_boundary import (
    MAX_EXP_ARG,
    MIN_EXP_ARG,
    exp_decimal,
    expm1_decimal,
    ln_decimal,
    log1p_decimal,
)


class TestExpDecimal:
    """Тесты exp_decimal"""

    def test_exp_zero_is_one(self) -> None:
        assert exp_decimal(Decimal(0)) == 1

    def test_matches_math_exp(self) -> None:
        """Результат совпадает с math.exp, приведённым через repr"""
        x = Decimal("18.420680744")
        assert exp_decimal(x) == Decimal(repr(math.exp(18.420680744)))

    def test_returns_decimal(self) -> None:
        assert isinstance(exp_decimal(Decimal("0.5")), Decimal)

    def test_at_max_arg_allowed(self) -> None:
        assert exp_decimal(Decimal(MAX_EXP_ARG)) > 0

    def test_above_max_arg_raises(self) -> None:
        with pytest.raises(DomainOverflow, match="outside safe range"):
            exp_decimal(Decimal(MAX_EXP_ARG + 1))

    def test_below_min_arg_raises(self) -> None:
        with pytest.raises(DomainOverflow):
            exp_decimal(Decimal(MIN_EXP_ARG - 1))

    def test_huge_decimal_raises(self) -> None:
        """Decimal за пределами float → DomainOverflow"""
        with pytest.raises(DomainOverflow, match="outside float range"):
            exp_decimal(Decimal("1e400"))

    def test_domain_overflow_is_arithmetic_error(self) -> None:
        with pytest.raises(ArithmeticError):
            exp_decimal(Decimal(1_000))


class TestLnDecimal:
    """Тесты ln_decimal"""

    def test_ln_one_is_zero(self) -> None:
        assert ln_decimal(Decimal(1)) == 0

    def test_inverse_of_exp(self) -> None:
        x = Decimal("12.5")
        assert float(ln_decimal(exp_decimal(x))) == pytest.approx(12.5, rel=1e-15)

    def test_zero_raises(self) -> None:
        with pytest.raises(DomainOverflow, match="must be positive"):
            ln_decimal(Decimal(0))

    def test_negative_raises(self) -> None:
        with pytest.raises(DomainOverflow, match="must be positive"):
            ln_decimal(Decimal(-1))

    def test_underflow_to_zero_raises(self) -> None:
        """Положительный Decimal, неотличимый от нуля в float"""
        with pytest.raises(DomainOverflow):
            ln_decimal(Decimal("1e-400"))

    def test_huge_argument_raises(self) -> None:
        with pytest.raises(DomainOverflow):
            ln_decimal(Decimal("1e400"))


class TestExpm1Decimal:
    """Тесты expm1_decimal"""

    def test_zero(self) -> None:
        assert expm1_decimal(Decimal(0)) == 0

    def test_small_argument_keeps_precision(self) -> None:
        """expm1 сохраняет значащие цифры при малых x"""
        x = Decimal("8.77e-11")
        assert float(expm1_decimal(x)) == pytest.approx(8.77e-11, rel=1e-12)

    def test_matches_math_expm1(self) -> None:
        assert expm1_decimal(Decimal("0.5")) == Decimal(repr(math.expm1(0.5)))

    def test_above_max_arg_raises(self) -> None:
        with pytest.raises(DomainOverflow, match="outside safe range"):
            expm1_decimal(Decimal(MAX_EXP_ARG + 1))


class TestLog1pDecimal:
    """Тесты log1p_decimal"""

    def test_zero(self) -> None:
        assert log1p_decimal(Decimal(0)) == 0

    def test_small_argument_keeps_precision(self) -> None:
        x = Decimal("1e-12")
        assert float(log1p_decimal(x)) == pytest.approx(1e-12, rel=1e-9)

    def test_inverse_of_expm1(self) -> None:
        x = Decimal("0.0001")
        assert float(log1p_decimal(expm1_decimal(x))) == pytest.approx(1e-4, rel=1e-15)

    def test_minus_one_raises(self) -> None:
        with pytest.raises(DomainOverflow, match="must be > -1"):
            log1p_decimal(Decimal(-1))
