"""
Тесты для CurveParams — параметры кривой и масштабы единиц
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.core.domain.curve_params import (
    CURVE_A_SCALED,
    CURVE_B_SCALED,
    CURVE_C_SCALED,
    DEFAULT_CURVE_PARAMS,
    MAX_TOKEN_SUPPLY,
    CurveParams,
)


class TestDefaultParams:
    """Штатные константы кривой"""

    def test_constants_from_scaled(self) -> None:
        params = DEFAULT_CURVE_PARAMS
        assert params.a == Decimal("11400.230149967394933471")
        assert params.b == Decimal("0.000000877175273521")
        assert params.c == params.b

    def test_c_equals_b_scaled(self) -> None:
        assert CURVE_C_SCALED == CURVE_B_SCALED

    def test_max_supply(self) -> None:
        assert DEFAULT_CURVE_PARAMS.max_supply == Decimal(MAX_TOKEN_SUPPLY)

    def test_ab_is_floor_price(self) -> None:
        """a * b ≈ $0.01"""
        assert float(DEFAULT_CURVE_PARAMS.ab) == pytest.approx(0.01, rel=1e-6)

    def test_ab_over_c_equals_a(self) -> None:
        """При c == b множитель интеграла равен a"""
        assert DEFAULT_CURVE_PARAMS.ab_over_c == DEFAULT_CURVE_PARAMS.a

    def test_unit_scales(self) -> None:
        assert DEFAULT_CURVE_PARAMS.quarks_per_token == 10**10
        assert DEFAULT_CURVE_PARAMS.usd_base_per_whole == 10**6


class TestFromScaled:
    """Тесты CurveParams.from_scaled"""

    def test_custom_scale(self) -> None:
        params = CurveParams.from_scaled(10**18, 2 * 10**18, 10**18, max_supply=100)
        assert params.a == 1
        assert params.b == 2
        assert params.c == 1
        assert params.max_supply == 100
        assert params.ab_over_c == 2

    def test_custom_decimals(self) -> None:
        params = CurveParams.from_scaled(
            CURVE_A_SCALED, CURVE_B_SCALED, CURVE_C_SCALED, token_decimals=6
        )
        assert params.quarks_per_token == 10**6


class TestValidation:
    """Валидация и неизменяемость"""

    @pytest.mark.parametrize("field", ["a", "b", "c", "max_supply"])
    def test_non_positive_rejected(self, field) -> None:
        values = {"a": 1, "b": 1, "c": 1, "max_supply": 1_000}
        values[field] = 0
        with pytest.raises(ValidationError):
            CurveParams(**values)

    def test_token_decimals_bounds(self) -> None:
        with pytest.raises(ValidationError):
            CurveParams(a=1, b=1, c=1, max_supply=1_000, token_decimals=19)

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError, match="frozen"):
            DEFAULT_CURVE_PARAMS.a = Decimal(1)
