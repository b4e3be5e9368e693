"""
Тесты для Fees — комиссии в basis points

Проверяет:
1. Конверсию bps → дробь
2. Удержание комиссии (net + fee == amount)
3. Buy fee и явное освобождение от неё
4. Валидацию fee_bps и FeeSchedule
"""

from decimal import Decimal

import pytest

from src.core.errors import InvalidAmount
from src.core.math.fees import (
    BUY_FEE_BPS,
    SELL_FEE_BPS,
    FeeSchedule,
    apply_fee_bps,
    bps_to_fraction,
    fee_amount,
    net_buy_input,
    validate_fee_bps,
)

EXEMPT_MINT = "mny8s3Cx1E2b3kSU4dLGfsm7nnkA1mghGmxHPBVPNVR"


class TestBpsToFraction:
    """Тесты bps_to_fraction"""

    def test_sell_fee(self) -> None:
        assert bps_to_fraction(SELL_FEE_BPS) == Decimal("0.01")

    def test_buy_fee(self) -> None:
        assert bps_to_fraction(BUY_FEE_BPS) == Decimal("0.0033")

    def test_bounds(self) -> None:
        assert bps_to_fraction(0) == 0
        assert bps_to_fraction(10_000) == 1


class TestApplyFee:
    """Тесты apply_fee_bps и fee_amount"""

    def test_one_percent(self) -> None:
        assert apply_fee_bps(Decimal(1_000), 100) == Decimal(990)

    def test_zero_fee_unchanged(self) -> None:
        amount = Decimal("123.456789")
        assert apply_fee_bps(amount, 0) == amount

    def test_full_fee_is_zero(self) -> None:
        assert apply_fee_bps(Decimal(50), 10_000) == 0

    def test_fee_amount(self) -> None:
        assert fee_amount(Decimal(1_000), 33) == Decimal("3.3")

    def test_net_plus_fee_is_amount(self) -> None:
        """Инвариант: net + fee == amount"""
        amount = Decimal("987.654321")
        net = apply_fee_bps(amount, 77)
        fee = fee_amount(amount, 77)
        assert net + fee == amount

    def test_negative_amount_rejected(self) -> None:
        with pytest.raises(InvalidAmount, match="non-negative"):
            apply_fee_bps(Decimal(-1), 100)


class TestNetBuyInput:
    """Тесты net_buy_input: buy fee и освобождение"""

    def test_default_buy_fee(self) -> None:
        assert net_buy_input(Decimal(1_000)) == Decimal("996.7")

    def test_exempt_bypasses_fee(self) -> None:
        assert net_buy_input(Decimal(1_000), fee_exempt=True) == Decimal(1_000)

    def test_custom_fee(self) -> None:
        assert net_buy_input(Decimal(200), buy_fee_bps=50) == Decimal(199)


class TestValidateFeeBps:
    """Тесты validate_fee_bps"""

    @pytest.mark.parametrize("fee_bps", [0, 1, 33, 100, 10_000])
    def test_valid(self, fee_bps) -> None:
        assert validate_fee_bps(fee_bps) == fee_bps

    @pytest.mark.parametrize("fee_bps", [-1, 10_001])
    def test_out_of_range(self, fee_bps) -> None:
        with pytest.raises(InvalidAmount, match="must be in"):
            validate_fee_bps(fee_bps)

    @pytest.mark.parametrize("fee_bps", [1.5, "100", True])
    def test_non_integer(self, fee_bps) -> None:
        with pytest.raises(InvalidAmount, match="integer"):
            validate_fee_bps(fee_bps)


class TestFeeSchedule:
    """Тесты FeeSchedule"""

    def test_defaults(self) -> None:
        schedule = FeeSchedule()
        assert schedule.sell_fee_bps == 100
        assert schedule.buy_fee_bps == 33
        assert schedule.exempt_mints == frozenset()

    def test_is_exempt(self) -> None:
        schedule = FeeSchedule(exempt_mints=frozenset({EXEMPT_MINT}))
        assert schedule.is_exempt(EXEMPT_MINT)
        assert not schedule.is_exempt("54ggcQ23uen5b9QXMAns99MQNTKn7iyzq4wvCW6e8r25")

    def test_invalid_fee_rejected(self) -> None:
        with pytest.raises(InvalidAmount, match="sell_fee_bps"):
            FeeSchedule(sell_fee_bps=20_000)

    def test_frozen(self) -> None:
        schedule = FeeSchedule()
        with pytest.raises(AttributeError):
            schedule.buy_fee_bps = 0
