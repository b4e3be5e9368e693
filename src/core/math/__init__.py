"""
Core math modules для bonding curve

Decimal-контекст, граница float exp/log и комиссии в basis points.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    CURVE_DECIMAL_CONTEXT,
    CURVE_PRECISION,
    EPS_DECIMAL_COMPARE_ABS,
    EPS_DECIMAL_COMPARE_REL,
    NumberLike,
    clamp,
    is_close_decimal,
    is_valid_float,
    to_decimal,
    validate_in_range,
    validate_non_negative,
    validate_positive,
)

# Float Boundary
from src.core.math.float_boundary import (
    MAX_EXP_ARG,
    MIN_EXP_ARG,
    exp_decimal,
    expm1_decimal,
    ln_decimal,
    log1p_decimal,
)

# Fees
from src.core.math.fees import (
    BPS_DENOMINATOR,
    BUY_FEE_BPS,
    SELL_FEE_BPS,
    FeeSchedule,
    apply_fee_bps,
    bps_to_fraction,
    fee_amount,
    net_buy_input,
    validate_fee_bps,
)

__all__ = [
    # Numerical Safeguards — Decimal context
    "CURVE_DECIMAL_CONTEXT",
    "CURVE_PRECISION",
    "NumberLike",
    # Numerical Safeguards — Epsilon constants
    "EPS_DECIMAL_COMPARE_ABS",
    "EPS_DECIMAL_COMPARE_REL",
    # Numerical Safeguards — Functions
    "clamp",
    "is_close_decimal",
    "is_valid_float",
    "to_decimal",
    "validate_in_range",
    "validate_non_negative",
    "validate_positive",
    # Float Boundary
    "MAX_EXP_ARG",
    "MIN_EXP_ARG",
    "exp_decimal",
    "expm1_decimal",
    "ln_decimal",
    "log1p_decimal",
    # Fees — Constants
    "BPS_DENOMINATOR",
    "BUY_FEE_BPS",
    "SELL_FEE_BPS",
    # Fees — Config
    "FeeSchedule",
    # Fees — Functions
    "apply_fee_bps",
    "bps_to_fraction",
    "fee_amount",
    "net_buy_input",
    "validate_fee_bps",
]
