"""
Core math modules для rcgal

Численные примитивы с гарантией конечности и граница с NumPy.
"""

from rcgal.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    FLOAT_MAX,
    FLOAT_MIN_NORMAL,
    UNIT_LENGTH_TOLERANCE,
    # Classification
    FloatClass,
    classify_float,
    is_normal_float,
    is_valid_float,
    # Validation
    is_close,
    validate_finite,
    # Hypot
    checked_magnitude,
    max_abs,
    safe_hypot,
)

from rcgal.core.math.array_interop import (
    array_to_pair,
    pair_to_array,
    value_to_pair,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "FLOAT_MAX",
    "FLOAT_MIN_NORMAL",
    "UNIT_LENGTH_TOLERANCE",
    # Numerical Safeguards — Classification
    "FloatClass",
    "classify_float",
    "is_normal_float",
    "is_valid_float",
    # Numerical Safeguards — Validation
    "is_close",
    "validate_finite",
    # Numerical Safeguards — Hypot
    "checked_magnitude",
    "max_abs",
    "safe_hypot",
    # Array Interop
    "array_to_pair",
    "pair_to_array",
    "value_to_pair",
]
