"""
Core math modules для fiz_math

Скалярные capability-границы, численные safeguards и обобщённый Vec4.
"""

# Numerical Safeguards
from fiz_math.core.math.numerical_safeguards import (
    EPS_ALMOST_EQUAL_ABS,
    almost_equal,
    clamp,
    is_nan,
    is_valid_float,
    round_half_away,
)

# Scalar capabilities
from fiz_math.core.math.scalar import (
    FloatScalar,
    RingScalar,
    ScalarCapabilityError,
    ScalarTypeMismatch,
    from_int,
    is_float_like,
    one_of,
    zero_of,
)

# Vec4
from fiz_math.core.math.vec4 import Ordering, Vec4

__all__ = [
    # Numerical Safeguards
    "EPS_ALMOST_EQUAL_ABS",
    "almost_equal",
    "clamp",
    "is_nan",
    "is_valid_float",
    "round_half_away",
    # Scalar — Protocols
    "RingScalar",
    "FloatScalar",
    # Scalar — Exceptions
    "ScalarTypeMismatch",
    "ScalarCapabilityError",
    # Scalar — Functions
    "from_int",
    "is_float_like",
    "one_of",
    "zero_of",
    # Vec4
    "Ordering",
    "Vec4",
]
