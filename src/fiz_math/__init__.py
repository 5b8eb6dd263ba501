"""
fiz_math — generic Vec4 arithmetic and exact distance-unit conversions.
"""

import logging

from fiz_math.core.domain import CM, KM, MM, M, ToCM, ToKM, ToM, ToMM, UnitError
from fiz_math.core.math import Ordering, ScalarCapabilityError, ScalarTypeMismatch, Vec4

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Vec4",
    "Ordering",
    "M",
    "MM",
    "CM",
    "KM",
    "ToM",
    "ToMM",
    "ToCM",
    "ToKM",
    "UnitError",
    "ScalarTypeMismatch",
    "ScalarCapabilityError",
]
