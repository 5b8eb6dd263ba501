"""
Domain models and value objects.

Contains the distance unit types (M, MM, CM, KM) and their conversion protocols.
"""

from fiz_math.core.domain.units import (
    CM,
    CM_PER_KM,
    CM_PER_M,
    KM,
    M,
    M_PER_KM,
    MM,
    MM_PER_CM,
    MM_PER_KM,
    MM_PER_M,
    Distance,
    ToCM,
    ToKM,
    ToM,
    ToMM,
    UnitError,
)

__all__ = [
    # Conversion factors
    "MM_PER_M",
    "CM_PER_M",
    "M_PER_KM",
    "MM_PER_CM",
    "MM_PER_KM",
    "CM_PER_KM",
    # Exceptions
    "UnitError",
    # Protocols
    "ToM",
    "ToMM",
    "ToCM",
    "ToKM",
    # Unit models
    "Distance",
    "M",
    "MM",
    "CM",
    "KM",
]
