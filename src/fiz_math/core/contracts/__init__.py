"""
Contract Validation Module

Модуль для валидации и (де)сериализации JSON контрактов fiz_math.
"""

from .codec import (
    DISTANCE_UNITS,
    distance_from_payload,
    distance_to_payload,
    vec4_from_payload,
    vec4_to_payload,
)
from .validators import (
    ContractValidator,
    DistanceValidator,
    SchemaLoader,
    Vec4Validator,
    validate_distance,
    validate_vec4,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DistanceValidator",
    "Vec4Validator",
    # Functions
    "validate_distance",
    "validate_vec4",
    # Codec
    "DISTANCE_UNITS",
    "distance_to_payload",
    "distance_from_payload",
    "vec4_to_payload",
    "vec4_from_payload",
]
