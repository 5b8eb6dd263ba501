"""
Payload Codec — Vec4 и расстояния ↔ JSON-совместимые dict

Декодирование всегда проходит через JSON Schema контракт (validators),
поэтому невалидный payload отвергается с jsonschema.ValidationError до
создания объектов.

Форматы:
    distance: {"unit": "mm", "value": 1.0}
    vec4:     {"x": 1.0, "y": 2.0, "z": 3.0, "w": 4.0}
              {"x": {"unit": "mm", "value": 1.0}, ...}
"""

from typing import Any, Dict, Final

from fiz_math.core.contracts.validators import validate_distance, validate_vec4
from fiz_math.core.domain.units import CM, KM, MM, M, Distance
from fiz_math.core.math.vec4 import Vec4
from fiz_math.logging_config import get_logger

logger = get_logger(__name__)

# Соответствие symbol → тип единицы (только для декодирования payload)
DISTANCE_UNITS: Final[Dict[str, type]] = {
    M.symbol: M,
    MM.symbol: MM,
    CM.symbol: CM,
    KM.symbol: KM,
}

_COMPONENTS: Final[tuple] = ("x", "y", "z", "w")


# =============================================================================
# DISTANCE
# =============================================================================


def distance_to_payload(distance: Distance[Any]) -> Dict[str, Any]:
    """
    Сериализация расстояния.

    Examples:
        >>> distance_to_payload(MM(1.5))
        {'unit': 'mm', 'value': 1.5}
    """
    return {"unit": distance.symbol, **distance.model_dump()}


def distance_from_payload(data: Dict[str, Any]) -> Distance[Any]:
    """
    Десериализация расстояния.

    Raises:
        ValidationError: Если payload не соответствует distance.json
    """
    validate_distance(data)
    unit_cls = DISTANCE_UNITS[data["unit"]]
    return unit_cls.model_validate({"value": data["value"]})


# =============================================================================
# VEC4
# =============================================================================


def _component_to_payload(component: Any) -> Any:
    if isinstance(component, Distance):
        return distance_to_payload(component)
    return component


def vec4_to_payload(vector: Vec4[Any]) -> Dict[str, Any]:
    """
    Сериализация вектора; компоненты-расстояния кодируются как distance payload.

    Examples:
        >>> vec4_to_payload(Vec4(1, 2, 3, 4))
        {'x': 1, 'y': 2, 'z': 3, 'w': 4}
    """
    return {name: _component_to_payload(getattr(vector, name)) for name in _COMPONENTS}


def vec4_from_payload(data: Dict[str, Any]) -> Vec4[Any]:
    """
    Десериализация вектора.

    Числовые компоненты (и значения расстояний) приводятся к float, если
    хотя бы одна из них не целая (JSON не различает 1 и 1.0 однозначно).

    Raises:
        ValidationError: Если payload не соответствует vec4.json
        ValueError: Если компоненты-расстояния заданы в разных единицах
    """
    validate_vec4(data)
    raw = [data[name] for name in _COMPONENTS]

    if isinstance(raw[0], dict):
        units = sorted({component["unit"] for component in raw})
        if len(units) > 1:
            raise ValueError(f"vec4 components must share one unit, got {units}")
        components = [distance_from_payload(component) for component in raw]
        if any(isinstance(component.value, float) for component in components):
            components = [type(component)(float(component.value)) for component in components]
    elif any(isinstance(component, float) for component in raw):
        components = [float(component) for component in raw]
    else:
        components = raw

    vector = Vec4(*components)
    logger.debug("Decoded vec4 payload into %r", vector)
    return vector
