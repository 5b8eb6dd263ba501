"""
JSON Schema Contract Validators

Модуль для валидации JSON payload'ов векторов и расстояний согласно
формальным JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы (пакетные данные fiz_math/core/contracts/schema/):
- distance.json — {"unit": "mm", "value": 1.0}
- vec4.json — {"x": .., "y": .., "z": .., "w": ..}, компоненты либо все
  числа, либо все distance payload'ы
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from fiz_math.logging_config import get_logger

logger = get_logger(__name__)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат рядом с модулем в каталоге schema/.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'vec4')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        logger.debug("Loaded schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        try:
            self.validator.validate(data)
        except ValidationError as e:
            logger.debug("Payload rejected by %s schema: %s", self.schema_name, e.message)
            raise

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class DistanceValidator(ContractValidator):
    """Валидатор для distance контракта."""

    def __init__(self):
        super().__init__("distance")


class Vec4Validator(ContractValidator):
    """Валидатор для vec4 контракта."""

    def __init__(self):
        super().__init__("vec4")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_distance(data: Dict[str, Any]) -> None:
    """
    Валидация distance payload.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    DistanceValidator().validate(data)


def validate_vec4(data: Dict[str, Any]) -> None:
    """
    Валидация vec4 payload.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    Vec4Validator().validate(data)
