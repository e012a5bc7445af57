"""Declarative validation of decoded JSON-like values.

Build a schema from composable fields, configure constraints through
chainable builders, and validate values to get every violation at once:

    ```python
    from dataknobs_schema import array_field, float_field

    field = array_field("temps", float_field("temp").required().range(-40, 60))
    result = field.min_length(1).validate([12.5, 99.0])
    result.valid     # False
    result.messages  # ['99.0 item at index 1 is invalid in temps array: ...']
    ```
"""

from .array import ArrayField, array_field
from .boolean import BooleanField, boolean_field
from .exceptions import (
    AggregateValidationError,
    ConfigurationError,
    ConstraintViolationError,
    FieldTypeError,
    FieldValidationError,
    NestedFieldError,
    RequiredFieldError,
    SchemaError,
)
from .field import Field
from .numeric import FloatField, IntegerField, NumberField, float_field, integer_field
from .objects import ObjectField, object_field
from .result import ValidationResult
from .schema import Schema
from .settings import SchemaSettings, configure, get_settings, reset_settings
from .string import StringField, string_field

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Result types
    "ValidationResult",
    # Fields
    "Field",
    "NumberField",
    "FloatField",
    "IntegerField",
    "StringField",
    "BooleanField",
    "ArrayField",
    "ObjectField",
    "Schema",
    # Factories
    "float_field",
    "integer_field",
    "string_field",
    "boolean_field",
    "array_field",
    "object_field",
    # Exceptions
    "SchemaError",
    "ConfigurationError",
    "FieldValidationError",
    "RequiredFieldError",
    "FieldTypeError",
    "ConstraintViolationError",
    "NestedFieldError",
    "AggregateValidationError",
    # Settings
    "SchemaSettings",
    "configure",
    "get_settings",
    "reset_settings",
]
