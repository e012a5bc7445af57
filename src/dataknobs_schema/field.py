"""Base class for all field definitions.

A field validates one decoded JSON-like value. Every concrete field follows
the same steps:

1. ``None`` is accepted unless the field is required.
2. A value of the wrong shape yields a single FieldTypeError and nothing
   else is checked.
3. Otherwise every configured constraint runs and all failures are kept.

Fields are configured through chainable builder methods right after
construction and are read-only afterwards; ``validate`` never changes them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, TypeVar

from .exceptions import (
    AggregateValidationError,
    FieldTypeError,
    FieldValidationError,
    RequiredFieldError,
)
from .result import ValidationResult
from .settings import get_settings

FieldT = TypeVar("FieldT", bound="Field")


def short_repr(value: Any) -> str:
    """repr() of a value, shortened to the ``max_value_repr`` setting."""
    text = repr(value)
    limit = get_settings().max_value_repr
    if limit > 3 and len(text) > limit:
        return text[: limit - 3] + "..."
    return text


class Field(ABC):
    """Abstract field with a name, a fixed kind and a required flag."""

    kind: str = ""

    def __init__(self, name: str):
        self._name = name
        self._required = False

    def get_name(self) -> str:
        """Return the name of the field."""
        return self._name

    def get_type(self) -> str:
        """Return the kind of the field, e.g. "array" or "float"."""
        return self.kind

    def get_required(self) -> bool:
        """Return True if the field is required."""
        return self._required

    def required(self: FieldT) -> FieldT:
        """Make the field required (fluent API)."""
        self._required = True
        return self

    def validate(self, value: Any) -> ValidationResult:
        """Validate a value against this field definition.

        Args:
            value: Decoded value to validate, None meaning absent

        Returns:
            ValidationResult holding every failure found
        """
        if value is None:
            if self._required:
                return ValidationResult.failure(value, [RequiredFieldError(self._name)])
            return ValidationResult.success(value)

        if not self._is_correct_type(value):
            return ValidationResult.failure(
                value,
                [FieldTypeError(self._name, self.kind, type_name(value))],
            )

        errors: list[FieldValidationError] = []
        self._check_constraints(value, errors)
        return ValidationResult(value=value, errors=errors)

    def check(self, value: Any) -> Any:
        """Validate a value and raise if it is invalid.

        Returns:
            The value itself when valid

        Raises:
            AggregateValidationError: If any check failed
        """
        return self.validate(value).raise_for_errors()

    def error(self, value: Any) -> AggregateValidationError | None:
        """Validate a value and return the combined error or None."""
        return self.validate(value).error

    @abstractmethod
    def _is_correct_type(self, value: Any) -> bool:
        """Check if a non-None value has the shape this field expects."""

    @abstractmethod
    def _check_constraints(self, value: Any, errors: list[FieldValidationError]) -> None:
        """Append one error per failing constraint to ``errors``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, required={self._required})"


def type_name(value: Any) -> str:
    """JSON-ish name of a Python value's type, used in messages."""
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
