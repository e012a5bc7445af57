"""Boolean field."""

from __future__ import annotations

from typing import Any

from .exceptions import ConstraintViolationError, FieldValidationError
from .field import Field


class BooleanField(Field):
    """Field accepting True or False."""

    kind = "boolean"

    def __init__(self, name: str):
        super().__init__(name)
        self._value = False
        self._value_validation = False

    def should_be(self, expected: bool) -> BooleanField:
        """Require the value to equal ``expected`` (fluent API)."""
        self._value = bool(expected)
        self._value_validation = True
        return self

    def _is_correct_type(self, value: Any) -> bool:
        return isinstance(value, bool)

    def _check_constraints(self, value: Any, errors: list[FieldValidationError]) -> None:
        if self._value_validation and value != self._value:
            errors.append(
                ConstraintViolationError(
                    f"Value of {self._name} should be {str(self._value).lower()}",
                    self._name,
                    "should_be",
                    context={"expected": self._value},
                )
            )


def boolean_field(name: str) -> BooleanField:
    """Create a boolean field."""
    return BooleanField(name)
