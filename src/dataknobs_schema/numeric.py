"""Numeric fields: float and integer.

Constraints are opt-in. Each one has an activation flag next to its bound
because zero is a perfectly valid bound. Ranges are alternatives: a value
passes when it falls inside at least one of them.

    ```python
    speed = float_field("speed").required().range(-10, 10).range(20, 30)
    speed.validate(25.0).valid   # True
    speed.validate(100.0).valid  # False
    ```
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Any, TypeVar

from .exceptions import ConstraintViolationError, FieldValidationError
from .field import Field
from .settings import get_settings

NumberT = TypeVar("NumberT", bound="NumberField")


class NumberField(Field):
    """Shared constraint logic for numeric fields."""

    def __init__(self, name: str):
        super().__init__(name)
        self._positive = False
        self._negative = False

        self._min: Real = 0
        self._min_validation = False

        self._max: Real = 0
        self._max_validation = False

        self._ranges: list[tuple[Real, Real]] = []

    def positive(self: NumberT) -> NumberT:
        """Require value > 0 (fluent API)."""
        self._positive = True
        return self

    def negative(self: NumberT) -> NumberT:
        """Require value < 0 (fluent API)."""
        self._negative = True
        return self

    def min(self: NumberT, bound: Real) -> NumberT:
        """Require value >= bound; the last call wins (fluent API)."""
        self._min = bound
        self._min_validation = True
        return self

    def max(self: NumberT, bound: Real) -> NumberT:
        """Require value <= bound; the last call wins (fluent API)."""
        self._max = bound
        self._max_validation = True
        return self

    def range(self: NumberT, low: Real, high: Real) -> NumberT:
        """Add an allowed range [low, high] (fluent API).

        Each call adds one more alternative. A value is valid if it lies in
        any registered range.
        """
        self._ranges.append((low, high))
        return self

    def _is_number(self, value: Any) -> bool:
        if isinstance(value, bool):
            return get_settings().bool_is_number
        return isinstance(value, Real)

    def _check_constraints(self, value: Any, errors: list[FieldValidationError]) -> None:
        # Comparisons are written so that NaN fails every active check
        name = self._name
        if self._positive and not value > 0:
            errors.append(
                ConstraintViolationError(
                    f"Value of {name} should be positive, got {value}", name, "positive"
                )
            )

        if self._negative and not value < 0:
            errors.append(
                ConstraintViolationError(
                    f"Value of {name} should be negative, got {value}", name, "negative"
                )
            )

        if self._min_validation and not value >= self._min:
            errors.append(
                ConstraintViolationError(
                    f"Value of {name} should be at least {self._min}, got {value}",
                    name,
                    "min",
                    context={"min": self._min},
                )
            )

        if self._max_validation and not value <= self._max:
            errors.append(
                ConstraintViolationError(
                    f"Value of {name} should be at most {self._max}, got {value}",
                    name,
                    "max",
                    context={"max": self._max},
                )
            )

        if self._ranges and not any(low <= value <= high for low, high in self._ranges):
            ranges = ", ".join(f"[{low}, {high}]" for low, high in self._ranges)
            errors.append(
                ConstraintViolationError(
                    f"Value of {name} should be in one of the ranges {ranges}, got {value}",
                    name,
                    "range",
                    context={"ranges": list(self._ranges)},
                )
            )


class FloatField(NumberField):
    """Field accepting any real number."""

    kind = "float"

    def _is_correct_type(self, value: Any) -> bool:
        return self._is_number(value)


class IntegerField(NumberField):
    """Field accepting whole numbers, including integral floats like 2.0."""

    kind = "integer"

    def _is_correct_type(self, value: Any) -> bool:
        if not self._is_number(value):
            return False
        if isinstance(value, float):
            return math.isfinite(value) and value.is_integer()
        return True


def float_field(name: str) -> FloatField:
    """Create a float field."""
    return FloatField(name)


def integer_field(name: str) -> IntegerField:
    """Create an integer field."""
    return IntegerField(name)
