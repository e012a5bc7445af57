"""Array field: validates a list and every element in it.

The array checks its own length bounds and then hands every element to
its item field. All failures are collected: length violations first, then
one NestedFieldError per invalid element in index order.

    ```python
    scores = array_field("scores", float_field("score").required().positive())
    result = scores.min_length(1).validate([1.0, -2.0, 3.0, -4.0])
    [error.location for error in result.errors]  # [1, 3]
    ```
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from .exceptions import (
    ConfigurationError,
    ConstraintViolationError,
    FieldValidationError,
    NestedFieldError,
)
from .field import Field, short_repr

logger = logging.getLogger(__name__)

ArrayT = TypeVar("ArrayT", bound="ArrayField")


class ArrayField(Field):
    """Field accepting a list (or tuple) whose elements match ``items``."""

    kind = "array"

    def __init__(self, name: str, items: Field):
        if not isinstance(items, Field):
            raise ConfigurationError(
                f"Items of {name} array must be a Field, got {type(items).__name__}",
                context={"field_name": name},
            )
        super().__init__(name)
        self._items = items

        self._min_length = 0
        self._min_length_validation = False

        self._max_length = 0
        self._max_length_validation = False

    @property
    def items(self) -> Field:
        """The field every element is validated against."""
        return self._items

    def min_length(self: ArrayT, length: int) -> ArrayT:
        """Require at least ``length`` elements (fluent API)."""
        self._min_length = length
        self._min_length_validation = True
        return self

    def max_length(self: ArrayT, length: int) -> ArrayT:
        """Require at most ``length`` elements (fluent API)."""
        self._max_length = length
        self._max_length_validation = True
        return self

    def _is_correct_type(self, value: Any) -> bool:
        return isinstance(value, (list, tuple))

    def _check_constraints(self, value: Any, errors: list[FieldValidationError]) -> None:
        name = self._name
        if self._min_length_validation and len(value) < self._min_length:
            errors.append(
                ConstraintViolationError(
                    f"length of {name} array should be at least {self._min_length}",
                    name,
                    "min_length",
                    context={"min_length": self._min_length, "length": len(value)},
                )
            )

        if self._max_length_validation and len(value) > self._max_length:
            errors.append(
                ConstraintViolationError(
                    f"length of {name} array should be at most {self._max_length}",
                    name,
                    "max_length",
                    context={"max_length": self._max_length, "length": len(value)},
                )
            )

        invalid = 0
        for index, item in enumerate(value):
            item_error = self._items.validate(item).error
            if item_error is None:
                continue
            invalid += 1
            errors.append(
                NestedFieldError(
                    name,
                    index,
                    item,
                    item_error,
                    f"{short_repr(item)} item at index {index} is invalid in {name} array",
                )
            )

        if invalid:
            logger.debug("%d of %d items invalid in %s array", invalid, len(value), name)


def array_field(name: str, items: Field) -> ArrayField:
    """Create an array field whose elements are validated by ``items``."""
    return ArrayField(name, items)
