"""String field with length, format and choice constraints.
"""

from __future__ import annotations

import re
from re import Pattern as RegexPattern
from typing import Any, TypeVar

from .exceptions import ConstraintViolationError, FieldValidationError
from .field import Field, short_repr

StringT = TypeVar("StringT", bound="StringField")


class StringField(Field):
    """Field accepting str values."""

    kind = "string"

    def __init__(self, name: str):
        super().__init__(name)
        self._min_length = 0
        self._min_length_validation = False

        self._max_length = 0
        self._max_length_validation = False

        self._formats: list[RegexPattern[str]] = []
        self._choices: list[str] = []

    def min_length(self: StringT, length: int) -> StringT:
        """Require at least ``length`` characters (fluent API)."""
        self._min_length = length
        self._min_length_validation = True
        return self

    def max_length(self: StringT, length: int) -> StringT:
        """Require at most ``length`` characters (fluent API)."""
        self._max_length = length
        self._max_length_validation = True
        return self

    def format(self: StringT, pattern: str | RegexPattern[str]) -> StringT:
        """Require the value to match a regular expression (fluent API).

        Formats accumulate; the value must match all of them. Matching uses
        ``re.search``, so anchor the pattern to match the whole value.
        """
        if isinstance(pattern, str):
            pattern = re.compile(pattern)
        self._formats.append(pattern)
        return self

    def choices(self: StringT, *choices: str) -> StringT:
        """Restrict the value to the given choices (fluent API)."""
        self._choices = list(choices)
        return self

    def _is_correct_type(self, value: Any) -> bool:
        return isinstance(value, str)

    def _check_constraints(self, value: Any, errors: list[FieldValidationError]) -> None:
        name = self._name
        if self._min_length_validation and len(value) < self._min_length:
            errors.append(
                ConstraintViolationError(
                    f"length of {name} should be at least {self._min_length}",
                    name,
                    "min_length",
                    context={"min_length": self._min_length, "length": len(value)},
                )
            )

        if self._max_length_validation and len(value) > self._max_length:
            errors.append(
                ConstraintViolationError(
                    f"length of {name} should be at most {self._max_length}",
                    name,
                    "max_length",
                    context={"max_length": self._max_length, "length": len(value)},
                )
            )

        for pattern in self._formats:
            if not pattern.search(value):
                errors.append(
                    ConstraintViolationError(
                        f"Value {short_repr(value)} of {name} does not match format "
                        f"'{pattern.pattern}'",
                        name,
                        "format",
                        context={"format": pattern.pattern},
                    )
                )

        if self._choices and value not in self._choices:
            allowed = ", ".join(repr(choice) for choice in self._choices)
            errors.append(
                ConstraintViolationError(
                    f"Value {short_repr(value)} of {name} should be one of {allowed}",
                    name,
                    "choices",
                    context={"choices": list(self._choices)},
                )
            )


def string_field(name: str) -> StringField:
    """Create a string field."""
    return StringField(name)
