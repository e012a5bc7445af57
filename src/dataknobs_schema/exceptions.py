"""Exception hierarchy for dataknobs_schema.

Every error carries an optional ``context`` dictionary with structured
information (field names, bounds, offending values) next to the human
readable message.

Validation failures are normally *returned* inside a
:class:`~dataknobs_schema.result.ValidationResult` rather than raised. They
are still exceptions so that callers can raise them when they prefer
fail-loud handling:

    ```python
    result = schema.validate(payload)
    if not result:
        raise result.error
    ```
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any


class SchemaError(Exception):
    """Base exception for all dataknobs_schema errors.

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}


class ConfigurationError(SchemaError):
    """Raised when a field or the settings are configured incorrectly."""

    pass


class FieldValidationError(SchemaError):
    """A single validation failure reported by a field."""

    def __init__(
        self,
        message: str,
        field_name: str,
        context: dict[str, Any] | None = None,
    ):
        self.field_name = field_name
        context = dict(context or {})
        context.setdefault("field_name", field_name)
        super().__init__(message, context=context)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldValidationError):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))


class RequiredFieldError(FieldValidationError):
    """Raised when a required field has no value."""

    def __init__(self, field_name: str):
        super().__init__(f"Value for {field_name} field is required", field_name)


class FieldTypeError(FieldValidationError):
    """Raised when a value does not have the shape a field expects."""

    def __init__(self, field_name: str, expected_type: str, actual_type: str):
        self.expected_type = expected_type
        self.actual_type = actual_type
        super().__init__(
            f"Value of {field_name} should be {expected_type}, got {actual_type}",
            field_name,
            context={"expected_type": expected_type, "actual_type": actual_type},
        )


class ConstraintViolationError(FieldValidationError):
    """Raised when a value breaks one configured constraint."""

    def __init__(
        self,
        message: str,
        field_name: str,
        constraint: str,
        context: dict[str, Any] | None = None,
    ):
        self.constraint = constraint
        context = dict(context or {})
        context["constraint"] = constraint
        super().__init__(message, field_name, context=context)


class NestedFieldError(FieldValidationError):
    """Wraps the failure of a child field of a composite field.

    Args:
        field_name: Name of the composite (parent) field
        location: Element index or object key of the failing child
        value: The child value that failed
        cause: The child's aggregated error
        message: Context message placed in front of the child's message
    """

    def __init__(
        self,
        field_name: str,
        location: int | str,
        value: Any,
        cause: AggregateValidationError,
        message: str,
    ):
        self.location = location
        self.value = value
        self.cause = cause
        self.__cause__ = cause
        super().__init__(
            f"{message}: {cause}",
            field_name,
            context={"location": location, "value": value},
        )


class AggregateValidationError(SchemaError):
    """All failures found during one validation pass, in evaluation order."""

    def __init__(self, errors: Sequence[FieldValidationError]):
        self.errors = list(errors)
        super().__init__(
            self._format(self.errors),
            context={"count": len(self.errors)},
        )

    @staticmethod
    def _format(errors: list[FieldValidationError]) -> str:
        if len(errors) == 1:
            return errors[0].message
        lines = "".join(f"\n\t* {error.message}" for error in errors)
        return f"{len(errors)} errors occurred:{lines}"

    def __iter__(self) -> Iterator[FieldValidationError]:
        return iter(self.errors)

    def __len__(self) -> int:
        return len(self.errors)

    def __getitem__(self, index: int) -> FieldValidationError:
        return self.errors[index]


__all__ = [
    "SchemaError",
    "ConfigurationError",
    "FieldValidationError",
    "RequiredFieldError",
    "FieldTypeError",
    "ConstraintViolationError",
    "NestedFieldError",
    "AggregateValidationError",
]
