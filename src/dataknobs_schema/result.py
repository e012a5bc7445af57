"""Validation result type shared by every field.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .exceptions import AggregateValidationError, FieldValidationError


@dataclass
class ValidationResult:
    """Outcome of one validation pass.

    A result is valid exactly when no error has been collected. Errors keep
    the order in which the checks ran, so composite fields list their own
    failures before those of their children.
    """

    value: Any
    errors: list[FieldValidationError] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        """True when no error was collected."""
        return not self.errors

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check validity."""
        return self.valid

    @property
    def error(self) -> AggregateValidationError | None:
        """The combined error, or None when the value is valid."""
        if not self.errors:
            return None
        return AggregateValidationError(self.errors)

    @property
    def messages(self) -> list[str]:
        """Error messages in evaluation order."""
        return [error.message for error in self.errors]

    def add_error(self, error: FieldValidationError) -> ValidationResult:
        """Add an error (fluent API).

        Args:
            error: The failure to record

        Returns:
            Self for chaining
        """
        self.errors.append(error)
        return self

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Combine results for composite validation.

        Args:
            other: Another ValidationResult to merge with this one

        Returns:
            New ValidationResult holding the errors of both, this value kept
        """
        return ValidationResult(value=self.value, errors=self.errors + other.errors)

    def raise_for_errors(self) -> Any:
        """Raise the combined error if invalid, otherwise return the value.

        Raises:
            AggregateValidationError: If any error was collected
        """
        error = self.error
        if error is not None:
            raise error
        return self.value

    @classmethod
    def success(cls, value: Any) -> ValidationResult:
        """Create a successful validation result."""
        return cls(value=value)

    @classmethod
    def failure(cls, value: Any, errors: list[FieldValidationError]) -> ValidationResult:
        """Create a failed validation result.

        Args:
            value: The value that failed validation
            errors: List of failures, must not be empty

        Returns:
            Failed ValidationResult
        """
        if not errors:
            raise ValueError("A failed ValidationResult needs at least one error")
        return cls(value=value, errors=list(errors))
