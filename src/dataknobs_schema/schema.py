"""Schema definition with fluent API for validating whole documents.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .exceptions import ConstraintViolationError, FieldTypeError, FieldValidationError
from .field import Field, type_name
from .objects import index_fields, unknown_keys, validate_members
from .result import ValidationResult

logger = logging.getLogger(__name__)


class Schema:
    """Top-level description of a JSON object.

    A schema behaves like an unnamed object field, except that the errors of
    its fields are reported as they are instead of being wrapped.
    """

    def __init__(self, name: str, strict: bool = False):
        """Initialize schema.

        Args:
            name: Schema name for identification and messages
            strict: If True, reject documents with unknown keys
        """
        self.name = name
        self.strict = strict
        self._fields: dict[str, Field] = {}
        self.description: str | None = None

    @property
    def fields(self) -> list[Field]:
        """Fields in declaration order."""
        return list(self._fields.values())

    def field(self, field: Field) -> Schema:
        """Add a field definition (fluent API).

        Args:
            field: Field to add; a previous field with the same name is replaced

        Returns:
            Self for chaining
        """
        self._fields.update(index_fields(self.name, [field]))
        return self

    def with_fields(self, *fields: Field) -> Schema:
        """Add several field definitions (fluent API)."""
        self._fields.update(index_fields(self.name, fields))
        return self

    def with_description(self, description: str) -> Schema:
        """Set schema description (fluent API).

        Args:
            description: Schema description

        Returns:
            Self for chaining
        """
        self.description = description
        return self

    def validate(self, data: Any) -> ValidationResult:
        """Validate a decoded document against this schema.

        Args:
            data: Decoded JSON object

        Returns:
            ValidationResult with every failure of every field
        """
        if not isinstance(data, Mapping):
            return ValidationResult.failure(
                data, [FieldTypeError(self.name, "object", type_name(data))]
            )

        errors: list[FieldValidationError] = []
        for _key, _member, result in validate_members(self._fields, data):
            errors.extend(result.errors)

        if self.strict:
            unknown = unknown_keys(self._fields, data)
            if unknown:
                errors.append(
                    ConstraintViolationError(
                        f"Unknown fields in strict mode: {', '.join(unknown)}",
                        self.name,
                        "strict",
                        context={"unknown_keys": unknown},
                    )
                )

        if errors:
            logger.debug("Schema %s rejected document with %d errors", self.name, len(errors))
        return ValidationResult(value=data, errors=errors)

    def validate_many(
        self,
        documents: Iterable[Any],
        stop_on_error: bool = False,
    ) -> list[ValidationResult]:
        """Validate multiple documents.

        Args:
            documents: Documents to validate
            stop_on_error: If True, stop after the first invalid document

        Returns:
            List of ValidationResults
        """
        results = []

        for document in documents:
            result = self.validate(document)
            results.append(result)

            if not result.valid and stop_on_error:
                break

        return results

    def __repr__(self) -> str:
        return f"Schema(name={self.name!r}, fields={list(self._fields)!r}, strict={self.strict})"
