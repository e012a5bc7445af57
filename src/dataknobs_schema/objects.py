"""Object field: validates a mapping key by key.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from .exceptions import (
    ConfigurationError,
    ConstraintViolationError,
    FieldValidationError,
    NestedFieldError,
)
from .field import Field
from .result import ValidationResult

logger = logging.getLogger(__name__)

ObjectT = TypeVar("ObjectT", bound="ObjectField")


def index_fields(owner: str, fields: Iterable[Field]) -> dict[str, Field]:
    """Key fields by name, the last field with a given name wins."""
    indexed: dict[str, Field] = {}
    for child in fields:
        if not isinstance(child, Field):
            raise ConfigurationError(
                f"Fields of {owner} must be Field instances, got {type(child).__name__}",
                context={"owner": owner},
            )
        indexed[child.get_name()] = child
    return indexed


def validate_members(
    fields: Mapping[str, Field], value: Mapping[str, Any]
) -> Iterable[tuple[str, Any, ValidationResult]]:
    """Validate each declared key of ``value``; missing keys count as None."""
    for key, child in fields.items():
        member = value.get(key)
        yield key, member, child.validate(member)


def unknown_keys(fields: Mapping[str, Field], value: Mapping[str, Any]) -> list[str]:
    """Keys of ``value`` that no field describes, in mapping order."""
    return [str(key) for key in value if key not in fields]


class ObjectField(Field):
    """Field accepting a mapping whose keys are described by child fields."""

    kind = "object"

    def __init__(self, name: str, fields: Iterable[Field] = ()):
        super().__init__(name)
        self._fields = index_fields(name, fields)
        self._strict = False

    @property
    def fields(self) -> list[Field]:
        """Child fields in declaration order."""
        return list(self._fields.values())

    def field(self: ObjectT, child: Field) -> ObjectT:
        """Add a child field (fluent API)."""
        self._fields.update(index_fields(self._name, [child]))
        return self

    def strict(self: ObjectT) -> ObjectT:
        """Reject keys without a matching child field (fluent API)."""
        self._strict = True
        return self

    def _is_correct_type(self, value: Any) -> bool:
        return isinstance(value, Mapping)

    def _check_constraints(self, value: Any, errors: list[FieldValidationError]) -> None:
        name = self._name
        for key, member, result in validate_members(self._fields, value):
            if result.valid:
                continue
            errors.append(
                NestedFieldError(
                    name,
                    key,
                    member,
                    result.error,  # type: ignore[arg-type]
                    f"{key} key is invalid in {name} object",
                )
            )

        if self._strict:
            unknown = unknown_keys(self._fields, value)
            if unknown:
                logger.debug("Unknown keys in %s object: %s", name, unknown)
                errors.append(
                    ConstraintViolationError(
                        f"{name} object has unknown keys: {', '.join(unknown)}",
                        name,
                        "strict",
                        context={"unknown_keys": unknown},
                    )
                )


def object_field(name: str, *fields: Field) -> ObjectField:
    """Create an object field with the given child fields."""
    return ObjectField(name, fields)
