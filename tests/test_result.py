"""Tests for ValidationResult and the exception hierarchy."""

import pytest

from dataknobs_schema import (
    AggregateValidationError,
    ConfigurationError,
    ConstraintViolationError,
    FieldTypeError,
    FieldValidationError,
    NestedFieldError,
    RequiredFieldError,
    SchemaError,
    ValidationResult,
)


class TestValidationResult:
    """Test ValidationResult functionality."""

    def test_success_result(self):
        """Test creating a successful result."""
        result = ValidationResult.success(42)
        assert result.valid is True
        assert result.value == 42
        assert result.errors == []
        assert result.error is None
        assert bool(result) is True

    def test_failure_result(self):
        """Test creating a failed result."""
        error = RequiredFieldError("foo")
        result = ValidationResult.failure(None, [error])
        assert result.valid is False
        assert result.errors == [error]
        assert bool(result) is False
        assert result.messages == ["Value for foo field is required"]

    def test_failure_needs_errors(self):
        """Test that an empty failure is refused."""
        with pytest.raises(ValueError):
            ValidationResult.failure(1, [])

    def test_add_error(self):
        """Test adding errors fluently."""
        result = ValidationResult.success(5)
        assert result.add_error(RequiredFieldError("foo")) is result
        assert result.valid is False

    def test_merge_results(self):
        """Test merging validation results."""
        first = ValidationResult.failure(1, [RequiredFieldError("a")])
        second = ValidationResult.failure(2, [RequiredFieldError("b")])

        merged = first.merge(second)
        assert merged.value == 1
        assert [error.field_name for error in merged.errors] == ["a", "b"]
        assert len(first.errors) == 1

    def test_merge_with_success(self):
        """Test that merging two successes stays valid."""
        assert ValidationResult.success(1).merge(ValidationResult.success(2)).valid

    def test_raise_for_errors(self):
        """Test raising the combined error."""
        assert ValidationResult.success("ok").raise_for_errors() == "ok"

        result = ValidationResult.failure(None, [RequiredFieldError("foo")])
        with pytest.raises(AggregateValidationError) as exc_info:
            result.raise_for_errors()
        assert str(exc_info.value) == "Value for foo field is required"


class TestExceptions:
    """Test the exception hierarchy."""

    def test_hierarchy(self):
        """Test that every error is a SchemaError."""
        for error_type in (
            ConfigurationError,
            FieldValidationError,
            AggregateValidationError,
        ):
            assert issubclass(error_type, SchemaError)
        for error_type in (
            RequiredFieldError,
            FieldTypeError,
            ConstraintViolationError,
            NestedFieldError,
        ):
            assert issubclass(error_type, FieldValidationError)

    def test_context(self):
        """Test context dictionaries."""
        assert SchemaError("boom").context == {}

        error = FieldTypeError("foo", "float", "string")
        assert error.context == {
            "field_name": "foo",
            "expected_type": "float",
            "actual_type": "string",
        }

        error = ConstraintViolationError("too small", "foo", "min", context={"min": 3})
        assert error.context == {"field_name": "foo", "min": 3, "constraint": "min"}

    def test_nested_error(self):
        """Test wrapping a child error."""
        cause = AggregateValidationError([RequiredFieldError("bar")])
        error = NestedFieldError("foo", 2, None, cause, "None item at index 2 is invalid")
        assert error.cause is cause
        assert error.__cause__ is cause
        assert error.location == 2
        assert str(error) == "None item at index 2 is invalid: Value for bar field is required"

    def test_aggregate_format(self):
        """Test the combined message."""
        error = AggregateValidationError(
            [RequiredFieldError("a"), RequiredFieldError("b")]
        )
        assert str(error) == (
            "2 errors occurred:"
            "\n\t* Value for a field is required"
            "\n\t* Value for b field is required"
        )
        assert len(error) == 2
        assert [e.field_name for e in error] == ["a", "b"]
        assert error.context == {"count": 2}

    def test_equality(self):
        """Test that equal failures compare equal."""
        assert RequiredFieldError("a") == RequiredFieldError("a")
        assert RequiredFieldError("a") != RequiredFieldError("b")
        assert len({RequiredFieldError("a"), RequiredFieldError("a")}) == 1
