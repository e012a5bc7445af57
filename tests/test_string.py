"""Tests for StringField and BooleanField."""

import re

from dataknobs_schema import (
    BooleanField,
    FieldTypeError,
    RequiredFieldError,
    StringField,
    boolean_field,
    configure,
    string_field,
)


class TestStringField:
    """Test StringField validation."""

    def test_identity(self):
        """Test type tag and class."""
        field = string_field("name")
        assert isinstance(field, StringField)
        assert field.get_type() == "string"

    def test_type_check(self):
        """Test that only str passes the shape check."""
        assert string_field("name").validate("x").valid
        result = string_field("name").min_length(3).validate(12)
        assert len(result.errors) == 1
        assert isinstance(result.errors[0], FieldTypeError)

    def test_required(self):
        """Test None handling."""
        assert string_field("name").validate(None).valid
        result = string_field("name").required().validate(None)
        assert isinstance(result.errors[0], RequiredFieldError)

    def test_empty_string_is_a_value(self):
        """Test that an empty string satisfies required."""
        assert string_field("name").required().validate("").valid

    def test_lengths(self):
        """Test min and max length."""
        field = string_field("name").min_length(2).max_length(4)
        assert field.validate("abc").valid
        assert field.validate("a").messages == ["length of name should be at least 2"]
        assert field.validate("abcde").messages == ["length of name should be at most 4"]

    def test_formats_all_must_match(self):
        """Test that every registered format is checked."""
        field = string_field("code").format(r"^[A-Z]").format(re.compile(r"\d$"))
        assert field.validate("AB1").valid
        result = field.validate("ab")
        assert [error.constraint for error in result.errors] == ["format", "format"]
        assert result.errors[1].context["format"] == r"\d$"

    def test_format_searches(self):
        """Test that unanchored patterns match anywhere."""
        assert string_field("code").format("b").validate("abc").valid

    def test_choices(self):
        """Test allowed values."""
        field = string_field("color").choices("red", "green")
        assert field.validate("red").valid
        result = field.validate("blue")
        assert result.errors[0].constraint == "choices"
        assert "'red', 'green'" in result.messages[0]

    def test_choices_last_call_wins(self):
        """Test that choices are replaced, not extended."""
        field = string_field("color").choices("red").choices("blue")
        assert field.validate("blue").valid
        assert not field.validate("red").valid

    def test_all_failures_collected(self):
        """Test that string constraints do not short-circuit."""
        field = string_field("code").min_length(5).format(r"^\d+$").choices("12345")
        result = field.validate("ab")
        assert [error.constraint for error in result.errors] == [
            "min_length",
            "format",
            "choices",
        ]

    def test_long_value_is_shortened(self):
        """Test that quoted values respect max_value_repr."""
        configure(max_value_repr=10)
        result = string_field("text").choices("a").validate("x" * 50)
        assert "'xxxxxx..." in result.messages[0]
        assert "x" * 20 not in result.messages[0]


class TestBooleanField:
    """Test BooleanField validation."""

    def test_identity(self):
        """Test type tag and class."""
        field = boolean_field("flag")
        assert isinstance(field, BooleanField)
        assert field.get_type() == "boolean"

    def test_type_check(self):
        """Test that numbers are not booleans."""
        assert boolean_field("flag").validate(False).valid
        assert isinstance(boolean_field("flag").validate(0).errors[0], FieldTypeError)

    def test_should_be(self):
        """Test the expected value constraint."""
        field = boolean_field("accepted").required().should_be(True)
        assert field.validate(True).valid
        result = field.validate(False)
        assert result.messages == ["Value of accepted should be true"]
        assert not field.validate(None).valid
