"""Tests for the scalar elements."""

from decimal import Decimal

import pytest

from mongo_schema_validator import (
    ConstraintViolationError,
    MalformedSchemaError,
    TypeMismatchError,
    compile_schema,
)


class TestStringElement:
    """Test string type, length and pattern checks."""

    def test_accepts_strings_only(self):
        tree = compile_schema({"bsonType": "string"})

        tree.verify("hello")
        with pytest.raises(TypeMismatchError) as exc_info:
            tree.verify(3)
        assert "expected string" in exc_info.value.message

    def test_length_bounds(self):
        tree = compile_schema({"bsonType": "string", "minLength": 2, "maxLength": 4})

        assert tree.is_valid("ab")
        assert tree.is_valid("abcd")
        assert tree.validate("a").constraint == "minLength"
        assert tree.validate("abcde").constraint == "maxLength"

    def test_zero_min_length_is_distinct_from_unset(self):
        tree = compile_schema({"bsonType": "string", "minLength": 0, "maxLength": 0})

        assert tree.is_valid("")
        assert tree.validate("a").constraint == "maxLength"

    def test_pattern_uses_search_semantics(self):
        tree = compile_schema({"bsonType": "string", "pattern": "[0-9]{3}"})

        assert tree.is_valid("abc123def")
        assert tree.validate("abc12").constraint == "pattern"

    def test_invalid_pattern_fails_at_build_time(self):
        with pytest.raises(MalformedSchemaError) as exc_info:
            compile_schema({"bsonType": "string", "pattern": "("})

        assert exc_info.value.path == "/pattern"

    @pytest.mark.parametrize("bound", [-1, "3", True, 1.5])
    def test_invalid_length_bound(self, bound):
        with pytest.raises(MalformedSchemaError) as exc_info:
            compile_schema({"bsonType": "string", "minLength": bound})

        assert exc_info.value.constraint == "minLength"

    def test_integral_float_bound_is_accepted(self):
        tree = compile_schema({"bsonType": "string", "maxLength": 2.0})

        assert tree.root.get("string").element.max_length == 2

    def test_unknown_keys_are_ignored(self):
        tree = compile_schema({"bsonType": "string", "format": "email", "x-extension": {"a": 1}})

        assert tree.is_valid("anything")


class TestBoolElement:
    """Test bool type checks."""

    def test_accepts_booleans_only(self):
        tree = compile_schema({"bsonType": "bool"})

        assert tree.is_valid(True)
        assert tree.is_valid(False)
        assert isinstance(tree.validate(1), TypeMismatchError)
        assert isinstance(tree.validate("true"), TypeMismatchError)

    def test_enum_restricts_booleans(self):
        tree = compile_schema({"bsonType": "bool", "enum": [True]})

        assert tree.is_valid(True)
        assert tree.validate(False).constraint == "enum"


class TestIntegerElements:
    """Test int and long type checks and bit widths."""

    def test_int_rejects_bool_and_float(self):
        tree = compile_schema({"bsonType": "int"})

        assert tree.is_valid(7)
        assert isinstance(tree.validate(True), TypeMismatchError)
        assert isinstance(tree.validate(7.0), TypeMismatchError)

    def test_int_is_32_bit(self):
        tree = compile_schema({"bsonType": "int"})

        assert tree.is_valid(2 ** 31 - 1)
        assert tree.is_valid(-(2 ** 31))
        error = tree.validate(2 ** 31)
        assert isinstance(error, TypeMismatchError)
        assert "32 bits" in error.message

    def test_long_is_64_bit(self):
        tree = compile_schema({"bsonType": "long"})

        assert tree.is_valid(2 ** 31)
        assert tree.is_valid(2 ** 63 - 1)
        assert isinstance(tree.validate(2 ** 63), TypeMismatchError)

    def test_bounds(self):
        tree = compile_schema({"bsonType": "int", "minimum": 1, "maximum": 10})

        assert tree.is_valid(1)
        assert tree.is_valid(10)
        assert tree.validate(0).constraint == "minimum"
        assert tree.validate(11).constraint == "maximum"

    def test_exclusive_bounds(self):
        tree = compile_schema(
            {"bsonType": "int", "minimum": 1, "exclusiveMinimum": True, "maximum": 10, "exclusiveMaximum": True}
        )

        assert tree.is_valid(2)
        assert tree.is_valid(9)
        assert tree.validate(1).constraint == "exclusiveMinimum"
        assert tree.validate(10).constraint == "exclusiveMaximum"

    def test_exclusive_flag_without_bound_is_malformed(self):
        with pytest.raises(MalformedSchemaError) as exc_info:
            compile_schema({"bsonType": "int", "exclusiveMinimum": True})

        assert exc_info.value.path == "/exclusiveMinimum"

    def test_multiple_of(self):
        tree = compile_schema({"bsonType": "long", "multipleOf": 5})

        assert tree.is_valid(15)
        assert tree.is_valid(0)
        assert tree.validate(16).constraint == "multipleOf"

    @pytest.mark.parametrize("step", [0, -2])
    def test_multiple_of_must_be_positive(self, step):
        with pytest.raises(MalformedSchemaError):
            compile_schema({"bsonType": "int", "multipleOf": step})

    def test_non_numeric_bound_is_malformed(self):
        with pytest.raises(MalformedSchemaError) as exc_info:
            compile_schema({"bsonType": "int", "maximum": "10"})

        assert exc_info.value.path == "/maximum"


class TestDoubleElement:
    """Test double type checks."""

    def test_accepts_floats_only(self):
        tree = compile_schema({"bsonType": "double"})

        assert tree.is_valid(1.5)
        assert isinstance(tree.validate(1), TypeMismatchError)
        assert isinstance(tree.validate(Decimal("1.5")), TypeMismatchError)

    def test_multiple_of_is_exact_for_decimal_fractions(self):
        tree = compile_schema({"bsonType": "double", "multipleOf": 0.1})

        assert tree.is_valid(0.3)
        assert tree.is_valid(2.5)
        assert tree.validate(0.35).constraint == "multipleOf"

    def test_bounds_with_integer_limits(self):
        tree = compile_schema({"bsonType": "double", "minimum": 0, "maximum": 1})

        assert tree.is_valid(0.5)
        assert tree.validate(1.01).constraint == "maximum"

    def test_large_value_with_fractional_step(self):
        tree = compile_schema({"bsonType": "double", "multipleOf": 0.5})

        assert tree.is_valid(1e300)
        assert compile_schema({"bsonType": "double", "multipleOf": 0.3}).validate(1e300).constraint == "multipleOf"

    def test_nan_fails_bounds(self):
        tree = compile_schema({"bsonType": "double", "minimum": 0, "maximum": 10})

        error = tree.validate(float("nan"))
        assert isinstance(error, ConstraintViolationError)
        assert error.constraint == "minimum"

    def test_infinity_fails_upper_bound(self):
        tree = compile_schema({"bsonType": "double", "maximum": 10})

        assert tree.validate(float("inf")).constraint == "maximum"
        assert tree.validate(float("-inf")).constraint == "maximum"

    def test_non_finite_values_pass_without_bounds(self):
        tree = compile_schema({"bsonType": "double", "enum": [1.5, float("inf")]})

        assert tree.is_valid(float("inf"))
        assert compile_schema({"bsonType": "double"}).is_valid(float("nan"))

    @pytest.mark.parametrize("bound", [float("inf"), float("nan"), Decimal("-Infinity")])
    def test_non_finite_bound_is_malformed(self, bound):
        with pytest.raises(MalformedSchemaError) as exc_info:
            compile_schema({"bsonType": "double", "maximum": bound})

        assert exc_info.value.path == "/maximum"


class TestDecimalElement:
    """Test decimal type checks."""

    def test_accepts_decimals_only(self):
        tree = compile_schema({"bsonType": "decimal"})

        assert tree.is_valid(Decimal("10.25"))
        assert isinstance(tree.validate(10.25), TypeMismatchError)
        assert isinstance(tree.validate(10), TypeMismatchError)

    def test_bounds_are_compared_as_decimals(self):
        tree = compile_schema({"bsonType": "decimal", "minimum": 0.1, "maximum": 100})

        assert tree.is_valid(Decimal("0.1"))
        assert tree.is_valid(Decimal("100"))
        assert tree.validate(Decimal("0.09")).constraint == "minimum"

    def test_multiple_of(self):
        tree = compile_schema({"bsonType": "decimal", "multipleOf": 0.01})

        assert tree.is_valid(Decimal("19.99"))
        assert tree.validate(Decimal("19.999")).constraint == "multipleOf"

    def test_non_finite_values(self):
        unbounded = compile_schema({"bsonType": "decimal"})
        bounded = compile_schema({"bsonType": "decimal", "maximum": 5})

        assert unbounded.is_valid(Decimal("NaN"))
        assert bounded.validate(Decimal("Infinity")).constraint == "maximum"

    def test_large_decimal_with_fractional_step(self):
        tree = compile_schema({"bsonType": "decimal", "multipleOf": 0.1})

        assert tree.is_valid(Decimal("1E+30"))
        assert tree.validate(Decimal("1000000000000000000000000000000.05")).constraint == "multipleOf"

    def test_infinity_with_lower_bound(self):
        tree = compile_schema({"bsonType": "decimal", "minimum": 0})

        assert tree.validate(Decimal("Infinity")).constraint == "minimum"
