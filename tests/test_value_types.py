"""Tests for value classification and comparison helpers."""

from decimal import Decimal

import pytest

from mongo_schema_validator.utils.json_pointer import escape_token, format_path, join_path
from mongo_schema_validator.utils.value_types import (
    describe_value_type,
    is_finite_number,
    is_multiple_of,
    to_decimal,
    values_equal,
)


class TestDescribeValueType:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, "null"),
            (True, "bool"),
            (1, "int"),
            (2 ** 40, "long"),
            (1.5, "double"),
            (Decimal("1.5"), "decimal"),
            ("a", "string"),
            ([1], "array"),
            ((1,), "array"),
            ({"a": 1}, "object"),
            (b"raw", "bytes"),
        ],
    )
    def test_names(self, value, expected):
        assert describe_value_type(value) == expected


class TestNumericHelpers:
    def test_to_decimal_avoids_float_artifacts(self):
        assert to_decimal(0.1) == Decimal("0.1")

    @pytest.mark.parametrize("value", [True, "1", float("nan"), Decimal("Infinity")])
    def test_to_decimal_rejects_invalid_values(self, value):
        with pytest.raises(ValueError):
            to_decimal(value)

    def test_integer_multiple(self):
        assert is_multiple_of(10, 5)
        assert not is_multiple_of(10, 3)

    def test_fractional_multiple(self):
        assert is_multiple_of(0.3, 0.1)
        assert is_multiple_of(Decimal("1.25"), Decimal("0.05"))
        assert not is_multiple_of(1.0, 0.3)

    def test_non_finite_is_never_a_multiple(self):
        assert not is_multiple_of(float("inf"), 1)

    def test_quotient_beyond_default_precision(self):
        assert is_multiple_of(1e300, 0.5)
        assert is_multiple_of(Decimal("1E+30"), 0.1)
        assert not is_multiple_of(Decimal("1000000000000000000000000000000.05"), 0.1)

    def test_is_finite_number(self):
        assert is_finite_number(3)
        assert is_finite_number(Decimal("2.5"))
        assert not is_finite_number(float("nan"))
        assert not is_finite_number(Decimal("-Infinity"))
        assert not is_finite_number("1")


class TestValuesEqual:
    def test_numbers_compare_by_value(self):
        assert values_equal(1, 1.0)
        assert values_equal(Decimal("2.50"), 2.5)
        assert not values_equal(1, 2)

    def test_bool_is_not_a_number(self):
        assert not values_equal(True, 1)
        assert not values_equal(0, False)
        assert values_equal(False, False)

    def test_sequences_compare_in_order(self):
        assert values_equal([1, "a"], (1, "a"))
        assert not values_equal([1, 2], [2, 1])
        assert not values_equal([1], [1, 1])

    def test_mappings_compare_by_keys_and_values(self):
        assert values_equal({"a": 1, "b": [1]}, {"b": [1.0], "a": 1})
        assert not values_equal({"a": 1}, {"a": 1, "b": None})

    def test_mixed_kinds_differ(self):
        assert not values_equal("1", 1)
        assert not values_equal(None, [])
        assert not values_equal({}, [])


class TestJsonPointer:
    def test_escape(self):
        assert escape_token("a/b~c") == "a~1b~0c"

    def test_join(self):
        assert join_path("", "items") == "/items"
        assert join_path("/items", 3) == "/items/3"
        assert join_path("/properties", "x/y") == "/properties/x~1y"

    def test_format_root(self):
        assert format_path("") == "/"
        assert format_path("/a") == "/a"
