# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Numeric elements: int, long, double and decimal."""

from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Optional

from ..exceptions import ConstraintViolationError, MalformedSchemaError, TypeMismatchError
from ..utils.json_pointer import join_path
from ..utils.value_types import (
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    is_finite_number,
    is_integer_value,
    is_multiple_of,
    to_decimal,
)
from .base import BSON_TYPE_KEY, BsonElement


class NumericElement(BsonElement):
    """Shared bounds and step handling for the numeric elements.

    exclusiveMinimum/exclusiveMaximum are boolean modifiers of
    minimum/maximum, as in the MongoDB $jsonSchema dialect.
    """

    def __init__(self) -> None:
        super().__init__()
        self.minimum: Optional[Any] = None
        self.maximum: Optional[Any] = None
        self.exclusive_minimum: bool = False
        self.exclusive_maximum: bool = False
        self.multiple_of: Optional[Any] = None

    def populate_constraints(self, schema: Mapping, path: str) -> None:
        self.minimum = self._get_number(schema, "minimum", path)
        self.maximum = self._get_number(schema, "maximum", path)

        exclusive_minimum = self._get_bool(schema, "exclusiveMinimum", path)
        if exclusive_minimum is not None and self.minimum is None:
            raise MalformedSchemaError(
                "'exclusiveMinimum' requires 'minimum'",
                path=join_path(path, "exclusiveMinimum"),
                constraint="exclusiveMinimum",
            )
        self.exclusive_minimum = bool(exclusive_minimum)

        exclusive_maximum = self._get_bool(schema, "exclusiveMaximum", path)
        if exclusive_maximum is not None and self.maximum is None:
            raise MalformedSchemaError(
                "'exclusiveMaximum' requires 'maximum'",
                path=join_path(path, "exclusiveMaximum"),
                constraint="exclusiveMaximum",
            )
        self.exclusive_maximum = bool(exclusive_maximum)

        multiple_of = self._get_number(schema, "multipleOf", path)
        if multiple_of is not None and not multiple_of > 0:
            raise MalformedSchemaError(
                f"'multipleOf' must be greater than 0, got {multiple_of!r}",
                path=join_path(path, "multipleOf"),
                constraint="multipleOf",
            )
        self.multiple_of = multiple_of

    def comparable(self, value: Any) -> Any:
        return value

    def verify_constraints(self, value: Any, path: str) -> None:
        if not is_finite_number(value):
            # NaN and infinities are valid double and decimal128 values but cannot be bounded.
            for key, bound in (("minimum", self.minimum), ("maximum", self.maximum), ("multipleOf", self.multiple_of)):
                if bound is not None:
                    raise ConstraintViolationError(
                        f"Value {value} cannot be checked against '{key}'",
                        path=path,
                        constraint=key,
                    )
            return

        current = self.comparable(value)

        if self.minimum is not None:
            minimum = self.comparable(self.minimum)
            if self.exclusive_minimum and current <= minimum:
                raise ConstraintViolationError(
                    f"Value {value!r} must be greater than exclusive minimum {self.minimum!r}",
                    path=path,
                    constraint="exclusiveMinimum",
                )
            if current < minimum:
                raise ConstraintViolationError(
                    f"Value {value!r} is less than minimum {self.minimum!r}",
                    path=path,
                    constraint="minimum",
                )

        if self.maximum is not None:
            maximum = self.comparable(self.maximum)
            if self.exclusive_maximum and current >= maximum:
                raise ConstraintViolationError(
                    f"Value {value!r} must be less than exclusive maximum {self.maximum!r}",
                    path=path,
                    constraint="exclusiveMaximum",
                )
            if current > maximum:
                raise ConstraintViolationError(
                    f"Value {value!r} is greater than maximum {self.maximum!r}",
                    path=path,
                    constraint="maximum",
                )

        if self.multiple_of is not None and not is_multiple_of(value, self.multiple_of):
            raise ConstraintViolationError(
                f"Value {value!r} is not a multiple of {self.multiple_of!r}",
                path=path,
                constraint="multipleOf",
            )


class _BoundedIntegerElement(NumericElement):
    MIN_VALUE: int
    MAX_VALUE: int
    BIT_WIDTH: int

    def verify_type(self, value: Any, path: str) -> None:
        if not is_integer_value(value):
            raise self.type_mismatch(value, path)
        if not self.MIN_VALUE <= value <= self.MAX_VALUE:
            raise TypeMismatchError(
                f"Invalid type: expected {self.get_type_name()}, "
                f"integer {value} does not fit in {self.BIT_WIDTH} bits",
                path=path,
                constraint=BSON_TYPE_KEY,
            )


class Int32Element(_BoundedIntegerElement):
    """Element for bsonType 'int' (32-bit signed integer)."""

    TYPE_NAME = "int"
    MIN_VALUE = INT32_MIN
    MAX_VALUE = INT32_MAX
    BIT_WIDTH = 32


class Int64Element(_BoundedIntegerElement):
    """Element for bsonType 'long' (64-bit signed integer)."""

    TYPE_NAME = "long"
    MIN_VALUE = INT64_MIN
    MAX_VALUE = INT64_MAX
    BIT_WIDTH = 64


class DoubleElement(NumericElement):
    """Element for bsonType 'double'; integers are not accepted."""

    TYPE_NAME = "double"

    def verify_type(self, value: Any, path: str) -> None:
        if not isinstance(value, float):
            raise self.type_mismatch(value, path)


class DecimalElement(NumericElement):
    """Element for bsonType 'decimal' (decimal128, carried as decimal.Decimal)."""

    TYPE_NAME = "decimal"

    def verify_type(self, value: Any, path: str) -> None:
        if not isinstance(value, Decimal):
            raise self.type_mismatch(value, path)

    def comparable(self, value: Any) -> Any:
        return to_decimal(value)
