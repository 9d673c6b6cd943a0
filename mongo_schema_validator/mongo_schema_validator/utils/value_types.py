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

from __future__ import annotations

import math
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation, localcontext
from typing import Any


INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def is_integer_value(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_number_value(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def is_sequence_value(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_mapping_value(value: Any) -> bool:
    return isinstance(value, Mapping)


def describe_value_type(value: Any) -> str:
    """Return the BSON-flavoured type name of an instance value for messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        if INT32_MIN <= value <= INT32_MAX:
            return "int"
        return "long"
    if isinstance(value, float):
        return "double"
    if isinstance(value, Decimal):
        return "decimal"
    if isinstance(value, str):
        return "string"
    if is_sequence_value(value):
        return "array"
    if is_mapping_value(value):
        return "object"
    return type(value).__name__


def to_decimal(value: Any) -> Decimal:
    """Convert a numeric value to Decimal without binary float artifacts.

    Raises ValueError if the value is not a finite number.
    """
    if isinstance(value, bool) or not is_number_value(value):
        raise ValueError(f"Invalid numeric value '{value}'")
    try:
        dec = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"Invalid numeric value '{value}'") from exc
    if not dec.is_finite():
        raise ValueError(f"Non-finite numeric value '{value}'")
    return dec


def is_finite_number(value: Any) -> bool:
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, Decimal):
        return value.is_finite()
    return is_number_value(value)


def is_multiple_of(value: Any, step: Any) -> bool:
    if is_integer_value(value) and is_integer_value(step):
        return value % step == 0
    try:
        dividend = to_decimal(value)
        divisor = to_decimal(step)
    except ValueError:
        return False
    with localcontext() as ctx:
        # the integer part of the quotient has to fit in the working precision
        ctx.prec = max(ctx.prec, dividend.adjusted() - divisor.adjusted() + 2)
        return dividend % divisor == 0


def values_equal(left: Any, right: Any) -> bool:
    """Compare two instance values with JSON semantics.

    Booleans never equal numbers, 1 equals 1.0, sequences compare element-wise
    and mappings compare by key set and values.
    """
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    if is_number_value(left) and is_number_value(right):
        try:
            return to_decimal(left) == to_decimal(right)
        except ValueError:
            return left == right
    if is_sequence_value(left) and is_sequence_value(right):
        return len(left) == len(right) and all(values_equal(a, b) for a, b in zip(left, right))
    if is_mapping_value(left) and is_mapping_value(right):
        if set(left.keys()) != set(right.keys()):
            return False
        return all(values_equal(left[key], right[key]) for key in left)
    if is_sequence_value(left) or is_sequence_value(right) or is_mapping_value(left) or is_mapping_value(right):
        return False
    return type(left) is type(right) and left == right
