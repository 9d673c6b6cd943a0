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

"""Common fields shared by every schema element and the abstract element contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Optional, Tuple

from ..exceptions import ConstraintViolationError, MalformedSchemaError, TypeMismatchError
from ..utils.json_pointer import join_path
from ..utils.value_types import (
    describe_value_type,
    is_finite_number,
    is_integer_value,
    is_number_value,
    values_equal,
)

BSON_TYPE_KEY = "bsonType"

# Not part of the MongoDB vocabulary: selects the untyped element when a schema
# node declares only enum/title/description.
GENERIC_TYPE = "generic"


def bson_type_names(schema: Mapping, path: str = "") -> Tuple[str, ...]:
    """Return the declared type names of a raw schema node, in declared order."""
    if BSON_TYPE_KEY not in schema:
        return (GENERIC_TYPE,)

    raw = schema[BSON_TYPE_KEY]
    type_path = join_path(path, BSON_TYPE_KEY)
    if isinstance(raw, str):
        return (raw,)

    if isinstance(raw, list):
        if not raw:
            raise MalformedSchemaError(
                f"'{BSON_TYPE_KEY}' must not be an empty list", path=type_path, constraint=BSON_TYPE_KEY
            )
        names = []
        for idx, name in enumerate(raw):
            if not isinstance(name, str):
                raise MalformedSchemaError(
                    f"'{BSON_TYPE_KEY}' values must be strings, got {name!r}",
                    path=join_path(type_path, idx),
                    constraint=BSON_TYPE_KEY,
                )
            if name not in names:
                names.append(name)
        return tuple(names)

    raise MalformedSchemaError(
        f"'{BSON_TYPE_KEY}' must be a string or an array of strings, got {raw!r}",
        path=type_path,
        constraint=BSON_TYPE_KEY,
    )


class BsonElement(ABC):
    """Abstract schema element.

    An element is populated once from a raw schema node and is read-only
    afterwards, so a populated tree can be shared across threads.
    """

    TYPE_NAME: str

    def __init__(self) -> None:
        self.type_names: Tuple[str, ...] = ()
        self.title: Optional[str] = None
        self.description: Optional[str] = None
        self.enum: Optional[Tuple[Any, ...]] = None
        self.schema_path: str = ""

    def __setattr__(self, name: str, value: Any) -> None:
        if getattr(self, "_sealed", False):
            raise AttributeError(f"{type(self).__name__} is read-only once populated")
        super().__setattr__(name, value)

    @classmethod
    def get_type_name(cls) -> str:
        """Return the bsonType name this element validates."""
        type_name = getattr(cls, "TYPE_NAME", None)
        if not isinstance(type_name, str) or not type_name:
            raise NotImplementedError("Element must define TYPE_NAME")
        return type_name

    def populate(self, schema: Mapping, path: str = "") -> "BsonElement":
        """Populate common fields and element constraints from a raw schema node."""
        if getattr(self, "_sealed", False):
            raise AttributeError(f"{type(self).__name__} has already been populated")
        self.schema_path = path
        self.populate_common(schema, path)
        self.populate_constraints(schema, path)
        self._sealed = True
        return self

    def populate_common(self, schema: Mapping, path: str) -> None:
        self.type_names = bson_type_names(schema, path)
        self.title = self._get_string(schema, "title", path)
        self.description = self._get_string(schema, "description", path)

        if "enum" in schema:
            raw_enum = schema["enum"]
            if not isinstance(raw_enum, list) or not raw_enum:
                raise MalformedSchemaError(
                    f"'enum' must be a non-empty array, got {raw_enum!r}",
                    path=join_path(path, "enum"),
                    constraint="enum",
                )
            self.enum = tuple(raw_enum)

    @abstractmethod
    def populate_constraints(self, schema: Mapping, path: str) -> None:
        """Parse the constraint keys this element understands."""
        pass

    def verify(self, value: Any, path: str = "") -> None:
        """Check an instance value; raises DocumentValidationError on the first violation."""
        self.verify_type(value, path)
        self.verify_constraints(value, path)
        self.verify_enum(value, path)

    def verify_type(self, value: Any, path: str) -> None:
        pass

    def verify_constraints(self, value: Any, path: str) -> None:
        pass

    def verify_enum(self, value: Any, path: str) -> None:
        if self.enum is None:
            return
        if not any(values_equal(value, member) for member in self.enum):
            raise ConstraintViolationError(
                f"Value {value!r} is not one of the enumerated values {list(self.enum)!r}",
                path=path,
                constraint="enum",
            )

    def type_mismatch(self, value: Any, path: str) -> TypeMismatchError:
        return TypeMismatchError(
            f"Invalid type: expected {self.get_type_name()}, got {describe_value_type(value)}",
            path=path,
            constraint=BSON_TYPE_KEY,
        )

    # -------------------------
    # raw schema accessors
    # -------------------------

    @staticmethod
    def _get_string(schema: Mapping, key: str, path: str) -> Optional[str]:
        if key not in schema:
            return None
        raw = schema[key]
        if not isinstance(raw, str):
            raise MalformedSchemaError(f"'{key}' must be a string, got {raw!r}", path=join_path(path, key), constraint=key)
        return raw

    @staticmethod
    def _get_bool(schema: Mapping, key: str, path: str) -> Optional[bool]:
        if key not in schema:
            return None
        raw = schema[key]
        if not isinstance(raw, bool):
            raise MalformedSchemaError(f"'{key}' must be a boolean, got {raw!r}", path=join_path(path, key), constraint=key)
        return raw

    @staticmethod
    def _get_mapping(schema: Mapping, key: str, path: str) -> Optional[Mapping]:
        if key not in schema:
            return None
        raw = schema[key]
        if not isinstance(raw, Mapping):
            raise MalformedSchemaError(f"'{key}' must be an object, got {raw!r}", path=join_path(path, key), constraint=key)
        return raw

    @staticmethod
    def _get_count(schema: Mapping, key: str, path: str) -> Optional[int]:
        """Read a non-negative integer bound; None means the key is not set."""
        if key not in schema:
            return None
        raw = schema[key]
        # Decoded JSON may carry integral bounds as floats (e.g. 2.0).
        if isinstance(raw, float) and raw.is_integer():
            raw = int(raw)
        if not is_integer_value(raw) or raw < 0:
            raise MalformedSchemaError(
                f"'{key}' must be a non-negative integer, got {schema[key]!r}",
                path=join_path(path, key),
                constraint=key,
            )
        return raw

    @staticmethod
    def _get_number(schema: Mapping, key: str, path: str) -> Optional[Any]:
        if key not in schema:
            return None
        raw = schema[key]
        if not is_number_value(raw) or not is_finite_number(raw):
            raise MalformedSchemaError(f"'{key}' must be a finite number, got {raw!r}", path=join_path(path, key), constraint=key)
        return raw

    def __repr__(self) -> str:
        return f"{type(self).__name__}(type_names={self.type_names!r}, schema_path={self.schema_path!r})"
