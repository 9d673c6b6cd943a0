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

"""Array element: item schema(s), item-count bounds and uniqueness."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Optional, Sequence, Tuple, Union

from ..exceptions import ConstraintViolationError, MalformedSchemaError
from ..utils.json_pointer import join_path
from ..utils.value_types import is_sequence_value, values_equal
from .base import BsonElement

if TYPE_CHECKING:
    from ..schema_node import TypeUnion

Items = Union[None, "TypeUnion", Tuple["TypeUnion", ...]]
AdditionalPolicy = Union[None, bool, "TypeUnion"]


def _build_union(schema: Any, path: str) -> "TypeUnion":
    # dispatcher imports this module to fill its dispatch table
    from ..dispatcher import build_type_union

    return build_type_union(schema, path)


class ArrayElement(BsonElement):
    """Element for bsonType 'array'.

    `items` is either one schema applied to every element, or an array of
    schemas applied positionally (tuple validation). In the tuple form,
    elements past the end follow `additionalItems`.
    """

    TYPE_NAME = "array"

    def __init__(self) -> None:
        super().__init__()
        self.items: Items = None
        self.additional_items: AdditionalPolicy = None
        self.min_items: Optional[int] = None
        self.max_items: Optional[int] = None
        self.unique_items: bool = False

    @property
    def is_tuple(self) -> bool:
        return isinstance(self.items, tuple)

    def populate_constraints(self, schema: Mapping, path: str) -> None:
        self.min_items = self._get_count(schema, "minItems", path)
        self.max_items = self._get_count(schema, "maxItems", path)
        self.unique_items = bool(self._get_bool(schema, "uniqueItems", path))
        self.items = self._populate_items(schema, path)
        self.additional_items = self._populate_additional_items(schema, path)

    def _populate_items(self, schema: Mapping, path: str) -> Items:
        if "items" not in schema:
            return None

        raw = schema["items"]
        items_path = join_path(path, "items")
        if isinstance(raw, Mapping):
            return _build_union(raw, items_path)
        if isinstance(raw, list):
            return tuple(_build_union(sub_schema, join_path(items_path, idx)) for idx, sub_schema in enumerate(raw))
        raise MalformedSchemaError(
            f"'items' must be a schema or an array of schemas, got {raw!r}",
            path=items_path,
            constraint="items",
        )

    def _populate_additional_items(self, schema: Mapping, path: str) -> AdditionalPolicy:
        if "additionalItems" not in schema:
            return None

        raw = schema["additionalItems"]
        entry_path = join_path(path, "additionalItems")
        if isinstance(raw, bool):
            return raw
        if isinstance(raw, Mapping):
            return _build_union(raw, entry_path)
        raise MalformedSchemaError(
            f"'additionalItems' must be a boolean or a schema, got {raw!r}",
            path=entry_path,
            constraint="additionalItems",
        )

    def verify_type(self, value: Any, path: str) -> None:
        if not is_sequence_value(value):
            raise self.type_mismatch(value, path)

    def verify_constraints(self, value: Any, path: str) -> None:
        count = len(value)
        if self.min_items is not None and count < self.min_items:
            raise ConstraintViolationError(
                f"Array has {count} items, fewer than minItems {self.min_items}",
                path=path,
                constraint="minItems",
            )
        if self.max_items is not None and count > self.max_items:
            raise ConstraintViolationError(
                f"Array has {count} items, more than maxItems {self.max_items}",
                path=path,
                constraint="maxItems",
            )

        if self.is_tuple:
            self._verify_positional(value, path)
        elif self.items is not None:
            for idx, item in enumerate(value):
                self.items.verify(item, join_path(path, idx))

        if self.unique_items:
            self._verify_unique(value, path)

    def _verify_positional(self, value: Sequence, path: str) -> None:
        positional = self.items
        for idx, item in enumerate(value):
            item_path = join_path(path, idx)
            if idx < len(positional):
                positional[idx].verify(item, item_path)
                continue

            policy = self.additional_items
            if policy is False:
                raise ConstraintViolationError(
                    f"Array has {len(value)} items but the tuple schema allows only {len(positional)}",
                    path=item_path,
                    constraint="additionalItems",
                )
            if policy is None or policy is True:
                return
            policy.verify(item, item_path)

    @staticmethod
    def _verify_unique(value: Sequence, path: str) -> None:
        for idx in range(1, len(value)):
            for earlier in range(idx):
                if values_equal(value[earlier], value[idx]):
                    raise ConstraintViolationError(
                        f"Array items {earlier} and {idx} are equal; items must be unique",
                        path=join_path(path, idx),
                        constraint="uniqueItems",
                    )
