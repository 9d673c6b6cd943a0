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

"""Object element.

The object schema type configures the content of documents:

    {
      "bsonType": "object",
      "title": "<Type Name>",
      "required": ["<Required Field Name>", ...],
      "properties": {"<Field Name>": <Schema Document>},
      "minProperties": <integer>,
      "maxProperties": <integer>,
      "patternProperties": {"<Field Name Regex>": <Schema Document>},
      "additionalProperties": <boolean> | <Schema Document>,
      "dependencies": {"<Field Name>": <Schema Document> | ["<Field Name>", ...]}
    }

`required` is checked at this object's own level only; nested objects carry
their own `required` lists.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Dict, Optional, Pattern, Tuple, Union

from ..exceptions import ConstraintViolationError, MalformedSchemaError
from ..utils.json_pointer import join_path
from ..utils.value_types import is_mapping_value
from .base import BsonElement

if TYPE_CHECKING:
    from ..schema_node import TypeUnion

AdditionalPolicy = Union[None, bool, "TypeUnion"]
Dependency = Union[Tuple[str, ...], "TypeUnion"]


def _build_union(schema: Any, path: str) -> "TypeUnion":
    # dispatcher imports this module to fill its dispatch table
    from ..dispatcher import build_type_union

    return build_type_union(schema, path)


class ObjectElement(BsonElement):
    """Element for bsonType 'object'."""

    TYPE_NAME = "object"

    def __init__(self) -> None:
        super().__init__()
        self.properties: Mapping[str, "TypeUnion"] = MappingProxyType({})
        self.required: Tuple[str, ...] = ()
        self.min_properties: Optional[int] = None
        self.max_properties: Optional[int] = None
        self.pattern_properties: Tuple[Tuple[str, Pattern[str], "TypeUnion"], ...] = ()
        self.additional_properties: AdditionalPolicy = None
        self.dependencies: Mapping[str, Dependency] = MappingProxyType({})

    # -------------------------
    # populate
    # -------------------------

    def populate_constraints(self, schema: Mapping, path: str) -> None:
        self.min_properties = self._get_count(schema, "minProperties", path)
        self.max_properties = self._get_count(schema, "maxProperties", path)
        self.required = self._populate_required(schema, path)
        self.properties = self._populate_properties(schema, path)
        self.pattern_properties = self._populate_pattern_properties(schema, path)
        self.additional_properties = self._populate_additional_properties(schema, path)
        self.dependencies = self._populate_dependencies(schema, path)

    @staticmethod
    def _string_list(raw: Any, key: str, path: str) -> Tuple[str, ...]:
        if not isinstance(raw, list):
            raise MalformedSchemaError(f"'{key}' must be an array of strings, got {raw!r}", path=path, constraint=key)
        names = []
        for idx, name in enumerate(raw):
            if not isinstance(name, str):
                raise MalformedSchemaError(
                    f"'{key}' values must be strings, got {name!r}",
                    path=join_path(path, idx),
                    constraint=key,
                )
            if name not in names:
                names.append(name)
        return tuple(names)

    def _populate_required(self, schema: Mapping, path: str) -> Tuple[str, ...]:
        if "required" not in schema:
            return ()
        return self._string_list(schema["required"], "required", join_path(path, "required"))

    def _populate_properties(self, schema: Mapping, path: str) -> Mapping[str, "TypeUnion"]:
        raw = self._get_mapping(schema, "properties", path)
        if raw is None:
            return MappingProxyType({})

        base = join_path(path, "properties")
        properties: Dict[str, "TypeUnion"] = {}
        for name, sub_schema in raw.items():
            properties[name] = _build_union(sub_schema, join_path(base, name))
        return MappingProxyType(properties)

    def _populate_pattern_properties(
        self, schema: Mapping, path: str
    ) -> Tuple[Tuple[str, Pattern[str], "TypeUnion"], ...]:
        raw = self._get_mapping(schema, "patternProperties", path)
        if raw is None:
            return ()

        base = join_path(path, "patternProperties")
        entries = []
        for pattern, sub_schema in raw.items():
            entry_path = join_path(base, pattern)
            try:
                compiled = re.compile(pattern)
            except re.error as exc:
                raise MalformedSchemaError(
                    f"Invalid regular expression in 'patternProperties': {pattern!r} ({exc})",
                    path=entry_path,
                    constraint="patternProperties",
                ) from exc
            entries.append((pattern, compiled, _build_union(sub_schema, entry_path)))
        return tuple(entries)

    def _populate_additional_properties(self, schema: Mapping, path: str) -> AdditionalPolicy:
        if "additionalProperties" not in schema:
            return None

        raw = schema["additionalProperties"]
        entry_path = join_path(path, "additionalProperties")
        if isinstance(raw, bool):
            return raw
        if isinstance(raw, Mapping):
            return _build_union(raw, entry_path)
        raise MalformedSchemaError(
            f"'additionalProperties' must be a boolean or a schema, got {raw!r}",
            path=entry_path,
            constraint="additionalProperties",
        )

    def _populate_dependencies(self, schema: Mapping, path: str) -> Mapping[str, Dependency]:
        raw = self._get_mapping(schema, "dependencies", path)
        if raw is None:
            return MappingProxyType({})

        base = join_path(path, "dependencies")
        dependencies: Dict[str, Dependency] = {}
        for name, dependency in raw.items():
            entry_path = join_path(base, name)
            if isinstance(dependency, list):
                dependencies[name] = self._string_list(dependency, "dependencies", entry_path)
            elif isinstance(dependency, Mapping):
                dependencies[name] = _build_union(dependency, entry_path)
            else:
                raise MalformedSchemaError(
                    f"Dependency of '{name}' must be an array of field names or a schema, got {dependency!r}",
                    path=entry_path,
                    constraint="dependencies",
                )
        return MappingProxyType(dependencies)

    # -------------------------
    # verify
    # -------------------------

    def verify_type(self, value: Any, path: str) -> None:
        if not is_mapping_value(value):
            raise self.type_mismatch(value, path)

    def verify_constraints(self, value: Any, path: str) -> None:
        count = len(value)
        if self.min_properties is not None and count < self.min_properties:
            raise ConstraintViolationError(
                f"Object has {count} properties, fewer than minProperties {self.min_properties}",
                path=path,
                constraint="minProperties",
            )
        if self.max_properties is not None and count > self.max_properties:
            raise ConstraintViolationError(
                f"Object has {count} properties, more than maxProperties {self.max_properties}",
                path=path,
                constraint="maxProperties",
            )

        for name in self.required:
            if name not in value:
                raise ConstraintViolationError(
                    f"Missing required field '{name}'",
                    path=join_path(path, name),
                    constraint="required",
                )

        uncovered = []
        for key, item in value.items():
            union = self.properties.get(key)
            if union is None:
                uncovered.append((key, item))
                continue
            union.verify(item, join_path(path, key))

        for key, item in uncovered:
            self._verify_uncovered(key, item, join_path(path, key))

        self._verify_dependencies(value, path)

    def _verify_uncovered(self, key: Any, item: Any, item_path: str) -> None:
        matched = False
        for _pattern, compiled, union in self.pattern_properties:
            if compiled.search(str(key)) is not None:
                matched = True
                union.verify(item, item_path)
        if matched:
            return

        policy = self.additional_properties
        if policy is False:
            raise ConstraintViolationError(
                f"Additional property '{key}' is not allowed",
                path=item_path,
                constraint="additionalProperties",
            )
        if policy is not None and policy is not True:
            policy.verify(item, item_path)

    def _verify_dependencies(self, value: Mapping, path: str) -> None:
        for name, dependency in self.dependencies.items():
            if name not in value:
                continue
            if isinstance(dependency, tuple):
                for required_name in dependency:
                    if required_name not in value:
                        raise ConstraintViolationError(
                            f"Field '{name}' requires field '{required_name}'",
                            path=join_path(path, required_name),
                            constraint="dependencies",
                        )
            else:
                dependency.verify(value, path)
