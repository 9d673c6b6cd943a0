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

from collections.abc import Mapping

from ..exceptions import MalformedSchemaError
from ..utils.json_pointer import join_path
from .base import BSON_TYPE_KEY, GENERIC_TYPE, BsonElement

# Keywords that only constrain one kind of value. Without a bsonType there is
# nothing to apply them to.
TYPE_SPECIFIC_KEYS = (
    "required",
    "properties",
    "minProperties",
    "maxProperties",
    "patternProperties",
    "additionalProperties",
    "dependencies",
    "minLength",
    "maxLength",
    "pattern",
    "minimum",
    "maximum",
    "exclusiveMinimum",
    "exclusiveMaximum",
    "multipleOf",
    "items",
    "additionalItems",
    "minItems",
    "maxItems",
    "uniqueItems",
)


class GenericElement(BsonElement):
    """Untyped element; only the common fields (enum) constrain the value.

    A node selects this element by omitting bsonType, so it may only carry
    title, description and enum.
    """

    TYPE_NAME = GENERIC_TYPE

    def populate_constraints(self, schema: Mapping, path: str) -> None:
        for key in schema:
            if key in TYPE_SPECIFIC_KEYS:
                raise MalformedSchemaError(
                    f"'{key}' requires '{BSON_TYPE_KEY}' to be declared on the same schema",
                    path=join_path(path, key),
                    constraint=key,
                )
