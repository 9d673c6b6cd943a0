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

"""Compile a $jsonSchema document into a reusable validator tree."""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from .dispatcher import build_type_union
from .exceptions import DocumentValidationError, UnsupportedFeatureError
from .schema_node import TypeUnion
from .utils.json_pointer import escape_token

logger = logging.getLogger(__name__)

JSON_SCHEMA_KEY = "$jsonSchema"


class ValidatorTree:
    """Compiled schema; read-only and safe to share between threads."""

    __slots__ = ("_root",)

    def __init__(self, root: TypeUnion):
        self._root = root

    @property
    def root(self) -> TypeUnion:
        return self._root

    def verify(self, instance: Any) -> None:
        """Raise DocumentValidationError for the first violation found."""
        self._root.verify(instance, "")

    def validate(self, instance: Any) -> Optional[DocumentValidationError]:
        """Return the first violation found, or None when the instance conforms."""
        try:
            self.verify(instance)
        except DocumentValidationError as exc:
            return exc
        return None

    def is_valid(self, instance: Any) -> bool:
        return self.validate(instance) is None

    def __repr__(self) -> str:
        return f"ValidatorTree(root={self._root!r})"


def compile_schema(schema: Mapping) -> ValidatorTree:
    """Compile a raw schema document.

    Accepts either the bare schema or a collection validator of the form
    ``{"$jsonSchema": {...}}``.

    Raises:
        MalformedSchemaError: If a recognized key holds a value of the wrong kind
        UnsupportedFeatureError: If a declared bsonType is not supported
    """
    path = ""
    if isinstance(schema, Mapping) and JSON_SCHEMA_KEY in schema:
        others = [key for key in schema if key != JSON_SCHEMA_KEY]
        if others:
            raise UnsupportedFeatureError(
                f"Query operators alongside '{JSON_SCHEMA_KEY}' are not supported: {others}",
                path=f"/{escape_token(str(others[0]))}",
            )
        path = f"/{escape_token(JSON_SCHEMA_KEY)}"
        schema = schema[JSON_SCHEMA_KEY]

    root = build_type_union(schema, path)
    logger.debug(f"Compiled schema with root types {list(root.type_names)}")
    return ValidatorTree(root)
