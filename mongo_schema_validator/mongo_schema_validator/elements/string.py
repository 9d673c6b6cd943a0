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

"""String element: length bounds and regular-expression pattern."""

import re
from collections.abc import Mapping
from typing import Any, Optional, Pattern

from ..exceptions import ConstraintViolationError, MalformedSchemaError
from ..utils.json_pointer import join_path
from .base import BsonElement


class StringElement(BsonElement):
    """Element for bsonType 'string'."""

    TYPE_NAME = "string"

    def __init__(self) -> None:
        super().__init__()
        self.min_length: Optional[int] = None
        self.max_length: Optional[int] = None
        self.pattern: Optional[str] = None
        self._pattern_re: Optional[Pattern[str]] = None

    def populate_constraints(self, schema: Mapping, path: str) -> None:
        self.min_length = self._get_count(schema, "minLength", path)
        self.max_length = self._get_count(schema, "maxLength", path)

        self.pattern = self._get_string(schema, "pattern", path)
        if self.pattern is not None:
            try:
                self._pattern_re = re.compile(self.pattern)
            except re.error as exc:
                raise MalformedSchemaError(
                    f"Invalid regular expression in 'pattern': {self.pattern!r} ({exc})",
                    path=join_path(path, "pattern"),
                    constraint="pattern",
                ) from exc

    def verify_type(self, value: Any, path: str) -> None:
        if not isinstance(value, str):
            raise self.type_mismatch(value, path)

    def verify_constraints(self, value: Any, path: str) -> None:
        length = len(value)
        if self.min_length is not None and length < self.min_length:
            raise ConstraintViolationError(
                f"String is too short: length {length} is less than minLength {self.min_length}",
                path=path,
                constraint="minLength",
            )
        if self.max_length is not None and length > self.max_length:
            raise ConstraintViolationError(
                f"String is too long: length {length} is greater than maxLength {self.max_length}",
                path=path,
                constraint="maxLength",
            )
        if self._pattern_re is not None and self._pattern_re.search(value) is None:
            raise ConstraintViolationError(
                f"String {value!r} does not match pattern {self.pattern!r}",
                path=path,
                constraint="pattern",
            )
