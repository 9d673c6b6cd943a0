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
from typing import Any

from .base import BsonElement


class BoolElement(BsonElement):
    """Element for bsonType 'bool'."""

    TYPE_NAME = "bool"

    def populate_constraints(self, schema: Mapping, path: str) -> None:
        pass

    def verify_type(self, value: Any, path: str) -> None:
        if not isinstance(value, bool):
            raise self.type_mismatch(value, path)
