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

"""Schema element classes, one per supported bsonType."""

from .array import ArrayElement
from .base import BSON_TYPE_KEY, GENERIC_TYPE, BsonElement, bson_type_names
from .boolean import BoolElement
from .generic import GenericElement
from .numeric import DecimalElement, DoubleElement, Int32Element, Int64Element, NumericElement
from .object import ObjectElement
from .string import StringElement

__all__ = [
    "BSON_TYPE_KEY",
    "GENERIC_TYPE",
    "BsonElement",
    "bson_type_names",
    "GenericElement",
    "ObjectElement",
    "StringElement",
    "ArrayElement",
    "BoolElement",
    "NumericElement",
    "Int32Element",
    "Int64Element",
    "DoubleElement",
    "DecimalElement",
]
