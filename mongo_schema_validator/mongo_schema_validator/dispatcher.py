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

"""Type dispatch: map a declared bsonType name to a populated element."""

import logging
from collections.abc import Mapping
from typing import Any, Dict, Tuple, Type

from .elements.array import ArrayElement
from .elements.base import BSON_TYPE_KEY, GENERIC_TYPE, BsonElement, bson_type_names
from .elements.boolean import BoolElement
from .elements.generic import GenericElement
from .elements.numeric import DecimalElement, DoubleElement, Int32Element, Int64Element
from .elements.object import ObjectElement
from .elements.string import StringElement
from .exceptions import MalformedSchemaError, UnsupportedFeatureError
from .schema_node import SchemaNode, TypeUnion
from .utils.json_pointer import format_path, join_path
from .utils.value_types import describe_value_type

logger = logging.getLogger(__name__)


class ElementFactory:
    """Factory for creating populated schema elements."""

    _elements: Dict[str, Type[BsonElement]] = {
        GENERIC_TYPE: GenericElement,
        ObjectElement.TYPE_NAME: ObjectElement,
        StringElement.TYPE_NAME: StringElement,
        ArrayElement.TYPE_NAME: ArrayElement,
        BoolElement.TYPE_NAME: BoolElement,
        Int32Element.TYPE_NAME: Int32Element,
        Int64Element.TYPE_NAME: Int64Element,
        DoubleElement.TYPE_NAME: DoubleElement,
        DecimalElement.TYPE_NAME: DecimalElement,
    }

    @classmethod
    def supported_types(cls) -> Tuple[str, ...]:
        return tuple(cls._elements.keys())

    @classmethod
    def is_supported(cls, type_name: str) -> bool:
        return type_name in cls._elements

    @classmethod
    def check_supported(cls, type_name: str, path: str) -> None:
        if not cls.is_supported(type_name):
            raise UnsupportedFeatureError(
                f"Unsupported bsonType '{type_name}'. Supported types: {list(cls.supported_types())}",
                path=join_path(path, BSON_TYPE_KEY),
                constraint=BSON_TYPE_KEY,
            )

    @classmethod
    def build(cls, type_name: str, schema: Mapping, path: str = "") -> SchemaNode:
        """Build a populated node for one type name declared on a raw schema node."""
        cls.check_supported(type_name, path)
        logger.debug(f"Building '{type_name}' element at {format_path(path)}")
        element = cls._elements[type_name]()
        element.populate(schema, path)
        return SchemaNode(element)


def build_type_union(schema: Any, path: str = "") -> TypeUnion:
    """Build one node per declared type name of a raw schema node.

    Every declared name is checked before any element is populated, so an
    unsupported name fails without partial parsing.
    """
    if not isinstance(schema, Mapping):
        raise MalformedSchemaError(
            f"Schema must be an object, got {describe_value_type(schema)}",
            path=path,
        )

    type_names = bson_type_names(schema, path)
    for type_name in type_names:
        ElementFactory.check_supported(type_name, path)

    return TypeUnion({type_name: ElementFactory.build(type_name, schema, path) for type_name in type_names})
