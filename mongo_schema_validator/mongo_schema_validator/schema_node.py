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

"""Validator tree nodes.

A SchemaNode owns exactly one populated element. A TypeUnion groups the nodes
built for every type name declared at one schema position; a value needs to
satisfy only one of them.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from .elements.base import BsonElement
from .exceptions import DocumentValidationError


class SchemaNode:
    """Wrapper owning one populated element."""

    __slots__ = ("_element",)

    def __init__(self, element: BsonElement):
        self._element = element

    @property
    def element(self) -> BsonElement:
        return self._element

    @property
    def type_name(self) -> str:
        return self._element.get_type_name()

    def verify(self, value: Any, path: str = "") -> None:
        self._element.verify(value, path)

    def __repr__(self) -> str:
        return f"SchemaNode({self._element!r})"


class TypeUnion:
    """Ordered mapping of declared type name to its SchemaNode."""

    __slots__ = ("_nodes",)

    def __init__(self, nodes: Dict[str, SchemaNode]):
        if not nodes:
            raise ValueError("TypeUnion requires at least one node")
        self._nodes: Mapping[str, SchemaNode] = MappingProxyType(dict(nodes))

    @property
    def nodes(self) -> Mapping[str, SchemaNode]:
        return self._nodes

    @property
    def type_names(self) -> Tuple[str, ...]:
        return tuple(self._nodes.keys())

    def get(self, type_name: str) -> Optional[SchemaNode]:
        return self._nodes.get(type_name)

    def verify(self, value: Any, path: str = "") -> None:
        """Accept the value if any member accepts it.

        When every member rejects the value, the first member's error is raised.
        """
        first_error: Optional[DocumentValidationError] = None
        for node in self._nodes.values():
            try:
                node.verify(value, path)
                return
            except DocumentValidationError as exc:
                if first_error is None:
                    first_error = exc
        raise first_error

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"TypeUnion({list(self._nodes.keys())!r})"
