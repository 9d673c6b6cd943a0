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

"""Compile MongoDB $jsonSchema documents into validator trees and check documents against them."""

__version__ = "0.1.0"

from .dispatcher import ElementFactory, build_type_union
from .exceptions import (
    ConstraintViolationError,
    DocumentLoadError,
    DocumentValidationError,
    MalformedSchemaError,
    SchemaBuildError,
    SchemaValidatorError,
    TypeMismatchError,
    UnsupportedFeatureError,
)
from .schema_node import SchemaNode, TypeUnion
from .validator_tree import ValidatorTree, compile_schema

__all__ = [
    "__version__",
    "compile_schema",
    "build_type_union",
    "ElementFactory",
    "ValidatorTree",
    "SchemaNode",
    "TypeUnion",
    "SchemaValidatorError",
    "SchemaBuildError",
    "MalformedSchemaError",
    "UnsupportedFeatureError",
    "DocumentValidationError",
    "TypeMismatchError",
    "ConstraintViolationError",
    "DocumentLoadError",
]
