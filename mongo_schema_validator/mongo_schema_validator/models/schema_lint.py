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

"""Shape lint for $jsonSchema documents.

Unlike compilation, which stops at the first problem, the lint pass reports
every shape issue it finds so a schema author can fix them in one go.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, List, Optional

import jsonschema
from jsonschema.exceptions import best_match

from ..utils.json_pointer import escape_token
from ..validator_tree import JSON_SCHEMA_KEY
from .meta_schema_loader import load_meta_schema


JsonPointer = str


@dataclass(frozen=True)
class SchemaIssue:
    message: str
    json_path: Optional[JsonPointer] = None


def _error_path(prefix: JsonPointer, error: jsonschema.ValidationError) -> JsonPointer:
    return prefix + "".join(f"/{escape_token(str(token))}" for token in error.absolute_path)


def _error_message(error: jsonschema.ValidationError) -> str:
    # anyOf/oneOf failures carry the useful reason in their sub-errors
    if error.context:
        return best_match(error.context).message
    return error.message


def lint_schema_document(schema: Any) -> List[SchemaIssue]:
    """Check the shape of a raw schema document against the bundled meta-schema."""
    prefix = ""
    if isinstance(schema, Mapping) and JSON_SCHEMA_KEY in schema:
        prefix = f"/{escape_token(JSON_SCHEMA_KEY)}"
        schema = schema[JSON_SCHEMA_KEY]

    validator = jsonschema.Draft7Validator(load_meta_schema(), format_checker=jsonschema.FormatChecker())
    errors = sorted(validator.iter_errors(schema), key=lambda e: [str(p) for p in e.absolute_path])
    return [SchemaIssue(message=_error_message(e), json_path=_error_path(prefix, e)) for e in errors]
