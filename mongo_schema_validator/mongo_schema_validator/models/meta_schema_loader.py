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

"""Loader for the JSON Schema that describes $jsonSchema documents."""

import json
from pathlib import Path
from typing import Dict

META_SCHEMA_FILE = "bson_schema.meta.json"

# Schema cache to avoid reloading files
_SCHEMA_CACHE: Dict[str, dict] = {}


def get_meta_schema_path(file_name: str = META_SCHEMA_FILE) -> Path:
    """Get the path to a bundled meta-schema file."""
    schema_dir = Path(__file__).parent.parent / "schema"
    return schema_dir / file_name


def load_meta_schema(file_name: str = META_SCHEMA_FILE) -> dict:
    """Load a bundled meta-schema.

    Raises:
        FileNotFoundError: If the schema file doesn't exist
        json.JSONDecodeError: If the schema file is invalid JSON
    """
    if file_name in _SCHEMA_CACHE:
        return _SCHEMA_CACHE[file_name]

    schema_path = get_meta_schema_path(file_name)
    if not schema_path.exists():
        raise FileNotFoundError(f"Meta-schema file not found: {schema_path}")

    try:
        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)
    except json.JSONDecodeError as e:
        raise json.JSONDecodeError(
            f"Invalid JSON in meta-schema file {schema_path}: {e.msg}",
            e.doc,
            e.pos,
        ) from e

    _SCHEMA_CACHE[file_name] = schema
    return schema


def clear_cache() -> None:
    """Clear the meta-schema cache. Useful for testing."""
    _SCHEMA_CACHE.clear()
