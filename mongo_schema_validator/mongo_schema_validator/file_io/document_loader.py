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

"""JSON/YAML document loader with source locations and caching."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml

from ..config import validator_config
from ..exceptions import DocumentLoadError
from ..utils.json_pointer import escape_token, join_path
from .source_location import SourceMap

logger = logging.getLogger(__name__)

JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yaml", ".yml")


class DocumentLoader:
    """Load schema and instance documents from JSON or YAML files."""

    def __init__(self, cache_enabled: Optional[bool] = None):
        """Initialize the loader.

        Args:
            cache_enabled: Whether to cache loaded files. If None, uses global config.
        """
        self.cache_enabled = cache_enabled if cache_enabled is not None else validator_config.cache_enabled
        self._cache: Dict[Path, Tuple[Any, SourceMap]] = {}

    @staticmethod
    def build_source_map(content: str) -> SourceMap:
        """Build a mapping from JSON pointers to 1-based line/column.

        This walks PyYAML's node tree (yaml.compose), which also covers JSON
        content, without changing the parsed data.
        """
        source_map: SourceMap = {}

        try:
            root = yaml.compose(content, Loader=yaml.SafeLoader)
        except yaml.YAMLError:
            # Location tracking is best effort; parse errors are reported by the loader.
            return source_map

        if root is None:
            return source_map

        def _walk(node: yaml.Node, path: str) -> None:
            mark = node.start_mark
            # PyYAML uses 0-based line/column
            source_map[path] = {"line": mark.line + 1, "column": mark.column + 1}

            if isinstance(node, yaml.MappingNode):
                for key_node, value_node in node.value:
                    key = getattr(key_node, "value", None)
                    if key is None:
                        continue
                    _walk(value_node, f"{path}/{escape_token(str(key))}")
            elif isinstance(node, yaml.SequenceNode):
                for idx, item_node in enumerate(node.value):
                    _walk(item_node, join_path(path, idx))

        _walk(root, "")
        return source_map

    @staticmethod
    def parse_content(content: str, suffix: str = ".yaml") -> Any:
        """Parse document text; JSON files are parsed strictly, everything else as YAML."""
        try:
            if suffix.lower() in JSON_SUFFIXES:
                return json.loads(content)
            return yaml.safe_load(content)
        except json.JSONDecodeError as exc:
            raise DocumentLoadError(f"Failed to parse JSON content: {exc}") from exc
        except yaml.YAMLError as exc:
            raise DocumentLoadError(f"Failed to parse YAML content: {exc}") from exc

    def load_document_with_source(self, file_path: Union[str, Path]) -> Tuple[Any, SourceMap]:
        """Load one document file and return (data, source_map)."""
        path = Path(file_path)

        if not path.exists():
            raise DocumentLoadError(f"Document file not found: {path}")

        if not path.is_file():
            raise DocumentLoadError(f"Path is not a file: {path}")

        if self.cache_enabled and path in self._cache:
            logger.debug(f"Loading document from cache: {path}")
            return self._cache[path]

        logger.debug(f"Loading document file: {path}")
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentLoadError(f"Failed to read document file {path}: {exc}") from exc

        try:
            data = self.parse_content(content, path.suffix)
        except DocumentLoadError as exc:
            raise DocumentLoadError(f"{exc.message} ({path})") from exc

        source_map = self.build_source_map(content)
        if self.cache_enabled:
            self._cache[path] = (data, source_map)
        return data, source_map

    def load_document(self, file_path: Union[str, Path]) -> Any:
        """Load one document file."""
        data, _ = self.load_document_with_source(file_path)
        return data

    def load_documents_with_source(self, file_path: Union[str, Path]) -> Tuple[List[Tuple[str, Any]], SourceMap]:
        """Load a file holding a top-level array of documents.

        Returns ((pointer, document) pairs, source_map). A file whose top
        level is not an array yields one pair with the root pointer.
        """
        data, source_map = self.load_document_with_source(file_path)
        if isinstance(data, list):
            return [(join_path("", idx), item) for idx, item in enumerate(data)], source_map
        return [("", data)], source_map

    def load_documents(self, file_path: Union[str, Path]) -> List[Tuple[str, Any]]:
        """Load a file holding a top-level array of documents as (pointer, document) pairs."""
        documents, _ = self.load_documents_with_source(file_path)
        return documents

    def clear_cache(self) -> None:
        """Clear the document cache."""
        self._cache.clear()
        logger.debug("Document cache cleared")


# Global loader instance
document_loader = DocumentLoader()
