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

"""Check instance documents on disk against a schema file."""

import logging
from pathlib import Path
from typing import Any, List, Optional, Sequence, Union

from ..config import validator_config
from ..exceptions import DocumentLoadError, SchemaBuildError
from ..file_io.document_loader import DocumentLoader, document_loader
from ..file_io.source_location import SourceMap, lookup_source
from ..models.schema_lint import lint_schema_document
from ..validator_tree import ValidatorTree, compile_schema
from .report import CheckResult

__all__ = ['check_files', 'check_document', 'load_validator', 'CheckResult']

logger = logging.getLogger(__name__)


def load_validator(
    schema_path: Path,
    result: CheckResult,
    *,
    lint_schema: bool = True,
    loader: DocumentLoader = document_loader,
) -> Optional[ValidatorTree]:
    """Load, lint and compile a schema file.

    Problems are recorded on ``result``; None is returned when the schema
    cannot be used.
    """
    try:
        schema, source_map = loader.load_document_with_source(schema_path)
    except DocumentLoadError as e:
        result.add_error(f"Failed to load schema file: {e.message}")
        return None

    if lint_schema:
        issues = lint_schema_document(schema)
        for issue in issues:
            loc = lookup_source(source_map, issue.json_path)
            result.add_error(issue.message, line=loc.line, column=loc.column, json_path=issue.json_path)
        if issues:
            logger.warning(f"Schema lint found {len(issues)} issue(s) in {schema_path}")
            return None

    try:
        tree = compile_schema(schema)
    except SchemaBuildError as e:
        loc = lookup_source(source_map, e.path)
        result.add_error(
            e.message,
            line=loc.line,
            column=loc.column,
            json_path=e.path,
            constraint=e.constraint,
        )
        return None

    logger.info(f"Compiled schema: {schema_path}")
    return tree


def check_document(
    tree: ValidatorTree,
    document: Any,
    result: CheckResult,
    source_map: Optional[SourceMap] = None,
    base_path: str = "",
) -> bool:
    """Verify one document and record the first violation, if any."""
    result.documents_checked += 1
    error = tree.validate(document)
    if error is None:
        return True

    json_path = base_path + error.path
    loc = lookup_source(source_map, json_path)
    result.add_error(
        error.message,
        line=loc.line,
        column=loc.column,
        json_path=json_path,
        constraint=error.constraint,
    )
    return False


def check_files(
    schema_path: Union[str, Path],
    document_paths: Sequence[Union[str, Path]],
    *,
    many: bool = False,
    lint_schema: Optional[bool] = None,
    loader: DocumentLoader = document_loader,
) -> List[CheckResult]:
    """Check document files against a schema file.

    Args:
        schema_path: Schema file (JSON or YAML)
        document_paths: Instance files
        many: Treat a top-level array in an instance file as several documents
        lint_schema: Run the meta-schema lint first. If None, uses global config.

    Returns:
        The schema file's result followed by one result per instance file.
        Instance files are skipped when the schema cannot be compiled.
    """
    if lint_schema is None:
        lint_schema = validator_config.lint_schema

    schema_result = CheckResult(Path(schema_path))
    results = [schema_result]

    tree = load_validator(Path(schema_path), schema_result, lint_schema=lint_schema, loader=loader)
    if tree is None:
        return results

    for document_path in document_paths:
        result = CheckResult(Path(document_path))
        results.append(result)
        try:
            if many:
                documents, source_map = loader.load_documents_with_source(document_path)
            else:
                document, source_map = loader.load_document_with_source(document_path)
                documents = [("", document)]
        except DocumentLoadError as e:
            result.add_error(f"Failed to load document file: {e.message}")
            continue

        for base_path, document in documents:
            check_document(tree, document, result, source_map, base_path)

        logger.debug(f"Checked {result.documents_checked} document(s) in {document_path}")

    return results
