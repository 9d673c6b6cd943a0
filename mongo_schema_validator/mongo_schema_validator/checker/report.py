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
"""Result container for the document checker."""

from pathlib import Path
from typing import Any, Dict, List, Optional


class CheckResult:
    """Container for checking results for a single file."""

    def __init__(self, file_path: Path):
        """Initialize check result.

        Args:
            file_path: Path to the schema or instance file being checked
        """
        self.file_path = file_path
        self.documents_checked = 0
        self.errors: List[Dict[str, Any]] = []

    def add_error(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
        json_path: Optional[str] = None,
        constraint: Optional[str] = None,
    ):
        """Add an error message; location fields are omitted when unknown."""
        entry: Dict[str, Any] = {'message': message}
        if line is not None:
            entry['line'] = line
        if column is not None:
            entry['column'] = column
        if json_path is not None:
            entry['json_path'] = json_path
        if constraint is not None:
            entry['constraint'] = constraint
        self.errors.append(entry)

    @property
    def ok(self) -> bool:
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            'file': str(self.file_path),
            'documents': self.documents_checked,
            'errors': self.errors,
        }
