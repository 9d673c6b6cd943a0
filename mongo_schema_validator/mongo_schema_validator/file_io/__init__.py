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

"""File I/O related utilities.

Reading schema and instance documents from disk and formatting file-backed
diagnostics.
"""

from .document_loader import DocumentLoader, document_loader
from .source_location import SourceLocation, SourceMap, format_source, lookup_source

__all__ = [
    "DocumentLoader",
    "document_loader",
    "SourceLocation",
    "SourceMap",
    "format_source",
    "lookup_source",
]
