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

"""JSON pointer helpers shared by schema build errors and instance errors."""

from typing import Union

JsonPointer = str


def escape_token(token: str) -> str:
    # JSON Pointer escaping: "~" -> "~0", "/" -> "~1"
    return token.replace("~", "~0").replace("/", "~1")


def join_path(base: JsonPointer, token: Union[str, int]) -> JsonPointer:
    """Append one reference token to a JSON pointer.

    Array indices are passed as ints and are not escaped.
    """
    if isinstance(token, int):
        return f"{base}/{token}"
    return f"{base}/{escape_token(str(token))}"


def format_path(path: JsonPointer) -> str:
    """Render a pointer for messages; the root pointer renders as '/'."""
    return path or "/"
