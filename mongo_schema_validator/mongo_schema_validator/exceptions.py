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

"""Custom exceptions for the MongoDB schema validator."""

from typing import Optional


class SchemaValidatorError(Exception):
    """Base exception for schema-validator related errors.

    Args:
        message: Human readable description
        path: JSON pointer of the offending location ("" is the root)
        constraint: Schema keyword the error relates to, if any
    """

    def __init__(self, message: str, path: str = "", constraint: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.path = path
        self.constraint = constraint

    def __str__(self) -> str:
        if self.path:
            return f"{self.message} (path={self.path})"
        return self.message


class SchemaBuildError(SchemaValidatorError):
    """Exception raised while compiling a schema document."""
    pass


class MalformedSchemaError(SchemaBuildError):
    """Exception raised when a recognized schema key holds a value of the wrong kind."""
    pass


class UnsupportedFeatureError(SchemaBuildError):
    """Exception raised for a declared type name the dispatcher does not know."""
    pass


class DocumentValidationError(SchemaValidatorError):
    """Exception raised when an instance does not conform to a compiled schema."""
    pass


class TypeMismatchError(DocumentValidationError):
    """Exception raised when an instance value has the wrong runtime kind."""
    pass


class ConstraintViolationError(DocumentValidationError):
    """Exception raised when an instance value breaks a declared constraint."""
    pass


class DocumentLoadError(SchemaValidatorError):
    """Exception raised when a schema or instance file cannot be read or parsed."""
    pass
