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

"""Custom exceptions for the schema_guard validator."""

from typing import Dict, Optional


REQUIRED_MESSAGE = "The field is required"
WRONG_TYPE_MESSAGE = "The field is not of the correct type"
ENUM_MESSAGE_PREFIX = "The field can only be one of: "
UNKNOWN_FIELDS_MESSAGE_PREFIX = "The object contains invalid properties: "


class SchemaGuardError(Exception):
    """Base exception for schema_guard related errors."""
    pass


class SchemaFormatError(SchemaGuardError):
    """Exception raised when a schema declaration is malformed."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(message)


class ValidatorUsageError(SchemaGuardError, TypeError):
    """Exception raised when an engine entry point receives input of the wrong shape."""
    pass


class ValidationError(SchemaGuardError):
    """Exception raised when a value does not conform to its schema."""
    pass


class FieldValidationError(ValidationError):
    """A single failing field: one path, one message."""

    def __init__(self, path: str, message: str):
        self.path = path
        self.message = message
        super().__init__(f'{path}: {message}' if path else message)

    def as_dict(self) -> Dict[str, str]:
        return {self.path: self.message}


class AggregateValidationError(ValidationError):
    """Every failure found while walking a record or a sequence, keyed by path."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        details = "; ".join(f"{path or '<root>'}: {message}" for path, message in self.errors.items())
        super().__init__(f"Validation failed with {len(self.errors)} error(s): {details}")

    def as_dict(self) -> Dict[str, str]:
        return dict(self.errors)


class DocumentLoadError(SchemaGuardError):
    """Exception raised when a data document cannot be read or parsed."""
    pass
