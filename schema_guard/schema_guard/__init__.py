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

"""Runtime schema validation with path-qualified errors.

    >>> from schema_guard import Validator
    >>> validator = Validator({"name": {"type": str, "required": True}, "size": float})
    >>> validator.collect_errors({"size": "large"})
    {'name': 'The field is required', 'size': 'The field is not of the correct type'}
"""

__version__ = "0.1.0"

from .compiler import SchemaCompiler, classify_field, compile_field, compile_schema
from .engine import validate_field, validate_record, validate_sequence
from .exceptions import (
    AggregateValidationError,
    DocumentLoadError,
    FieldValidationError,
    SchemaFormatError,
    SchemaGuardError,
    ValidationError,
    ValidatorUsageError,
)
from .field_schema import MISSING, FieldSchema, Schema, join_path
from .registry import TYPE_VALIDATORS, get_type_validator
from .type_validators import TypeValidator
from .validator import Validator

__all__ = [
    'AggregateValidationError',
    'DocumentLoadError',
    'FieldSchema',
    'FieldValidationError',
    'MISSING',
    'Schema',
    'SchemaCompiler',
    'SchemaFormatError',
    'SchemaGuardError',
    'TYPE_VALIDATORS',
    'TypeValidator',
    'ValidationError',
    'Validator',
    'ValidatorUsageError',
    'classify_field',
    'compile_field',
    'compile_schema',
    'get_type_validator',
    'join_path',
    'validate_field',
    'validate_record',
    'validate_sequence',
]
