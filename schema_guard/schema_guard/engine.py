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

"""Validation engine: walks a value against a compiled schema.

Scalar checks stop at the first failure and raise :class:`FieldValidationError`.
Records and sequences keep going and raise one :class:`AggregateValidationError`
holding every failing path.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional, Sequence

from .exceptions import (
    ENUM_MESSAGE_PREFIX,
    REQUIRED_MESSAGE,
    UNKNOWN_FIELDS_MESSAGE_PREFIX,
    WRONG_TYPE_MESSAGE,
    AggregateValidationError,
    FieldValidationError,
    ValidationError,
    ValidatorUsageError,
)
from .field_schema import MISSING, FieldSchema, Schema, join_path
from .registry import get_type_validator, is_record_type, is_sequence_type

logger = logging.getLogger(__name__)


def _is_enum_member(value: Any, options: Iterable[Any]) -> bool:
    # True == 1 in Python; booleans only ever match booleans.
    for option in options:
        if isinstance(value, bool) != isinstance(option, bool):
            continue
        if value == option:
            return True
    return False


def format_enum_message(options: Sequence[Any]) -> str:
    return ENUM_MESSAGE_PREFIX + ", ".join(str(option) for option in options)


def validate_field(
    value: Any,
    field_schema: FieldSchema,
    field_name: str,
    parent_path: Optional[str] = None,
) -> None:
    """Validate a value against one field schema.

    Args:
        value: The value to check, or ``MISSING`` when the field is absent
        field_schema: Compiled field schema
        field_name: Name of the field (``"[3]"`` for sequence elements)
        parent_path: Path of the enclosing record or sequence

    Raises:
        FieldValidationError: required, enum or type check failed for this field
        AggregateValidationError: a nested record or sequence has failures
    """
    field_path = join_path(parent_path, field_name)
    type_validator = get_type_validator(field_schema.type, field_path)

    if field_schema.required:
        if value is MISSING or not type_validator.validate_required(value):
            raise FieldValidationError(field_path, REQUIRED_MESSAGE)

    # Absent optional fields are valid whatever their type or enum.
    if value is MISSING:
        return

    if field_schema.enum is not None and not _is_enum_member(value, field_schema.enum):
        raise FieldValidationError(field_path, format_enum_message(field_schema.enum))

    if not type_validator.validate_type(value, field_schema):
        raise FieldValidationError(field_path, WRONG_TYPE_MESSAGE)

    if is_record_type(field_schema.type):
        validate_record(value, field_schema.child, field_path)
    elif is_sequence_type(field_schema.type):
        validate_sequence(value, field_schema, field_path)


def validate_record(obj: Any, schema: Schema, path_prefix: Optional[str] = None) -> None:
    """Validate every declared field of a record and reject undeclared keys.

    Iterates the schema's fields, not the object's keys, and collects every
    failure before raising.
    """
    if not isinstance(obj, Mapping):
        raise ValidatorUsageError(
            f"Record validator needs the first argument to be a mapping, instead received '{type(obj).__name__}'"
        )
    if not isinstance(schema, Mapping):
        raise ValidatorUsageError(
            f"Record validator needs the second argument to be the record schema, instead received '{type(schema).__name__}'"
        )

    errors: Dict[str, str] = {}
    for field_name, field_schema in schema.items():
        try:
            validate_field(obj.get(field_name, MISSING), field_schema, field_name, path_prefix)
        except FieldValidationError as e:
            errors[e.path] = e.message
        except AggregateValidationError as e:
            errors.update(e.errors)

    unknown_fields: List[str] = [join_path(path_prefix, str(key)) for key in obj if key not in schema]
    if unknown_fields:
        errors[path_prefix or ""] = UNKNOWN_FIELDS_MESSAGE_PREFIX + ", ".join(unknown_fields)

    if errors:
        logger.debug(f"Record '{path_prefix or '<root>'}' failed validation with {len(errors)} error(s)")
        raise AggregateValidationError(errors)


def _matches_any(element: Any, alternatives: Sequence[FieldSchema], field_name: str, parent_path: Optional[str]) -> bool:
    for alternative in alternatives:
        try:
            validate_field(element, alternative, field_name, parent_path)
        except ValidationError:
            # Rejected alternatives are not reported.
            continue
        return True
    return False


def validate_sequence(array: Any, field_schema: FieldSchema, path_prefix: Optional[str] = None) -> None:
    """Check that every element of *array* matches at least one alternative.

    Alternatives are tried in declared order and the first match wins.
    Elements without a match are reported at their indexed path.
    """
    if not isinstance(array, (list, tuple)):
        raise ValidatorUsageError(
            f"Sequence validator needs the first argument to be a sequence, instead received '{type(array).__name__}'"
        )
    alternatives = getattr(field_schema, "child", None)
    if not isinstance(alternatives, tuple) or not alternatives:
        raise ValidatorUsageError(
            f"Sequence validator needs the second argument to be the sequence schema, instead received '{type(field_schema).__name__}'"
        )

    errors: Dict[str, str] = {}
    for index, element in enumerate(array):
        element_name = f"[{index}]"
        if not _matches_any(element, alternatives, element_name, path_prefix):
            errors[join_path(path_prefix, element_name)] = WRONG_TYPE_MESSAGE

    if errors:
        logger.debug(f"Sequence '{path_prefix or '<root>'}' has {len(errors)} element(s) matching no alternative")
        raise AggregateValidationError(errors)
