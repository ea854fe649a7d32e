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

"""Registry mapping type tags to their type-validator plugins.

The set of tags is closed: it is populated when this module is imported and
is read-only afterwards.
"""

from __future__ import annotations

from datetime import date, datetime
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .exceptions import SchemaFormatError
from .field_schema import describe_path
from .type_validators import (
    BooleanValidator,
    DateValidator,
    IntegerValidator,
    NumberValidator,
    RecordValidator,
    SequenceValidator,
    StringValidator,
    TypeValidator,
)

RECORD_TYPE = dict
SEQUENCE_TYPE = list

TYPE_VALIDATORS: Mapping[type, TypeValidator] = MappingProxyType({
    str: StringValidator(),
    float: NumberValidator(),
    int: IntegerValidator(),
    bool: BooleanValidator(),
    date: DateValidator(date),
    datetime: DateValidator(datetime),
    RECORD_TYPE: RecordValidator(),
    SEQUENCE_TYPE: SequenceValidator(),
})


def is_type_tag(raw: Any) -> bool:
    """Return True if *raw* is a registered type tag. Never raises for unhashable input."""
    try:
        return raw in TYPE_VALIDATORS
    except TypeError:
        return False


def get_type_validator(tag: Any, path: Optional[str] = None) -> TypeValidator:
    """Get the plugin registered for *tag*."""
    if not is_type_tag(tag):
        raise SchemaFormatError(f'Invalid type for the field "{describe_path(path)}"', path=path)
    return TYPE_VALIDATORS[tag]


def is_record_type(tag: Any) -> bool:
    return is_type_tag(tag) and TYPE_VALIDATORS[tag].KIND == RecordValidator.KIND


def is_sequence_type(tag: Any) -> bool:
    return is_type_tag(tag) and TYPE_VALIDATORS[tag].KIND == SequenceValidator.KIND
