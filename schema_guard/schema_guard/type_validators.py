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

"""Type-validator plugins, one per type tag.

A plugin answers three questions about its kind of value:

* ``validate_type``: does this value have the right type?
* ``validate_required``: does this value count as present for ``required``?
  Defaults to ``validate_type``.
* ``validate_schema_shape``: is this field declaration well-formed?
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Mapping
from datetime import date
from typing import Any, Optional

from jsonschema.exceptions import ValidationError as JsonSchemaValidationError

from .exceptions import SchemaFormatError
from .field_schema import describe_path
from .shapes import get_shape_checker


class TypeValidator(ABC):
    """Abstract base type validator."""

    KIND: str = "scalar"

    @abstractmethod
    def validate_type(self, value: Any, field_schema: Any = None) -> bool:
        """Return whether *value* has the type this plugin governs."""

    def validate_required(self, value: Any) -> bool:
        return self.validate_type(value, None)

    def validate_schema_shape(self, field: Mapping, path: Optional[str] = None) -> None:
        """Check an expanded field declaration against this plugin's shape document."""
        checker = get_shape_checker(self.KIND)
        error = next(iter(sorted(checker.iter_errors(field), key=_error_sort_key)), None)
        if error is None:
            return

        location = ".".join(str(p) for p in error.absolute_path)
        detail = f"{error.message} (at '{location}')" if location else error.message
        raise SchemaFormatError(f'Invalid schema for the field "{describe_path(path)}": {detail}', path=path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def _error_sort_key(error: JsonSchemaValidationError):
    return (len(error.absolute_path), list(map(str, error.absolute_path)), error.message)


class StringValidator(TypeValidator):
    """Validator for ``str`` fields. The empty string does not satisfy ``required``."""

    def validate_type(self, value: Any, field_schema: Any = None) -> bool:
        return isinstance(value, str)

    def validate_required(self, value: Any) -> bool:
        return isinstance(value, str) and value != ""


class NumberValidator(TypeValidator):
    """Validator for ``float`` fields; integers are numbers too, booleans and NaN are not."""

    def validate_type(self, value: Any, field_schema: Any = None) -> bool:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False
        return not (isinstance(value, float) and math.isnan(value))


class IntegerValidator(TypeValidator):
    """Validator for ``int`` fields."""

    def validate_type(self, value: Any, field_schema: Any = None) -> bool:
        return isinstance(value, int) and not isinstance(value, bool)


class BooleanValidator(TypeValidator):
    """Validator for ``bool`` fields. ``False`` satisfies ``required``."""

    def validate_type(self, value: Any, field_schema: Any = None) -> bool:
        return isinstance(value, bool)


class DateValidator(TypeValidator):
    """Validator for ``date`` and ``datetime`` fields."""

    def __init__(self, date_class: type = date):
        self.date_class = date_class

    def validate_type(self, value: Any, field_schema: Any = None) -> bool:
        return isinstance(value, self.date_class)

    def __repr__(self) -> str:
        return f"DateValidator({self.date_class.__name__})"


class RecordValidator(TypeValidator):
    """Validator for keyed records (``dict``)."""

    KIND = "record"

    def validate_type(self, value: Any, field_schema: Any = None) -> bool:
        return isinstance(value, Mapping)


class SequenceValidator(TypeValidator):
    """Validator for sequences of alternatives (``list``).

    Tuples are accepted as sequences; strings and bytes are not.
    """

    KIND = "sequence"

    def validate_type(self, value: Any, field_schema: Any = None) -> bool:
        return isinstance(value, (list, tuple))