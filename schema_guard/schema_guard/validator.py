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

"""Public entry point: compile a schema once, validate values many times."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Optional

from . import engine
from .compiler import SchemaCompiler
from .exceptions import AggregateValidationError, FieldValidationError
from .field_schema import FieldSchema, Schema
from .registry import RECORD_TYPE


class Validator:
    """Validates values against a schema compiled at construction time.

    Example:
        >>> validator = Validator({"name": {"type": str, "required": True}, "tags": [str]})
        >>> validator.validate({"name": "sensor", "tags": ["lidar"]})
        >>> validator.collect_errors({"tags": [1]})
        {'name': 'The field is required', 'tags[0]': 'The field is not of the correct type'}

    The compiled schema is never mutated, so one instance can be shared
    between threads.
    """

    def __init__(self, schema: Any, *, layer_limit: Optional[int] = None):
        self._compiler = SchemaCompiler(layer_limit)
        self._root = self._compiler.compile_root(schema)

    @property
    def schema(self) -> FieldSchema:
        """The compiled root field schema."""
        return self._root

    @property
    def fields(self) -> Optional[Schema]:
        """The compiled top-level fields when the root is a record, else None."""
        return self._root.child if self._root.type is RECORD_TYPE else None

    def validate(self, value: Any) -> None:
        """Validate *value* against the compiled schema.

        Raises:
            AggregateValidationError: for a record or sequence root with failing fields
            FieldValidationError: for a scalar root, or when the root value itself
                has the wrong type
        """
        engine.validate_field(value, self._root, "")

    def collect_errors(self, value: Any) -> Dict[str, str]:
        """Return a mapping of path to message, empty when *value* is valid."""
        try:
            self.validate(value)
        except (FieldValidationError, AggregateValidationError) as e:
            return e.as_dict()
        return {}

    def is_valid(self, value: Any) -> bool:
        return not self.collect_errors(value)

    def validate_field(
        self,
        value: Any,
        field_schema: Any,
        field_name: str,
        parent_path: Optional[str] = None,
    ) -> None:
        """Validate *value* against a single field schema, compiling it first if needed."""
        engine.validate_field(value, self._compile(field_schema, field_name), field_name, parent_path)

    def validate_record(self, obj: Any, schema: Any = None, path_prefix: Optional[str] = None) -> None:
        """Validate a record against *schema* (default: this validator's top-level fields).

        A schema passed in is compiled first, prebuilt fields included.
        """
        if schema is None:
            schema = self.fields
        elif isinstance(schema, Mapping):
            schema = self._compiler.compile_schema(schema, path_prefix)
        engine.validate_record(obj, schema, path_prefix)

    def validate_sequence(self, array: Any, field_schema: Any, path_prefix: Optional[str] = None) -> None:
        """Validate a sequence against a sequence field schema, compiling it first if needed."""
        engine.validate_sequence(array, self._compile(field_schema, path_prefix), path_prefix)

    def _compile(self, field_schema: Any, path: Optional[str]) -> FieldSchema:
        return self._compiler.compile_field(field_schema, path)

    def __repr__(self) -> str:
        return f"Validator({self._root.to_declaration()!r})"
