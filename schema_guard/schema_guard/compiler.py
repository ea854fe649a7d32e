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

"""Schema compiler: shorthand and verbose declarations to canonical field schemas.

Accepted declaration forms for a single field, checked in this order:

* a bare type tag, ``str``  -> ``{"type": str}``
* a list of alternatives, ``[str, float]`` -> ``{"type": list, "child": [...]}``
* a mapping without a ``type`` key, ``{"name": str}``
  -> ``{"type": dict, "child": {...}}``
* a verbose declaration, ``{"type": str, "required": True, "enum": [...]}``

Compilation is purely structural and never looks at data values.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Optional

from .config import validator_config
from .exceptions import SchemaFormatError
from .field_schema import DECLARATION_KEYS, FieldSchema, Schema, describe_path, join_path
from .registry import RECORD_TYPE, SEQUENCE_TYPE, get_type_validator, is_record_type, is_sequence_type, is_type_tag

logger = logging.getLogger(__name__)


class FieldForm(Enum):
    """The declaration form a raw field schema is written in."""

    COMPILED = "compiled"
    TYPE_TAG = "type_tag"
    SEQUENCE_LITERAL = "sequence_literal"
    SHAPE_MAPPING = "shape_mapping"
    VERBOSE = "verbose"
    INVALID = "invalid"


def classify_field(raw: Any) -> FieldForm:
    """Classify a raw field declaration before it is expanded."""
    if isinstance(raw, FieldSchema):
        return FieldForm.COMPILED
    if is_type_tag(raw):
        return FieldForm.TYPE_TAG
    if isinstance(raw, (list, tuple)):
        return FieldForm.SEQUENCE_LITERAL
    if isinstance(raw, Mapping):
        return FieldForm.VERBOSE if "type" in raw else FieldForm.SHAPE_MAPPING
    return FieldForm.INVALID


def is_verbose_root(raw: Mapping) -> bool:
    """Return True if a top-level mapping declares a single field rather than a record of fields."""
    return is_type_tag(raw.get("type")) and all(key in DECLARATION_KEYS for key in raw)


class SchemaCompiler:
    """Compiles raw schema declarations into :class:`FieldSchema` trees."""

    def __init__(self, layer_limit: Optional[int] = None):
        self.layer_limit = layer_limit if layer_limit is not None else validator_config.layer_limit

    def compile_root(self, raw: Any) -> FieldSchema:
        """Compile the top-level declaration handed to a validator.

        A mapping that is itself a verbose declaration (``{"type": list,
        "child": [...]}``) compiles to that field; any other mapping is a
        record of fields.
        """
        if not isinstance(raw, Mapping):
            raise SchemaFormatError("Schema must be a mapping")

        if is_verbose_root(raw):
            root = self.compile_field(raw, None)
        else:
            root = FieldSchema(type=RECORD_TYPE, child=self.compile_schema(raw))

        logger.debug(f"Compiled root schema of type '{root.type.__name__}'")
        return root

    def compile_schema(self, raw: Any, parent_path: Optional[str] = None, depth: int = 0) -> Schema:
        """Compile a mapping of field name to field declaration."""
        if not isinstance(raw, Mapping):
            raise SchemaFormatError("Schema must be a mapping", path=parent_path)

        compiled: Dict[str, FieldSchema] = {}
        for field_name, raw_field in raw.items():
            if not isinstance(field_name, str):
                raise SchemaFormatError(
                    f'Field names must be strings, got {field_name!r} in "{describe_path(parent_path)}"',
                    path=parent_path,
                )
            if not field_name:
                raise SchemaFormatError(
                    f'Field names must not be empty in "{describe_path(parent_path)}"',
                    path=parent_path,
                )
            field_path = join_path(parent_path, field_name)
            compiled[field_name] = self.compile_field(raw_field, field_path, depth)

        return MappingProxyType(compiled)

    def compile_field(self, raw: Any, path: Optional[str], depth: int = 0) -> FieldSchema:
        """Expand one field declaration and validate its shape."""
        if depth > self.layer_limit:
            raise SchemaFormatError(
                f'Schema nesting exceeds the layer limit of {self.layer_limit} at "{describe_path(path)}"',
                path=path,
            )

        form = classify_field(raw)
        if form is FieldForm.COMPILED:
            # Prebuilt fields are re-checked like any verbose declaration.
            raw, form = raw.to_declaration(), FieldForm.VERBOSE
        if form is FieldForm.INVALID:
            raise SchemaFormatError(f'Invalid type for the field "{describe_path(path)}"', path=path)

        declaration = self._expand(raw, form)
        type_validator = get_type_validator(declaration.get("type"), path)
        type_validator.validate_schema_shape(declaration, path)

        enum = declaration.get("enum")
        field = FieldSchema(
            type=declaration["type"],
            required=declaration.get("required", False),
            enum=tuple(enum) if enum is not None else None,
            child=self._compile_child(declaration, path, depth),
        )
        logger.debug(f"Compiled field '{describe_path(path)}' ({form.value}) as {field.type.__name__}")
        return field

    @staticmethod
    def _expand(raw: Any, form: FieldForm) -> Dict[str, Any]:
        if form is FieldForm.TYPE_TAG:
            return {"type": raw}
        if form is FieldForm.SEQUENCE_LITERAL:
            return {"type": SEQUENCE_TYPE, "child": list(raw)}
        if form is FieldForm.SHAPE_MAPPING:
            return {"type": RECORD_TYPE, "child": raw}
        return dict(raw)

    def _compile_child(self, declaration: Dict[str, Any], path: Optional[str], depth: int):
        if is_record_type(declaration["type"]):
            return self.compile_schema(declaration["child"], path, depth + 1)
        if is_sequence_type(declaration["type"]):
            return tuple(
                self.compile_field(alternative, join_path(path, f"[{index}]"), depth + 1)
                for index, alternative in enumerate(declaration["child"])
            )
        return None


_default_compiler: Optional[SchemaCompiler] = None


def _get_default_compiler() -> SchemaCompiler:
    global _default_compiler
    if _default_compiler is None:
        _default_compiler = SchemaCompiler()
    return _default_compiler


def compile_schema(raw: Any, parent_path: Optional[str] = None) -> Schema:
    """Compile a record-level schema with the default compiler."""
    return _get_default_compiler().compile_schema(raw, parent_path)


def compile_field(raw: Any, path: Optional[str] = None) -> FieldSchema:
    """Compile a single field declaration with the default compiler."""
    return _get_default_compiler().compile_field(raw, path)
