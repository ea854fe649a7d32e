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

"""Shape documents describing well-formed field declarations.

Each type-validator plugin checks an expanded field declaration against one of
the JSON Schema documents shipped next to this module (``scalar.json``,
``record.json``, ``sequence.json``).
"""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Dict

from jsonschema import Draft7Validator, validators


# Shape cache to avoid reloading files
_SHAPE_CACHE: Dict[str, dict] = {}
_CHECKER_CACHE: Dict[str, Draft7Validator] = {}


def _is_object(checker, instance) -> bool:
    return isinstance(instance, Mapping)


def _is_array(checker, instance) -> bool:
    return isinstance(instance, (list, tuple))


# Compiled declarations hold read-only mappings and tuples, so "object" and
# "array" are widened beyond dict and list.
DeclarationValidator = validators.extend(
    Draft7Validator,
    type_checker=Draft7Validator.TYPE_CHECKER.redefine_many(
        {"object": _is_object, "array": _is_array}
    ),
)


def get_shape_path(shape_name: str) -> Path:
    """Get the path to the shape document for the given plugin kind.

    Args:
        shape_name: Plugin kind (scalar, record, sequence)

    Returns:
        Path to the shape file
    """
    return Path(__file__).parent / f"{shape_name}.json"


def load_shape(shape_name: str) -> dict:
    """Load the shape document for the given plugin kind.

    Raises:
        FileNotFoundError: If the shape file doesn't exist
        json.JSONDecodeError: If the shape file is invalid JSON
    """
    if shape_name in _SHAPE_CACHE:
        return _SHAPE_CACHE[shape_name]

    shape_path = get_shape_path(shape_name)
    if not shape_path.exists():
        raise FileNotFoundError(f"Shape file not found for {shape_name}: {shape_path}")

    try:
        with open(shape_path, "r", encoding="utf-8") as f:
            shape = json.load(f)
    except json.JSONDecodeError as e:
        raise json.JSONDecodeError(
            f"Invalid JSON in shape file {shape_path}: {e.msg}",
            e.doc,
            e.pos,
        ) from e

    _SHAPE_CACHE[shape_name] = shape
    return shape


def get_shape_checker(shape_name: str) -> Draft7Validator:
    """Return a (cached) validator instance for the given shape document."""
    checker = _CHECKER_CACHE.get(shape_name)
    if checker is None:
        checker = DeclarationValidator(load_shape(shape_name))
        _CHECKER_CACHE[shape_name] = checker
    return checker


def clear_cache() -> None:
    """Clear the shape caches. Useful for testing."""
    _SHAPE_CACHE.clear()
    _CHECKER_CACHE.clear()
