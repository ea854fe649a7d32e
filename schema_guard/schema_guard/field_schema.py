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

"""Canonical, compiled form of a schema declaration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple, Union


class _Missing:
    """Marker for a value that is absent, as opposed to a value that is ``None``."""

    _instance: Optional["_Missing"] = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Missing, ())


MISSING = _Missing()

# Keys a verbose field declaration may carry.
DECLARATION_KEYS = frozenset({"type", "required", "enum", "child"})


@dataclass(frozen=True)
class FieldSchema:
    """Validation rules for one field.

    Attributes:
        type: Registered type tag (``str``, ``float``, ``dict``, ``list``, ...)
        required: Whether an absent or empty value is rejected
        enum: Allowed literals, in declared order
        child: For records, a read-only mapping of child field schemas.
            For sequences, the tuple of alternatives an element may match.
    """

    type: type
    required: bool = False
    enum: Optional[Tuple[Any, ...]] = None
    child: Union["Schema", Tuple["FieldSchema", ...], None] = None

    def to_declaration(self) -> dict:
        """Return the verbose declaration this field compiles from.

        Hand-built fields are rendered as given, so a malformed one still
        fails the compiler's shape check.
        """
        declaration: dict = {"type": self.type}
        if self.required is not False:
            declaration["required"] = self.required
        if self.enum is not None:
            declaration["enum"] = list(self.enum) if isinstance(self.enum, (list, tuple)) else self.enum
        if isinstance(self.child, Mapping):
            declaration["child"] = {name: _declaration_of(field) for name, field in self.child.items()}
        elif isinstance(self.child, (list, tuple)):
            declaration["child"] = [_declaration_of(alternative) for alternative in self.child]
        elif self.child is not None:
            declaration["child"] = self.child
        return declaration


Schema = Mapping[str, FieldSchema]


def _declaration_of(field: Any) -> Any:
    return field.to_declaration() if isinstance(field, FieldSchema) else field


def join_path(parent: Optional[str], name: str) -> str:
    """Join a field name onto its parent path.

    ``join_path("a", "b") == "a.b"``, ``join_path("a", "[0]") == "a[0]"`` and
    an empty parent yields *name* unchanged.
    """
    if not parent:
        return name
    if name.startswith("["):
        return f"{parent}{name}"
    return f"{parent}.{name}"


def describe_path(path: Optional[str]) -> str:
    return path if path else "<root>"
