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

"""Per-document results for the command line tool."""

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional


class ValidationReport:
    """Container for validation results for a single document."""

    def __init__(self, file_path: Path):
        self.file_path = file_path
        self.errors: List[Dict[str, Any]] = []

    def add_error(self, message: str, path: Optional[str] = None):
        """Add an error message.

        Args:
            message: Error message
            path: Field path the message refers to, if any
        """
        error = {'message': message}
        if path is not None:
            error['path'] = path
        self.errors.append(error)

    def add_errors(self, errors: Mapping[str, str]):
        for path, message in errors.items():
            self.add_error(message, path=path)

    @property
    def ok(self) -> bool:
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        return {'file': str(self.file_path), 'errors': self.errors}
