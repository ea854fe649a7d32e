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

"""Loading of JSON and YAML data documents for the command line tool."""

import json
import logging
from pathlib import Path
from typing import Any, List, Union

import yaml

from .exceptions import DocumentLoadError

logger = logging.getLogger(__name__)

JSON_EXTENSIONS = ('.json',)
YAML_EXTENSIONS = ('.yaml', '.yml')
DOCUMENT_EXTENSIONS = JSON_EXTENSIONS + YAML_EXTENSIONS


def load_document(file_path: Union[str, Path]) -> Any:
    """Load a JSON or YAML document.

    YAML is read with ``yaml.safe_load``, so date literals arrive as
    ``datetime.date``/``datetime.datetime`` values. An empty YAML document
    loads as ``None``.

    Raises:
        DocumentLoadError: If the file is missing, has an unknown extension or cannot be parsed
    """
    path = Path(file_path)

    if not path.exists():
        raise DocumentLoadError(f"Document not found: {path}")

    if not path.is_file():
        raise DocumentLoadError(f"Path is not a file: {path}")

    suffix = path.suffix.lower()
    if suffix not in DOCUMENT_EXTENSIONS:
        raise DocumentLoadError(
            f"Unsupported document type '{suffix}' for {path}. Expected one of: {', '.join(DOCUMENT_EXTENSIONS)}"
        )

    logger.debug(f"Loading document: {path}")
    try:
        with open(path, 'r', encoding='utf-8') as stream:
            if suffix in JSON_EXTENSIONS:
                return json.load(stream)
            return yaml.safe_load(stream)
    except json.JSONDecodeError as exc:
        raise DocumentLoadError(f"Failed to parse JSON file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise DocumentLoadError(f"Failed to parse YAML file {path}: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentLoadError(f"Failed to read document {path}: {exc}") from exc


def find_documents(paths: List[str]) -> List[Path]:
    """Expand files and directories into the list of data documents to validate."""
    documents = []

    for path_str in paths:
        path = Path(path_str)

        if not path.exists():
            logger.warning(f"Path does not exist: {path}")
            continue

        if path.is_file():
            documents.append(path)
        elif path.is_dir():
            for ext in DOCUMENT_EXTENSIONS:
                documents.extend(path.rglob(f'*{ext}'))
        else:
            logger.warning(f"Path is neither file nor directory: {path}")

    return sorted(set(documents))
