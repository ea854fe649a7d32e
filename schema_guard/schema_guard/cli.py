#!/usr/bin/env python3
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

"""CLI entry point for validating JSON/YAML documents against a Python-declared schema."""

import argparse
import importlib
import json
import logging
import sys
from pathlib import Path
from typing import List

from .config import validator_config
from .documents import find_documents, load_document
from .exceptions import DocumentLoadError, SchemaGuardError
from .report import ValidationReport
from .validator import Validator

logger = logging.getLogger(__name__)


def resolve_validator(reference: str) -> Validator:
    """Import ``package.module:attribute`` and turn it into a :class:`Validator`.

    The attribute may be a ``Validator`` or a raw schema mapping.

    Raises:
        SchemaGuardError: If the reference cannot be imported
        SchemaFormatError: If the referenced schema is malformed
    """
    module_name, sep, attribute = reference.partition(':')
    if not sep or not module_name or not attribute:
        raise SchemaGuardError(f"Invalid schema reference '{reference}'. Expected 'package.module:attribute'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise SchemaGuardError(f"Cannot import schema module '{module_name}': {exc}") from exc

    target = module
    for part in attribute.split('.'):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise SchemaGuardError(f"Schema module '{module_name}' has no attribute '{attribute}'") from exc

    if isinstance(target, Validator):
        return target
    return Validator(target)


def validate_files(validator: Validator, file_paths: List[Path]) -> List[ValidationReport]:
    """Validate every document and return one report per file."""
    reports = []

    for file_path in file_paths:
        report = ValidationReport(file_path)
        try:
            document = load_document(file_path)
        except DocumentLoadError as e:
            report.add_error(str(e))
        else:
            report.add_errors(validator.collect_errors(document))
        reports.append(report)

    return reports


def main(argv: List[str] | None = None) -> None:
    """Main entry point for the validator CLI."""
    parser = argparse.ArgumentParser(
        prog='schema-guard',
        description='Validate JSON/YAML documents against a schema declared in Python',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        'schema',
        help="Schema reference in the form 'package.module:attribute'",
    )
    parser.add_argument(
        'paths',
        nargs='*',
        default=None,
        help='Document paths or directories to validate (default: current directory)',
    )
    parser.add_argument(
        '--format',
        choices=['human', 'json'],
        default='human',
        help='Output format (default: human)',
    )

    args = parser.parse_args(argv)
    validator_config.set_logging()

    if not args.paths:
        args.paths = ['.']

    try:
        validator = resolve_validator(args.schema)
    except SchemaGuardError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    documents = find_documents(args.paths)
    if not documents:
        print("No JSON or YAML documents found.", file=sys.stderr)
        sys.exit(1)

    reports = validate_files(validator, documents)

    if args.format == 'json':
        output = {
            'files': len(reports),
            'errors': sum(len(r.errors) for r in reports),
            'results': [r.to_dict() for r in reports],
        }
        print(json.dumps(output, indent=2))
    else:  # human-readable
        for report in reports:
            if report.ok:
                continue
            print(f"\n{report.file_path}:")
            for error in report.errors:
                location = f" {error['path'] or '<root>'}:" if 'path' in error else ""
                print(f"  ERROR{location} {error['message']}")

    total_errors = sum(len(r.errors) for r in reports)
    if total_errors > 0:
        sys.exit(1)
    if args.format == 'human':
        print(f"Validated {len(reports)} document(s) with no errors.")
    sys.exit(0)


if __name__ == '__main__':
    main()
