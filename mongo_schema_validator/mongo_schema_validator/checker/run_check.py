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

"""CLI entry point for checking documents against a $jsonSchema file."""

import argparse
import dataclasses
import json
import sys
from typing import List

from ..config import validator_config
from . import CheckResult, check_files


def print_results(results: List[CheckResult], output_format: str) -> None:
    """Print results in the requested format."""
    if output_format == 'json':
        output = {
            'files': len(results),
            'documents': sum(r.documents_checked for r in results),
            'errors': sum(len(r.errors) for r in results),
            'results': [r.to_dict() for r in results],
        }
        print(json.dumps(output, indent=2))
    elif output_format == 'github-actions':
        for result in results:
            for error in result.errors:
                print(f"::error file={result.file_path},line={error.get('line', 1)}::{error['message']}")
    else:  # human-readable
        for result in results:
            if result.errors:
                print(f"\n{result.file_path}:")
                for error in result.errors:
                    line_info = f":{error['line']}" if 'line' in error else ""
                    path_info = f" (path={error['json_path'] or '/'})" if 'json_path' in error else ""
                    print(f"  ERROR{line_info}: {error['message']}{path_info}")


def main(argv: List[str] | None = None) -> None:
    """Main entry point for the checker CLI."""
    parser = argparse.ArgumentParser(
        description='Check JSON/YAML documents against a MongoDB $jsonSchema file',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        '--schema',
        required=True,
        help='Schema file (JSON or YAML), either the bare schema or {"$jsonSchema": ...}',
    )
    parser.add_argument(
        'paths',
        nargs='*',
        default=[],
        help='Instance document files to check (default: only compile the schema)',
    )
    parser.add_argument(
        '--many',
        action='store_true',
        help='Treat a top-level array in an instance file as several documents',
    )
    parser.add_argument(
        '--no-lint',
        action='store_true',
        help='Skip the meta-schema lint of the schema file',
    )
    parser.add_argument(
        '--format',
        choices=['human', 'json', 'github-actions'],
        default='human',
        help='Output format (default: human)',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging',
    )

    args = parser.parse_args(argv)

    config = validator_config
    if args.verbose:
        config = dataclasses.replace(config, log_level='DEBUG')
    if args.format != 'human':
        # keep stdout machine-readable
        config = dataclasses.replace(config, print_level='DEBUG')
    config.set_logging()

    lint_schema = False if args.no_lint else None
    results = check_files(args.schema, args.paths, many=args.many, lint_schema=lint_schema)

    print_results(results, args.format)

    # Exit with error code if any errors found
    total_errors = sum(len(r.errors) for r in results)
    if total_errors > 0:
        sys.exit(1)
    if args.format == 'human':
        documents = sum(r.documents_checked for r in results)
        print(f"Check succeeded: {documents} document(s) conform to the schema.")
    sys.exit(0)


if __name__ == '__main__':
    main()
