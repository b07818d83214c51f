#!/usr/bin/env python3
"""
Local Validation Demo

Runs the use case checks on files from the local checkout and prints the
comments the action would post.

Usage:
    python examples/validate_local_files.py <method_name> <file> [<file> ...]

Example:
    python examples/validate_local_files.py call lib/domain/get_user_use_case.dart
"""

import sys
import asyncio
import logging

from use_case_validator.checks import UseCaseValidator
from use_case_validator.formatting import SummaryFormatter
from use_case_validator.models import ChangedFile, SourceFile, SourceFileError


def setup_logging():
    """Set up logging configuration."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def main():
    """Main demo function."""
    setup_logging()

    if len(sys.argv) < 3:
        print("Usage: python validate_local_files.py <method_name> <file> [<file> ...]")
        sys.exit(1)

    method_name = sys.argv[1]
    changed_files = [ChangedFile(path=path) for path in sys.argv[2:]]

    validator = UseCaseValidator(method_name=method_name)

    try:
        report = asyncio.run(validator.validate_files(changed_files, SourceFile.read))
    except SourceFileError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(SummaryFormatter().format_summary(report))
    print()

    for diagnostic in report.diagnostics:
        print(f"{diagnostic.path}:{diagnostic.line}")
        print(diagnostic.body)
        print()

    sys.exit(1 if report.has_issues else 0)


if __name__ == "__main__":
    main()
