"""
Use Case Validator

Runs the class and method checkers over every use case file of a
pull request and collects the results in processing order.
"""

import asyncio
import logging
from typing import Callable, Iterable, Optional

from ..models.review import CheckResult, FileValidationResult, ValidationReport
from ..models.source_file import ChangedFile, SourceFile
from .class_declaration import ClassDeclarationChecker
from .method_declaration import MethodDeclarationChecker
from .naming import DEFAULT_CLASS_SUFFIX, DEFAULT_FILE_SUFFIX, derive_expected_class_name, is_use_case_path


logger = logging.getLogger(__name__)

SourceReader = Callable[[str], SourceFile]


class UseCaseValidator:
    """
    Validates use case files against the naming convention.

    Each file is checked for a class named after the file and for the
    required public method. Checkers keep no state between files, so the
    same input always produces the same report.
    """

    def __init__(
        self,
        method_name: str,
        single_class_in_file: bool = True,
        include_suggestions: bool = True,
        file_suffix: str = DEFAULT_FILE_SUFFIX,
        class_suffix: str = DEFAULT_CLASS_SUFFIX,
    ):
        """
        Initialize the validator.

        Args:
            method_name: Name of the single public method a use case exposes
            single_class_in_file: Report files declaring more than one class
            include_suggestions: Attach rename suggestions to class comments
            file_suffix: Suffix identifying use case files
            class_suffix: Suffix of use case class names
        """
        self.file_suffix = file_suffix
        self.class_suffix = class_suffix
        self.class_checker = ClassDeclarationChecker(
            class_suffix=class_suffix,
            single_class_required=single_class_in_file,
            include_suggestions=include_suggestions,
        )
        self.method_checker = MethodDeclarationChecker(method_name)

    def is_use_case_file(self, changed_file: ChangedFile) -> bool:
        """Check whether a changed file should be validated."""
        if not is_use_case_path(changed_file.path, self.file_suffix):
            return False
        if changed_file.is_removed:
            logger.debug(f"Skipping removed file: {changed_file.path}")
            return False
        return True

    def expected_class_name(self, file_name: str) -> str:
        return derive_expected_class_name(file_name, self.file_suffix, self.class_suffix)

    def validate_source(
        self,
        source: SourceFile,
        changed_file: Optional[ChangedFile] = None,
    ) -> FileValidationResult:
        """
        Validate the text of a single use case file.

        Args:
            source: File contents
            changed_file: PR file descriptor (derived from the path if omitted)

        Returns:
            FileValidationResult with class diagnostics before method diagnostics
        """
        changed_file = changed_file or ChangedFile(path=source.path)
        expected_class_name = self.expected_class_name(changed_file.file_name)

        result = CheckResult()
        result.extend(self.class_checker.check(source, expected_class_name))
        result.extend(self.method_checker.check(source))

        return FileValidationResult(
            changed_file=changed_file,
            expected_class_name=expected_class_name,
            diagnostics=result.diagnostics,
            violations=result.violations,
        )

    async def validate_files(
        self,
        changed_files: Iterable[ChangedFile],
        reader: SourceReader,
    ) -> ValidationReport:
        """
        Validate every use case file, one file at a time.

        Args:
            changed_files: Files changed in the pull request, in API order
            reader: Callable returning the current contents of a path

        Returns:
            ValidationReport in file order

        Raises:
            SourceFileError: If any file cannot be read; the run is abandoned
        """
        report = ValidationReport()

        for changed_file in changed_files:
            if not self.is_use_case_file(changed_file):
                continue

            logger.info(f"Processing {changed_file.path}")
            source = await asyncio.to_thread(reader, changed_file.path)
            logger.debug(f"File content:\n{source.content}")

            file_result = self.validate_source(source, changed_file)
            report.add(file_result)

            if file_result.is_valid:
                logger.info(f"{changed_file.path}: all valid")
            else:
                logger.info(
                    f"{changed_file.path}: {', '.join(v.value for v in file_result.violations)}"
                )

        logger.info(f"Validated {len(report.results)} use case files, {len(report.diagnostics)} comments")
        return report
