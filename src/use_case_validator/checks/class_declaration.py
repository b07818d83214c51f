"""
Class Declaration Checker

Finds class declarations in a use case file, picks the primary one and
reports when it is missing, duplicated or named differently from the
name derived from the file.
"""

import re
import logging
from dataclasses import dataclass
from typing import List, Optional

from ..models.review import CheckResult, Diagnostic, ViolationKind
from ..models.source_file import SourceFile
from .locate import NOT_FOUND, find_first_line, to_line_number
from .messages import NO_CLASS_MESSAGE, invalid_class_name_message, multiple_classes_message
from .naming import DEFAULT_CLASS_SUFFIX


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassDeclarationMatch:
    """A class declaration found in the file text."""
    declaration: str
    class_name: str
    line_index: int

    @property
    def is_located(self) -> bool:
        return self.line_index != NOT_FOUND


class ClassDeclarationChecker:
    """
    Checks that a use case file declares a class with the expected name.

    Declarations are matched with a regular expression over the whole file
    text; there is no parsing, so declarations inside comments or strings
    count as well.
    """

    def __init__(
        self,
        class_suffix: str = DEFAULT_CLASS_SUFFIX,
        single_class_required: bool = True,
        include_suggestions: bool = True,
    ):
        """
        Initialize class declaration checker.

        Args:
            class_suffix: Suffix every use case class name ends with
            single_class_required: Report files declaring more than one class
            include_suggestions: Attach a ``suggestion`` block renaming the class
        """
        self.class_suffix = class_suffix
        self.single_class_required = single_class_required
        self.include_suggestions = include_suggestions

        # "class <name> ... {" on a single line
        self.class_declaration_pattern = re.compile(r'(class) (.+) (.*)\{')

    def find_declarations(self, source: SourceFile) -> List[ClassDeclarationMatch]:
        """Return every class declaration in order of appearance."""
        declarations = []

        for match in self.class_declaration_pattern.finditer(source.content):
            declaration = match.group(0)
            class_name = declaration.split(" ")[1]
            declarations.append(ClassDeclarationMatch(
                declaration=declaration,
                class_name=class_name,
                line_index=find_first_line(source.lines, class_name),
            ))

        return declarations

    def check(self, source: SourceFile, expected_class_name: str) -> CheckResult:
        """
        Check the class declarations of a single file.

        Args:
            source: File to check
            expected_class_name: Class name derived from the file name

        Returns:
            CheckResult with the diagnostics and violation markers
        """
        logger.debug(f"Checking class declarations in {source.path}")
        result = CheckResult()

        declarations = self.find_declarations(source)

        if not declarations:
            logger.info(f"{source.path}: no class declarations")
            result.diagnostics.append(Diagnostic(path=source.path, line=1, body=NO_CLASS_MESSAGE))
            result.violations.append(ViolationKind.NO_USE_CASE_CLASS)
            return result

        if self.single_class_required and len(declarations) > 1:
            logger.info(f"{source.path}: {len(declarations)} class declarations")
            result.diagnostics.append(Diagnostic(
                path=source.path,
                line=1,
                body=multiple_classes_message(source.path),
            ))
            result.violations.append(ViolationKind.MULTIPLE_CLASSES)

        logger.debug(f"Expected class name: {expected_class_name}")

        first_class: Optional[ClassDeclarationMatch] = None
        first_use_case_class: Optional[ClassDeclarationMatch] = None

        for declaration in declarations:
            if first_class is None and declaration.is_located:
                first_class = declaration

            if not declaration.class_name.endswith(self.class_suffix):
                continue

            if first_use_case_class is None and declaration.is_located:
                first_use_case_class = declaration

            if declaration.class_name == expected_class_name:
                logger.info(f"{source.path}: use case has the correct name {expected_class_name}")
                return result

        logger.info(f"{source.path}: no class named {expected_class_name}")

        candidate = first_use_case_class or first_class
        if candidate:
            body = invalid_class_name_message(
                expected_class_name,
                candidate.class_name,
                candidate.declaration,
                add_suggestion=self.include_suggestions,
            )
            line = to_line_number(candidate.line_index)
        else:
            body = invalid_class_name_message(expected_class_name, add_suggestion=False)
            line = 1

        result.diagnostics.append(Diagnostic(path=source.path, line=line, body=body))
        result.violations.append(ViolationKind.NO_USE_CASE_CLASS)
        return result
