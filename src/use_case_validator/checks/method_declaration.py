"""
Method Declaration Checker

Verifies that a use case file declares the required public method.
"""

import re
import logging

from ..models.review import CheckResult, Diagnostic, ViolationKind
from ..models.source_file import SourceFile
from .locate import find_first_line, to_line_number
from .messages import must_contain_method_message


logger = logging.getLogger(__name__)

# "<indent> <type> <name>(" on a single line
OTHER_METHOD_PATTERN = re.compile(r'([ \t]*) (.+) (.+)\(')


class MethodDeclarationChecker:
    """
    Checks for a declaration of the required method.

    When the method is missing the comment is anchored on the first other
    method-like declaration, but the message always asks for the required
    method; no rename is suggested.
    """

    def __init__(self, method_name: str):
        self.method_name = method_name
        self.method_pattern = re.compile(rf'([ \t]*) (.+) ({re.escape(method_name)})\(')

    def check(self, source: SourceFile) -> CheckResult:
        """
        Check the method declarations of a single file.

        Args:
            source: File to check

        Returns:
            CheckResult with at most one diagnostic
        """
        logger.debug(f"Checking method declarations in {source.path}")
        result = CheckResult()

        if self.method_pattern.search(source.content):
            logger.info(f"{source.path}: the {self.method_name} method is correctly declared")
            return result

        message = must_contain_method_message(self.method_name)
        result.violations.append(ViolationKind.INCORRECT_PUBLIC_METHOD)

        other_declaration = OTHER_METHOD_PATTERN.search(source.content)
        if other_declaration is None:
            logger.info(f"{source.path}: no {self.method_name} method and no other public method")
            result.diagnostics.append(Diagnostic(path=source.path, line=1, body=message))
            return result

        matched_text = other_declaration.group(0)
        logger.info(f"{source.path}: no {self.method_name} method, found {matched_text.strip()!r} instead")

        line = to_line_number(find_first_line(source.lines, matched_text))
        result.diagnostics.append(Diagnostic(path=source.path, line=line, body=message))
        return result
