"""
Unit tests for the class declaration checker.
"""

from unittest.mock import patch

import pytest

from use_case_validator.checks.class_declaration import ClassDeclarationChecker, ClassDeclarationMatch
from use_case_validator.checks.locate import NOT_FOUND
from use_case_validator.checks.messages import (
    INVALID_CLASS_MESSAGE, NO_CLASS_MESSAGE, invalid_class_name_message
)
from use_case_validator.models.review import ViolationKind


class TestClassDeclarationChecker:
    """Unit tests for ClassDeclarationChecker."""

    def setup_method(self):
        """Set up test fixtures."""
        self.checker = ClassDeclarationChecker()

    def test_correctly_named_class(self, make_source):
        source = make_source("class FooBarUseCase {\n  Future<void> call() async {}\n}\n")

        result = self.checker.check(source, "FooBarUseCase")

        assert result.diagnostics == []
        assert result.violations == []
        assert result.ok

    def test_no_class_declaration(self, make_source):
        source = make_source("void main() {\n  print('hi');\n}\n")

        result = self.checker.check(source, "FooUseCase")

        assert len(result.diagnostics) == 1
        diagnostic = result.diagnostics[0]
        assert diagnostic.line == 1
        assert diagnostic.body == NO_CLASS_MESSAGE
        assert diagnostic.path == source.path
        assert result.violations == [ViolationKind.NO_USE_CASE_CLASS]

    def test_brace_on_next_line_is_not_a_declaration(self, make_source):
        source = make_source("class FooUseCase\n{\n}\n")

        result = self.checker.check(source, "FooUseCase")

        assert result.violations == [ViolationKind.NO_USE_CASE_CLASS]
        assert result.diagnostics[0].body == NO_CLASS_MESSAGE

    def test_wrong_name_gets_suggestion(self, make_source):
        source = make_source(
            "import 'package:app/app.dart';\n"
            "\n"
            "class FooUseCase {\n"
            "  void call() {}\n"
            "}\n"
        )

        result = self.checker.check(source, "BarUseCase")

        assert len(result.diagnostics) == 1
        diagnostic = result.diagnostics[0]
        assert diagnostic.line == 3
        assert diagnostic.body == (
            INVALID_CLASS_MESSAGE
            + "\n```suggestion\n"
            + "class BarUseCase {"
            + "\n```"
        )
        assert diagnostic.has_suggestion
        assert result.violations == [ViolationKind.NO_USE_CASE_CLASS]

    def test_suggestion_replaces_first_occurrence_only(self, make_source):
        source = make_source("class FooUseCase extends Base<FooUseCase> {\n}\n")

        result = self.checker.check(source, "BarUseCase")

        assert "class BarUseCase extends Base<FooUseCase> {" in result.diagnostics[0].body

    def test_multiple_classes_reported_when_single_class_required(self, make_source):
        source = make_source(
            "class FooUseCase {\n"
            "}\n"
            "class Helper {\n"
            "}\n"
        )

        result = self.checker.check(source, "FooUseCase")

        assert len(result.diagnostics) == 1
        assert result.diagnostics[0].line == 1
        assert result.diagnostics[0].body == (
            "The `lib/domain/get_user_use_case.dart` must not contain more than one class."
        )
        assert result.violations == [ViolationKind.MULTIPLE_CLASSES]

    def test_multiple_classes_and_wrong_name_both_reported(self, make_source):
        source = make_source(
            "class BarUseCase {\n"
            "}\n"
            "class Helper {\n"
            "}\n"
        )

        result = self.checker.check(source, "FooUseCase")

        assert [d.line for d in result.diagnostics] == [1, 1]
        assert "must not contain more than one class" in result.diagnostics[0].body
        assert "class FooUseCase {" in result.diagnostics[1].body
        assert result.violations == [
            ViolationKind.MULTIPLE_CLASSES,
            ViolationKind.NO_USE_CASE_CLASS,
        ]

    def test_multiple_classes_allowed(self, make_source):
        checker = ClassDeclarationChecker(single_class_required=False)
        source = make_source("class FooUseCase {\n}\nclass Helper {\n}\n")

        result = checker.check(source, "FooUseCase")

        assert result.ok

    def test_use_case_class_preferred_over_first_class(self, make_source):
        checker = ClassDeclarationChecker(single_class_required=False)
        source = make_source(
            "class Helper {\n"
            "}\n"
            "\n"
            "class WrongUseCase {\n"
            "}\n"
        )

        result = checker.check(source, "RightUseCase")

        assert len(result.diagnostics) == 1
        assert result.diagnostics[0].line == 4
        assert "class RightUseCase {" in result.diagnostics[0].body

    def test_first_class_used_without_use_case_class(self, make_source):
        checker = ClassDeclarationChecker(single_class_required=False)
        source = make_source("\nclass Helper {\n}\nclass Other {\n}\n")

        result = checker.check(source, "RightUseCase")

        assert result.diagnostics[0].line == 2
        assert "```suggestion\nclass RightUseCase {\n```" in result.diagnostics[0].body

    def test_exact_match_later_in_file_is_success(self, make_source):
        checker = ClassDeclarationChecker(single_class_required=False)
        source = make_source(
            "class OtherUseCase {\n"
            "}\n"
            "class RightUseCase {\n"
            "}\n"
        )

        assert checker.check(source, "RightUseCase").ok

    def test_location_uses_first_line_mentioning_the_name(self, make_source):
        """A comment echoing the class name wins over the declaration."""
        source = make_source(
            "// WrongUseCase loads the user\n"
            "class WrongUseCase {\n"
            "}\n"
        )

        result = self.checker.check(source, "RightUseCase")

        assert result.diagnostics[0].line == 1
        assert "class RightUseCase {" in result.diagnostics[0].body

    def test_plain_message_without_suggestions(self, make_source):
        checker = ClassDeclarationChecker(include_suggestions=False)
        source = make_source("class FooUseCase {\n}\n")

        result = checker.check(source, "BarUseCase")

        assert result.diagnostics[0].body == (
            INVALID_CLASS_MESSAGE + "It is `FooUseCase`, but should be `BarUseCase`."
        )
        assert not result.diagnostics[0].has_suggestion

    def test_declaration_spans_to_last_brace_on_line(self, make_source):
        source = make_source("class MathHelperUseCase { compute() {} }")

        declarations = self.checker.find_declarations(source)

        assert len(declarations) == 1
        assert declarations[0].declaration == "class MathHelperUseCase { compute() {"
        assert declarations[0].class_name == "MathHelperUseCase"
        assert declarations[0].line_index == 0

    def test_extends_clause(self, make_source):
        source = make_source("abstract class BaseUseCase extends Object {\n}\n")

        declarations = self.checker.find_declarations(source)

        assert declarations[0].class_name == "BaseUseCase"

    @pytest.mark.parametrize("class_suffix, class_name", [
        ("Interactor", "CreateOrderInteractor"),
        ("", "CreateOrder"),
    ])
    def test_custom_class_suffix(self, make_source, class_suffix, class_name):
        checker = ClassDeclarationChecker(class_suffix=class_suffix)
        source = make_source(f"class {class_name} {{\n}}\n")

        assert checker.check(source, class_name).ok

    def test_empty_class_name_has_no_suggestion(self, make_source):
        """Extra spaces after ``class`` leave an empty name to rename."""
        source = make_source("// intro\nclass   Bar {\n}\n")

        result = self.checker.check(source, "FooUseCase")

        assert len(result.diagnostics) == 1
        diagnostic = result.diagnostics[0]
        assert diagnostic.line == 1
        assert diagnostic.body == (
            "This use case file does not contain a valid use case class.\n"
            "It should be `FooUseCase`."
        )
        assert not diagnostic.has_suggestion
        assert result.violations == [ViolationKind.NO_USE_CASE_CLASS]

    def test_unlocated_declarations_report_line_one(self, make_source):
        source = make_source("class BarUseCase {\n}\n")
        unlocated = ClassDeclarationMatch(
            declaration="class BarUseCase {", class_name="BarUseCase", line_index=NOT_FOUND
        )

        with patch.object(self.checker, "find_declarations", return_value=[unlocated]):
            result = self.checker.check(source, "FooUseCase")

        assert len(result.diagnostics) == 1
        diagnostic = result.diagnostics[0]
        assert diagnostic.line == 1
        assert diagnostic.body == INVALID_CLASS_MESSAGE + "It should be `FooUseCase`."
        assert not diagnostic.has_suggestion
        assert result.violations == [ViolationKind.NO_USE_CASE_CLASS]


class TestInvalidClassNameMessage:
    """Unit tests for invalid_class_name_message."""

    def test_without_real_name(self):
        assert invalid_class_name_message("FooUseCase", add_suggestion=False) == (
            INVALID_CLASS_MESSAGE + "It should be `FooUseCase`."
        )

    def test_suggestion_needs_real_name(self):
        message = invalid_class_name_message("FooUseCase", "", "class  Bar {")

        assert message == INVALID_CLASS_MESSAGE + "It should be `FooUseCase`."
