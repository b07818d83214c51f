"""
Unit tests for the method declaration checker.
"""

from use_case_validator.checks.method_declaration import MethodDeclarationChecker
from use_case_validator.models.review import ViolationKind


EXPECTED_MESSAGE = "This class must contain only one public method called `call`"


class TestMethodDeclarationChecker:
    """Unit tests for MethodDeclarationChecker."""

    def setup_method(self):
        """Set up test fixtures."""
        self.checker = MethodDeclarationChecker("call")

    def test_required_method_present(self, make_source, valid_use_case):
        result = self.checker.check(make_source(valid_use_case))

        assert result.ok

    def test_anchored_on_other_method(self, make_source):
        source = make_source(
            "import 'package:app/app.dart';\n"
            "\n"
            "class GetUserUseCase {\n"
            "\n"
            "  Future<void> execute() {\n"
            "  }\n"
            "}\n"
        )

        result = self.checker.check(source)

        assert len(result.diagnostics) == 1
        diagnostic = result.diagnostics[0]
        assert diagnostic.line == 5
        assert diagnostic.body == EXPECTED_MESSAGE
        assert not diagnostic.has_suggestion
        assert result.violations == [ViolationKind.INCORRECT_PUBLIC_METHOD]

    def test_no_method_at_all(self, make_source):
        source = make_source("class GetUserUseCase {\n}\n")

        result = self.checker.check(source)

        assert len(result.diagnostics) == 1
        assert result.diagnostics[0].line == 1
        assert result.diagnostics[0].body == EXPECTED_MESSAGE
        assert result.violations == [ViolationKind.INCORRECT_PUBLIC_METHOD]

    def test_name_must_be_a_whole_token(self, make_source):
        """``recall(`` does not count as a ``call`` declaration."""
        source = make_source(
            "class GetUserUseCase {\n"
            "  Future<void> recall() async {}\n"
            "}\n"
        )

        result = self.checker.check(source)

        assert result.violations == [ViolationKind.INCORRECT_PUBLIC_METHOD]
        assert result.diagnostics[0].line == 2

    def test_method_on_class_declaration_line(self, make_source):
        checker = MethodDeclarationChecker("compute")
        source = make_source("class MathUtilsUseCase { compute() {} other() {} }")

        assert checker.check(source).ok

    def test_method_name_is_matched_literally(self, make_source):
        checker = MethodDeclarationChecker("c.ll")
        source = make_source("class GetUserUseCase {\n  void call() {}\n}\n")

        result = checker.check(source)

        assert result.violations == [ViolationKind.INCORRECT_PUBLIC_METHOD]
        assert result.diagnostics[0].body == (
            "This class must contain only one public method called `c.ll`"
        )

    def test_extra_methods_are_not_reported(self, make_source):
        source = make_source(
            "class GetUserUseCase {\n"
            "  Future<User> call(String id) async {}\n"
            "  void helper() {}\n"
            "}\n"
        )

        assert self.checker.check(source).ok
