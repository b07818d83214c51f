"""Pytest fixtures for use case validator tests."""

from pathlib import Path

import pytest

from use_case_validator.models.source_file import SourceFile


VALID_USE_CASE = """\
import 'package:app/domain/user_repository.dart';

class GetUserUseCase {
  final UserRepository repository;

  GetUserUseCase(this.repository);

  Future<User> call(String id) async {
    return repository.find(id);
  }
}
"""


@pytest.fixture
def make_source():
    """Build a SourceFile from inline text."""
    def _make(content: str, path: str = "lib/domain/get_user_use_case.dart") -> SourceFile:
        return SourceFile(path=path, content=content)
    return _make


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Create a checked-out workspace with use case files."""
    domain = tmp_path / "lib" / "domain"
    domain.mkdir(parents=True)

    (domain / "get_user_use_case.dart").write_text(VALID_USE_CASE, encoding="utf-8")
    (domain / "delete_user_use_case.dart").write_text(
        """\
class RemoveUserUseCase {
  Future<void> execute(String id) async {}
}
""",
        encoding="utf-8",
    )
    (tmp_path / "README.md").write_text("# App\n", encoding="utf-8")

    return tmp_path


@pytest.fixture
def valid_use_case() -> str:
    """Text of a use case file that passes every check."""
    return VALID_USE_CASE
