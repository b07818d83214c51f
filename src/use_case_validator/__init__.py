"""
Use Case Validator

Pull request 변경 파일의 유스케이스 클래스/메서드 규칙을 검사하고
GitHub 리뷰 코멘트를 남기는 CI 검증기
"""

__version__ = "1.0.0"

from .api import UseCaseValidatorAPI, RunRequest
from .checks import UseCaseValidator, derive_expected_class_name

__all__ = ["UseCaseValidatorAPI", "RunRequest", "UseCaseValidator", "derive_expected_class_name"]
