"""
Data Models

Use Case Validator 시스템의 핵심 데이터 모델들
"""

from .source_file import ChangedFile, SourceFile, SourceFileError
from .review import (
    CheckResult,
    Diagnostic,
    FileValidationResult,
    ValidationReport,
    ValidationRun,
    ViolationKind,
)

__all__ = [
    "ChangedFile",
    "SourceFile",
    "SourceFileError",
    "CheckResult",
    "Diagnostic",
    "FileValidationResult",
    "ValidationReport",
    "ValidationRun",
    "ViolationKind",
]
