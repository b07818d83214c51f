"""
Review Data Models

유스케이스 검증 결과와 리뷰 코멘트 관련 데이터 모델들
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional
from pydantic import BaseModel, validator
import uuid

from .source_file import ChangedFile


class ViolationKind(Enum):
    """파일 단위 위반 분류 (요약 테이블에 표시)"""
    NO_USE_CASE_CLASS = "No valid use case class"
    MULTIPLE_CLASSES = "Multiple classes in a single file"
    INCORRECT_PUBLIC_METHOD = "Incorrect public method"


@dataclass(frozen=True)
class Diagnostic:
    """특정 파일/라인에 고정되는 리뷰 코멘트"""
    path: str
    line: int
    body: str
    side: str = 'RIGHT'  # 'RIGHT' for new code, 'LEFT' for old code

    def __post_init__(self):
        """데이터 검증"""
        valid_sides = {'RIGHT', 'LEFT'}
        if self.side not in valid_sides:
            raise ValueError(f"Invalid side: {self.side}")

        if self.line <= 0:
            raise ValueError("Line number must be positive")

        if not self.body.strip():
            raise ValueError("Comment body cannot be empty")

    @property
    def has_suggestion(self) -> bool:
        """제안 블록 포함 여부"""
        return "```suggestion" in self.body

    def to_github_payload(self) -> Dict[str, object]:
        """GitHub create review API의 comments 항목 형식으로 변환"""
        return {
            'path': self.path,
            'line': self.line,
            'side': self.side,
            'body': self.body,
        }


@dataclass
class CheckResult:
    """단일 검사기의 결과"""
    diagnostics: List[Diagnostic] = field(default_factory=list)
    violations: List[ViolationKind] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.diagnostics and not self.violations

    def extend(self, other: "CheckResult") -> None:
        """다른 결과를 순서대로 이어붙임"""
        self.diagnostics.extend(other.diagnostics)
        self.violations.extend(other.violations)


@dataclass
class FileValidationResult:
    """파일 하나의 검증 결과"""
    changed_file: ChangedFile
    expected_class_name: str
    diagnostics: List[Diagnostic]
    violations: List[ViolationKind]

    @property
    def file_name(self) -> str:
        return self.changed_file.file_name

    @property
    def is_valid(self) -> bool:
        """위반 마커가 없으면 완전히 유효"""
        return not self.violations


@dataclass
class ValidationReport:
    """Pull request 전체 검증 결과"""
    results: List[FileValidationResult] = field(default_factory=list)

    def add(self, result: FileValidationResult) -> None:
        self.results.append(result)

    @property
    def diagnostics(self) -> List[Diagnostic]:
        """파일 순서, 검사기 순서대로 누적된 코멘트 (중복 제거 없음)"""
        collected = []
        for result in self.results:
            collected.extend(result.diagnostics)
        return collected

    @property
    def has_issues(self) -> bool:
        return any(result.diagnostics for result in self.results)

    @property
    def files_with_issues(self) -> List[str]:
        """이슈가 있는 파일 목록"""
        return [r.changed_file.path for r in self.results if not r.is_valid]

    def get_files_by_violation(self, kind: ViolationKind) -> List[str]:
        """특정 위반을 가진 파일들 반환"""
        return [r.changed_file.path for r in self.results if kind in r.violations]


@dataclass
class ValidationRun:
    """검증 실행 전체 결과"""
    run_id: str
    repository: str
    pr_number: int
    status: str
    report: ValidationReport
    processing_time: float
    created_at: datetime
    review_event: Optional[str] = None
    error: Optional[str] = None

    def __post_init__(self):
        """데이터 검증"""
        if self.pr_number <= 0:
            raise ValueError("PR number must be positive")

        if '/' not in self.repository:
            raise ValueError("Repository must be in format 'owner/repo'")

        valid_statuses = {'passed', 'changes_requested', 'failed'}
        if self.status not in valid_statuses:
            raise ValueError(f"Invalid status: {self.status}")

    @classmethod
    def create_new(
        cls,
        repository: str,
        pr_number: int,
        status: str,
        report: ValidationReport,
        processing_time: float,
        review_event: Optional[str] = None,
        error: Optional[str] = None,
    ) -> "ValidationRun":
        """새로운 실행 결과 생성"""
        return cls(
            run_id=str(uuid.uuid4()),
            repository=repository,
            pr_number=pr_number,
            status=status,
            report=report,
            processing_time=processing_time,
            created_at=datetime.now(),
            review_event=review_event,
            error=error,
        )

    @property
    def succeeded(self) -> bool:
        return self.status == 'passed'


# Pydantic models for API validation
class ValidationRequest(BaseModel):
    """API 요청용 검증 요청 모델"""
    repository: str
    pr_number: int
    github_token: str
    method_name: str
    approve_message: str = "All use cases are valid"
    single_class_in_file: str = "true"

    @validator('repository')
    def validate_repository(cls, v):
        if v.count('/') != 1:
            raise ValueError('Repository must be in format "owner/repo"')
        return v

    @validator('pr_number')
    def validate_pr_number(cls, v):
        if v <= 0:
            raise ValueError('PR number must be positive')
        return v

    @validator('github_token', 'method_name')
    def validate_non_empty(cls, v):
        if not v.strip():
            raise ValueError('Field cannot be empty')
        return v.strip()

    @validator('single_class_in_file')
    def validate_boolean_string(cls, v):
        if v.lower() not in {'true', 'false'}:
            raise ValueError('single_class_in_file must be "true" or "false"')
        return v.lower()


class DiagnosticResponse(BaseModel):
    """API 응답용 Diagnostic 모델"""
    path: str
    line: int
    body: str
    has_suggestion: bool

    class Config:
        from_attributes = True


class FileResultResponse(BaseModel):
    """API 응답용 파일 검증 결과 모델"""
    path: str
    expected_class_name: str
    is_valid: bool
    violations: List[str]


class ValidationRunResponse(BaseModel):
    """API 응답용 실행 결과 모델"""
    run_id: str
    repository: str
    pr_number: int
    status: str
    review_event: Optional[str]
    processing_time: float
    created_at: datetime
    files: List[FileResultResponse]
    comments: List[DiagnosticResponse]
    error: Optional[str] = None

    @classmethod
    def from_run(cls, run: ValidationRun) -> "ValidationRunResponse":
        """ValidationRun을 응답 모델로 변환"""
        return cls(
            run_id=run.run_id,
            repository=run.repository,
            pr_number=run.pr_number,
            status=run.status,
            review_event=run.review_event,
            processing_time=run.processing_time,
            created_at=run.created_at,
            files=[
                FileResultResponse(
                    path=r.changed_file.path,
                    expected_class_name=r.expected_class_name,
                    is_valid=r.is_valid,
                    violations=[v.value for v in r.violations],
                )
                for r in run.report.results
            ],
            comments=[DiagnosticResponse.model_validate(d) for d in run.report.diagnostics],
            error=run.error,
        )
