"""
Source File Models

Changed-file descriptors from the pull request and the on-disk
source text that the checkers analyze.
"""

import posixpath
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union


class SourceFileError(Exception):
    """A changed file could not be read from the workspace"""
    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path
        self.reason = reason


@dataclass(frozen=True)
class ChangedFile:
    """Pull request의 변경 파일"""
    path: str
    status: str = 'modified'
    contents_url: Optional[str] = None

    def __post_init__(self):
        """데이터 검증"""
        valid_statuses = {'added', 'modified', 'removed', 'renamed', 'copied', 'changed', 'unchanged'}
        if self.status not in valid_statuses:
            raise ValueError(f"Invalid status: {self.status}")
        if not self.path.strip():
            raise ValueError("File path cannot be empty")

    @property
    def file_name(self) -> str:
        """경로의 마지막 구성요소 (base name)"""
        return posixpath.basename(self.path)

    @property
    def is_removed(self) -> bool:
        return self.status == 'removed'


@dataclass(frozen=True)
class SourceFile:
    """분석 대상 소스 파일 (한 번의 분석 동안만 유지)"""
    path: str
    content: str
    lines: List[str] = field(init=False, compare=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, 'lines', self.content.split('\n'))

    @classmethod
    def read(cls, path: str, root: Union[str, Path, None] = None) -> "SourceFile":
        """
        Read a changed file from the checked-out workspace.

        Args:
            path: Repository-relative file path
            root: Workspace directory (default: current directory)

        Returns:
            SourceFile with the decoded text

        Raises:
            SourceFileError: If the file is missing, unreadable or not UTF-8
        """
        file_path = Path(root or '.') / path
        try:
            # 줄바꿈 변환 없이 그대로 디코딩
            content = file_path.read_bytes().decode('utf-8')
        except UnicodeDecodeError as e:
            raise SourceFileError(path, f"not valid UTF-8 ({e.reason})") from e
        except OSError as e:
            raise SourceFileError(path, e.strerror or str(e)) from e

        return cls(path=path, content=content)
