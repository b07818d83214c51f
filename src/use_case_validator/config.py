"""
Configuration Management

시스템 설정 관리
"""

import os
import yaml
from dataclasses import dataclass, field
from typing import Optional, Dict, Any
from pathlib import Path
import logging

from .checks.naming import DEFAULT_CLASS_SUFFIX, DEFAULT_FILE_SUFFIX


def _get_input(name: str, default: Optional[str] = None) -> Optional[str]:
    """GitHub Actions 입력값 조회 (INPUT_<NAME> 환경 변수)"""
    value = os.getenv(f"INPUT_{name.replace(' ', '_').upper()}")
    if value is None or value == "":
        return default
    return value


def _is_true(value: Any) -> bool:
    """"true"/"false" 문자열 입력을 bool로 변환"""
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() == "true"


@dataclass
class ValidatorConfig:
    """유스케이스 검증 설정"""
    method_name: str = ""
    approve_message: str = "All use cases are valid"
    single_class_in_file: bool = True
    include_suggestions: bool = True
    file_suffix: str = DEFAULT_FILE_SUFFIX
    class_suffix: str = DEFAULT_CLASS_SUFFIX
    bot_login: str = "github-actions[bot]"
    workspace: str = "."


@dataclass
class GitHubConfig:
    """GitHub API 설정"""
    token: Optional[str] = None
    api_base_url: str = "https://api.github.com"
    timeout_seconds: int = 30


@dataclass
class LoggingConfig:
    """로깅 설정"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_path: Optional[str] = None
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5


@dataclass
class AppConfig:
    """전체 애플리케이션 설정"""
    validator: ValidatorConfig = field(default_factory=ValidatorConfig)
    github: GitHubConfig = field(default_factory=GitHubConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    debug: bool = False

    @classmethod
    def from_env(cls) -> "AppConfig":
        """환경 변수 (GitHub Actions 입력 포함)에서 설정 로드"""
        return cls(
            validator=ValidatorConfig(
                method_name=_get_input("method-name", ""),
                approve_message=_get_input("approve-message", "All use cases are valid"),
                single_class_in_file=_is_true(_get_input("single-class-in-file", "true")),
                include_suggestions=_is_true(_get_input("include-suggestions", "true")),
                file_suffix=_get_input("file-suffix", DEFAULT_FILE_SUFFIX),
                class_suffix=_get_input("class-suffix", DEFAULT_CLASS_SUFFIX),
                bot_login=os.getenv("BOT_LOGIN", "github-actions[bot]"),
                workspace=os.getenv("GITHUB_WORKSPACE", "."),
            ),
            github=GitHubConfig(
                token=_get_input("github-token", os.getenv("GITHUB_TOKEN")),
                api_base_url=os.getenv("GITHUB_API_URL", "https://api.github.com"),
                timeout_seconds=int(os.getenv("GITHUB_TIMEOUT", "30")),
            ),
            logging=LoggingConfig(
                level=os.getenv("LOG_LEVEL", "INFO"),
                format=os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
                file_path=os.getenv("LOG_FILE"),
                max_file_size=int(os.getenv("LOG_MAX_SIZE", str(10 * 1024 * 1024))),
                backup_count=int(os.getenv("LOG_BACKUP_COUNT", "5")),
            ),
            debug=_is_true(os.getenv("DEBUG", "false")),
        )

    @classmethod
    def from_yaml(cls, config_path: str) -> "AppConfig":
        """YAML 파일에서 설정 로드"""
        config_file = Path(config_path)
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_file, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}

        validator_data = dict(config_data.get('validator', {}))
        for flag in ('single_class_in_file', 'include_suggestions'):
            if flag in validator_data:
                validator_data[flag] = _is_true(validator_data[flag])

        return cls(
            validator=ValidatorConfig(**validator_data),
            github=GitHubConfig(**config_data.get('github', {})),
            logging=LoggingConfig(**config_data.get('logging', {})),
            debug=config_data.get('debug', False),
        )

    def validate(self) -> None:
        """설정 유효성 검사"""
        errors = []

        # 필수 입력 확인
        if not self.validator.method_name.strip():
            errors.append("Method name is required")

        if not self.github.token:
            errors.append("GitHub token is required")

        if not self.validator.file_suffix:
            errors.append("File suffix cannot be empty")

        if self.github.timeout_seconds <= 0:
            errors.append("Timeout must be positive")

        # 로그 레벨 검증
        valid_log_levels = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
        if self.logging.level.upper() not in valid_log_levels:
            errors.append(f"Invalid log level: {self.logging.level}")

        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

    def to_dict(self) -> Dict[str, Any]:
        """설정을 딕셔너리로 변환"""
        return {
            'validator': {
                'method_name': self.validator.method_name,
                'approve_message': self.validator.approve_message,
                'single_class_in_file': self.validator.single_class_in_file,
                'include_suggestions': self.validator.include_suggestions,
                'file_suffix': self.validator.file_suffix,
                'class_suffix': self.validator.class_suffix,
                'bot_login': self.validator.bot_login,
                'workspace': self.validator.workspace,
            },
            'github': {
                'api_base_url': self.github.api_base_url,
                'timeout_seconds': self.github.timeout_seconds,
                # 보안상 토큰은 제외
            },
            'logging': {
                'level': self.logging.level,
                'format': self.logging.format,
                'file_path': self.logging.file_path,
                'max_file_size': self.logging.max_file_size,
                'backup_count': self.logging.backup_count,
            },
            'debug': self.debug,
        }


class ConfigManager:
    """설정 관리자"""

    def __init__(self, config: Optional[AppConfig] = None):
        self._config = config or AppConfig.from_env()
        self._config.validate()
        self._setup_logging()

    @property
    def config(self) -> AppConfig:
        """현재 설정 반환"""
        return self._config

    def _setup_logging(self) -> None:
        """로깅 설정"""
        level = logging.DEBUG if self._config.debug else getattr(logging, self._config.logging.level.upper())
        logging.basicConfig(
            level=level,
            format=self._config.logging.format,
        )

        # 파일 로깅이 설정된 경우 로테이션 설정
        if self._config.logging.file_path:
            from logging.handlers import RotatingFileHandler

            handler = RotatingFileHandler(
                self._config.logging.file_path,
                maxBytes=self._config.logging.max_file_size,
                backupCount=self._config.logging.backup_count,
            )
            handler.setFormatter(logging.Formatter(self._config.logging.format))

            # 루트 로거에 핸들러 추가
            root_logger = logging.getLogger()
            root_logger.addHandler(handler)
