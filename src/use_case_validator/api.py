"""
Main Validator API

Main interface that drives a validation run from the pull request file
list to the posted summary, line comments and approval.
"""

import logging
from datetime import datetime
from dataclasses import dataclass
from functools import partial
from typing import Dict, List, Optional, Tuple

from .checks.validator import UseCaseValidator
from .config import AppConfig
from .formatting.summary import SUMMARY_HEADER, SummaryFormatter
from .github.client import GitHubClient
from .github.context import ActionContext
from .github.parser import PullRequestFileParser
from .models.review import ValidationReport, ValidationRun
from .models.source_file import SourceFile


logger = logging.getLogger(__name__)

ISSUES_FOUND_MESSAGE = "Use case validator has found some issues."


@dataclass
class RunRequest:
    """Request for a pull request validation run."""
    repository: str
    pr_number: int
    github_token: Optional[str] = None

    def __post_init__(self):
        if self.pr_number <= 0:
            raise ValueError("PR number must be positive")
        if self.repository.count('/') != 1:
            raise ValueError("Repository must be in format 'owner/repo'")


class UseCaseValidatorAPI:
    """
    Main Use Case Validator interface.

    Orchestrates a validation run:
    1. List the pull request files and the validator's earlier reviews
    2. Find or create the summary review
    3. Validate every use case file from the workspace
    4. Update the summary and approve or request changes
    """

    def __init__(self, config: Optional[AppConfig] = None):
        """
        Initialize Use Case Validator API.

        Args:
            config: Optional configuration object
        """
        self.config = config or AppConfig.from_env()
        settings = self.config.validator

        self.file_parser = PullRequestFileParser()
        self.validator = UseCaseValidator(
            method_name=settings.method_name,
            single_class_in_file=settings.single_class_in_file,
            include_suggestions=settings.include_suggestions,
            file_suffix=settings.file_suffix,
            class_suffix=settings.class_suffix,
        )
        self.summary_formatter = SummaryFormatter()

    def _create_client(self, token: Optional[str]) -> GitHubClient:
        return GitHubClient(
            token or self.config.github.token,
            base_url=self.config.github.api_base_url,
            timeout=self.config.github.timeout_seconds,
        )

    async def validate_pull_request(self, request: RunRequest) -> ValidationRun:
        """
        Run the validation for one pull request.

        Args:
            request: RunRequest with the pull request to validate

        Returns:
            ValidationRun; status is ``failed`` when any collaborator or
            file read failed
        """
        start_time = datetime.now()
        logger.info(f"Starting validation: {request.repository}#{request.pr_number}")

        try:
            context = ActionContext.from_repository(request.repository, request.pr_number)
            client = self._create_client(request.github_token)

            files_data = client.get_pull_request_files(context.owner, context.repo, context.pr_number)
            if not files_data:
                logger.info("No PR files found")
                return self._create_run(request, start_time, 'passed', ValidationReport())

            changed_files = self.file_parser.parse_files(files_data)

            bot_reviews = self._get_bot_reviews(client, context)
            summary_review_id = self._find_or_create_summary_review(client, context, bot_reviews)

            reader = partial(SourceFile.read, root=self.config.validator.workspace)
            report = await self.validator.validate_files(changed_files, reader)

            if report.results:
                client.update_review(
                    context.owner, context.repo, context.pr_number,
                    summary_review_id,
                    self.summary_formatter.format_summary(report),
                )

            status, review_event = self._submit_verdict(client, context, report, bot_reviews)
            run = self._create_run(request, start_time, status, report, review_event=review_event)

            logger.info(f"Validation completed: {request.repository}#{request.pr_number} ({status})")
            return run

        except Exception as e:
            logger.error(f"Validation failed: {request.repository}#{request.pr_number} - {e}")
            return self._create_run(
                request, start_time, 'failed', ValidationReport(), error=str(e)
            )

    def _get_bot_reviews(self, client: GitHubClient, context: ActionContext) -> List[Dict]:
        """Reviews posted by the validator itself, oldest first."""
        reviews = client.list_reviews(context.owner, context.repo, context.pr_number)
        bot_login = self.config.validator.bot_login
        bot_reviews = [r for r in reviews if (r.get('user') or {}).get('login') == bot_login]

        logger.info(f"Found {len(bot_reviews)} earlier reviews by {bot_login}")
        return bot_reviews

    def _find_or_create_summary_review(
        self,
        client: GitHubClient,
        context: ActionContext,
        bot_reviews: List[Dict]
    ) -> int:
        """Reuse the summary review of an earlier run or post a new one."""
        for review in bot_reviews:
            if SummaryFormatter.is_summary_body(review.get('body')):
                logger.info(f"Reusing summary review {review['id']}")
                return review['id']

        created = client.create_review(
            context.owner, context.repo, context.pr_number,
            event='COMMENT',
            body=SUMMARY_HEADER,
        )
        logger.info(f"Created summary review {created['id']}")
        return created['id']

    def _submit_verdict(
        self,
        client: GitHubClient,
        context: ActionContext,
        report: ValidationReport,
        bot_reviews: List[Dict]
    ) -> Tuple[str, Optional[str]]:
        """Approve a clean pull request or request changes with the line comments."""
        latest_state = None
        if bot_reviews:
            latest_state = (bot_reviews[-1].get('state') or '').lower()
            logger.info(f"State of the latest PR review: {latest_state}")

        if not report.has_issues:
            review_event = None
            if not latest_state or latest_state == 'changes_requested':
                client.create_review(
                    context.owner, context.repo, context.pr_number,
                    event='APPROVE',
                    body=self.config.validator.approve_message,
                )
                review_event = 'APPROVE'

            logger.info("No review comments, considering a successful check")
            return 'passed', review_event

        client.create_review(
            context.owner, context.repo, context.pr_number,
            event='REQUEST_CHANGES',
            comments=report.diagnostics,
        )
        logger.info(f"Requested changes with {len(report.diagnostics)} comments")
        return 'changes_requested', 'REQUEST_CHANGES'

    def _create_run(
        self,
        request: RunRequest,
        start_time: datetime,
        status: str,
        report: ValidationReport,
        review_event: Optional[str] = None,
        error: Optional[str] = None,
    ) -> ValidationRun:
        processing_time = (datetime.now() - start_time).total_seconds()
        return ValidationRun.create_new(
            repository=request.repository,
            pr_number=request.pr_number,
            status=status,
            report=report,
            processing_time=processing_time,
            review_event=review_event,
            error=error,
        )
