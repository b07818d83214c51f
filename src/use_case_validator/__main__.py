"""
GitHub Actions entry point.

Usage:
    python -m use_case_validator
"""

import sys
import asyncio
import logging

from .api import ISSUES_FOUND_MESSAGE, RunRequest, UseCaseValidatorAPI
from .config import ConfigManager
from .github.context import ActionContext, ActionContextError


logger = logging.getLogger(__name__)


def set_failed(message: str) -> int:
    """Report a failure to the Actions runner and return the exit code."""
    print(f"::error::{message}")
    return 1


def main() -> int:
    """Validate the pull request of the current workflow run."""
    try:
        manager = ConfigManager()
    except ValueError as e:
        return set_failed(str(e))

    config = manager.config
    logger.info("Use Case Validator")
    logger.info(f"method_name: {config.validator.method_name}")
    logger.info(f"approve_message: {config.validator.approve_message}")
    logger.info(f"single_class_in_file: {config.validator.single_class_in_file}")

    try:
        context = ActionContext.from_env()
    except ActionContextError as e:
        return set_failed(f"ERROR OCCURED: {e}")

    api = UseCaseValidatorAPI(config)
    run = asyncio.run(api.validate_pull_request(
        RunRequest(repository=context.repository, pr_number=context.pr_number)
    ))

    if run.status == 'failed':
        return set_failed(f"ERROR OCCURED: {run.error}")

    if run.status == 'changes_requested':
        return set_failed(ISSUES_FOUND_MESSAGE)

    return 0


if __name__ == "__main__":
    sys.exit(main())
