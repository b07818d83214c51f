"""
GitHub Actions Context

Reads the repository and pull request the workflow runs for from the
Actions environment.
"""

import os
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional


logger = logging.getLogger(__name__)


class ActionContextError(Exception):
    """The workflow was not triggered for a pull request"""


@dataclass(frozen=True)
class ActionContext:
    """Repository and pull request of the current workflow run."""
    owner: str
    repo: str
    pr_number: int

    @property
    def repository(self) -> str:
        return f"{self.owner}/{self.repo}"

    @classmethod
    def from_repository(cls, repository: str, pr_number: int) -> "ActionContext":
        """Build a context from an ``owner/repo`` string."""
        if repository.count('/') != 1:
            raise ActionContextError(f"Repository must be in format 'owner/repo': {repository}")
        owner, repo = repository.split('/')
        return cls(owner=owner, repo=repo, pr_number=pr_number)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ActionContext":
        """
        Load the context from GITHUB_REPOSITORY and the event payload.

        Args:
            environ: Environment mapping (default: os.environ)

        Returns:
            ActionContext for the pull request

        Raises:
            ActionContextError: If the repository or pull request is missing
        """
        environ = os.environ if environ is None else environ

        repository = environ.get('GITHUB_REPOSITORY')
        if not repository:
            raise ActionContextError("GITHUB_REPOSITORY is not set")

        event = cls._load_event(environ.get('GITHUB_EVENT_PATH'))
        pull_request = event.get('pull_request')
        if not pull_request or 'number' not in pull_request:
            raise ActionContextError("The event payload does not contain a pull request")

        context = cls.from_repository(repository, int(pull_request['number']))
        logger.info(f"Running for {context.repository}#{context.pr_number}")
        return context

    @staticmethod
    def _load_event(event_path: Optional[str]) -> Dict:
        if not event_path:
            raise ActionContextError("GITHUB_EVENT_PATH is not set")

        try:
            with open(Path(event_path), 'r', encoding='utf-8') as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ActionContextError(f"Cannot read event payload {event_path}: {e}") from e
