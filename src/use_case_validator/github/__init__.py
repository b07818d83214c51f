"""
GitHub Integration Layer

This module provides GitHub API integration for pull request file
listing, review management, and the Actions run context.
"""

from .client import GitHubClient, GitHubAPIError, RateLimitExceeded
from .context import ActionContext, ActionContextError
from .parser import PullRequestFileParser

__all__ = [
    'GitHubClient',
    'GitHubAPIError',
    'RateLimitExceeded',
    'ActionContext',
    'ActionContextError',
    'PullRequestFileParser',
]
