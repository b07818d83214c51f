"""
GitHub API Client

Handles GitHub API authentication, rate limiting, and communication.
Provides the pull request file listing and review endpoints the
validator needs.
"""

import time
import logging
from typing import Dict, List, Optional
from datetime import datetime
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..models.review import Diagnostic


logger = logging.getLogger(__name__)


class GitHubAPIError(Exception):
    """GitHub API related errors"""
    def __init__(self, message: str, status_code: Optional[int] = None, response_data: Optional[Dict] = None):
        super().__init__(message)
        self.status_code = status_code
        self.response_data = response_data


class RateLimitExceeded(GitHubAPIError):
    """GitHub API rate limit exceeded"""
    def __init__(self, reset_time: datetime):
        super().__init__(f"Rate limit exceeded. Resets at {reset_time}")
        self.reset_time = reset_time


class GitHubClient:
    """
    GitHub API client with authentication, rate limiting, and error handling.

    Provides methods for:
    - Pull request and changed file retrieval
    - Review listing, creation and update
    - API rate limit management
    """

    PER_PAGE = 100

    def __init__(self, token: str, base_url: str = "https://api.github.com", timeout: int = 30):
        """
        Initialize GitHub client.

        Args:
            token: GitHub token (the workflow's GITHUB_TOKEN or a PAT)
            base_url: GitHub API base URL (default: https://api.github.com)
            timeout: Request timeout in seconds
        """
        if not token:
            raise ValueError("GitHub token is required")

        self.token = token
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = self._create_session()
        self.rate_limit_remaining = 5000
        self.rate_limit_reset = datetime.now()

    def _create_session(self) -> requests.Session:
        """Create requests session with retry strategy and authentication."""
        session = requests.Session()

        # Transport-level retries for idempotent calls only
        retry_strategy = Retry(
            total=3,
            backoff_factor=1,
            status_forcelist=[500, 502, 503, 504],
            allowed_methods=["GET"],
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        session.headers.update({
            'Authorization': f'token {self.token}',
            'Accept': 'application/vnd.github.v3+json',
            'User-Agent': 'Use-Case-Validator/1.0'
        })

        return session

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self.session.headers)

    def _check_rate_limit(self) -> None:
        """Check and handle GitHub API rate limits."""
        if self.rate_limit_remaining <= 10 and datetime.now() < self.rate_limit_reset:
            wait_time = (self.rate_limit_reset - datetime.now()).total_seconds()
            if wait_time > 0:
                logger.warning(f"Rate limit low ({self.rate_limit_remaining}), resets in {wait_time:.1f}s")
                raise RateLimitExceeded(self.rate_limit_reset)

    def _update_rate_limit(self, response: requests.Response) -> None:
        """Update rate limit information from response headers."""
        if 'X-RateLimit-Remaining' in response.headers:
            self.rate_limit_remaining = int(response.headers['X-RateLimit-Remaining'])

        if 'X-RateLimit-Reset' in response.headers:
            reset_timestamp = int(response.headers['X-RateLimit-Reset'])
            self.rate_limit_reset = datetime.fromtimestamp(reset_timestamp)

    def _make_request(self, method: str, endpoint: str, **kwargs) -> requests.Response:
        """
        Make authenticated request to GitHub API with rate limiting.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint (without base URL)
            **kwargs: Additional arguments for requests

        Returns:
            Response object

        Raises:
            GitHubAPIError: For API errors
            RateLimitExceeded: When rate limit is exceeded
        """
        self._check_rate_limit()

        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        kwargs.setdefault('timeout', self.timeout)

        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            logger.error(f"Request failed: {e}")
            raise GitHubAPIError(f"Request failed: {str(e)}")

        self._update_rate_limit(response)

        if response.status_code == 429:
            reset_time = datetime.fromtimestamp(int(response.headers.get('X-RateLimit-Reset', time.time() + 3600)))
            raise RateLimitExceeded(reset_time)

        if not response.ok:
            error_data = response.json() if response.content else {}
            raise GitHubAPIError(
                f"GitHub API error: {response.status_code} - {error_data.get('message', 'Unknown error')}",
                status_code=response.status_code,
                response_data=error_data
            )

        return response

    def _get_paginated(self, endpoint: str) -> List[Dict]:
        """Collect every page of a list endpoint."""
        items = []
        page = 1

        while True:
            response = self._make_request(
                'GET',
                endpoint,
                params={'page': page, 'per_page': self.PER_PAGE}
            )

            page_items = response.json()
            if not page_items:
                break

            items.extend(page_items)

            if len(page_items) < self.PER_PAGE:
                break

            page += 1

        return items

    def get_pull_request_files(self, owner: str, repo: str, pr_number: int) -> List[Dict]:
        """
        Get files changed in a pull request.

        Args:
            owner: Repository owner
            repo: Repository name
            pr_number: Pull request number

        Returns:
            List of file change data
        """
        logger.info(f"Fetching PR files for {owner}/{repo}#{pr_number}")

        files = self._get_paginated(f'/repos/{owner}/{repo}/pulls/{pr_number}/files')

        logger.info(f"Found {len(files)} changed files")
        return files

    def list_reviews(self, owner: str, repo: str, pr_number: int) -> List[Dict]:
        """List reviews of a pull request, oldest first."""
        logger.info(f"Fetching reviews for {owner}/{repo}#{pr_number}")
        return self._get_paginated(f'/repos/{owner}/{repo}/pulls/{pr_number}/reviews')

    def create_review(
        self,
        owner: str,
        repo: str,
        pr_number: int,
        event: str,
        body: Optional[str] = None,
        comments: Optional[List[Diagnostic]] = None,
    ) -> Dict:
        """
        Create a pull request review.

        Args:
            owner: Repository owner
            repo: Repository name
            pr_number: Pull request number
            event: APPROVE, REQUEST_CHANGES or COMMENT
            body: Review body text
            comments: Line comments to attach to the review

        Returns:
            Created review data
        """
        valid_events = {'APPROVE', 'REQUEST_CHANGES', 'COMMENT'}
        if event not in valid_events:
            raise ValueError(f"Invalid review event: {event}")

        payload = {'event': event}
        if body is not None:
            payload['body'] = body
        if comments:
            payload['comments'] = [comment.to_github_payload() for comment in comments]

        logger.info(f"Creating {event} review on {owner}/{repo}#{pr_number} ({len(comments or [])} comments)")

        response = self._make_request(
            'POST',
            f'/repos/{owner}/{repo}/pulls/{pr_number}/reviews',
            json=payload
        )
        return response.json()

    def update_review(self, owner: str, repo: str, pr_number: int, review_id: int, body: str) -> Dict:
        """
        Replace the body of an existing review.

        Args:
            owner: Repository owner
            repo: Repository name
            pr_number: Pull request number
            review_id: Review to update
            body: New review body

        Returns:
            Updated review data
        """
        logger.info(f"Updating review {review_id} on {owner}/{repo}#{pr_number}")

        response = self._make_request(
            'PUT',
            f'/repos/{owner}/{repo}/pulls/{pr_number}/reviews/{review_id}',
            json={'body': body}
        )
        return response.json()
