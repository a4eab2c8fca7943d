"""
GitHub API client infrastructure for orgtagger.

Provides a thin abstraction over the GitHub REST API:
- Token authentication on a shared requests session
- Transparent pagination via the Link header
- Fail-fast errors: any non-2xx response raises APIError
"""

import time
import logging
from dataclasses import dataclass
from typing import Optional, List, Dict, Any

import requests

from ..exit_codes import APIError, AuthError

logger = logging.getLogger(__name__)


@dataclass
class RateLimitStatus:
    """GitHub API rate limit status."""
    remaining: int
    limit: int
    reset_time: int  # Unix timestamp
    used: int

    @property
    def minutes_until_reset(self) -> int:
        """Minutes until rate limit resets."""
        now = int(time.time())
        return max(0, (self.reset_time - now) // 60)

    @property
    def is_low(self) -> bool:
        """Check if rate limit is getting low (< 100 remaining)."""
        return self.remaining < 100


@dataclass
class GitHubRepo:
    """GitHub repository metadata."""
    owner: str
    name: str
    full_name: str
    default_branch: str
    is_archived: bool
    is_fork: bool
    is_private: bool

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'GitHubRepo':
        """Create from GitHub API response."""
        owner = data.get('owner', {})
        owner_login = owner.get('login', '') if isinstance(owner, dict) else str(owner)
        name = data.get('name', '')

        return cls(
            owner=owner_login,
            name=name,
            full_name=data.get('full_name') or f"{owner_login}/{name}",
            default_branch=data.get('default_branch') or 'main',
            is_archived=data.get('archived', False),
            is_fork=data.get('fork', False),
            is_private=data.get('private', False),
        )


class GitHubClient:
    """
    GitHub REST API client.

    The client is built once per command and handed to the services that
    need it.

    Example:
        client = GitHubClient(token)
        for repo in client.list_org_repos("conduitio"):
            print(repo.full_name, client.list_tag_refs(repo.owner, repo.name))
    """

    def __init__(
        self,
        token: str,
        api_url: str = "https://api.github.com",
        timeout: float = 30.0,
        per_page: int = 100,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize GitHubClient.

        Args:
            token: GitHub access token
            api_url: Base URL of the REST API (differs on GitHub Enterprise)
            timeout: Per-request timeout in seconds
            per_page: Page size for list endpoints
            session: Session to send requests on (a new one by default)
        """
        self.api_url = api_url.rstrip('/')
        self.timeout = timeout
        self.per_page = per_page
        self.session = session if session is not None else requests.Session()
        self.session.headers.update({
            'Accept': 'application/vnd.github+json',
            'User-Agent': 'orgtagger',
            'Authorization': f'token {token}',
        })
        self._rate_limit_status: Optional[RateLimitStatus] = None

    @classmethod
    def from_config(cls, config: Dict[str, Any], token: str, session: Optional[requests.Session] = None) -> 'GitHubClient':
        github = config.get('github', {})
        return cls(
            token,
            api_url=github.get('api_url', 'https://api.github.com'),
            timeout=github.get('timeout_seconds', 30),
            per_page=github.get('per_page', 100),
            session=session,
        )

    @property
    def rate_limit_status(self) -> Optional[RateLimitStatus]:
        """Rate limit status seen on the last response, if any."""
        return self._rate_limit_status

    def _update_rate_limit_from_headers(self, headers) -> None:
        """Update rate limit status from response headers."""
        try:
            remaining = int(headers.get('X-RateLimit-Remaining', -1))
            limit = int(headers.get('X-RateLimit-Limit', -1))
            reset_time = int(headers.get('X-RateLimit-Reset', 0))
            used = int(headers.get('X-RateLimit-Used', 0))
        except (ValueError, TypeError):
            return

        if remaining < 0 or limit < 0:
            return

        self._rate_limit_status = RateLimitStatus(
            remaining=remaining,
            limit=limit,
            reset_time=reset_time,
            used=used
        )
        if self._rate_limit_status.is_low:
            logger.warning(
                f"GitHub API rate limit low: {remaining}/{limit} remaining, "
                f"resets in {self._rate_limit_status.minutes_until_reset} minutes"
            )

    def _url(self, endpoint: str) -> str:
        if endpoint.startswith('http://') or endpoint.startswith('https://'):
            return endpoint
        return f"{self.api_url}/{endpoint.lstrip('/')}"

    def _request(self, method: str, endpoint: str, **kwargs) -> requests.Response:
        """Send one request and raise APIError unless it succeeded."""
        url = self._url(endpoint)
        logger.debug(f"{method} {url}")
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise APIError(f"GitHub API request failed: {method} {url}: {e}") from e

        self._update_rate_limit_from_headers(response.headers)

        if 200 <= response.status_code < 300:
            return response

        message = self._error_message(response)
        text = f"{method} {url}: {response.status_code} {message}"
        if response.status_code == 401:
            raise AuthError(text, response.status_code)
        raise APIError(text, response.status_code)

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        """Extract GitHub's error message from a response body."""
        try:
            data = response.json()
        except ValueError:
            return response.text or response.reason or ''
        if isinstance(data, dict) and data.get('message'):
            return data['message']
        return response.text or ''

    def _get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return self._request('GET', endpoint, params=params).json()

    def _get_paginated(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> List[Any]:
        """GET every page of a list endpoint, following ``Link: rel="next"``."""
        params = dict(params or {})
        params.setdefault('per_page', self.per_page)

        items: List[Any] = []
        url: Optional[str] = endpoint
        while url:
            response = self._request('GET', url, params=params)
            page = response.json()
            if not isinstance(page, list):
                raise APIError(f"GET {self._url(url)}: expected a list, got {type(page).__name__}")
            items.extend(page)

            next_link = response.links.get('next', {}) if response.links else {}
            url = next_link.get('url')
            # The next URL already carries the query string.
            params = None
        return items

    def list_org_repos(self, org: str) -> List[GitHubRepo]:
        """
        List every repository of an organization.

        Args:
            org: Organization login

        Returns:
            Repositories in the order GitHub returns them
        """
        data = self._get_paginated(f"orgs/{org}/repos")
        return [GitHubRepo.from_api_response(item) for item in data]

    def list_tag_refs(self, owner: str, name: str) -> List[str]:
        """
        List tag names of a repository.

        Args:
            owner: Repository owner
            name: Repository name

        Returns:
            Tag names with the ``refs/tags/`` prefix removed
        """
        data = self._get_paginated(f"repos/{owner}/{name}/git/matching-refs/tags/")
        tags = []
        for ref in data:
            ref_name = ref.get('ref', '')
            if ref_name.startswith('refs/tags/'):
                ref_name = ref_name[len('refs/tags/'):]
            if ref_name:
                tags.append(ref_name)
        return tags

    def get_repo(self, owner: str, name: str) -> GitHubRepo:
        """Get repository metadata."""
        return GitHubRepo.from_api_response(self._get(f"repos/{owner}/{name}"))

    def get_commit_sha(self, owner: str, name: str, ref: str) -> str:
        """
        Get the SHA of the commit a branch (or any ref) points at.

        Args:
            owner: Repository owner
            name: Repository name
            ref: Branch, tag or SHA

        Returns:
            Full commit SHA
        """
        data = self._get(f"repos/{owner}/{name}/commits/{ref}")
        sha = data.get('sha') if isinstance(data, dict) else None
        if not sha:
            raise APIError(f"no commit SHA returned for {owner}/{name}@{ref}")
        return sha

    def create_tag_ref(self, owner: str, name: str, tag: str, sha: str) -> Dict[str, Any]:
        """
        Create a lightweight tag ``refs/tags/<tag>`` pointing at ``sha``.

        Returns:
            The created reference as returned by the API
        """
        response = self._request(
            'POST',
            f"repos/{owner}/{name}/git/refs",
            json={'ref': f"refs/tags/{tag}", 'sha': sha},
        )
        return response.json()
