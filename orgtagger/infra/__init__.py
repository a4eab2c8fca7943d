"""
Infrastructure layer for orgtagger.

Contains adapters for external systems:
- GitHubClient: GitHub REST API access
"""

from .github_client import GitHubClient, GitHubRepo, RateLimitStatus

__all__ = [
    'GitHubClient',
    'GitHubRepo',
    'RateLimitStatus',
]
