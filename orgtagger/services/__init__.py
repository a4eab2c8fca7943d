"""
Service layer for orgtagger.

Contains business logic that orchestrates domain objects and infrastructure:
- ProposalService: Latest tag lookup and version bump per repository
- TagService: Input parsing, commit resolution and tag creation

Services take an explicitly constructed GitHubClient.
"""

from .proposal_service import ProposalService
from .tag_service import TagService

__all__ = [
    'ProposalService',
    'TagService',
]
