"""
Domain layer for orgtagger.

Contains pure domain objects with no I/O or side effects:
- RepositoryRef: owner/name of a hosted repository
- TagProposal: latest and proposed version for one repository
- TagRequest / TagTarget: a tag to create, before and after resolving
  the commit it should point at

These objects are immutable and live for a single invocation.
"""

from .repository import RepositoryRef
from .proposal import TagProposal, TagRequest, TagTarget

__all__ = [
    'RepositoryRef',
    'TagProposal',
    'TagRequest',
    'TagTarget',
]
