"""
Tag proposal domain objects for orgtagger.

A TagProposal is what the fetcher computes for a repository. A TagRequest
is one line handed to the creator, and a TagTarget is that request once the
commit at the tip of the default branch is known.
"""

from dataclasses import dataclass
from typing import Optional

import semver

from ..versioning import format_tag
from .repository import RepositoryRef


@dataclass(frozen=True)
class TagProposal:
    """
    Latest observed and proposed version for one repository.

    Attributes:
        repository: Repository the proposal is for
        latest: Highest semantic version among existing tags, or None
        proposed: Version the new tag should carry
        default_branch: Branch the tag will be created on
    """

    repository: RepositoryRef
    latest: Optional[semver.Version]
    proposed: semver.Version
    default_branch: str = "main"

    @property
    def latest_tag(self) -> str:
        return format_tag(self.latest)

    @property
    def new_tag(self) -> str:
        return format_tag(self.proposed)

    def to_request(self) -> 'TagRequest':
        return TagRequest(repository=self.repository, tag=self.new_tag)


@dataclass(frozen=True)
class TagRequest:
    """A tag to create in a repository."""

    repository: RepositoryRef
    tag: str


@dataclass(frozen=True)
class TagTarget:
    """A TagRequest resolved against the tip of the default branch."""

    request: TagRequest
    default_branch: str
    sha: str

    @property
    def repository(self) -> RepositoryRef:
        return self.request.repository

    @property
    def tag(self) -> str:
        return self.request.tag
