"""
Proposal service for orgtagger.

Walks the repositories of an organization one at a time and proposes the
next semantic version tag for each of them.
"""

from typing import Iterable, List
import logging

from ..domain import RepositoryRef, TagProposal
from ..infra import GitHubClient
from ..versioning import BumpKind, bump, select_latest

logger = logging.getLogger(__name__)


class ProposalService:
    """
    Service computing tag proposals for an organization.

    Example:
        service = ProposalService(client)
        for proposal in service.propose("conduitio", BumpKind.MINOR):
            print(proposal.repository, proposal.new_tag)
    """

    def __init__(self, github_client: GitHubClient):
        self.github = github_client

    def propose(
        self,
        org: str,
        kind: BumpKind,
        exclude_archived: bool = False,
        exclude: Iterable[str] = ()
    ) -> List[TagProposal]:
        """
        Propose a bumped version tag for every repository in ``org``.

        Args:
            org: Organization login
            kind: Version component to bump
            exclude_archived: Skip archived repositories
            exclude: Repository names (or owner/name) to leave out

        Returns:
            One TagProposal per repository, in API order
        """
        logger.info("Fetching repositories (might take a minute)...")
        repos = self.github.list_org_repos(org)
        excluded = set(exclude)

        proposals = []
        for repo in repos:
            if repo.name in excluded or repo.full_name in excluded:
                logger.info(f"Skipping excluded repository {repo.full_name}")
                continue
            if exclude_archived and repo.is_archived:
                logger.info(f"Skipping archived repository {repo.full_name}")
                continue

            logger.info(f"Fetching latest tag for {repo.full_name}")
            tags = self.github.list_tag_refs(repo.owner, repo.name)
            latest = select_latest(tags)
            proposal = TagProposal(
                repository=RepositoryRef(owner=repo.owner, name=repo.name),
                latest=latest,
                proposed=bump(latest, kind),
                default_branch=repo.default_branch,
            )
            logger.debug(
                f"{repo.full_name}: {len(tags)} tags, latest "
                f"{proposal.latest_tag or 'none'}, proposing {proposal.new_tag}"
            )
            proposals.append(proposal)

        return proposals
