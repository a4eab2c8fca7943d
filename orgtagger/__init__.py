"""
orgtagger - Bulk semantic version tagging for GitHub organizations.

Two steps, usually joined by a pipe and a human review in between:

    orgtagger fetch my-org --bump minor > tags.txt
    orgtagger create < tags.txt

The same building blocks are available from Python:

    from orgtagger import GitHubClient, ProposalService, BumpKind

    client = GitHubClient(token)
    for proposal in ProposalService(client).propose("my-org", BumpKind.MINOR):
        print(proposal.repository, proposal.latest_tag, proposal.new_tag)
"""

__version__ = "0.3.0"

from .versioning import BumpKind, parse_tag, select_latest, bump, format_tag

from .domain import RepositoryRef, TagProposal, TagRequest, TagTarget

from .infra import GitHubClient

from .services import ProposalService, TagService

from .config import load_config

__all__ = [
    "__version__",
    # Versioning
    "BumpKind",
    "parse_tag",
    "select_latest",
    "bump",
    "format_tag",
    # Domain objects
    "RepositoryRef",
    "TagProposal",
    "TagRequest",
    "TagTarget",
    # Infrastructure and services
    "GitHubClient",
    "ProposalService",
    "TagService",
    # Configuration
    "load_config",
]
