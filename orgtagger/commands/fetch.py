"""
Fetch command for orgtagger.

Proposes the next semantic version tag for every repository of an
organization and prints one ``host/owner/repo vX.Y.Z`` line per repository.
The output is meant to be reviewed and then piped into ``orgtagger create``.
"""

import logging

import click

from ..cli_utils import add_common_options, build_client, get_host, handle_errors, prepare
from ..render import proposal_debug_lines, proposal_lines
from ..services import ProposalService
from ..versioning import BumpKind

logger = logging.getLogger(__name__)


@click.command('fetch')
@click.argument('org')
@add_common_options('bump', 'exclude_archived', 'verbose')
@handle_errors
def fetch_cmd(org, bump_kind, exclude_archived, verbose):
    """Propose bumped version tags for all repositories of ORG.

    Reads the latest semantic version tag of each repository in the GitHub
    organization ORG and prints the repository together with the bumped
    version. Requires the GITHUB_TOKEN environment variable.

    \b
    Example:
        GITHUB_TOKEN=my-token orgtagger fetch my-org | orgtagger create
    """
    config = prepare(verbose)
    kind = BumpKind.from_string(bump_kind)
    client = build_client(config)
    host = get_host(config)

    proposals = ProposalService(client).propose(org, kind, exclude_archived=exclude_archived)
    status = client.rate_limit_status
    if status is not None:
        logger.debug(f"GitHub API rate limit: {status.remaining}/{status.limit} remaining")

    for line in proposal_debug_lines(proposals, host):
        logger.debug(line)
    for line in proposal_lines(proposals, host):
        click.echo(line)
