"""
Release command for orgtagger.

Interactive version of ``fetch | create``: proposals are shown as a table,
the user confirms with a phrase, and the tags are created in one go.
"""

import click

from ..cli_utils import add_common_options, build_client, get_host, handle_errors, prepare, require_phrase
from ..exit_codes import AbortedError
from ..render import console, render_proposal_table
from ..services import ProposalService, TagService
from ..versioning import BumpKind

CONFIRM_PHRASE = "DO IT"


@click.command('release')
@click.argument('org')
@click.option('--exclude', multiple=True, metavar='REPO',
              help='Repository to leave out (repeatable)')
@add_common_options('bump', 'exclude_archived', 'verbose')
@handle_errors
def release_cmd(org, exclude, bump_kind, exclude_archived, verbose):
    """Interactively tag all repositories of ORG with bumped versions.

    Shows the proposed tags, asks you to type "DO IT", then creates every
    tag on the latest commit of the repository's default branch.
    """
    config = prepare(verbose)
    kind = BumpKind.from_string(bump_kind)
    client = build_client(config)
    host = get_host(config)

    proposals = ProposalService(client).propose(
        org, kind, exclude_archived=exclude_archived, exclude=exclude
    )
    if not proposals:
        raise AbortedError("No repositories selected, abort!")

    render_proposal_table(proposals, title=f"Proposed tags for {org}")
    require_phrase(CONFIRM_PHRASE)

    service = TagService(client, host)
    targets = service.resolve([p.to_request() for p in proposals])
    for ref in service.create(targets):
        console.print(f"[green]Created[/green] {ref.get('ref')} ({ref.get('object', {}).get('sha')})")
