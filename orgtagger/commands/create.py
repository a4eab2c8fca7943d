"""
Create command for orgtagger.

Reads ``host/owner/repo tag`` lines from stdin and creates each tag on the
latest commit of the repository's default branch.
"""

import sys

import click

from ..cli_utils import add_common_options, build_client, confirm_on_tty, get_host, handle_errors, prepare
from ..exit_codes import AbortedError
from ..render import target_lines
from ..services import TagService

CONFIRM_QUESTION = "Do you want to create the tags listed above? [Y/N]: "


@click.command('create')
@click.option('-y', '--yes', is_flag=True, help="Don't ask for confirmation")
@add_common_options('verbose')
@handle_errors
def create_cmd(yes, verbose):
    """Create tags in multiple repositories.

    Expects one "host/owner/repo tag" line per repository on stdin, as
    printed by "orgtagger fetch". Tags are created on the latest commit of
    each repository's default branch. Requires the GITHUB_TOKEN environment
    variable.

    \b
    Examples:
        GITHUB_TOKEN=my-token orgtagger fetch my-org | orgtagger create
        orgtagger create < repo-list.txt
    """
    config = prepare(verbose)
    host = get_host(config)
    client = build_client(config)
    service = TagService(client, host)

    requests = service.parse_lines(sys.stdin)
    targets = service.resolve(requests)

    if not yes:
        click.echo(err=True)
        click.echo("\n".join(target_lines(targets, host)), err=True)
        click.echo(err=True)
        if not confirm_on_tty(CONFIRM_QUESTION):
            raise AbortedError()

    service.create(targets)
