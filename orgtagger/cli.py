#!/usr/bin/env python3

import click

from orgtagger.commands.fetch import fetch_cmd
from orgtagger.commands.create import create_cmd
from orgtagger.commands.release import release_cmd


@click.group()
@click.version_option(package_name='orgtagger')
def cli():
    """orgtagger - Bulk semantic version tagging for GitHub organizations.

    "fetch" proposes the next version tag for every repository of an
    organization, "create" turns a reviewed list of proposals into tags, and
    "release" does both interactively.
    """
    pass


cli.add_command(fetch_cmd)
cli.add_command(create_cmd)
cli.add_command(release_cmd)


def main():
    cli()


def fetcher_main():
    """Entry point for the standalone gh-tag-fetcher script."""
    fetch_cmd()


def creator_main():
    """Entry point for the standalone gh-tag-creator script."""
    create_cmd()


if __name__ == "__main__":
    main()
