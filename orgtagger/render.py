"""
Rendering functions for orgtagger output.

Plain line formats are what the two tools exchange over a pipe; the rich
table is only used by the interactive release flow.
"""

from rich.table import Table
from rich.console import Console
from rich import box
from typing import List, Sequence

from .domain import TagProposal, TagTarget

console = Console(stderr=True)

NO_TAG = "_"


def proposal_lines(proposals: Sequence[TagProposal], host: str) -> List[str]:
    """Lines of the form ``host/owner/repo vX.Y.Z``."""
    return [f"{p.repository.url(host)} {p.new_tag}" for p in proposals]


def proposal_debug_lines(proposals: Sequence[TagProposal], host: str) -> List[str]:
    """
    Aligned ``host/owner/repo  vOLD -> vNEW`` lines for verbose output.

    Repositories without a version tag show ``_`` as the old version.
    """
    if not proposals:
        return []

    repo_width = max(len(p.repository.url(host)) for p in proposals)
    old_width = max(len(p.latest_tag or NO_TAG) for p in proposals)
    new_width = max(len(p.new_tag) for p in proposals)

    return [
        f"{p.repository.url(host):<{repo_width}} "
        f"{p.latest_tag or NO_TAG:>{old_width}} -> {p.new_tag:>{new_width}}"
        for p in proposals
    ]


def target_lines(targets: Sequence[TagTarget], host: str) -> List[str]:
    """Lines listing the tags about to be created."""
    return [f"{t.repository.url(host)} {t.tag}" for t in targets]


def render_proposal_table(proposals: Sequence[TagProposal], title: str = "Proposed tags") -> None:
    """
    Render tag proposals as a table on stderr.

    Args:
        proposals: Proposals to show
        title: Table title
    """
    if not proposals:
        console.print("[yellow]No repositories selected.[/yellow]")
        return

    table = Table(
        title=title,
        box=box.ROUNDED,
        show_header=True,
        header_style="bold magenta"
    )
    table.add_column("Repository", style="cyan")
    table.add_column("Branch", style="dim")
    table.add_column("Latest", style="yellow", justify="right")
    table.add_column("New", style="green", justify="right")

    for proposal in proposals:
        table.add_row(
            proposal.repository.full_name,
            proposal.default_branch,
            proposal.latest_tag or NO_TAG,
            proposal.new_tag,
        )

    console.print(table)
