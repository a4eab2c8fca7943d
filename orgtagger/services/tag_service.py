"""
Tag service for orgtagger.

Turns ``host/owner/repo tag`` lines into tag refs on GitHub. Every request
is resolved against the tip of its repository's default branch before the
first tag is created, so a typo in line 40 fails the run before line 1 has
been tagged.
"""

from typing import Iterable, List, Dict, Any, Optional
import logging

from ..domain import RepositoryRef, TagRequest, TagTarget
from ..exit_codes import InputError
from ..infra import GitHubClient

logger = logging.getLogger(__name__)


class TagService:
    """
    Service for creating tags across repositories.

    Example:
        service = TagService(client)
        requests = service.parse_lines(sys.stdin)
        service.create(service.resolve(requests))
    """

    def __init__(self, github_client: GitHubClient, host: str = "github.com"):
        self.github = github_client
        self.host = host

    def parse_line(self, line: str, line_number: Optional[int] = None) -> TagRequest:
        """
        Parse a single ``host/owner/repo tag`` line.

        Raises:
            InputError: unless the line has exactly two whitespace-separated tokens
                and a valid repository reference
        """
        tokens = line.split()
        if len(tokens) != 2:
            raise InputError(
                f"expected 2 tokens separated with a space: {line.rstrip()}",
                line_number,
            )
        repo_text, tag = tokens
        try:
            repository = RepositoryRef.parse(repo_text, self.host)
        except InputError as e:
            raise InputError(str(e), line_number) from None
        return TagRequest(repository=repository, tag=tag)

    def parse_lines(self, lines: Iterable[str]) -> List[TagRequest]:
        """
        Parse every non-blank input line.

        Raises:
            InputError: on the first malformed line, or when there is no input
        """
        requests = []
        for number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            requests.append(self.parse_line(line, number))

        if not requests:
            raise InputError("no input")
        return requests

    def resolve(self, requests: Iterable[TagRequest]) -> List[TagTarget]:
        """Look up the default branch and its latest commit for each request."""
        targets = []
        for request in requests:
            repository = request.repository
            logger.info(f"Fetching info for {repository.full_name}")
            repo = self.github.get_repo(repository.owner, repository.name)
            sha = self.github.get_commit_sha(repository.owner, repository.name, repo.default_branch)
            targets.append(TagTarget(request=request, default_branch=repo.default_branch, sha=sha))
        return targets

    def create(self, targets: Iterable[TagTarget]) -> List[Dict[str, Any]]:
        """
        Create one tag ref per target, in order.

        Returns:
            The created refs as returned by the API
        """
        created = []
        for target in targets:
            repository = target.repository
            logger.info(
                f"Creating tag {target.tag} in {repository.full_name} "
                f"(branch: {target.default_branch}, SHA: {target.sha})"
            )
            ref = self.github.create_tag_ref(repository.owner, repository.name, target.tag, target.sha)
            logger.info(f"Created ref: {ref.get('ref')} (SHA: {ref.get('object', {}).get('sha')})")
            created.append(ref)
        return created
