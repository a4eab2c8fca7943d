"""
Shared fixtures for orgtagger tests.
"""

import logging
import os
from unittest.mock import MagicMock

import pytest

from orgtagger.infra import GitHubClient, RateLimitStatus

from tests.helpers import make_repo


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Run every test without the developer's token or config files, and reset logging afterwards."""
    for key in list(os.environ):
        if key.startswith('ORGTAGGER_'):
            monkeypatch.delenv(key)
    monkeypatch.delenv('GITHUB_TOKEN', raising=False)
    monkeypatch.setenv('HOME', str(tmp_path))
    yield
    logger = logging.getLogger("orgtagger")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def github():
    """A GitHubClient double with an organization of two repositories.

    Repository A carries v1.0.0 and v1.1.0; repository B has no tags.
    """
    client = MagicMock(spec=GitHubClient)
    client.list_org_repos.return_value = [make_repo('A'), make_repo('B', default_branch='develop')]
    tags = {'A': ['v1.0.0', 'v1.1.0'], 'B': []}
    client.list_tag_refs.side_effect = lambda owner, name: tags[name]
    client.get_repo.side_effect = lambda owner, name: make_repo(
        name, owner=owner, default_branch='develop' if name == 'B' else 'main'
    )
    client.get_commit_sha.side_effect = lambda owner, name, ref: f"sha-{name}-{ref}"
    client.create_tag_ref.side_effect = lambda owner, name, tag, sha: {
        'ref': f"refs/tags/{tag}",
        'object': {'sha': sha, 'type': 'commit'},
    }
    client.rate_limit_status = RateLimitStatus(remaining=4990, limit=5000, reset_time=0, used=10)
    return client
