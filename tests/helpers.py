"""
Builders for the objects the GitHub API client hands around in tests.
"""

from unittest.mock import MagicMock

from orgtagger.infra import GitHubRepo


def make_repo(name, owner='org', default_branch='main', archived=False):
    """Build a GitHubRepo as the API client would return it."""
    return GitHubRepo(
        owner=owner,
        name=name,
        full_name=f"{owner}/{name}",
        default_branch=default_branch,
        is_archived=archived,
        is_fork=False,
        is_private=False,
    )


def make_response(status=200, json_data=None, headers=None, links=None, text=''):
    """Build a stand-in for requests.Response."""
    response = MagicMock()
    response.status_code = status
    response.json.return_value = json_data
    response.headers = headers or {}
    response.links = links or {}
    response.text = text
    response.reason = ''
    return response
