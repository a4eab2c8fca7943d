"""
Tests for ProposalService and TagService.
"""

import pytest
import semver

from orgtagger.domain import RepositoryRef, TagRequest, TagTarget
from orgtagger.exit_codes import APIError, InputError
from orgtagger.render import proposal_lines
from orgtagger.services import ProposalService, TagService
from orgtagger.versioning import BumpKind

from tests.helpers import make_repo


class TestProposalService:
    """Tests for proposing bumped tags."""

    def test_propose_minor(self, github):
        proposals = ProposalService(github).propose('org', BumpKind.MINOR)

        assert proposal_lines(proposals, 'github.com') == [
            'github.com/org/A v1.2.0',
            'github.com/org/B v0.1.0',
        ]
        github.list_org_repos.assert_called_once_with('org')

    def test_proposal_fields(self, github):
        a, b = ProposalService(github).propose('org', BumpKind.MAJOR)

        assert a.latest == semver.Version(1, 1, 0)
        assert a.proposed == semver.Version(2, 0, 0)
        assert b.latest is None
        assert b.default_branch == 'develop'

    def test_unrelated_tags_do_not_abort(self, github):
        github.list_org_repos.return_value = [make_repo('C')]
        github.list_tag_refs.side_effect = lambda owner, name: ['latest', 'v2.3.4', 'v1.99.0', 'nightly']

        (proposal,) = ProposalService(github).propose('org', BumpKind.PATCH)

        assert proposal.latest_tag == 'v2.3.4'
        assert proposal.new_tag == 'v2.3.5'

    def test_exclude_archived(self, github):
        github.list_org_repos.return_value = [make_repo('A'), make_repo('old', archived=True)]

        proposals = ProposalService(github).propose('org', BumpKind.MINOR, exclude_archived=True)

        assert [p.repository.name for p in proposals] == ['A']

    def test_archived_included_by_default(self, github):
        github.list_org_repos.return_value = [make_repo('A'), make_repo('B', archived=True)]
        proposals = ProposalService(github).propose('org', BumpKind.MINOR)
        assert len(proposals) == 2

    def test_exclude_by_name(self, github):
        proposals = ProposalService(github).propose('org', BumpKind.MINOR, exclude=['A'])
        assert [p.repository.name for p in proposals] == ['B']

    def test_exclude_by_full_name(self, github):
        proposals = ProposalService(github).propose('org', BumpKind.MINOR, exclude=['org/B'])
        assert [p.repository.name for p in proposals] == ['A']
        github.list_tag_refs.assert_called_once_with('org', 'A')

    def test_empty_org(self, github):
        github.list_org_repos.return_value = []
        assert ProposalService(github).propose('org', BumpKind.MINOR) == []

    def test_api_error_aborts(self, github):
        github.list_tag_refs.side_effect = APIError("GET .../matching-refs/tags/: 500 boom", 500)
        with pytest.raises(APIError):
            ProposalService(github).propose('org', BumpKind.MINOR)


class TestTagServiceParsing:
    """Tests for parsing creator input."""

    def setup_method(self):
        self.service = TagService(github_client=None)

    def test_parse_lines(self):
        requests = self.service.parse_lines([
            'github.com/org/A v1.2.0\n',
            'github.com/org/B v0.1.0\n',
        ])
        assert requests == [
            TagRequest(RepositoryRef('org', 'A'), 'v1.2.0'),
            TagRequest(RepositoryRef('org', 'B'), 'v0.1.0'),
        ]

    def test_blank_lines_are_skipped(self):
        requests = self.service.parse_lines(['\n', 'github.com/org/A v1.2.0\n', '   \n'])
        assert len(requests) == 1

    def test_any_whitespace_separates_tokens(self):
        (request,) = self.service.parse_lines(['org/A\t  v1.2.0'])
        assert request.tag == 'v1.2.0'

    def test_too_many_tokens(self):
        with pytest.raises(InputError) as excinfo:
            self.service.parse_lines(['github.com/org/A v1.2.0', 'github.com/org/B v0.1.0 extra'])
        assert excinfo.value.line_number == 2
        assert 'expected 2 tokens' in str(excinfo.value)

    def test_too_few_tokens(self):
        with pytest.raises(InputError, match='expected 2 tokens'):
            self.service.parse_lines(['github.com/org/A'])

    def test_invalid_repository(self):
        with pytest.raises(InputError) as excinfo:
            self.service.parse_lines(['github.com/A v1.2.0'])
        assert excinfo.value.line_number == 1
        assert 'invalid repo URL' in str(excinfo.value)

    def test_no_input(self):
        with pytest.raises(InputError, match='no input'):
            self.service.parse_lines([])

    def test_only_blank_lines(self):
        with pytest.raises(InputError, match='no input'):
            self.service.parse_lines(['\n', '\n'])

    def test_custom_host(self):
        service = TagService(github_client=None, host='ghe.example.com')
        (request,) = service.parse_lines(['ghe.example.com/team/svc v3.0.0'])
        assert request.repository.full_name == 'team/svc'


class TestTagServiceCreate:
    """Tests for resolving and creating tags."""

    def test_resolve_uses_default_branch(self, github):
        service = TagService(github)
        targets = service.resolve([
            TagRequest(RepositoryRef('org', 'A'), 'v1.2.0'),
            TagRequest(RepositoryRef('org', 'B'), 'v0.1.0'),
        ])

        assert [t.sha for t in targets] == ['sha-A-main', 'sha-B-develop']
        assert [t.default_branch for t in targets] == ['main', 'develop']
        github.create_tag_ref.assert_not_called()

    def test_resolve_error_aborts(self, github):
        github.get_repo.side_effect = APIError("GET .../repos/org/missing: 404 Not Found", 404)
        with pytest.raises(APIError):
            TagService(github).resolve([TagRequest(RepositoryRef('org', 'missing'), 'v1.0.0')])

    def test_create(self, github):
        targets = [
            TagTarget(TagRequest(RepositoryRef('org', 'A'), 'v1.2.0'), 'main', 'sha-a'),
            TagTarget(TagRequest(RepositoryRef('org', 'B'), 'v0.1.0'), 'develop', 'sha-b'),
        ]

        created = TagService(github).create(targets)

        assert [ref['ref'] for ref in created] == ['refs/tags/v1.2.0', 'refs/tags/v0.1.0']
        github.create_tag_ref.assert_any_call('org', 'A', 'v1.2.0', 'sha-a')
        github.create_tag_ref.assert_any_call('org', 'B', 'v0.1.0', 'sha-b')

    def test_create_stops_at_first_failure(self, github):
        github.create_tag_ref.side_effect = [
            {'ref': 'refs/tags/v1.0.0', 'object': {'sha': 'a'}},
            APIError("POST .../git/refs: 422 Reference already exists", 422),
            {'ref': 'refs/tags/v1.0.0', 'object': {'sha': 'c'}},
        ]
        targets = [
            TagTarget(TagRequest(RepositoryRef('org', name), 'v1.0.0'), 'main', name)
            for name in ('A', 'B', 'C')
        ]

        with pytest.raises(APIError, match='Reference already exists'):
            TagService(github).create(targets)
        assert github.create_tag_ref.call_count == 2
