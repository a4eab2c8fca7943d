"""
Semantic version handling for repository tags.

Tags are parsed with the ``semver`` library. A tag like ``v1.2.3-rc.1``
is accepted; anything outside the SemVer 2.0 grammar (``latest``,
``1.2``, ``release-2020``) is ignored rather than treated as an error,
since unrelated tags are common in real repositories.
"""

from enum import Enum
from typing import Iterable, Optional

import semver

from .exit_codes import ConfigError

TAG_REF_PREFIX = "refs/tags/"

ZERO = semver.Version(0, 0, 0)


class BumpKind(Enum):
    """Which version component to increment."""
    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"

    @classmethod
    def choices(cls):
        return [kind.value for kind in cls]

    @classmethod
    def from_string(cls, value: str) -> 'BumpKind':
        try:
            return cls(value)
        except ValueError:
            raise ConfigError(
                f"bump expects one of [{' '.join(cls.choices())}], got: {value}"
            ) from None


def parse_tag(tag: str) -> Optional[semver.Version]:
    """
    Parse a tag name into a version.

    Args:
        tag: Tag name, optionally with a ``refs/tags/`` prefix and a leading ``v``

    Returns:
        The parsed version, or None if the tag is not a semantic version
    """
    if tag.startswith(TAG_REF_PREFIX):
        tag = tag[len(TAG_REF_PREFIX):]
    if tag.startswith("v"):
        tag = tag[1:]
    try:
        return semver.Version.parse(tag)
    except (ValueError, TypeError):
        return None


def select_latest(tags: Iterable[str]) -> Optional[semver.Version]:
    """Return the highest semantic version among ``tags``, or None."""
    versions = [v for v in (parse_tag(tag) for tag in tags) if v is not None]
    if not versions:
        return None
    return max(versions)


def bump(version: Optional[semver.Version], kind: BumpKind) -> semver.Version:
    """
    Compute the next version.

    A missing version counts as 0.0.0. Pre-release and build metadata are
    dropped, so 1.2.3-rc1 bumped by minor gives 1.3.0.
    """
    if version is None:
        version = ZERO
    if kind is BumpKind.MAJOR:
        return semver.Version(version.major + 1, 0, 0)
    if kind is BumpKind.MINOR:
        return semver.Version(version.major, version.minor + 1, 0)
    if kind is BumpKind.PATCH:
        return semver.Version(version.major, version.minor, version.patch + 1)
    raise ConfigError(f"invalid bump: {kind!r}")


def format_tag(version: Optional[semver.Version]) -> str:
    """Format a version as a tag name (``v1.2.3``); None becomes ''."""
    if version is None:
        return ""
    return f"v{version}"
