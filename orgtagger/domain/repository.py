"""
Repository reference domain object for orgtagger.
"""

from dataclasses import dataclass

from ..exit_codes import InputError


@dataclass(frozen=True)
class RepositoryRef:
    """
    Owner and name of a repository on the hosting service.

    Examples:
        RepositoryRef.parse("github.com/conduitio/conduit") -> RepositoryRef("conduitio", "conduit")
        RepositoryRef.parse("conduitio/conduit")            -> RepositoryRef("conduitio", "conduit")
    """

    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    def url(self, host: str) -> str:
        """Host-qualified reference, e.g. ``github.com/owner/name``."""
        return f"{host}/{self.full_name}"

    @classmethod
    def parse(cls, text: str, host: str = "github.com") -> 'RepositoryRef':
        """
        Parse ``[host/]owner/name``.

        Args:
            text: Repository reference
            host: Host prefix to strip when present

        Returns:
            Parsed RepositoryRef

        Raises:
            InputError: if the reference isn't exactly owner/name
        """
        reference = text.strip()
        prefix = f"{host}/"
        if reference.startswith(prefix):
            reference = reference[len(prefix):]

        parts = reference.split('/')
        if len(parts) != 2 or not all(parts):
            raise InputError(f"invalid repo URL: {text}")

        return cls(owner=parts[0], name=parts[1])

    def __str__(self) -> str:
        return self.full_name
