"""Data models for repository references"""

from enum import Enum
from dataclasses import dataclass

from ..utils.github import DEFAULT_HOST, build_clone_url


class Transport(Enum):
    """How git talks to GitHub"""
    SSH = "ssh"
    READ_ONLY = "git"

    @classmethod
    def from_flag(cls, use_ssh: bool) -> 'Transport':
        return cls.SSH if use_ssh else cls.READ_ONLY


@dataclass(frozen=True)
class RepositoryIdentifier:
    """A repository as typed on the command line; owner may be empty"""
    name: str
    owner: str = ""

    @classmethod
    def parse(cls, token: str) -> 'RepositoryIdentifier':
        """Split ``owner/name`` on the first slash, a bare name has no owner"""
        if "/" in token:
            owner, name = token.split("/", 1)
            return cls(name=name, owner=owner)
        return cls(name=token)

    def resolve(self, login: str, host: str = DEFAULT_HOST) -> 'Project':
        """Fill a missing owner with ``login``"""
        return Project(name=self.name, owner=self.owner or login, host=host)


@dataclass(frozen=True)
class Project:
    """A repository with both name and owner known"""
    name: str
    owner: str
    host: str = DEFAULT_HOST

    @property
    def name_with_owner(self) -> str:
        return f"{self.owner}/{self.name}"

    def git_url(self, use_ssh: bool = False) -> str:
        """Canonical clone URL for this project"""
        return build_clone_url(self.name, self.owner, use_ssh, host=self.host)
