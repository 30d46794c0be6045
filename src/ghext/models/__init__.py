from .repository import Project, RepositoryIdentifier, Transport

__all__ = [
    "Project",
    "RepositoryIdentifier",
    "Transport",
]
