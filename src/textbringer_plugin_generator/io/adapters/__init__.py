"""Concrete collaborator implementations."""

from .git import GitIdentityProvider, StaticIdentityProvider
from .local import LocalFileSink

__all__ = [
    "GitIdentityProvider",
    "LocalFileSink",
    "StaticIdentityProvider",
]
