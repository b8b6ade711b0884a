"""Collaborator interfaces and adapters for the generator."""

from .interfaces import FileSink, IdentityProvider

__all__ = [
    "FileSink",
    "IdentityProvider",
]
