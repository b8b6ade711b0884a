"""Abstract interfaces for the generator's external collaborators."""

from __future__ import annotations

from abc import ABC, abstractmethod


class FileSink(ABC):
    """Destination for generated directories and files.

    Paths are relative, ``/`` separated strings such as
    ``"textbringer-my-lang/lib/textbringer_plugin.rb"``.
    """

    @abstractmethod
    def make_directory(self, path: str) -> None:
        """Create ``path`` and any missing parents. Existing directories are fine."""

    @abstractmethod
    def write_text(self, path: str, content: str) -> None:
        """Write ``content`` to ``path``, replacing an existing file."""

    @abstractmethod
    def describe(self, path: str) -> str:
        """Return a user facing location for ``path``."""


class IdentityProvider(ABC):
    """Source of default author details.

    Implementations raise :class:`~textbringer_plugin_generator.errors.IdentityUnavailable`
    when a value cannot be determined.
    """

    @abstractmethod
    def author(self) -> str:
        """Return the default author name."""

    @abstractmethod
    def email(self) -> str:
        """Return the default author email."""

    @abstractmethod
    def github_user(self) -> str:
        """Return the default GitHub account name."""


__all__ = ["FileSink", "IdentityProvider"]
