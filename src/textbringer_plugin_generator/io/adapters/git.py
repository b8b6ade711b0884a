"""Identity providers backed by ``git config`` or fixed values."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

from ...errors import IdentityUnavailable
from ..interfaces import IdentityProvider

LOGGER = logging.getLogger(__name__)


def read_git_config(key: str, *, cwd: Path | None = None) -> str:
    """Return ``git config <key>`` or raise :class:`IdentityUnavailable`."""

    try:
        result = subprocess.run(
            ["git", "config", key],
            cwd=cwd,
            capture_output=True,
            check=True,
            text=True,
        )
    except subprocess.CalledProcessError as exc:
        raise IdentityUnavailable(f"git config {key} is not set") from exc
    except OSError as exc:
        raise IdentityUnavailable(f"git is not available: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise IdentityUnavailable(f"git config {key} is not valid UTF-8") from exc
    return result.stdout.strip()


class GitIdentityProvider(IdentityProvider):
    """Read author details from the user's git configuration."""

    def __init__(self, cwd: Path | str | None = None):
        self._cwd = None if cwd is None else Path(cwd)

    def _lookup(self, key: str) -> str:
        value = read_git_config(key, cwd=self._cwd)
        LOGGER.debug("git config %s -> %r", key, value)
        return value

    def author(self) -> str:
        return self._lookup("user.name")

    def email(self) -> str:
        return self._lookup("user.email")

    def github_user(self) -> str:
        return self._lookup("github.user")


@dataclass(slots=True, frozen=True)
class StaticIdentityProvider(IdentityProvider):
    """Identity provider returning fixed values; empty strings by default."""

    default_author: str = ""
    default_email: str = ""
    default_github_user: str = ""

    def author(self) -> str:
        return self.default_author

    def email(self) -> str:
        return self.default_email

    def github_user(self) -> str:
        return self.default_github_user


__all__ = ["GitIdentityProvider", "StaticIdentityProvider", "read_git_config"]
