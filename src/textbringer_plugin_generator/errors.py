"""Custom exception types raised by the plugin generator."""

from __future__ import annotations

from pathlib import PurePath


class GeneratorError(RuntimeError):
    """Base class for generator failures."""


class IOFailure(GeneratorError):
    """Raised when the file sink rejects a directory or file write."""

    def __init__(self, path: str | PurePath, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = str(path)
        self.reason = reason


class IdentityUnavailable(GeneratorError):
    """Raised by identity providers that cannot supply a value."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
