"""Local filesystem-backed file sink."""

from __future__ import annotations

import logging
from pathlib import Path

from ..interfaces import FileSink

LOGGER = logging.getLogger(__name__)


def _ensure_directory(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


class LocalFileSink(FileSink):
    """Write generated artifacts below ``base_path`` on disk."""

    def __init__(self, base_path: Path | str | None = None, *, encoding: str = "utf-8"):
        self._base_path = Path.cwd() if base_path is None else Path(base_path).expanduser()
        self._encoding = encoding

    @property
    def base_path(self) -> Path:
        """Directory every relative path is resolved against."""

        return self._base_path

    def resolve(self, path: str) -> Path:
        return self._base_path / path

    def make_directory(self, path: str) -> None:
        LOGGER.debug("mkdir %s", path)
        _ensure_directory(self.resolve(path))

    def write_text(self, path: str, content: str) -> None:
        destination = self.resolve(path)
        _ensure_directory(destination.parent)
        destination.write_text(content, encoding=self._encoding)
        LOGGER.debug("wrote %s (%d bytes)", path, len(content))

    def describe(self, path: str) -> str:
        return str(self.resolve(path))


__all__ = ["LocalFileSink"]
