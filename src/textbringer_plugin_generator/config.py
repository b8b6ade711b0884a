"""Derived identifiers shared by the planner, the renderers and the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from .naming import camelize, display_name, snake_case

__all__ = [
    "GEM_VERSION",
    "HOST_PREFIX",
    "REQUIRED_RUBY_VERSION",
    "RUBY_EXTENSION",
    "DerivedNames",
    "derive",
]


HOST_PREFIX = "textbringer"
RUBY_EXTENSION = "rb"
GEM_VERSION = "0.1.0"
REQUIRED_RUBY_VERSION = ">= 3.2.0"


@dataclass(slots=True, frozen=True)
class DerivedNames:
    """Every name a generated plugin needs, derived from one raw identifier.

    Attributes
    ----------
    raw:
        The identifier supplied by the user, e.g. ``"my-lang"``. It is used
        verbatim for the ``lib/textbringer/<raw>`` directory, ``require`` paths
        and the file extension matched by the generated mode.
    package_name:
        The gem name, ``"textbringer-<raw>"``. Also the package root directory.
    module_name:
        The Ruby module nested under ``Textbringer`` that holds ``VERSION``.
    mode_class_name:
        ``module_name + "Mode"``; the ``Mode`` subclass defined by the plugin.
    snake_name:
        ``raw`` with hyphens turned into underscores, used in file stems.
    test_class_stem:
        Prefix of the generated test class. Computed with the same transform as
        :attr:`module_name` so the two can never diverge.
    display_name:
        README heading derived from :attr:`package_name`.
    """

    raw: str
    package_name: str
    module_name: str
    mode_class_name: str
    snake_name: str
    test_class_stem: str
    display_name: str

    @classmethod
    def from_name(cls, raw: str) -> "DerivedNames":
        """Build a :class:`DerivedNames` from ``raw``.

        The transform is total: an empty identifier yields degenerate names
        (``"textbringer-"``, ``""`` and ``"Mode"``) rather than an error. The
        derived names are only valid Ruby constants and paths when ``raw`` is
        made of ``[A-Za-z0-9_-]``; callers must reject anything else before
        deriving, as the CLI does.
        """

        package_name = f"{HOST_PREFIX}-{raw}"
        module_name = camelize(raw)
        return cls(
            raw=raw,
            package_name=package_name,
            module_name=module_name,
            mode_class_name=f"{module_name}Mode",
            snake_name=snake_case(raw),
            test_class_stem=camelize(raw),
            display_name=display_name(package_name),
        )

    @property
    def lib_dir(self) -> str:
        return f"lib/{HOST_PREFIX}/{self.raw}"

    @property
    def test_file_stem(self) -> str:
        return f"{HOST_PREFIX}_{self.snake_name}"

    def context(self) -> Mapping[str, str]:
        """Return a dictionary compatible with the templating helpers."""

        return {
            "host": HOST_PREFIX,
            "raw": self.raw,
            "package_name": self.package_name,
            "module_name": self.module_name,
            "mode_class_name": self.mode_class_name,
            "snake_name": self.snake_name,
            "test_class_stem": self.test_class_stem,
            "display_name": self.display_name,
            "lib_dir": self.lib_dir,
            "test_file_stem": self.test_file_stem,
            "version": GEM_VERSION,
            "required_ruby_version": REQUIRED_RUBY_VERSION,
        }


def derive(raw: str) -> DerivedNames:
    """Map ``raw`` to the family of names used across every artifact."""

    return DerivedNames.from_name(raw)
