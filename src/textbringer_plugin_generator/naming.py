"""String normalisation utilities used throughout the generator.

Two casing rules live here and are deliberately kept apart:

* :func:`camelize` produces Ruby constant names (``my-lang`` -> ``MyLang``).
* :func:`display_name` produces the human readable README heading
  (``textbringer-my-lang`` -> ``Textbringer My Lang``).
"""

from __future__ import annotations

import re

__all__ = ["camelize", "display_name", "github_handle", "snake_case"]


_SEGMENT_SEPARATORS = re.compile(r"[-_]")
_WHITESPACE = re.compile(r"\s+")
_NON_HANDLE_CHARACTERS = re.compile(r"[^a-zA-Z0-9-]")


def camelize(name: str) -> str:
    """Return the PascalCase constant name for ``name``.

    The identifier is split on ``-`` and ``_`` and the first character of every
    segment is upper-cased. Remaining characters are left untouched, so
    ``"myHTML-mode"`` becomes ``"MyHTMLMode"``.
    """

    return "".join(segment[:1].upper() + segment[1:] for segment in _SEGMENT_SEPARATORS.split(name))


def snake_case(name: str) -> str:
    """Return ``name`` with hyphens replaced by underscores."""

    return name.replace("-", "_")


def display_name(package_name: str) -> str:
    """Title-case every ``-`` delimited segment of ``package_name``.

    Segments are capitalised independently (``str.capitalize``), which lowers the
    remaining characters. This is not the same transform as :func:`camelize`.
    """

    return " ".join(segment.capitalize() for segment in package_name.split("-"))


def github_handle(author: str) -> str:
    """Turn an author name into something usable inside a GitHub URL."""

    collapsed = _WHITESPACE.sub("", author)
    return _NON_HANDLE_CHARACTERS.sub("", collapsed)
