"""Generate Textbringer plugin packages.

A single plugin name such as ``my-lang`` is turned into the family of names a
Ruby gem for the Textbringer editor needs (``textbringer-my-lang``,
``Textbringer::MyLang``, ``MyLangMode`` ...). Those names, together with the
chosen license and test framework, drive a set of pure renderers whose output
is written through a pluggable file sink.
"""

from __future__ import annotations

from .config import DerivedNames, derive
from .emitter import RenderedArtifact, emit, render_plan
from .errors import GeneratorError, IdentityUnavailable, IOFailure
from .generator import GenerationResult, PluginGenerator
from .naming import camelize, display_name, snake_case
from .options import LicenseKind, ResolvedOptions, TestFramework, resolve
from .plan import ArtifactPlan, PlannedFile

__all__ = [
    "ArtifactPlan",
    "DerivedNames",
    "GenerationResult",
    "GeneratorError",
    "IOFailure",
    "IdentityUnavailable",
    "LicenseKind",
    "PlannedFile",
    "PluginGenerator",
    "RenderedArtifact",
    "ResolvedOptions",
    "TestFramework",
    "camelize",
    "derive",
    "display_name",
    "emit",
    "render_plan",
    "resolve",
    "snake_case",
]

__version__ = "0.1.0"
