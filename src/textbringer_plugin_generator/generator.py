"""High level entry point wiring the generation pipeline together."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Mapping

from .config import DerivedNames, derive
from .emitter import emit, render_plan
from .io.adapters.git import GitIdentityProvider
from .io.adapters.local import LocalFileSink
from .io.interfaces import FileSink, IdentityProvider
from .options import ResolvedOptions, resolve
from .plan import ArtifactPlan, plan

__all__ = ["GenerationResult", "PluginGenerator"]


@dataclass(slots=True, frozen=True)
class GenerationResult:
    """What a generation run produced."""

    names: DerivedNames
    options: ResolvedOptions
    plan: ArtifactPlan
    message: str


@dataclass(slots=True)
class PluginGenerator:
    """Create Textbringer plugin packages."""

    identity_provider: IdentityProvider

    def __init__(self, identity_provider: IdentityProvider | None = None) -> None:
        self.identity_provider = identity_provider or GitIdentityProvider()

    def generate(
        self,
        name: str,
        raw_options: Mapping[str, object | None] | None = None,
        *,
        target_dir: str | Path | None = None,
        sink: FileSink | None = None,
        today: date | None = None,
    ) -> GenerationResult:
        """Generate the ``textbringer-<name>`` package.

        The package is written through ``sink`` when given, otherwise below
        ``target_dir`` (default: the current directory).
        """

        options = resolve(raw_options or {}, self.identity_provider, today=today)
        names = derive(name)
        artifact_plan = plan(names, options)
        rendered = render_plan(artifact_plan, names, options)
        message = emit(artifact_plan, rendered, sink or LocalFileSink(target_dir))
        return GenerationResult(names=names, options=options, plan=artifact_plan, message=message)
