"""Render planned artifacts and hand them to a file sink."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from .config import DerivedNames
from .errors import IOFailure
from .io.interfaces import FileSink
from .options import ResolvedOptions
from .plan import ArtifactPlan

__all__ = ["RenderedArtifact", "emit", "render_plan"]

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class RenderedArtifact:
    """A planned file together with its rendered content."""

    path: str
    content: str


def render_plan(plan: ArtifactPlan, names: DerivedNames, options: ResolvedOptions) -> list[RenderedArtifact]:
    """Run every renderer referenced by ``plan``."""

    return [RenderedArtifact(planned.path, planned.renderer(names, options)) for planned in plan.files]


def emit(plan: ArtifactPlan, rendered: Sequence[RenderedArtifact], sink: FileSink) -> str:
    """Write ``plan``'s directories and ``rendered`` files to ``sink``.

    Returns the completion message. Writes are not transactional: when the sink
    fails part way through, everything written before the failure stays in
    place and :class:`IOFailure` is raised for the offending path.
    """

    for directory in plan.directories:
        try:
            sink.make_directory(directory)
        except OSError as exc:
            raise IOFailure(sink.describe(directory), exc.strerror or str(exc)) from exc

    for artifact in rendered:
        try:
            sink.write_text(artifact.path, artifact.content)
        except OSError as exc:
            raise IOFailure(sink.describe(artifact.path), exc.strerror or str(exc)) from exc
        LOGGER.debug("created %s", artifact.path)

    message = f"Created {plan.root}/"
    LOGGER.info(message)
    return message
