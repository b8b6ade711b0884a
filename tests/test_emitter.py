from __future__ import annotations

import errno

import pytest

from textbringer_plugin_generator.config import derive
from textbringer_plugin_generator.emitter import RenderedArtifact, emit, render_plan
from textbringer_plugin_generator.errors import IOFailure
from textbringer_plugin_generator.io.interfaces import FileSink
from textbringer_plugin_generator.options import ResolvedOptions
from textbringer_plugin_generator.plan import plan


class RecordingSink(FileSink):
    def __init__(self, fail_on: str | None = None) -> None:
        self.directories: list[str] = []
        self.files: dict[str, str] = {}
        self.fail_on = fail_on

    def make_directory(self, path: str) -> None:
        if path == self.fail_on:
            raise PermissionError(errno.EACCES, "Permission denied", path)
        self.directories.append(path)

    def write_text(self, path: str, content: str) -> None:
        if path == self.fail_on:
            raise PermissionError(errno.EACCES, "Permission denied", path)
        self.files[path] = content

    def describe(self, path: str) -> str:
        return f"memory://{path}"


@pytest.fixture()
def pipeline():
    names = derive("my-lang")
    options = ResolvedOptions(year=2024)
    artifact_plan = plan(names, options)
    return artifact_plan, render_plan(artifact_plan, names, options)


def test_render_plan_follows_plan_order(pipeline):
    artifact_plan, rendered = pipeline
    assert [artifact.path for artifact in rendered] == artifact_plan.paths()
    assert all(isinstance(artifact, RenderedArtifact) and artifact.content for artifact in rendered)


def test_emit_writes_directories_then_files(pipeline):
    artifact_plan, rendered = pipeline
    sink = RecordingSink()

    message = emit(artifact_plan, rendered, sink)

    assert message == "Created textbringer-my-lang/"
    assert sink.directories == list(artifact_plan.directories)
    assert list(sink.files) == artifact_plan.paths()


def test_emit_wraps_sink_errors(pipeline):
    artifact_plan, rendered = pipeline
    sink = RecordingSink(fail_on="textbringer-my-lang/README.md")

    with pytest.raises(IOFailure) as excinfo:
        emit(artifact_plan, rendered, sink)

    assert excinfo.value.path == "memory://textbringer-my-lang/README.md"
    assert excinfo.value.reason == "Permission denied"
    assert isinstance(excinfo.value.__cause__, PermissionError)
    # Earlier writes are kept.
    assert "textbringer-my-lang/Gemfile" in sink.files
    assert "textbringer-my-lang/LICENSE.txt" not in sink.files


def test_emit_fails_on_directory_error(pipeline):
    artifact_plan, rendered = pipeline
    sink = RecordingSink(fail_on="textbringer-my-lang")

    with pytest.raises(IOFailure):
        emit(artifact_plan, rendered, sink)
    assert sink.files == {}
