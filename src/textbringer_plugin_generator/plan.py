"""Decide which directories and files a plugin package consists of."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping

from . import renderers
from .config import HOST_PREFIX, RUBY_EXTENSION, DerivedNames
from .options import ResolvedOptions, TestFramework
from .renderers import Renderer

__all__ = ["ArtifactPlan", "PlannedFile", "TestLayout", "TEST_LAYOUTS", "plan"]

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class PlannedFile:
    """A file to generate, relative to the package root."""

    path: str
    renderer: Renderer


@dataclass(slots=True, frozen=True)
class TestLayout:
    """Where a test framework keeps its helper and test files."""

    __test__ = False

    directory: str
    helper: str
    suffix: str
    helper_renderer: Renderer
    test_renderer: Renderer
    extra_files: tuple[PlannedFile, ...] = ()


TEST_LAYOUTS: Mapping[TestFramework, TestLayout] = {
    TestFramework.TEST_UNIT: TestLayout(
        directory="test",
        helper="test_helper",
        suffix="test",
        helper_renderer=renderers.render_test_unit_helper,
        test_renderer=renderers.render_test_unit_test,
    ),
    TestFramework.MINITEST: TestLayout(
        directory="test",
        helper="test_helper",
        suffix="test",
        helper_renderer=renderers.render_minitest_helper,
        test_renderer=renderers.render_minitest_test,
    ),
    TestFramework.RSPEC: TestLayout(
        directory="spec",
        helper="spec_helper",
        suffix="spec",
        helper_renderer=renderers.render_rspec_helper,
        test_renderer=renderers.render_rspec_spec,
        extra_files=(PlannedFile(".rspec", renderers.render_rspec_dotfile),),
    ),
}


@dataclass(slots=True, frozen=True)
class ArtifactPlan:
    """Ordered directories and files making up one generated package.

    ``directories`` and the paths of ``files`` are relative to the directory the
    package is generated in; every path starts with :attr:`root`.
    """

    root: str
    directories: tuple[str, ...]
    files: tuple[PlannedFile, ...]
    test_directory: str
    helper_path: str
    test_path: str
    license_path: str

    def paths(self) -> list[str]:
        return [planned.path for planned in self.files]


def plan(names: DerivedNames, options: ResolvedOptions) -> ArtifactPlan:
    """Build the :class:`ArtifactPlan` for ``names`` and ``options``."""

    root = names.package_name
    layout = TEST_LAYOUTS[options.test_framework]
    ext = RUBY_EXTENSION

    def at(relative: str) -> str:
        return f"{root}/{relative}"

    test_directory = at(layout.directory)
    helper_path = at(f"{layout.directory}/{layout.helper}.{ext}")
    test_path = at(f"{layout.directory}/{names.test_file_stem}_{layout.suffix}.{ext}")
    license_path = at("LICENSE.txt")

    directories = (
        root,
        at(names.lib_dir),
        at(".github/workflows"),
        test_directory,
    )

    files = [
        PlannedFile(at(f"{names.package_name}.gemspec"), renderers.render_gemspec),
        PlannedFile(at("Gemfile"), renderers.render_gemfile),
        PlannedFile(at("Rakefile"), renderers.render_rakefile),
        PlannedFile(at(".gitignore"), renderers.render_gitignore),
        PlannedFile(at(f"{names.lib_dir}/version.{ext}"), renderers.render_version_module),
        PlannedFile(at(f"lib/{HOST_PREFIX}/{names.raw}.{ext}"), renderers.render_main_module),
        PlannedFile(at(f"lib/{HOST_PREFIX}_plugin.{ext}"), renderers.render_plugin_entry),
        PlannedFile(at(".github/workflows/ci.yml"), renderers.render_ci_workflow),
        PlannedFile(helper_path, layout.helper_renderer),
        PlannedFile(test_path, layout.test_renderer),
    ]
    files.extend(PlannedFile(at(extra.path), extra.renderer) for extra in layout.extra_files)
    files.append(PlannedFile(at("README.md"), renderers.render_readme))
    files.append(PlannedFile(license_path, renderers.license_renderer(options.license_kind)))

    LOGGER.debug(
        "planned %d directories and %d files for %s (%s, %s)",
        len(directories),
        len(files),
        root,
        options.test_framework.value,
        options.license_kind.value,
    )
    return ArtifactPlan(
        root=root,
        directories=directories,
        files=tuple(files),
        test_directory=test_directory,
        helper_path=helper_path,
        test_path=test_path,
        license_path=license_path,
    )
