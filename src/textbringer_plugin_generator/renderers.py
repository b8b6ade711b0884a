"""Content renderers, one per generated artifact family.

Every renderer is a pure function of :class:`DerivedNames` and
:class:`ResolvedOptions` returning the file's text.
"""

from __future__ import annotations

from functools import partial
from typing import Any, Callable, Mapping

from .config import DerivedNames
from .licenses import license_info
from .options import LicenseKind, ResolvedOptions, TestFramework
from .template import TemplateRenderer

__all__ = [
    "Renderer",
    "TEXTBRINGER_MOCK",
    "license_renderer",
    "render_ci_workflow",
    "render_gemfile",
    "render_gemspec",
    "render_gitignore",
    "render_main_module",
    "render_minitest_helper",
    "render_minitest_test",
    "render_plugin_entry",
    "render_rakefile",
    "render_readme",
    "render_rspec_dotfile",
    "render_rspec_helper",
    "render_rspec_spec",
    "render_test_unit_helper",
    "render_test_unit_test",
    "render_version_module",
]

Renderer = Callable[[DerivedNames, ResolvedOptions], str]

_RENDERER = TemplateRenderer()

_TEST_GEMS: Mapping[TestFramework, str] = {
    TestFramework.TEST_UNIT: 'gem "test-unit"',
    TestFramework.MINITEST: 'gem "minitest", "~> 5.0"',
    TestFramework.RSPEC: 'gem "rspec", "~> 3.0"',
}

_TEST_TASKS: Mapping[TestFramework, str] = {
    TestFramework.TEST_UNIT: "test",
    TestFramework.MINITEST: "test",
    TestFramework.RSPEC: "spec",
}


def _context(names: DerivedNames, options: ResolvedOptions) -> dict[str, Any]:
    info = license_info(options.license_kind)
    context: dict[str, Any] = dict(names.context())
    context.update(
        {
            "author": options.author,
            "email": options.email,
            "github_user": options.github_user,
            "year": options.year,
            "homepage": f"https://github.com/{options.github_user}/{names.package_name}",
            "license_id": info.spdx_id,
            "license_title": info.title,
            "license_url": info.url,
            "test_gem": _TEST_GEMS[options.test_framework],
            "test_task": _TEST_TASKS[options.test_framework],
            "textbringer_mock": TEXTBRINGER_MOCK,
        }
    )
    return context


def _render(template: str, names: DerivedNames, options: ResolvedOptions) -> str:
    return _RENDERER.render_string(template, _context(names, options))


GEMSPEC_TEMPLATE = """# frozen_string_literal: true

require_relative "{{ lib_dir }}/version"

Gem::Specification.new do |spec|
  spec.name = "{{ package_name }}"
  spec.version = Textbringer::{{ module_name }}::VERSION
  spec.authors = [{{ author|ruby }}]
  spec.email = [{{ email|ruby }}]

  spec.summary = "{{ module_name }} mode for Textbringer"
  spec.description = "A Textbringer plugin that provides {{ raw }} mode support with syntax highlighting."
  spec.homepage = "{{ homepage }}"
  spec.license = "{{ license_id }}"
  spec.required_ruby_version = "{{ required_ruby_version }}"

  spec.metadata["allowed_push_host"] = "https://rubygems.org"
  spec.metadata["homepage_uri"] = spec.homepage
  spec.metadata["source_code_uri"] = "{{ homepage }}"

  gemspec = File.basename(__FILE__)
  spec.files = IO.popen(%w[git ls-files -z], chdir: __dir__, err: IO::NULL) do |ls|
    ls.readlines("\\x0", chomp: true).reject do |f|
      (f == gemspec) ||
        f.start_with?(*%w[bin/ test/ spec/ Gemfile .gitignore .rspec .github/])
    end
  end
  spec.bindir = "exe"
  spec.executables = spec.files.grep(%r{\\Aexe/}) { |f| File.basename(f) }
  spec.require_paths = ["lib"]

  spec.add_dependency "textbringer", ">= 1.0"
end
"""

GEMFILE_TEMPLATE = """# frozen_string_literal: true

source "https://rubygems.org"

gemspec

gem "irb"
gem "rake", "~> 13.0"
{{ test_gem }}
"""

TEST_TASK_RAKEFILE = """# frozen_string_literal: true

require "bundler/gem_tasks"
require "rake/testtask"

Rake::TestTask.new(:test) do |t|
  t.libs << "test"
  t.libs << "lib"
  t.test_files = FileList["test/**/*_test.rb"]
end

task default: :test
"""

RSPEC_RAKEFILE = """# frozen_string_literal: true

require "bundler/gem_tasks"
require "rspec/core/rake_task"

RSpec::Core::RakeTask.new(:spec)

task default: :spec
"""

GITIGNORE = """/.bundle/
/.yardoc
/_yardoc/
/coverage/
/doc/
/pkg/
/spec/reports/
/tmp/
/.rspec_status

# Bundler lockfile for gems
Gemfile.lock
"""

VERSION_TEMPLATE = """# frozen_string_literal: true

module Textbringer
  module {{ module_name }}
    VERSION = "{{ version }}"
  end
end
"""

MAIN_MODULE_TEMPLATE = """# frozen_string_literal: true

require_relative "{{ raw }}/version"

module Textbringer
  # Define faces for syntax elements
  # Face.define :{{ snake_name }}_keyword, foreground: "cyan", bold: true

  class {{ mode_class_name }} < Mode
    self.file_name_pattern = /\\.{{ raw }}\\z/i

    # Define your syntax highlighting here
    # define_syntax :{{ snake_name }}_keyword, /your_pattern/

    def initialize(buffer)
      super(buffer)
      @buffer[:indent_tabs_mode] = false
      @buffer[:tab_width] = 2
    end
  end
end
"""

PLUGIN_ENTRY_TEMPLATE = """# frozen_string_literal: true

require "{{ host }}/{{ raw }}"
"""

# Shared by every helper file so the suites run without Textbringer installed.
TEXTBRINGER_MOCK = """# Mock Textbringer for testing without the actual dependency
module Textbringer
  class Face
    def self.define(name, **options)
      # Mock Face.define
    end
  end

  class Mode
    attr_reader :buffer

    def initialize(buffer)
      @buffer = buffer
    end

    def self.define_syntax(face, pattern)
      # Mock define_syntax
    end

    def self.file_name_pattern
      @file_name_pattern
    end

    def self.file_name_pattern=(pattern)
      @file_name_pattern = pattern
    end
  end
end
"""

TEST_UNIT_HELPER_TEMPLATE = """# frozen_string_literal: true

$LOAD_PATH.unshift File.expand_path("../lib", __dir__)

{{ textbringer_mock }}
require "{{ host }}/{{ raw }}"

require "test/unit"
"""

TEST_UNIT_TEST_TEMPLATE = """# frozen_string_literal: true

require "test_helper"

class Textbringer::{{ test_class_stem }}Test < Test::Unit::TestCase
  test "VERSION is defined" do
    assert do
      ::Textbringer::{{ module_name }}.const_defined?(:VERSION)
    end
  end

  test "{{ mode_class_name }} class exists" do
    assert do
      defined?(Textbringer::{{ mode_class_name }})
    end
  end

  test "{{ mode_class_name }} file pattern matches .{{ raw }} files" do
    assert do
      Textbringer::{{ mode_class_name }}.file_name_pattern =~ "test.{{ raw }}"
    end
  end
end
"""

MINITEST_HELPER_TEMPLATE = """# frozen_string_literal: true

$LOAD_PATH.unshift File.expand_path("../lib", __dir__)

{{ textbringer_mock }}
require "{{ host }}/{{ raw }}"

require "minitest/autorun"
"""

MINITEST_TEST_TEMPLATE = """# frozen_string_literal: true

require "test_helper"

class Textbringer::{{ test_class_stem }}Test < Minitest::Test
  def test_version_is_defined
    assert ::Textbringer::{{ module_name }}.const_defined?(:VERSION)
  end

  def test_mode_class_exists
    refute_nil defined?(Textbringer::{{ mode_class_name }})
  end

  def test_file_name_pattern_matches_extension
    assert_match Textbringer::{{ mode_class_name }}.file_name_pattern, "test.{{ raw }}"
  end
end
"""

RSPEC_DOTFILE = """--format documentation
--color
--require spec_helper
"""

RSPEC_HELPER_TEMPLATE = """# frozen_string_literal: true

$LOAD_PATH.unshift File.expand_path("../lib", __dir__)

{{ textbringer_mock }}
require "{{ host }}/{{ raw }}"

RSpec.configure do |config|
  config.example_status_persistence_file_path = ".rspec_status"
  config.disable_monkey_patching!

  config.expect_with :rspec do |c|
    c.syntax = :expect
  end
end
"""

RSPEC_SPEC_TEMPLATE = """# frozen_string_literal: true

RSpec.describe Textbringer::{{ mode_class_name }} do
  it "has a version number" do
    expect(Textbringer::{{ module_name }}::VERSION).not_to be_nil
  end

  it "is a Textbringer mode" do
    expect(described_class.ancestors).to include(Textbringer::Mode)
  end

  it "matches .{{ raw }} files" do
    expect("test.{{ raw }}").to match(described_class.file_name_pattern)
  end
end
"""

CI_WORKFLOW = """name: Ruby

on:
  push:
    branches:
      - main
  pull_request:

jobs:
  build:
    runs-on: ubuntu-latest
    name: Ruby ${{ matrix.ruby }}
    strategy:
      matrix:
        ruby:
          - '3.2'
          - '3.3'
          - '3.4'

    steps:
      - uses: actions/checkout@v4
      - name: Set up Ruby
        uses: ruby/setup-ruby@v1
        with:
          ruby-version: ${{ matrix.ruby }}
          bundler-cache: true
      - name: Run the default task
        run: bundle exec rake
"""

README_TEMPLATE = """# {{ display_name }}

A Textbringer plugin that provides {{ raw }} mode support.

## Installation

Install the gem by executing:

```bash
gem install {{ package_name }}
```

Or add it to your Gemfile:

```bash
bundle add {{ package_name }}
```

## Usage

The plugin is automatically loaded when you start Textbringer. Simply open any `.{{ raw }}` file and the mode will be applied automatically.

No additional configuration is required.

## Development

After checking out the repo, run `bundle install` to install dependencies. Then, run `rake {{ test_task }}` to run the tests.

To install this gem onto your local machine, run `bundle exec rake install`.

## Contributing

Bug reports and pull requests are welcome on GitHub at {{ homepage }}.

## License

The gem is available as open source under the terms of the [{{ license_title }}]({{ license_url }}).
"""


def render_gemspec(names: DerivedNames, options: ResolvedOptions) -> str:
    return _render(GEMSPEC_TEMPLATE, names, options)


def render_gemfile(names: DerivedNames, options: ResolvedOptions) -> str:
    return _render(GEMFILE_TEMPLATE, names, options)


def render_rakefile(names: DerivedNames, options: ResolvedOptions) -> str:
    """Rakefile whose default task runs the chosen framework's suite."""

    if options.test_framework is TestFramework.RSPEC:
        return RSPEC_RAKEFILE
    return TEST_TASK_RAKEFILE


def render_gitignore(names: DerivedNames, options: ResolvedOptions) -> str:
    return GITIGNORE


def render_version_module(names: DerivedNames, options: ResolvedOptions) -> str:
    return _render(VERSION_TEMPLATE, names, options)


def render_main_module(names: DerivedNames, options: ResolvedOptions) -> str:
    return _render(MAIN_MODULE_TEMPLATE, names, options)


def render_plugin_entry(names: DerivedNames, options: ResolvedOptions) -> str:
    return _render(PLUGIN_ENTRY_TEMPLATE, names, options)


def render_test_unit_helper(names: DerivedNames, options: ResolvedOptions) -> str:
    return _render(TEST_UNIT_HELPER_TEMPLATE, names, options)


def render_test_unit_test(names: DerivedNames, options: ResolvedOptions) -> str:
    return _render(TEST_UNIT_TEST_TEMPLATE, names, options)


def render_minitest_helper(names: DerivedNames, options: ResolvedOptions) -> str:
    return _render(MINITEST_HELPER_TEMPLATE, names, options)


def render_minitest_test(names: DerivedNames, options: ResolvedOptions) -> str:
    return _render(MINITEST_TEST_TEMPLATE, names, options)


def render_rspec_dotfile(names: DerivedNames, options: ResolvedOptions) -> str:
    return RSPEC_DOTFILE


def render_rspec_helper(names: DerivedNames, options: ResolvedOptions) -> str:
    return _render(RSPEC_HELPER_TEMPLATE, names, options)


def render_rspec_spec(names: DerivedNames, options: ResolvedOptions) -> str:
    return _render(RSPEC_SPEC_TEMPLATE, names, options)


def render_ci_workflow(names: DerivedNames, options: ResolvedOptions) -> str:
    # ``${{ ... }}`` belongs to GitHub Actions; this file is never templated.
    return CI_WORKFLOW


def render_readme(names: DerivedNames, options: ResolvedOptions) -> str:
    return _render(README_TEMPLATE, names, options)


def _render_license(kind: LicenseKind, names: DerivedNames, options: ResolvedOptions) -> str:
    return _render(license_info(kind).body, names, options)


def license_renderer(kind: LicenseKind) -> Renderer:
    """Return the LICENSE.txt renderer for ``kind``."""

    return partial(_render_license, kind)
