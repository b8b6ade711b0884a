from __future__ import annotations

from pathlib import Path

import pytest

from textbringer_plugin_generator import __version__, cli
from textbringer_plugin_generator.io.adapters.git import StaticIdentityProvider


@pytest.fixture(autouse=True)
def offline_identity(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "GitIdentityProvider", lambda: StaticIdentityProvider())


def test_version_command(capsys: pytest.CaptureFixture[str]):
    assert cli.main(["version"]) == 0
    assert capsys.readouterr().out == f"textbringer-plugin-generator {__version__}\n"


def test_new_creates_package(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = cli.main(["new", "my-lang", "--directory", str(tmp_path)])
    assert exit_code == 0
    assert capsys.readouterr().out == "Created textbringer-my-lang/\n"
    assert (tmp_path / "textbringer-my-lang" / "test" / "textbringer_my_lang_test.rb").is_file()


def test_new_passes_options(tmp_path: Path):
    exit_code = cli.main(
        [
            "new",
            "foo_bar",
            "--license=mit",
            "--test_framework=rspec",
            "--author=Ada",
            "--email=ada@example.com",
            "-d",
            str(tmp_path),
        ]
    )
    assert exit_code == 0
    root = tmp_path / "textbringer-foo_bar"
    assert (root / "spec" / "textbringer_foo_bar_spec.rb").is_file()
    assert "Copyright (c)" in (root / "LICENSE.txt").read_text(encoding="utf-8")
    assert "https://github.com/Ada/textbringer-foo_bar" in (root / "README.md").read_text(encoding="utf-8")


def test_unknown_tokens_are_accepted(tmp_path: Path):
    exit_code = cli.main(["new", "demo", "--license", "beerware", "--test_framework", "cucumber", "-d", str(tmp_path)])
    assert exit_code == 0
    root = tmp_path / "textbringer-demo"
    assert (root / "test" / "test_helper.rb").is_file()
    assert "DO WHAT THE FUCK YOU WANT TO" in (root / "LICENSE.txt").read_text(encoding="utf-8")


def test_io_failure_exits_non_zero(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    (tmp_path / "textbringer-demo").write_text("", encoding="utf-8")

    assert cli.main(["new", "demo", "-d", str(tmp_path)]) == 1
    assert "error" in capsys.readouterr().err


def test_empty_name_is_a_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["new", "  "])
    assert excinfo.value.code == 2


@pytest.mark.parametrize("name", ["my.lang", "a/b", "../escape", "my lang"])
def test_invalid_name_is_a_usage_error(tmp_path: Path, name: str):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["new", name, "-d", str(tmp_path)])
    assert excinfo.value.code == 2
    assert list(tmp_path.iterdir()) == []


def test_command_is_required():
    with pytest.raises(SystemExit):
        cli.main([])
