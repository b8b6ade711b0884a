from __future__ import annotations

import logging
import sys
from datetime import date
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from textbringer_plugin_generator.io.adapters.git import StaticIdentityProvider  # noqa: E402
from textbringer_plugin_generator.options import ResolvedOptions  # noqa: E402


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo ``configure_logging`` side effects between tests."""

    yield
    logger = logging.getLogger("textbringer_plugin_generator")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture()
def blank_identity() -> StaticIdentityProvider:
    return StaticIdentityProvider()


@pytest.fixture()
def fixed_day() -> date:
    return date(2024, 5, 17)


@pytest.fixture()
def options() -> ResolvedOptions:
    return ResolvedOptions(author="Ada Lovelace", email="ada@example.com", github_user="ada", year=2024)
