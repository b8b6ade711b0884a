"""Generation options and their resolution against defaults."""

from __future__ import annotations

import logging
from datetime import date
from enum import Enum
from typing import Callable, Mapping, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from .errors import IdentityUnavailable
from .io.interfaces import IdentityProvider
from .naming import github_handle

LOGGER = logging.getLogger(__name__)

EnumT = TypeVar("EnumT", bound=Enum)


class LicenseKind(str, Enum):
    """Licenses a generated plugin can ship with."""

    WTFPL = "wtfpl"
    MIT = "mit"
    APACHE_2_0 = "apache-2.0"
    BSD_3_CLAUSE = "bsd-3-clause"
    GPL_3_0 = "gpl-3.0"


class TestFramework(str, Enum):
    """Test frameworks the generated suite can target."""

    __test__ = False

    TEST_UNIT = "test-unit"
    MINITEST = "minitest"
    RSPEC = "rspec"


DEFAULT_LICENSE = LicenseKind.WTFPL
DEFAULT_TEST_FRAMEWORK = TestFramework.TEST_UNIT


class ResolvedOptions(BaseModel):
    """Options after defaults and identity lookups have been applied."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    license_kind: LicenseKind = Field(default=DEFAULT_LICENSE, description="License written to LICENSE.txt.")
    test_framework: TestFramework = Field(
        default=DEFAULT_TEST_FRAMEWORK, description="Framework used by the generated test suite."
    )
    author: str = Field(default="", description="Author name stamped into the gemspec and license.")
    email: str = Field(default="", description="Author email stamped into the gemspec.")
    github_user: str = Field(default="", description="GitHub account used for homepage and source URLs.")
    year: int = Field(default_factory=lambda: date.today().year, description="Copyright year.")


def select_variant(enum_type: type[EnumT], token: object, default: EnumT) -> EnumT:
    """Map ``token`` onto ``enum_type`` or fall back to ``default``.

    Unknown tokens are not an error; the CLI lists the accepted values but the
    resolver stays permissive.
    """

    if isinstance(token, enum_type):
        return token
    if isinstance(token, str):
        for member in enum_type:
            if member.value == token:
                return member
    if token not in (None, ""):
        LOGGER.debug("unrecognised %s %r, using %s", enum_type.__name__, token, default.value)
    return default


def _from_provider(lookup: Callable[[], str], label: str) -> str:
    try:
        return lookup() or ""
    except (IdentityUnavailable, OSError) as exc:
        LOGGER.debug("no default %s: %s", label, exc)
        return ""


def resolve(
    raw_options: Mapping[str, object | None],
    identity_provider: IdentityProvider,
    *,
    today: date | None = None,
) -> ResolvedOptions:
    """Normalise ``raw_options`` into :class:`ResolvedOptions`.

    Recognised keys are ``license``, ``test_framework``, ``author``, ``email`` and
    ``github_user``. Missing or empty author details are looked up through
    ``identity_provider``. A provider failure leaves the field blank.
    """

    author = str(raw_options.get("author") or "") or _from_provider(identity_provider.author, "author")
    email = str(raw_options.get("email") or "") or _from_provider(identity_provider.email, "email")
    github_user = (
        str(raw_options.get("github_user") or "")
        or _from_provider(identity_provider.github_user, "github user")
        or github_handle(author)
    )

    return ResolvedOptions(
        license_kind=select_variant(LicenseKind, raw_options.get("license"), DEFAULT_LICENSE),
        test_framework=select_variant(TestFramework, raw_options.get("test_framework"), DEFAULT_TEST_FRAMEWORK),
        author=author,
        email=email,
        github_user=github_user,
        year=(today or date.today()).year,
    )


__all__ = [
    "DEFAULT_LICENSE",
    "DEFAULT_TEST_FRAMEWORK",
    "LicenseKind",
    "ResolvedOptions",
    "TestFramework",
    "resolve",
    "select_variant",
]
