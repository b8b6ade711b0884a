from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from textbringer_plugin_generator.errors import IdentityUnavailable
from textbringer_plugin_generator.io.adapters.git import StaticIdentityProvider
from textbringer_plugin_generator.io.interfaces import IdentityProvider
from textbringer_plugin_generator.options import (
    DEFAULT_LICENSE,
    DEFAULT_TEST_FRAMEWORK,
    LicenseKind,
    ResolvedOptions,
    TestFramework,
    resolve,
    select_variant,
)


class FailingIdentity(IdentityProvider):
    def author(self) -> str:
        raise IdentityUnavailable("git config user.name is not set")

    def email(self) -> str:
        raise IdentityUnavailable("git config user.email is not set")

    def github_user(self) -> str:
        raise IdentityUnavailable("git config github.user is not set")


def test_defaults_with_blank_identity(blank_identity, fixed_day):
    options = resolve({}, blank_identity, today=fixed_day)
    assert options.license_kind is LicenseKind.WTFPL
    assert options.test_framework is TestFramework.TEST_UNIT
    assert options.author == ""
    assert options.email == ""
    assert options.github_user == ""
    assert options.year == 2024


def test_default_constants():
    assert DEFAULT_LICENSE is LicenseKind.WTFPL
    assert DEFAULT_TEST_FRAMEWORK is TestFramework.TEST_UNIT


def test_unrecognised_license_falls_back(blank_identity):
    options = resolve({"license": "unknown-token"}, blank_identity)
    assert options.license_kind is LicenseKind.WTFPL


def test_unrecognised_test_framework_falls_back(blank_identity):
    options = resolve({"test_framework": "cucumber"}, blank_identity)
    assert options.test_framework is TestFramework.TEST_UNIT


def test_tokens_are_case_sensitive(blank_identity):
    options = resolve({"license": "MIT", "test_framework": "RSpec"}, blank_identity)
    assert options.license_kind is LicenseKind.WTFPL
    assert options.test_framework is TestFramework.TEST_UNIT


@pytest.mark.parametrize("kind", list(LicenseKind))
def test_every_license_token_is_recognised(kind, blank_identity):
    assert resolve({"license": kind.value}, blank_identity).license_kind is kind


@pytest.mark.parametrize("framework", list(TestFramework))
def test_every_framework_token_is_recognised(framework, blank_identity):
    assert resolve({"test_framework": framework.value}, blank_identity).test_framework is framework


def test_explicit_values_win_over_identity():
    identity = StaticIdentityProvider("Git User", "git@example.com", "gituser")
    options = resolve({"author": "Ada", "email": "ada@example.com", "github_user": "ada"}, identity)
    assert (options.author, options.email, options.github_user) == ("Ada", "ada@example.com", "ada")


def test_empty_values_use_identity():
    identity = StaticIdentityProvider("Git User", "git@example.com", "gituser")
    options = resolve({"author": "", "email": None}, identity)
    assert options.author == "Git User"
    assert options.email == "git@example.com"
    assert options.github_user == "gituser"


def test_identity_failure_yields_blank_fields():
    options = resolve({}, FailingIdentity())
    assert options.author == ""
    assert options.email == ""
    assert options.github_user == ""


def test_github_user_falls_back_to_sanitised_author():
    options = resolve({"author": "Ada Lovelace"}, FailingIdentity())
    assert options.github_user == "AdaLovelace"


def test_year_defaults_to_today(blank_identity):
    assert resolve({}, blank_identity).year == date.today().year


def test_select_variant_accepts_members():
    assert select_variant(LicenseKind, LicenseKind.MIT, DEFAULT_LICENSE) is LicenseKind.MIT
    assert select_variant(LicenseKind, None, DEFAULT_LICENSE) is DEFAULT_LICENSE
    assert select_variant(LicenseKind, 42, DEFAULT_LICENSE) is DEFAULT_LICENSE


def test_resolved_options_are_frozen(options):
    with pytest.raises(ValidationError):
        options.author = "Someone else"


def test_resolved_options_reject_unknown_fields():
    with pytest.raises(ValidationError):
        ResolvedOptions(colour="blue")
