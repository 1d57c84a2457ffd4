"""
Tests for route resolution and admin gating.
"""
import pytest

from portfolio.router import ADMIN_PATH, PUBLIC_PATH, View, is_known_path, normalize_path, resolve


@pytest.mark.parametrize("raw, expected", [
    ("/", "/"),
    ("", "/"),
    (None, "/"),
    ("/admin", "/admin"),
    ("admin", "/admin"),
    ("/admin/", "/admin"),
    ("#/admin", "/admin"),
    ("#/", "/"),
    ("/nope", "/"),
    ("/admin/settings", "/"),
])
def test_normalize_path(raw, expected):
    assert normalize_path(raw) == expected


def test_public_always_reachable():
    assert resolve("/", is_admin=False) == (PUBLIC_PATH, View.PUBLIC)
    assert resolve("/", is_admin=True) == (PUBLIC_PATH, View.PUBLIC)


def test_admin_gated_by_session_flag():
    assert resolve("/admin", is_admin=False) == (ADMIN_PATH, View.LOGIN)
    assert resolve("/admin", is_admin=True) == (ADMIN_PATH, View.DASHBOARD)


def test_undefined_path_redirects_to_root():
    assert resolve("/projects/42", is_admin=True) == (PUBLIC_PATH, View.PUBLIC)


@pytest.mark.parametrize("raw", ["/", "", None, "admin", "#/admin", "/admin/"])
def test_alternate_spellings_are_known(raw):
    assert is_known_path(raw) is True


@pytest.mark.parametrize("raw", ["/nope", "/admin/settings", "#/projects"])
def test_undefined_paths_are_unknown(raw):
    assert is_known_path(raw) is False
