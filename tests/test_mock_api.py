"""
Tests for the in-memory profile API.
"""
from portfolio.mock_api import ADMIN_EMAIL, ADMIN_PASSWORD, MockApi


def test_get_profile_returns_seed(api):
    profile = api.get_profile()
    assert profile is not None
    assert profile.name == "Julio Cesar Fonseca"


def test_get_profile_returns_copy(api):
    profile = api.get_profile()
    profile.title = "Changed locally"
    assert api.get_profile().title != "Changed locally"


def test_get_profile_without_record():
    assert MockApi(initial=None, delay=0).get_profile() is None


def test_update_replaces_record_and_bumps_timestamp(api):
    before = api.get_profile()
    edited = before.model_copy(update={"title": "Data Scientist"})

    returned = api.update_profile(edited)
    after = api.get_profile()

    assert returned.title == "Data Scientist"
    assert after.title == "Data Scientist"
    assert after.updated_at > before.updated_at
    assert after.updated_at == returned.updated_at


def test_consecutive_updates_strictly_increase_timestamp(api):
    record = api.get_profile()
    stamps = [api.update_profile(record).updated_at for _ in range(5)]
    assert all(a < b for a, b in zip(stamps, stamps[1:]))


def test_update_ignores_caller_timestamp(api):
    record = api.get_profile()
    stale = record.model_copy(update={"updated_at": record.updated_at.replace(year=2000)})
    assert api.update_profile(stale).updated_at > record.updated_at


def test_update_on_empty_store(profile):
    api = MockApi(initial=None, delay=0)
    api.update_profile(profile)
    assert api.get_profile().id == profile.id


def test_login_accepts_only_demo_pair(api):
    assert api.login_admin(ADMIN_EMAIL, ADMIN_PASSWORD) is True
    assert api.login_admin(ADMIN_EMAIL, "wrong") is False
    assert api.login_admin("someone@example.com", ADMIN_PASSWORD) is False
    assert api.login_admin("", "") is False


def test_send_contact_form_succeeds(api):
    assert api.send_contact_form("Ana", "ana@example.com", "Hola") is True


def test_delay_is_applied(monkeypatch):
    slept = []
    monkeypatch.setattr("portfolio.mock_api.time.sleep", slept.append)
    api = MockApi(delay=0.25)
    api.get_profile()
    api.login_admin("a", "b")
    assert slept == [0.25, 0.25]
