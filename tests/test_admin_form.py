"""
Tests for the admin form draft and the application-state container.
"""
import pytest

from portfolio.admin_form import AdminForm
from portfolio.config import Config
from portfolio.mock_api import ADMIN_EMAIL, ADMIN_PASSWORD
from portfolio.state import AppState


@pytest.fixture
def state(api, session_flag):
    app_state = AppState(api, session_flag)
    app_state.load()
    return app_state


def test_draft_is_independent_copy(state):
    form = AdminForm(state.profile)
    form.set_field("title", "Nuevo título")
    assert state.profile.title != "Nuevo título"
    assert state.api.get_profile().title != "Nuevo título"


def test_set_field_rejects_non_general_fields(state):
    form = AdminForm(state.profile)
    with pytest.raises(ValueError):
        form.set_field("skills", "[]")
    with pytest.raises(ValueError):
        form.set_contact_field("links", "x")


def test_contact_fields(state):
    form = AdminForm(state.profile)
    form.set_contact_field("email", "nuevo@example.com")
    form.set_contact_field("phone", "")
    assert form.draft.contact.email == "nuevo@example.com"
    assert form.draft.contact.phone is None
    assert form.draft.contact.links == state.profile.contact.links


def test_read_only_tabs_expose_raw_data(state):
    form = AdminForm(state.profile)
    skills = form.read_only_data("skills")
    assert skills[0] == {"name": "Python & R", "level": "expert"}
    assert [p["id"] for p in form.read_only_data("projects")] == ["p1", "p2", "p3"]
    with pytest.raises(ValueError):
        form.read_only_data("general")


def test_save_round_trips_through_store(state):
    before = state.profile.updated_at
    form = AdminForm(state.profile)
    form.set_field("title", "Data Scientist")

    saved = form.save(state)

    assert saved.title == "Data Scientist"
    assert state.profile.title == "Data Scientist"
    fresh = state.api.get_profile()
    assert fresh.title == "Data Scientist"
    assert fresh.updated_at > before
    assert form.draft.updated_at == fresh.updated_at


def test_load_fetches_once(state, monkeypatch):
    calls = []
    monkeypatch.setattr(state.api, "get_profile", lambda: calls.append(1))
    state.load()
    assert calls == []


def test_login_and_logout_toggle_flag(state, session_flag):
    assert state.is_admin is False
    assert state.login("intruso@example.com", "1234") is False
    assert state.is_admin is False
    assert session_flag.is_set() is False

    assert state.login(ADMIN_EMAIL, ADMIN_PASSWORD) is True
    assert state.is_admin is True
    assert session_flag.is_set() is True

    state.logout()
    assert state.is_admin is False
    assert session_flag.is_set() is False


def test_new_state_picks_up_persisted_flag(api, session_flag):
    session_flag.set()
    assert AppState(api, session_flag).is_admin is True


def test_is_admin_follows_cookie_arriving_later(api, storage, session_flag):
    state = AppState(api, session_flag)
    assert state.is_admin is False
    storage.sync({"admin_session": True})
    assert state.is_admin is True


def test_from_config_uses_environment(storage):
    state = AppState.from_config(Config(), storage)
    assert state.api.delay == 0
    assert state.session_flag.storage is storage
    assert state.is_admin is False
