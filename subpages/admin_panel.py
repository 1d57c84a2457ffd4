# subpages/admin_panel.py — login gate + profile editor
# ----------------------------------------------------------
# Login: single demo credential pair, inline error on failure.
# Dashboard: tabbed editor over an AdminForm draft; "save" sends
# the whole draft back through AppState.update_profile.
# ----------------------------------------------------------

from __future__ import annotations
import logging

import streamlit as st

from portfolio.admin_form import READ_ONLY_TABS, TABS, AdminForm
from portfolio.mock_api import ADMIN_EMAIL, ADMIN_PASSWORD
from portfolio.router import PUBLIC_PATH
from portfolio.state import AppState
from subpages.components import set_route

logger = logging.getLogger("portfolio.admin_panel")

FORM_KEY = "admin_form"
LOGIN_ERROR_KEY = "login_error"

INVALID_CREDENTIALS = f"Credenciales inválidas (Prueba: {ADMIN_EMAIL} / {ADMIN_PASSWORD})"
SAVED_MESSAGE = "Cambios guardados correctamente"


# -----------------------------
# Login
# -----------------------------
def render_login(state: AppState):
    _, mid, _ = st.columns([1, 1.2, 1])
    with mid:
        st.markdown(
            "<div class='login-head'><h2>Admin Panel</h2><p>Accede para editar tu perfil</p></div>",
            unsafe_allow_html=True,
        )
        error_slot = st.empty()
        email = st.text_input("Email", key="login_email")
        password = st.text_input("Contraseña", type="password", key="login_password")
        if st.button("Ingresar", key="login_submit", type="primary"):
            with st.spinner("Verificando..."):
                ok = state.login(email, password)
            if ok:
                st.session_state.pop(LOGIN_ERROR_KEY, None)
                st.rerun()
            st.session_state[LOGIN_ERROR_KEY] = INVALID_CREDENTIALS
        if st.session_state.get(LOGIN_ERROR_KEY):
            error_slot.error(st.session_state[LOGIN_ERROR_KEY])
        st.caption(f"Demo: {ADMIN_EMAIL} / {ADMIN_PASSWORD}")


# -----------------------------
# Dashboard
# -----------------------------
def get_admin_form(state: AppState) -> AdminForm:
    if FORM_KEY not in st.session_state:
        st.session_state[FORM_KEY] = AdminForm(state.profile)
    return st.session_state[FORM_KEY]


def logout(state: AppState):
    state.logout()
    st.session_state.pop(FORM_KEY, None)
    st.session_state.pop(LOGIN_ERROR_KEY, None)


def render_general_tab(form: AdminForm):
    d = form.draft
    form.set_field("name", st.text_input("Nombre Completo", value=d.name, key="draft_name"))
    form.set_field("title", st.text_input("Título Profesional", value=d.title, key="draft_title"))
    form.set_field("summary", st.text_area("Resumen (Elevator Pitch)", value=d.summary, key="draft_summary"))
    form.set_field("about", st.text_area("Biografía Completa", value=d.about, height=220, key="draft_about"))
    form.set_field("photo", st.text_input("URL Foto Perfil", value=d.photo, key="draft_photo"))
    form.set_field("cv", st.text_input("URL CV (PDF)", value=d.cv, key="draft_cv"))


def render_contact_tab(form: AdminForm):
    c = form.draft.contact
    form.set_contact_field("email", st.text_input("Email Público", value=c.email, key="draft_email"))
    form.set_contact_field("phone", st.text_input("Teléfono", value=c.phone or "", key="draft_phone"))
    st.info(
        "Nota: La edición de enlaces sociales y proyectos requiere lógica de arrays más compleja, "
        "simplificada para esta demo."
    )


def render_read_only_tab(form: AdminForm, tab: str):
    st.markdown(f"Editor de lista para {tab} disponible en versión completa.")
    st.json(form.read_only_data(tab))


def render_dashboard(state: AppState):
    form = get_admin_form(state)

    st.sidebar.title("Admin")
    tab = st.sidebar.radio("Sección", list(TABS), format_func=TABS.get, key="admin_tab")
    st.sidebar.markdown("---")
    if st.sidebar.button("🌐 Ver Sitio", key="admin_view_site"):
        set_route(PUBLIC_PATH); st.rerun()
    if st.sidebar.button("↩️ Salir", key="admin_logout"):
        logout(state); st.rerun()

    head_l, head_r = st.columns([3, 1])
    with head_l:
        st.title(TABS[tab])
        st.caption(f"Última actualización: {state.profile.updated_at:%Y-%m-%d %H:%M:%S} UTC")
    with head_r:
        save_clicked = st.button("💾 Guardar Cambios", key="admin_save", type="primary")
    status_slot = st.empty()

    st.markdown("---")
    if tab == "general":
        render_general_tab(form)
    elif tab == "contact":
        render_contact_tab(form)
    elif tab in READ_ONLY_TABS:
        render_read_only_tab(form, tab)

    # Widgets above have already pushed this run's edits into the draft
    if save_clicked:
        with st.spinner("Guardando..."):
            form.save(state)
        logger.info("Admin saved profile %s", state.profile.id)
        status_slot.success(SAVED_MESSAGE)
