# app.py — Public profile (single scroll) + mock-auth admin panel
# ----------------------------------------------------------------
# Routes (via ?route=, hash-style "#/admin" accepted):
#  • /       public profile, always reachable
#  • /admin  dashboard when this browser carries the admin session cookie, login otherwise
#  • any other path is replaced by /
# ----------------------------------------------------------------

from __future__ import annotations
import logging

import streamlit as st

from portfolio.router import View, is_known_path, resolve
from subpages.admin_panel import render_dashboard, render_login
from subpages.components import get_app_state, get_route, inject_css, set_route, sync_browser_storage
from subpages.public_profile import render_public

logger = logging.getLogger("portfolio.app")

# -----------------------------
# Page config + CSS
# -----------------------------
st.set_page_config(
    page_title="Business — Portafolio",
    page_icon="📊",
    layout="wide",
    initial_sidebar_state="expanded",
)
inject_css()

# -----------------------------
# State
# -----------------------------
sync_browser_storage()
state = get_app_state()

if not state.loaded:
    with st.spinner("Cargando perfil..."):
        state.load()

if state.profile is None:
    st.error("Error loading profile data")
    st.stop()

# -----------------------------
# Dispatch
# -----------------------------
requested = get_route()
path, view = resolve(requested, state.is_admin)
if path != requested:
    if not is_known_path(requested):
        logger.info("Unknown route %r, redirecting to %s", requested, path)
    set_route(path)

if view == View.DASHBOARD:
    render_dashboard(state)
elif view == View.LOGIN:
    render_login(state)
else:
    render_public(state)
