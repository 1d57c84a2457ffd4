# subpages/components.py — shared UI pieces
# ----------------------------------------------------------
# CSS, session-state routing helpers, smooth-scroll JS, icon links
# and the skills radar used by the public profile.
# ----------------------------------------------------------

from __future__ import annotations
import math
from html import escape
from typing import Dict, List, Optional

import extra_streamlit_components as stx
import numpy as np
import streamlit as st
import matplotlib.pyplot as plt
from streamlit.components.v1 import html as st_html

from portfolio.config import Config
from portfolio.contact import render_icon
from portfolio.local_storage import BrowserStorage
from portfolio.logger import setup_logger
from portfolio.models import SocialLink
from portfolio.router import PUBLIC_PATH
from portfolio.state import AppState


STATE_KEY = "app_state"
ROUTE_KEY = "route"
STORAGE_KEY = "browser_storage"

# -----------------------------
# CSS
# -----------------------------
CSS = """
<style>
:root { --primary: #0f172a; --accent: #facc15; --accent-hover: #eab308; }

.section-title { font-size: 2rem; font-weight: 800; color: var(--primary); text-align: center; margin: 48px 0 6px; }
.section-rule { width: 64px; height: 4px; background: var(--accent); border-radius: 4px; margin: 0 auto 28px; }

/* Hero */
.hero-badge {
  display: inline-block; padding: 4px 12px; border-radius: 999px;
  background: rgba(30,41,59,.85); border: 1px solid #334155; color: var(--accent);
  font-size: .85rem; font-weight: 600; letter-spacing: .3px; margin-bottom: 10px;
}
.hero { font-weight: 800; line-height: 1.1; margin: 0 0 8px; font-size: clamp(30px, 3.8vw, 56px); }
.hero .accent { color: var(--accent); }
.hero-title { font-size: clamp(17px, 1.5vw, 22px); font-weight: 500; opacity: .9; margin-bottom: 10px; }
.hero-sub { font-size: clamp(15px, 1.2vw, 18px); line-height: 1.6; opacity: .85; max-width: 62ch; }
.hero-photo { width: 100%; max-width: 340px; aspect-ratio: 1/1; object-fit: cover; border-radius: 50%;
  border: 4px solid #1e293b; box-shadow: 0 20px 40px rgba(0,0,0,.25); display: block; margin: 0 auto; }

/* Icon rows */
.icon-row { display: flex; gap: 14px; flex-wrap: wrap; margin: 10px 0; }
.icon-row.center { justify-content: center; }
.icon-row a { color: #94a3b8; padding: 6px; transition: color .2s; }
.icon-row a:hover { color: var(--accent); }
.icon-row.round a { width: 48px; height: 48px; border-radius: 50%; border: 1px solid #e2e8f0;
  display: flex; align-items: center; justify-content: center; background: #f8fafc; color: #64748b; }
.icon-row.round a:hover { background: var(--primary); color: var(--accent); border-color: var(--primary); }

/* About */
.about-card { background: #f8fafc; padding: 28px; border-radius: 16px; border-left: 4px solid var(--accent);
  white-space: pre-wrap; line-height: 1.7; font-size: 1.05rem; color: #334155; }

/* Skills */
.skill-pills { display: flex; flex-wrap: wrap; justify-content: center; gap: 12px; max-width: 900px; margin: 0 auto; }
.skill-pill { padding: 8px 18px; border-radius: 999px; border: 1px solid; font-weight: 600; font-size: .9rem;
  display: inline-flex; align-items: center; gap: 8px; }
.skill-expert { background: var(--primary); color: var(--accent); border-color: var(--primary); }
.skill-advanced { background: #fff; color: var(--primary); border-color: #cbd5e1; }
.skill-default { background: #f1f5f9; color: #475569; border-color: #e2e8f0; }
.pulse-dot { width: 8px; height: 8px; border-radius: 50%; background: var(--accent); animation: pulse 1.6s infinite; }
@keyframes pulse { 50% { opacity: .35; } }

/* Projects */
.project-card { border: 1px solid #f1f5f9; border-radius: 12px; overflow: hidden; box-shadow: 0 6px 18px rgba(0,0,0,.08);
  display: flex; flex-direction: column; height: 100%; background: #fff; margin-bottom: 16px; }
.project-card img { width: 100%; height: 190px; object-fit: cover; display: block; }
.project-body { padding: 18px; }
.project-role { font-size: .75rem; font-weight: 700; color: var(--accent-hover); text-transform: uppercase; letter-spacing: .5px; }
.project-title { font-size: 1.2rem; font-weight: 700; color: var(--primary); margin: 6px 0 8px; }
.project-desc { font-size: .9rem; color: #475569; }

/* Contact */
.cta-row { display: flex; flex-wrap: wrap; justify-content: center; gap: 20px; margin: 18px 0 30px; }
.cta { display: inline-flex; align-items: center; gap: 10px; color: #fff !important; text-decoration: none !important;
  padding: 14px 30px; border-radius: 12px; font-weight: 700; font-size: 1.1rem; }
.cta-whatsapp { background: #25D366; }
.cta-linkedin { background: #0077b5; }
.contact-lead { text-align: center; color: #475569; font-size: 1.1rem; line-height: 1.6; max-width: 640px; margin: 0 auto; }
.also-find { text-align: center; color: #64748b; font-size: .8rem; font-weight: 600; text-transform: uppercase;
  letter-spacing: .6px; margin-top: 24px; }

/* Footer + floating button */
.site-footer { text-align: center; color: #94a3b8; padding: 36px 0 20px; border-top: 1px solid #1e293b; margin-top: 48px; }
.site-footer .brand { font-weight: 800; font-size: 1.5rem; color: var(--accent); display: block; margin-bottom: 8px; }
.float-whatsapp { position: fixed; bottom: 32px; right: 32px; z-index: 1000; background: #25D366; color: #fff !important;
  padding: 16px; border-radius: 50%; box-shadow: 0 10px 24px rgba(0,0,0,.25); display: flex; }

/* Admin */
.login-head { text-align: center; margin-bottom: 12px; }
.login-head h2 { color: var(--primary); margin-bottom: 0; }
</style>
"""


def inject_css():
    st.markdown(CSS, unsafe_allow_html=True)


# -----------------------------
# Browser storage (cookies)
# -----------------------------
def get_browser_storage() -> BrowserStorage:
    if STORAGE_KEY not in st.session_state:
        st.session_state[STORAGE_KEY] = BrowserStorage()
    return st.session_state[STORAGE_KEY]


def sync_browser_storage():
    """Read this browser's cookies and push the session's queued writes back to it.

    Runs at the top of every script run, so a write queued right before
    ``st.rerun()`` is still rendered on the next run.
    """
    storage = get_browser_storage()
    cookies = stx.CookieManager(key="cookie_manager")
    storage.sync(cookies.get_all(key="cookie_get_all"))
    for name, write in storage.pending.items():
        if write.value is None:
            cookies.delete(name, key=f"cookie_delete_{name}")
        else:
            cookies.set(name, write.value, expires_at=write.expires_at, key=f"cookie_set_{name}")


# -----------------------------
# State + routing
# -----------------------------
def get_app_state() -> AppState:
    """Create the per-session state container on first use."""
    if STATE_KEY not in st.session_state:
        config = Config()
        setup_logger("portfolio", config.log_file, config.log_level)
        st.session_state[STATE_KEY] = AppState.from_config(config, get_browser_storage())
    return st.session_state[STATE_KEY]


def get_route() -> str:
    if ROUTE_KEY not in st.session_state:
        st.session_state[ROUTE_KEY] = st.query_params.get("route", PUBLIC_PATH)
    return st.session_state[ROUTE_KEY]


def set_route(path: str):
    st.session_state[ROUTE_KEY] = path
    st.query_params["route"] = path


def set_pending_jump(anchor_id: str):
    st.session_state["pending_jump"] = anchor_id


def consume_pending_jump() -> Optional[str]:
    return st.session_state.pop("pending_jump", None)


# -----------------------------
# Scroll helpers
# -----------------------------
def anchor(anchor_id: str):
    st.markdown(f"<div id='{anchor_id}' class='section'></div>", unsafe_allow_html=True)


def js_scroll_to_anchor(anchor_id: str):
    st_html(
        f"""
<script>
(function(){{
  const root = window.parent.document;
  const targetId = "{anchor_id}";
  function scrollNow() {{
    const el = root.getElementById(targetId);
    if (el) {{
      el.scrollIntoView({{behavior:'smooth', block:'start'}});
      return true;
    }}
    return false;
  }}
  if (!scrollNow()) {{
    const obs = new MutationObserver(() => {{ if (scrollNow()) obs.disconnect(); }});
    obs.observe(root, {{childList:true, subtree:true}});
    setTimeout(() => {{ scrollNow(); obs.disconnect(); }}, 1500);
  }}
}})();
</script>
""",
        height=0,
    )


def disable_scroll_restoration():
    st_html("""<script>try { window.parent.history.scrollRestoration = 'manual'; } catch(e) {}</script>""", height=0)


# -----------------------------
# HTML snippets
# -----------------------------
def section_title(text: str):
    st.markdown(f"<div class='section-title'>{escape(text)}</div><div class='section-rule'></div>", unsafe_allow_html=True)


def icon_links_html(links: List[SocialLink], size: int = 24, css_class: str = "icon-row") -> str:
    """One anchor per link, each tagged with its provider."""
    items = "".join(
        f"<a href='{escape(link.url, quote=True)}' target='_blank' rel='noreferrer' "
        f"data-provider='{link.provider.value}' title='{link.provider.value}'>{render_icon(link.provider, size)}</a>"
        for link in links
    )
    return f"<div class='{css_class}'>{items}</div>"


# -----------------------------
# Viz helpers (radar)
# -----------------------------
def is_dark_theme() -> bool:
    base = (st.get_option("theme.base") or "light").lower()
    return base == "dark"


def radar_chart(title: str, scores: Dict[str, float], size_px: int = 480, dark: bool | None = None, title_y: float = 1.2):
    if dark is None: dark = is_dark_theme()
    labels = list(scores.keys()); values = list(scores.values())
    angles = np.linspace(0, 2*math.pi, len(labels), endpoint=False).tolist()
    angles += angles[:1]; v = values + values[:1]
    dpi = 200
    fig = plt.figure(figsize=(size_px/dpi, size_px/dpi), dpi=dpi); ax = plt.subplot(111, polar=True)
    fig.patch.set_alpha(0.0); ax.set_facecolor("none"); ax.set_theta_offset(math.pi/2); ax.set_theta_direction(-1)
    label_color = "#e5e7eb" if dark else "#0f172a"; grid_color = "#9ca3af"
    plt.xticks(angles[:-1], labels, fontsize=7, color=label_color)
    ax.tick_params(pad=6, colors=label_color); ax.set_ylim(0, 100); ax.set_yticks([25, 50, 75, 100])
    ax.set_yticklabels(["Básico", "Intermedio", "Avanzado", "Experto"], fontsize=5, color=grid_color)
    ax.yaxis.grid(True, linestyle="dotted", alpha=0.35, color=grid_color)
    ax.xaxis.grid(True, linestyle="dotted", alpha=0.35, color=grid_color)
    line_color = (0.98, 0.8, 0.08, 0.95) if dark else (0.06, 0.09, 0.16, 0.95)
    for lw, a in [(8, 0.06), (6, 0.08), (4, 0.12)]: ax.plot(angles, v, linewidth=lw, color=(line_color[0], line_color[1], line_color[2], a))
    ax.plot(angles, v, linewidth=2, color=line_color); ax.fill(angles, v, alpha=0.12, color=(0.98, 0.8, 0.08))
    ax.set_title(title, y=title_y, fontsize=9, color=line_color)
    st.pyplot(fig, transparent=True, bbox_inches="tight")
    plt.close(fig)
