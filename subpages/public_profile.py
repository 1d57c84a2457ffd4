# subpages/public_profile.py — the public one-page profile
# ----------------------------------------------------------
# Nav (sidebar) · Hero · About · Skills · Projects · Contact · Footer
# Everything here is read-only over AppState.profile.
# ----------------------------------------------------------

from __future__ import annotations
from datetime import datetime
from html import escape
from typing import List

import streamlit as st

from portfolio.contact import find_link, headline_name, primary_links, render_icon, secondary_links
from portfolio.models import ContactInfo, ProfileData, Project, Provider, Skill, SkillLevel
from portfolio.state import AppState
from subpages.components import (
    anchor, consume_pending_jump, disable_scroll_restoration, icon_links_html,
    js_scroll_to_anchor, radar_chart, section_title, set_pending_jump,
)


BRAND = "Business"
NAV_LINKS = [
    ("Inicio", "home"),
    ("Sobre Mí", "about"),
    ("Habilidades", "skills"),
    ("Proyectos", "projects"),
    ("Contacto", "contact"),
]
LEVEL_CLASSES = {
    SkillLevel.EXPERT: "skill-expert",
    SkillLevel.ADVANCED: "skill-advanced",
}
CTA_LABELS = {
    Provider.WHATSAPP: ("cta-whatsapp", "Conversar por WhatsApp"),
    Provider.LINKEDIN: ("cta-linkedin", "Ver mi LinkedIn"),
}
RADAR_MIN_SKILLS = 3


# -----------------------------
# Sidebar nav
# -----------------------------
def render_navbar():
    st.sidebar.title(BRAND)
    for label, anchor_id in NAV_LINKS:
        if st.sidebar.button(label, key=f"nav_{anchor_id}"):
            set_pending_jump(anchor_id); st.rerun()


# -----------------------------
# Sections
# -----------------------------
def render_hero(data: ProfileData):
    anchor("home")
    col_left, col_right = st.columns([1.5, 1.0])
    with col_left:
        st.markdown("<div class='hero-badge'>Disponible para proyectos</div>", unsafe_allow_html=True)
        st.markdown(
            f"<div class='hero'>Hola, soy <br/><span class='accent'>{escape(headline_name(data.name))}</span></div>",
            unsafe_allow_html=True,
        )
        st.markdown(f"<div class='hero-title'>{escape(data.title)}</div>", unsafe_allow_html=True)
        st.markdown(f"<div class='hero-sub'>{escape(data.summary)}</div>", unsafe_allow_html=True)
        c1, c2 = st.columns([1, 1])
        with c1:
            if st.button("Contáctame", key="hero_contact", type="primary"):
                set_pending_jump("contact"); st.rerun()
        with c2:
            if data.cv and data.cv != "#":
                st.link_button("⬇️  Descargar CV", data.cv)
        st.markdown(icon_links_html(data.contact.links, size=24, css_class="icon-row hero-social"), unsafe_allow_html=True)
    with col_right:
        st.markdown(
            f"<img class='hero-photo' src='{escape(data.photo, quote=True)}' alt='{escape(data.name, quote=True)}'/>",
            unsafe_allow_html=True,
        )


def render_about(data: ProfileData):
    anchor("about")
    section_title("Sobre Mí")
    st.markdown(f"<div class='about-card'>{escape(data.about)}</div>", unsafe_allow_html=True)


def skill_pill_html(skill: Skill) -> str:
    css = LEVEL_CLASSES.get(skill.level, "skill-default")
    dot = "<span class='pulse-dot'></span>" if skill.level == SkillLevel.EXPERT else ""
    return f"<span class='skill-pill {css}' data-level='{skill.level.value}'>{escape(skill.name)}{dot}</span>"


def render_skills(skills: List[Skill]):
    anchor("skills")
    section_title("Habilidades")
    pills = "".join(skill_pill_html(s) for s in skills)
    st.markdown(f"<div class='skill-pills'>{pills}</div>", unsafe_allow_html=True)
    if len(skills) >= RADAR_MIN_SKILLS:
        _, mid, _ = st.columns([1, 1.2, 1])
        with mid:
            radar_chart("Nivel por habilidad", {s.name: s.level.rank * 25 for s in skills})


def project_card_html(project: Project) -> str:
    link = ""
    if project.link and project.link != "#":
        link = f"<a href='{escape(project.link, quote=True)}' target='_blank' rel='noreferrer'>Ver proyecto →</a>"
    return (
        "<div class='project-card'>"
        f"<img src='{escape(project.image, quote=True)}' alt='{escape(project.title, quote=True)}'/>"
        "<div class='project-body'>"
        f"<div class='project-role'>{escape(project.role)}</div>"
        f"<div class='project-title'>{escape(project.title)}</div>"
        f"<div class='project-desc'>{escape(project.description)}</div>"
        f"{link}</div></div>"
    )


def render_projects(projects: List[Project]):
    anchor("projects")
    section_title("Proyectos Destacados")
    cols = st.columns(3)
    for i, p in enumerate(projects):
        with cols[i % 3]:
            st.markdown(project_card_html(p), unsafe_allow_html=True)


def cta_html(contact: ContactInfo) -> str:
    buttons = []
    for link in primary_links(contact.links):
        css, label = CTA_LABELS[link.provider]
        buttons.append(
            f"<a class='cta {css}' href='{escape(link.url, quote=True)}' target='_blank' rel='noreferrer' "
            f"data-provider='{link.provider.value}'>{render_icon(link.provider, 24)} {label}</a>"
        )
    return f"<div class='cta-row contact-cta'>{''.join(buttons)}</div>"


def render_contact_form(state: AppState):
    with st.expander("✉️  Envíame un mensaje", expanded=False):
        name = st.text_input("Nombre", key="contact_name")
        email = st.text_input("Email", key="contact_email")
        message = st.text_area("Mensaje", key="contact_message")
        if st.button("Enviar", key="contact_send"):
            if not (name.strip() and email.strip() and message.strip()):
                st.warning("Completa todos los campos.")
            else:
                with st.spinner("Enviando..."):
                    state.api.send_contact_form(name, email, message)
                st.success("¡Mensaje enviado! Te responderé pronto.")


def render_contact(contact: ContactInfo, state: AppState):
    anchor("contact")
    section_title("¡Hablemos de Negocios!")
    st.markdown(
        "<div class='contact-lead'>¿Tienes un proyecto en mente o quieres optimizar tus procesos con datos?<br/>"
        "La forma más rápida y directa de contactarme es a través de WhatsApp.</div>",
        unsafe_allow_html=True,
    )
    st.markdown(cta_html(contact), unsafe_allow_html=True)
    others = secondary_links(contact.links)
    if others:
        st.markdown("<div class='also-find'>También puedes encontrarme en</div>", unsafe_allow_html=True)
        st.markdown(icon_links_html(others, size=20, css_class="icon-row round center also-find-icons"), unsafe_allow_html=True)
    render_contact_form(state)


def render_footer(name: str):
    st.markdown(
        f"<footer class='site-footer'><span class='brand'>{BRAND}</span>"
        f"<p>&copy; {datetime.now().year} {escape(name)}. Todos los derechos reservados.</p></footer>",
        unsafe_allow_html=True,
    )


def render_floating_whatsapp(data: ProfileData):
    url = find_link(data.contact.links, Provider.WHATSAPP)
    if not url:
        return
    st.markdown(
        f"<a class='float-whatsapp' href='{escape(url, quote=True)}' target='_blank' rel='noreferrer' "
        f"title='Escríbeme por WhatsApp'>{render_icon(Provider.WHATSAPP, 32)}</a>",
        unsafe_allow_html=True,
    )


# -----------------------------
# Page
# -----------------------------
def render_public(state: AppState):
    data = state.profile
    render_navbar()
    disable_scroll_restoration()
    jump_id = consume_pending_jump()
    if jump_id: js_scroll_to_anchor(jump_id)

    render_hero(data)
    render_about(data)
    render_skills(data.skills)
    render_projects(data.projects)
    render_contact(data.contact, state)
    render_footer(data.name)
    render_floating_whatsapp(data)
