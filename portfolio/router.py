"""
Client-side routing: two paths, one of them gated by the admin session flag.
"""
from enum import Enum
from typing import Optional, Tuple

PUBLIC_PATH = "/"
ADMIN_PATH = "/admin"
ROUTES = (PUBLIC_PATH, ADMIN_PATH)


class View(str, Enum):
    PUBLIC = "public"
    LOGIN = "login"
    DASHBOARD = "dashboard"


def _canonical(path: Optional[str]) -> str:
    p = (path or "").strip()
    if p.startswith("#"):
        p = p[1:]
    return "/" + p.strip("/")


def is_known_path(path: Optional[str]) -> bool:
    """True when ``path`` spells one of the routes, however it is written."""
    return _canonical(path) in ROUTES


def normalize_path(path: Optional[str]) -> str:
    """Turn ``#/admin``, ``admin/`` etc. into a known route; anything else becomes ``/``."""
    p = _canonical(path)
    return p if p in ROUTES else PUBLIC_PATH


def resolve(path: Optional[str], is_admin: bool) -> Tuple[str, View]:
    """Return the canonical path and the view to render for it."""
    p = normalize_path(path)
    if p == ADMIN_PATH:
        return p, (View.DASHBOARD if is_admin else View.LOGIN)
    return p, View.PUBLIC
