"""
Contact-link helpers and provider icons.
"""
from typing import Callable, Dict, List, Optional

from .models import Provider, SocialLink

# Providers promoted to the big call-to-action buttons, in display order
PRIMARY_PROVIDERS = (Provider.WHATSAPP, Provider.LINKEDIN)


def find_link(links: List[SocialLink], provider: Provider) -> Optional[str]:
    return next((link.url for link in links if link.provider == provider), None)


def primary_links(links: List[SocialLink]) -> List[SocialLink]:
    """First whatsapp link, then first linkedin link, skipping the missing ones."""
    out = []
    for provider in PRIMARY_PROVIDERS:
        link = next((item for item in links if item.provider == provider), None)
        if link is not None:
            out.append(link)
    return out


def secondary_links(links: List[SocialLink]) -> List[SocialLink]:
    """Every link not promoted to a call-to-action, in original order."""
    return [link for link in links if link.provider not in PRIMARY_PROVIDERS]


def headline_name(name: str) -> str:
    return " ".join(name.split()[:2])


# -----------------------------
# Icons (lucide-style inline SVG)
# -----------------------------
def _svg(body: str, size: int) -> str:
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{size}" height="{size}" viewBox="0 0 24 24" '
        'fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">'
        f"{body}</svg>"
    )


def linkedin_icon(size: int = 24) -> str:
    return _svg(
        '<path d="M16 8a6 6 0 0 1 6 6v7h-4v-7a2 2 0 0 0-2-2 2 2 0 0 0-2 2v7h-4v-7a6 6 0 0 1 6-6z"/>'
        '<rect width="4" height="12" x="2" y="9"/><circle cx="4" cy="4" r="2"/>',
        size,
    )


def github_icon(size: int = 24) -> str:
    return _svg(
        '<path d="M15 22v-4a4.8 4.8 0 0 0-1-3.5c3 0 6-2 6-5.5.08-1.25-.27-2.48-1-3.5.28-1.15.28-2.35 0-3.5 '
        '0 0-1 0-3 1.5-2.64-.5-5.36-.5-8 0C6 2 5 2 5 2c-.3 1.15-.3 2.35 0 3.5A5.403 5.403 0 0 0 4 9c0 3.5 3 5.5 '
        '6 5.5-.39.49-.68 1.05-.85 1.65-.17.6-.22 1.23-.15 1.85v4"/><path d="M9 18c-4.51 2-5-2-7-2"/>',
        size,
    )


def twitter_icon(size: int = 24) -> str:
    return _svg(
        '<path d="M22 4s-.7 2.1-2 3.4c1.6 10-9.4 17.3-18 11.6 2.2.1 4.4-.6 6-2C3 15.5.5 9.6 3 5c2.2 2.6 5.6 '
        '4.1 9 4-.9-4.2 4-6.6 7-3.8 1.1 0 3-1.2 3-1.2z"/>',
        size,
    )


def globe_icon(size: int = 24) -> str:
    return _svg(
        '<circle cx="12" cy="12" r="10"/><path d="M12 2a14.5 14.5 0 0 0 0 20 14.5 14.5 0 0 0 0-20"/>'
        '<path d="M2 12h20"/>',
        size,
    )


def mail_icon(size: int = 24) -> str:
    return _svg(
        '<rect width="20" height="16" x="2" y="4" rx="2"/><path d="m22 7-8.97 5.7a1.94 1.94 0 0 1-2.06 0L2 7"/>',
        size,
    )


def whatsapp_icon(size: int = 24) -> str:
    return _svg('<path d="M7.9 20A9 9 0 1 0 4 16.1L2 22Z"/>', size)


PROVIDER_ICONS: Dict[Provider, Callable[[int], str]] = {
    Provider.LINKEDIN: linkedin_icon,
    Provider.GITHUB: github_icon,
    Provider.TWITTER: twitter_icon,
    Provider.WEBSITE: globe_icon,
    Provider.EMAIL: mail_icon,
    Provider.WHATSAPP: whatsapp_icon,
}


def render_icon(provider: Provider, size: int = 24) -> str:
    return PROVIDER_ICONS[provider](size)
