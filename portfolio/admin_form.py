"""
Editable copy of the profile record backing the admin dashboard.
"""
from typing import TYPE_CHECKING, Optional

from .models import ProfileData

if TYPE_CHECKING:
    from .state import AppState


TABS = {
    "general": "General",
    "skills": "Habilidades",
    "projects": "Proyectos",
    "contact": "Contacto",
}
# Tabs whose list editors are not available; they show the raw data only
READ_ONLY_TABS = ("skills", "projects")

GENERAL_FIELDS = ("name", "title", "summary", "about", "photo", "cv")
CONTACT_FIELDS = ("email", "phone")


class AdminForm:
    """Controlled-form mirror of a ProfileData record."""

    def __init__(self, record: ProfileData):
        self.draft = record.model_copy(deep=True)

    def set_field(self, field: str, value: str):
        if field not in GENERAL_FIELDS:
            raise ValueError(f"Not an editable field: {field}")
        self.draft = self.draft.model_copy(update={field: value})

    def set_contact_field(self, field: str, value: Optional[str]):
        if field not in CONTACT_FIELDS:
            raise ValueError(f"Not an editable contact field: {field}")
        if field == "phone" and not value:
            value = None
        contact = self.draft.contact.model_copy(update={field: value})
        self.draft = self.draft.model_copy(update={"contact": contact})

    def read_only_data(self, tab: str) -> list:
        if tab not in READ_ONLY_TABS:
            raise ValueError(f"Tab has an editor: {tab}")
        return [item.model_dump(mode="json") for item in getattr(self.draft, tab)]

    def save(self, state: "AppState") -> ProfileData:
        """Send the whole draft to the store and resync the draft with the result."""
        updated = state.update_profile(self.draft)
        self.draft = updated.model_copy(deep=True)
        return updated
