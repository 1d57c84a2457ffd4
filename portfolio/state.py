"""
Application-state container shared by every view of one session.
"""
import logging
from typing import Optional

from .config import Config
from .local_storage import BrowserStorage, SessionFlag
from .mock_api import MockApi
from .models import ProfileData

logger = logging.getLogger(__name__)


class AppState:
    """Owns the profile snapshot, the admin session flag and the API they come from.

    Views receive this object and only go through its methods; the profile is
    replaced wholesale on every update.
    """

    def __init__(self, api: MockApi, session_flag: SessionFlag):
        self.api = api
        self.session_flag = session_flag
        self.profile: Optional[ProfileData] = None
        self.loaded = False

    @classmethod
    def from_config(cls, config: Config, storage: BrowserStorage) -> "AppState":
        api = MockApi(delay=config.api_delay)
        return cls(api, SessionFlag(storage))

    @property
    def is_admin(self) -> bool:
        return self.session_flag.is_set()

    def load(self) -> Optional[ProfileData]:
        """Fetch the profile once per session."""
        if not self.loaded:
            self.profile = self.api.get_profile()
            self.loaded = True
        return self.profile

    def update_profile(self, record: ProfileData) -> ProfileData:
        self.profile = self.api.update_profile(record)
        return self.profile

    def login(self, email: str, password: str) -> bool:
        if not self.api.login_admin(email, password):
            return False
        self.session_flag.set()
        return True

    def logout(self):
        self.session_flag.clear()
        logger.info("Admin session closed")
