"""
In-memory stand-in for the profile API.

Every call sleeps for ``delay`` seconds to mimic a network round trip and
otherwise always succeeds. The stored record lives only as long as this
object does.
"""
import logging
import time
from datetime import timedelta
from typing import Optional

from .config import DEFAULT_API_DELAY
from .models import ProfileData, utcnow
from .seed import initial_profile

logger = logging.getLogger(__name__)

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "password"

_UNSET = object()


class MockApi:
    """Holds the one profile record and the demo credential check."""

    def __init__(self, initial=_UNSET, delay: float = DEFAULT_API_DELAY):
        """Initialize the mock API.

        Args:
            initial: Record to start from. Defaults to the seed profile;
                pass None to simulate a backend with no profile.
            delay: Simulated latency in seconds for every call
        """
        self._record: Optional[ProfileData] = initial_profile() if initial is _UNSET else initial
        self.delay = delay

    def _wait(self):
        if self.delay > 0:
            time.sleep(self.delay)

    def get_profile(self) -> Optional[ProfileData]:
        """Return a copy of the current record, or None if there is none."""
        self._wait()
        if self._record is None:
            logger.warning("Profile requested but none is stored")
            return None
        return self._record.model_copy(deep=True)

    def update_profile(self, record: ProfileData) -> ProfileData:
        """Replace the stored record wholesale and stamp a fresh updated_at.

        Args:
            record: Complete record to store

        Returns:
            Copy of the stored record
        """
        self._wait()
        stamp = utcnow()
        if self._record is not None and stamp <= self._record.updated_at:
            # Clock resolution can repeat a stamp; keep it strictly increasing
            stamp = self._record.updated_at + timedelta(microseconds=1)
        self._record = record.model_copy(update={"updated_at": stamp}, deep=True)
        logger.info("Profile %s updated at %s", self._record.id, stamp.isoformat())
        return self._record.model_copy(deep=True)

    def login_admin(self, email: str, password: str) -> bool:
        self._wait()
        ok = email == ADMIN_EMAIL and password == ADMIN_PASSWORD
        if ok:
            logger.info("Admin login succeeded for %s", email)
        else:
            logger.info("Admin login rejected for %r", email)
        return ok

    def send_contact_form(self, name: str, email: str, message: str) -> bool:
        self._wait()
        logger.info("Contact message from %s <%s>: %d chars", name, email, len(message))
        return True
