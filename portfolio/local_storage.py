"""
Per-browser key/value store backed by cookies, used the way a browser page uses localStorage.

The server never sees the cookie jar directly: each script run folds in the
snapshot the browser reported and the UI layer pushes queued writes back.
"""
import json
from datetime import datetime, timedelta
from typing import Any, Dict, Mapping, NamedTuple, Optional

from .models import utcnow

ADMIN_SESSION_KEY = "admin_session"
COOKIE_LIFETIME = timedelta(days=365)


class PendingWrite(NamedTuple):
    value: Optional[str]  # None deletes the cookie
    expires_at: datetime


def _as_text(value: Any) -> str:
    # The cookie component hands back JSON-looking values decoded ("true" -> True)
    return value if isinstance(value, str) else json.dumps(value)


class BrowserStorage:
    """String key/value pairs kept in one browser's cookies.

    Reads see this session's own writes immediately; a write stays in
    ``pending`` until a browser snapshot reports it back.
    """

    def __init__(self, cookies: Optional[Mapping[str, Any]] = None):
        self.items: Dict[str, str] = {}
        self.pending: Dict[str, PendingWrite] = {}
        if cookies:
            self.sync(cookies)

    def sync(self, cookies: Optional[Mapping[str, Any]]):
        """Fold in a snapshot of the browser's cookies."""
        snapshot = {str(k): _as_text(v) for k, v in (cookies or {}).items()}
        self.items.update(snapshot)
        for key, write in list(self.pending.items()):
            if snapshot.get(key) == write.value:
                del self.pending[key]
            elif write.value is None:
                self.items.pop(key, None)
            else:
                self.items[key] = write.value

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set_item(self, key: str, value: str):
        self.items[key] = value
        self.pending[key] = PendingWrite(value, utcnow() + COOKIE_LIFETIME)

    def remove_item(self, key: str):
        self.items.pop(key, None)
        self.pending[key] = PendingWrite(None, utcnow())


class SessionFlag:
    """Boolean "is admin" flag, stored independently of the profile record."""

    def __init__(self, storage: BrowserStorage, key: str = ADMIN_SESSION_KEY):
        self.storage = storage
        self.key = key

    def is_set(self) -> bool:
        # Any stored value counts as an active session
        return bool(self.storage.get_item(self.key))

    def set(self):
        self.storage.set_item(self.key, "true")

    def clear(self):
        self.storage.remove_item(self.key)
