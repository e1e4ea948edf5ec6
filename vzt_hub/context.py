from datetime import datetime
from typing import Optional

import pytz

from .config import settings
from .schemas.auth import User


class Clock:
    """Source of "now", aware and expressed in the configured timezone."""

    def __init__(self, timezone_str: Optional[str] = None):
        self.timezone_str = timezone_str or settings.tz_default
        self.tz = pytz.timezone(self.timezone_str)

    def now(self) -> datetime:
        return datetime.now(pytz.UTC).astimezone(self.tz)


class SessionContext:
    """
    Per-process session state: the signed-in user and the UI theme.

    Loaded from the store once at start (``load``) and written back by the
    operations that change it (``save``).
    """

    def __init__(self, current_user: Optional[User] = None, theme: str = "light"):
        self.current_user = current_user
        self.theme = theme

    @property
    def user_name(self) -> str:
        return self.current_user.name if self.current_user else "System"

    @classmethod
    def load(cls, store) -> "SessionContext":
        return cls(current_user=store.current_user(), theme=store.theme())

    def save(self, store) -> None:
        with store.transaction():
            if self.current_user is None:
                store.clear_current_user()
            else:
                store.save_current_user(self.current_user)
            store.save_theme(self.theme)
