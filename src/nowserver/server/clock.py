"""Current-time formatting for the ``get_current_time`` tool.

Every call reads the clock exactly once and derives the requested
representation from that single instant.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum


class TimeFormat(str, Enum):
    ISO = "iso"
    UTC = "utc"
    LOCAL = "local"

    @classmethod
    def parse(cls, token: str | None) -> TimeFormat:
        """Match *token* case-insensitively; anything unknown falls back to ``ISO``."""
        if token:
            try:
                return cls(token.strip().lower())
            except ValueError:
                pass
        return cls.ISO


DEFAULT_FORMAT = TimeFormat.ISO


def now_local() -> datetime:
    """Return the current instant as an aware datetime in the host time zone."""
    return datetime.now().astimezone()


def format_now(fmt: str | TimeFormat | None = None, now: datetime | None = None) -> str:
    """Format the current time (or *now*, if given) as *fmt*.

    - ``iso``: local wall-clock time, ``YYYY-MM-DDTHH:MM:SS[.ffffff]``, no offset.
    - ``utc``: the same instant in UTC, ISO-8601 with a ``Z`` suffix.
    - ``local``: ``YYYY-MM-DD HH:MM:SS <zone>`` using the host zone abbreviation.

    Unknown tokens format as ``iso``. A naive *now* is taken as host-local.
    """
    instant = now if now is not None else now_local()
    if instant.tzinfo is None:
        instant = instant.astimezone()

    time_format = TimeFormat.parse(fmt)
    if time_format == TimeFormat.UTC:
        return instant.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")
    if time_format == TimeFormat.LOCAL:
        return instant.strftime("%Y-%m-%d %H:%M:%S %Z")
    return instant.replace(tzinfo=None).isoformat()
