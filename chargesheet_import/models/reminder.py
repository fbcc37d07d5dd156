from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

__all__ = [
    "Reminder",
]


@dataclass(frozen=True)
class Reminder:
    """Follow-up reminder attached to a case (hearing, document submission, ...)."""
    title: str
    due_date: datetime
    reminder_time: datetime
    is_completed: bool = False
    notification_sent: bool = False
    case_number: str | None = None
    description: str | None = None
