from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timedelta

from ..models.reminder import Reminder

"""Reminder due-time rules.

Only the comparisons live here; polling and delivering notifications belong
to the caller.
"""

__all__ = [
    "is_due",
    "is_overdue",
    "due_reminders",
    "reminder_statistics",
]


def is_due(reminder: Reminder, now: datetime) -> bool:
    """A reminder fires once: open, not yet notified, reminder time reached."""
    return (
        not reminder.is_completed
        and not reminder.notification_sent
        and reminder.reminder_time <= now
    )


def is_overdue(reminder: Reminder, now: datetime) -> bool:
    return not reminder.is_completed and reminder.due_date < now


def due_reminders(reminders: Iterable[Reminder], now: datetime) -> list[Reminder]:
    return [r for r in reminders if is_due(r, now)]


def reminder_statistics(reminders: Iterable[Reminder], now: datetime) -> dict[str, int]:
    """Counts shown on the reminder list: total/pending/completed/overdue/today."""
    items = list(reminders)
    start_of_day = now.replace(hour=0, minute=0, second=0, microsecond=0)
    start_of_tomorrow = start_of_day + timedelta(days=1)
    return {
        "total": len(items),
        "pending": sum(1 for r in items if not r.is_completed),
        "completed": sum(1 for r in items if r.is_completed),
        "overdue": sum(1 for r in items if is_overdue(r, now)),
        "today": sum(
            1
            for r in items
            if not r.is_completed and start_of_day <= r.due_date < start_of_tomorrow
        ),
    }
