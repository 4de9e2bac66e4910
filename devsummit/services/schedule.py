"""Schedule data — session lookup source and the calendar shown on every page."""

from __future__ import annotations

import json
import logging
from collections import defaultdict
from datetime import date
from pathlib import Path

logger = logging.getLogger(__name__)


def load_schedule(path: Path) -> dict:
    """Load schedule.json. Missing or malformed files abort startup."""
    schedule = json.loads(Path(path).read_text())
    logger.info("Loaded %d sessions from %s", len(schedule.get("sessions", {})), path)
    return schedule


def _day_label(iso_date: str) -> str:
    try:
        d = date.fromisoformat(iso_date)
    except ValueError:
        return iso_date
    return f"{d.strftime('%A')}, {d.strftime('%B')} {d.day}"


def calendar_days(schedule: dict) -> list[dict]:
    """Group sessions into conference days.

    An explicit ``days`` list in the schedule is used as-is. Otherwise every
    session with a ``date`` is bucketed by it; reserved sessions (``_`` IDs)
    are left out. Sessions within a day are ordered by ``start``.
    """
    if schedule.get("days"):
        return list(schedule["days"])

    by_date: dict[str, list[tuple[str, str]]] = defaultdict(list)
    for session_id, session in schedule.get("sessions", {}).items():
        if session_id.startswith("_"):
            continue
        day = session.get("date")
        if not day:
            continue
        by_date[day].append((session.get("start", ""), session_id))

    days = []
    for day in sorted(by_date):
        sessions = [session_id for _, session_id in sorted(by_date[day])]
        days.append({"date": day, "label": _day_label(day), "sessions": sessions})
    return days
