"""Read-side queries over logged timer phases."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta

from sqlalchemy import func

from .db import get_session
from .models import PhaseRecord


def _day_bounds(day: date) -> tuple[datetime, datetime]:
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)


def sessions_completed_on(day: date) -> int:
    """Number of work phases finished on *day*."""
    start, end = _day_bounds(day)
    with get_session() as db:
        return (
            db.query(func.count(PhaseRecord.id))
            .filter(
                PhaseRecord.phase == "work",
                PhaseRecord.completed_at >= start,
                PhaseRecord.completed_at < end,
            )
            .scalar()
        ) or 0


def focus_minutes_on(day: date) -> int:
    """Total minutes of finished work phases on *day*."""
    start, end = _day_bounds(day)
    with get_session() as db:
        return (
            db.query(func.sum(PhaseRecord.duration_minutes))
            .filter(
                PhaseRecord.phase == "work",
                PhaseRecord.completed_at >= start,
                PhaseRecord.completed_at < end,
            )
            .scalar()
        ) or 0


def recent_phases(limit: int = 5) -> list[PhaseRecord]:
    """Most recent finished phases, newest first."""
    with get_session() as db:
        return (
            db.query(PhaseRecord)
            .order_by(PhaseRecord.completed_at.desc(), PhaseRecord.id.desc())
            .limit(limit)
            .all()
        )
