"""Work/break countdown state machine for StudyHub.

Phases
------
WORK    Focus countdown.  Completing it counts one session.
BREAK   Rest countdown.

Transitions
-----------
WORK  → BREAK   (remaining reaches 0, ``completed_sessions`` += 1)
BREAK → WORK    (remaining reaches 0)
Any   → WORK    (reset)

The timer always stops after a phase completes; the next phase has to be
started by hand.

``TimerSession`` knows nothing about clocks.  Whoever hosts it calls
:meth:`TimerSession.tick` once per elapsed second while it is running
(see :class:`studyhub.timer.engine.TimerEngine` for the Qt host).
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from loguru import logger

from ..errors import InvalidInputError


class Phase(Enum):
    WORK = "work"
    BREAK = "break"


# ── constants ─────────────────────────────────────────────────────────────

DEFAULT_WORK_MINUTES = 25
DEFAULT_BREAK_MINUTES = 5

WORK_MINUTES_RANGE = (1, 60)
BREAK_MINUTES_RANGE = (1, 30)

# name → (work minutes, break minutes)
PRESETS: dict[str, tuple[int, int]] = {
    "classic": (25, 5),
    "extended": (45, 15),
    "quick": (15, 3),
}

WORK_COMPLETE_MESSAGE = "Work session completed! Time for a break."
BREAK_COMPLETE_MESSAGE = "Break completed! Ready for another work session."

Notifier = Callable[[Phase, str], None]


# ── input boundary helpers ────────────────────────────────────────────────


def clamp_minutes(value, bounds: tuple[int, int], default: int) -> int:
    """Turn raw form input into a duration inside *bounds*.

    Anything that doesn't parse as a positive integer falls back to
    *default*, the same way the duration fields treat garbage input.
    """
    try:
        minutes = int(value)
    except (TypeError, ValueError):
        return default
    if minutes <= 0:
        return default
    low, high = bounds
    return max(low, min(high, minutes))


def format_time(seconds: int) -> str:
    """``MM:SS`` for the countdown display."""
    minutes, secs = divmod(max(0, seconds), 60)
    return f"{minutes:02d}:{secs:02d}"


# ── state machine ─────────────────────────────────────────────────────────


class TimerSession:
    """A single countdown alternating between work and break phases.

    Durations passed in are assumed to be validated already; use
    :func:`clamp_minutes` on raw input first.
    """

    def __init__(
        self,
        work_duration_minutes: int = DEFAULT_WORK_MINUTES,
        break_duration_minutes: int = DEFAULT_BREAK_MINUTES,
        notify: Notifier | None = None,
    ) -> None:
        self._work_minutes = work_duration_minutes
        self._break_minutes = break_duration_minutes
        self._notify = notify

        self._phase = Phase.WORK
        self._remaining = work_duration_minutes * 60
        self._running = False
        self._completed_sessions = 0

    # ══════════════════════════════════════════════════════════════════
    #  PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def remaining_seconds(self) -> int:
        return self._remaining

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def completed_sessions(self) -> int:
        return self._completed_sessions

    @property
    def work_duration_minutes(self) -> int:
        return self._work_minutes

    @property
    def break_duration_minutes(self) -> int:
        return self._break_minutes

    @property
    def total_seconds(self) -> int:
        """Full length of the current phase."""
        return self._minutes_for(self._phase) * 60

    @property
    def percent_complete(self) -> float:
        """0.0 → 1.0 progress through the current phase."""
        total = self.total_seconds
        if total <= 0:
            return 0.0
        elapsed = total - self._remaining
        return max(0.0, min(1.0, elapsed / total))

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        logger.debug("Timer started ({} phase, {}s left)", self._phase.value, self._remaining)

    def pause(self) -> None:
        if not self._running:
            return
        self._running = False
        logger.debug("Timer paused at {}s", self._remaining)

    def reset(self) -> None:
        """Back to a stopped, full-length work phase.  Keeps the session count."""
        self._running = False
        self._phase = Phase.WORK
        self._remaining = self._work_minutes * 60
        logger.debug("Timer reset")

    def tick(self) -> None:
        """One elapsed second.  Ignored unless running."""
        if not self._running:
            return
        self._remaining = max(0, self._remaining - 1)
        if self._remaining == 0:
            self.complete_phase()

    def complete_phase(self) -> None:
        """Switch to the other phase and stop."""
        finished = self._phase
        if finished == Phase.WORK:
            self._completed_sessions += 1
            self._phase = Phase.BREAK
            self._remaining = self._break_minutes * 60
            message = WORK_COMPLETE_MESSAGE
        else:
            self._phase = Phase.WORK
            self._remaining = self._work_minutes * 60
            message = BREAK_COMPLETE_MESSAGE
        self._running = False

        logger.info(
            "{} phase complete ({} sessions so far)",
            finished.value, self._completed_sessions,
        )
        if self._notify is not None:
            self._notify(finished, message)

    # ══════════════════════════════════════════════════════════════════
    #  CONFIGURATION
    # ══════════════════════════════════════════════════════════════════

    def set_work_duration(self, minutes: int) -> bool:
        """Change the work length.  Returns False (and does nothing) while running."""
        if self._running:
            return False
        self._work_minutes = minutes
        if self._phase == Phase.WORK:
            self._remaining = minutes * 60
        return True

    def set_break_duration(self, minutes: int) -> bool:
        """Change the break length.  Returns False (and does nothing) while running."""
        if self._running:
            return False
        self._break_minutes = minutes
        if self._phase == Phase.BREAK:
            self._remaining = minutes * 60
        return True

    def apply_preset(self, name: str) -> bool:
        """Set both durations from :data:`PRESETS`."""
        try:
            work, rest = PRESETS[name]
        except KeyError:
            raise InvalidInputError(f"Unknown preset: {name!r}") from None
        if self._running:
            return False
        self.set_work_duration(work)
        self.set_break_duration(rest)
        return True

    def _minutes_for(self, phase: Phase) -> int:
        if phase == Phase.WORK:
            return self._work_minutes
        return self._break_minutes

    def __repr__(self) -> str:
        return (
            f"<TimerSession phase={self._phase.value} "
            f"remaining={self._remaining} running={self._running} "
            f"completed={self._completed_sessions}>"
        )
