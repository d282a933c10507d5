"""Qt host for :class:`~studyhub.timer.session.TimerSession`.

The engine owns the one-second ``QTimer`` that drives ``tick()``, turns
state changes into Qt signals for the UI, and logs every finished phase
to the database.

Control flow
------------
start()   → session.start(),  QTimer running
pause()   → session.pause(),  QTimer stopped (remaining kept)
reset()   → session.reset(),  QTimer stopped
timeout   → session.tick();   QTimer stopped again when a phase completes
"""

from __future__ import annotations

from datetime import datetime

from loguru import logger
from PyQt6.QtCore import QObject, QTimer, pyqtSignal
from sqlalchemy.exc import SQLAlchemyError

from .session import (
    DEFAULT_BREAK_MINUTES,
    DEFAULT_WORK_MINUTES,
    Phase,
    TimerSession,
)

TICK_INTERVAL_MS = 1000


class TimerEngine(QObject):
    """Qt-driven work/break timer.

    Signals
    -------
    ticked(remaining_seconds: int)
        Emitted after every tick while running.
    phase_changed(phase: Phase)
        Emitted when a phase completes and on reset.
    running_changed(is_running: bool)
        Emitted whenever the timer starts or stops.
    phase_completed(phase: Phase, message: str)
        Emitted for each finished phase with the user-facing message.
    durations_changed(work_minutes: int, break_minutes: int)
        Emitted when either duration is accepted.
    """

    ticked = pyqtSignal(int)
    phase_changed = pyqtSignal(object)
    running_changed = pyqtSignal(bool)
    phase_completed = pyqtSignal(object, str)
    durations_changed = pyqtSignal(int, int)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        work_minutes: int = DEFAULT_WORK_MINUTES,
        break_minutes: int = DEFAULT_BREAK_MINUTES,
        db_enabled: bool = True,
    ) -> None:
        super().__init__(parent)
        self._db_enabled = db_enabled
        self._session = TimerSession(
            work_minutes, break_minutes, notify=self._on_phase_completed,
        )

        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(TICK_INTERVAL_MS)
        self._qt_timer.timeout.connect(self._on_tick)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def session(self) -> TimerSession:
        return self._session

    @property
    def phase(self) -> Phase:
        return self._session.phase

    @property
    def remaining(self) -> int:
        """Seconds left on the clock."""
        return self._session.remaining_seconds

    @property
    def is_running(self) -> bool:
        return self._session.is_running

    @property
    def completed_sessions(self) -> int:
        return self._session.completed_sessions

    @property
    def percent_complete(self) -> float:
        return self._session.percent_complete

    @property
    def work_minutes(self) -> int:
        return self._session.work_duration_minutes

    @property
    def break_minutes(self) -> int:
        return self._session.break_duration_minutes

    @property
    def ticking(self) -> bool:
        """True while the underlying QTimer is active."""
        return self._qt_timer.isActive()

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> None:
        if self._session.is_running:
            return
        self._session.start()
        self._qt_timer.start()
        self.running_changed.emit(True)

    def pause(self) -> None:
        if not self._session.is_running:
            return
        self._qt_timer.stop()
        self._session.pause()
        self.running_changed.emit(False)

    def toggle(self) -> None:
        """Start when stopped, pause when running."""
        if self._session.is_running:
            self.pause()
        else:
            self.start()

    def reset(self) -> None:
        was_running = self._session.is_running
        self._qt_timer.stop()
        self._session.reset()
        if was_running:
            self.running_changed.emit(False)
        self.phase_changed.emit(self._session.phase)
        self.ticked.emit(self._session.remaining_seconds)

    def set_work_duration(self, minutes: int) -> bool:
        accepted = self._session.set_work_duration(minutes)
        self._after_duration_change(accepted)
        return accepted

    def set_break_duration(self, minutes: int) -> bool:
        accepted = self._session.set_break_duration(minutes)
        self._after_duration_change(accepted)
        return accepted

    def apply_preset(self, name: str) -> bool:
        accepted = self._session.apply_preset(name)
        self._after_duration_change(accepted)
        return accepted

    def shutdown(self) -> None:
        """Stop ticking for good; called when the hosting view goes away."""
        self._qt_timer.stop()
        self._session.pause()

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL
    # ══════════════════════════════════════════════════════════════════

    def _on_tick(self) -> None:
        if not self._session.is_running:
            self._qt_timer.stop()
            return
        self._session.tick()
        self.ticked.emit(self._session.remaining_seconds)

    def _on_phase_completed(self, phase: Phase, message: str) -> None:
        # Called from inside session.tick(); session has already stopped.
        self._qt_timer.stop()
        minutes = (
            self._session.work_duration_minutes
            if phase == Phase.WORK
            else self._session.break_duration_minutes
        )
        if self._db_enabled:
            # the signals below still fire when the write fails
            try:
                self._persist_phase(phase, minutes)
            except SQLAlchemyError:
                logger.exception("Could not log {} phase", phase.value)

        self.running_changed.emit(False)
        self.phase_changed.emit(self._session.phase)
        self.phase_completed.emit(phase, message)

    def _after_duration_change(self, accepted: bool) -> None:
        if not accepted:
            logger.debug("Duration change ignored while the timer is running")
            return
        self.durations_changed.emit(
            self._session.work_duration_minutes,
            self._session.break_duration_minutes,
        )
        self.ticked.emit(self._session.remaining_seconds)

    def _persist_phase(self, phase: Phase, minutes: int) -> None:
        from ..database.db import get_session
        from ..database.models import PhaseRecord

        with get_session() as db:
            db.add(PhaseRecord(
                phase=phase.value,
                duration_minutes=minutes,
                completed_at=datetime.now(),
            ))
        logger.info("Logged {} phase ({} min)", phase.value, minutes)
