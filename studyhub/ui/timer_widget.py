"""Pomodoro timer card shown in the Timer tab.

Layout (top → bottom):
    - Phase label ("FOCUS TIME" / "BREAK TIME") and progress bar
    - Big MM:SS countdown
    - Start/Pause + Reset buttons
    - Completed session counter, today's totals and recent phases
    - Duration spin boxes and preset buttons (locked while running)
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QFormLayout,
    QLabel, QPushButton, QSpinBox, QProgressBar, QFrame,
)

from ..database.models import PhaseRecord
from ..timer.engine import TimerEngine
from ..timer.session import (
    Phase, WORK_MINUTES_RANGE, BREAK_MINUTES_RANGE, format_time,
)


PHASE_LABELS: dict[Phase, str] = {
    Phase.WORK:  "FOCUS TIME",
    Phase.BREAK: "BREAK TIME",
}

PRESET_LABELS: dict[str, str] = {
    "classic":  "Classic (25/5)",
    "extended": "Extended (45/15)",
    "quick":    "Quick (15/3)",
}


class TimerWidget(QWidget):
    """The timer card shown in the Timer tab."""

    def __init__(self, engine: TimerEngine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._engine = engine
        self._build_ui()
        self._connect_signals()
        self._on_phase_changed(engine.phase)
        self._on_running_changed(engine.is_running)

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        card = QFrame(self)
        card.setObjectName("card")
        root.addWidget(card)

        layout = QVBoxLayout(card)
        layout.setContentsMargins(32, 24, 32, 28)
        layout.setSpacing(12)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        # ── phase + progress ─────────────────────────────────────────
        self._phase_label = QLabel(card)
        self._phase_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._phase_label)

        self._progress = QProgressBar(card)
        self._progress.setRange(0, 1000)
        self._progress.setTextVisible(False)
        layout.addWidget(self._progress)

        # ── countdown ────────────────────────────────────────────────
        self._time_label = QLabel(card)
        self._time_label.setObjectName("timeLabel")
        self._time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._time_label)

        self._length_label = QLabel(card)
        self._length_label.setObjectName("mutedLabel")
        self._length_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._length_label)

        # ── main controls ────────────────────────────────────────────
        btn_row = QHBoxLayout()
        btn_row.setSpacing(12)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._start_pause_btn = QPushButton("Start", card)
        self._start_pause_btn.setObjectName("primaryButton")
        self._reset_btn = QPushButton("Reset", card)
        self._reset_btn.setObjectName("dangerButton")

        btn_row.addWidget(self._start_pause_btn)
        btn_row.addWidget(self._reset_btn)
        layout.addLayout(btn_row)

        # ── session counter ──────────────────────────────────────────
        self._sessions_label = QLabel(card)
        self._sessions_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._sessions_label)

        self._today_label = QLabel(card)
        self._today_label.setObjectName("mutedLabel")
        self._today_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._today_label)

        self._recent_label = QLabel(card)
        self._recent_label.setObjectName("mutedLabel")
        self._recent_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._recent_label)

        # ── settings ─────────────────────────────────────────────────
        form = QFormLayout()
        self._work_spin = QSpinBox(card)
        self._work_spin.setRange(*WORK_MINUTES_RANGE)
        self._work_spin.setSuffix(" min")
        self._work_spin.setValue(self._engine.work_minutes)

        self._break_spin = QSpinBox(card)
        self._break_spin.setRange(*BREAK_MINUTES_RANGE)
        self._break_spin.setSuffix(" min")
        self._break_spin.setValue(self._engine.break_minutes)

        form.addRow("Focus duration", self._work_spin)
        form.addRow("Break duration", self._break_spin)
        layout.addLayout(form)

        preset_row = QHBoxLayout()
        self._preset_btns: dict[str, QPushButton] = {}
        for key, label in PRESET_LABELS.items():
            btn = QPushButton(label, card)
            btn.setObjectName("secondaryButton")
            self._preset_btns[key] = btn
            preset_row.addWidget(btn)
        layout.addLayout(preset_row)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._start_pause_btn.clicked.connect(self._engine.toggle)
        self._reset_btn.clicked.connect(self._engine.reset)
        self._work_spin.valueChanged.connect(self._engine.set_work_duration)
        self._break_spin.valueChanged.connect(self._engine.set_break_duration)
        for key, btn in self._preset_btns.items():
            btn.clicked.connect(lambda _checked=False, k=key: self._engine.apply_preset(k))

        self._engine.ticked.connect(self._refresh_display)
        self._engine.phase_changed.connect(self._on_phase_changed)
        self._engine.running_changed.connect(self._on_running_changed)
        self._engine.durations_changed.connect(self._on_durations_changed)

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_phase_changed(self, phase: Phase) -> None:
        self._phase_label.setText(PHASE_LABELS[phase])
        self._refresh_display(self._engine.remaining)

    def _on_running_changed(self, running: bool) -> None:
        self._start_pause_btn.setText("Pause" if running else "Start")
        # durations are locked while counting down
        self._work_spin.setEnabled(not running)
        self._break_spin.setEnabled(not running)
        for btn in self._preset_btns.values():
            btn.setEnabled(not running)
        self._sessions_label.setText(
            f"Completed sessions: {self._engine.completed_sessions}"
        )

    def _on_durations_changed(self, work: int, rest: int) -> None:
        for spin, value in ((self._work_spin, work), (self._break_spin, rest)):
            spin.blockSignals(True)
            spin.setValue(value)
            spin.blockSignals(False)
        self._refresh_display(self._engine.remaining)

    def _refresh_display(self, remaining: int) -> None:
        self._time_label.setText(format_time(remaining))
        self._progress.setValue(round(self._engine.percent_complete * 1000))
        if self._engine.phase == Phase.WORK:
            self._length_label.setText(f"{self._engine.work_minutes} min focus")
        else:
            self._length_label.setText(f"{self._engine.break_minutes} min break")

    # ── external updates ──────────────────────────────────────────────────

    def set_today_summary(self, sessions: int, minutes: int) -> None:
        self._today_label.setText(f"Today: {sessions} sessions, {minutes} min focused")

    def set_recent_phases(self, records: list[PhaseRecord]) -> None:
        """Show the latest finished phases, newest first."""
        if not records:
            self._recent_label.setText("No finished phases yet")
            return
        lines = [
            f"{r.completed_at:%H:%M}  {r.phase.capitalize()} {r.duration_minutes} min"
            for r in records
        ]
        self._recent_label.setText("Recent\n" + "\n".join(lines))

    @property
    def recent_text(self) -> str:
        return self._recent_label.text()

    @property
    def time_text(self) -> str:
        return self._time_label.text()

    @property
    def phase_text(self) -> str:
        return self._phase_label.text()
