"""Main application window for StudyHub."""

from __future__ import annotations

from datetime import date

from loguru import logger
from PyQt6.QtGui import QAction, QCloseEvent, QKeySequence
from PyQt6.QtWidgets import QMainWindow, QTabWidget, QStatusBar

from .audio.sounds import SoundManager
from .database.stats import focus_minutes_on, recent_phases, sessions_completed_on
from .settings import Settings, save_settings
from .timer.engine import TimerEngine
from .timer.session import Phase
from .ui.citation_widget import CitationWidget
from .ui.exams_widget import ExamsWidget
from .ui.flashcards_widget import FlashcardsWidget
from .ui.gpa_widget import GpaWidget
from .ui.groups_widget import GroupsWidget
from .ui.notes_widget import NotesWidget
from .ui.planner_widget import PlannerWidget
from .ui.styles import build_stylesheet, get_palette
from .ui.timer_widget import TimerWidget

NOTIFICATION_MS = 5000


class StudyHubApp(QMainWindow):
    """Tab shell hosting the timer and one tab per student tool.

    *settings* is owned by the window for its lifetime and written back to
    disk whenever the user changes a preference.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        db_enabled: bool = True,
        sound_manager: SoundManager | None = None,
        persist_settings: bool = True,
    ) -> None:
        super().__init__()
        self.setWindowTitle("StudyHub")
        self.setMinimumSize(720, 760)

        self._settings = settings
        self._db_enabled = db_enabled
        self._persist_settings = persist_settings

        # ── engines ───────────────────────────────────────────────────
        self._timer_engine = TimerEngine(
            self,
            work_minutes=settings.work_duration_minutes,
            break_minutes=settings.break_duration_minutes,
            db_enabled=db_enabled,
        )
        self._sounds = sound_manager
        if self._sounds is not None:
            self._sounds.set_enabled(settings.sound_enabled)
            self._sounds.set_volume(settings.sound_volume)

        # ── tabs ──────────────────────────────────────────────────────
        self._tabs = QTabWidget(self)
        self._timer_widget = TimerWidget(self._timer_engine, self)
        self._tabs.addTab(self._timer_widget, "Timer")

        self._notes_widget = NotesWidget(self)
        self._flashcards_widget = FlashcardsWidget(self)
        self._gpa_widget = GpaWidget(self)
        self._citation_widget = CitationWidget(self)
        self._planner_widget = PlannerWidget(self)
        self._exams_widget = ExamsWidget(self)
        self._groups_widget = GroupsWidget(self)
        self._tool_tabs = {
            "Notes": self._notes_widget,
            "Flashcards": self._flashcards_widget,
            "GPA": self._gpa_widget,
            "Citations": self._citation_widget,
            "Planner": self._planner_widget,
            "Exams": self._exams_widget,
            "Groups": self._groups_widget,
        }
        for title, widget in self._tool_tabs.items():
            self._tabs.addTab(widget, title)
        self.setCentralWidget(self._tabs)

        self.setStatusBar(QStatusBar(self))
        self._build_menu()
        self._connect_signals()

        self._apply_theme()
        self._refresh_today()

    # ── build ─────────────────────────────────────────────────────────────

    def _build_menu(self) -> None:
        view_menu = self.menuBar().addMenu("View")
        self._dark_action = QAction("Dark Mode", self)
        self._dark_action.setCheckable(True)
        self._dark_action.setChecked(self._settings.dark_mode)
        self._dark_action.setShortcut(QKeySequence("Ctrl+D"))
        self._dark_action.toggled.connect(self.set_dark_mode)
        view_menu.addAction(self._dark_action)

        timer_menu = self.menuBar().addMenu("Timer")
        toggle_action = QAction("Start / Pause", self)
        toggle_action.setShortcut(QKeySequence("Ctrl+Space"))
        toggle_action.triggered.connect(self._timer_engine.toggle)
        timer_menu.addAction(toggle_action)

        reset_action = QAction("Reset", self)
        reset_action.setShortcut(QKeySequence("Ctrl+R"))
        reset_action.triggered.connect(self._timer_engine.reset)
        timer_menu.addAction(reset_action)

    def _connect_signals(self) -> None:
        self._timer_engine.phase_completed.connect(self._on_phase_completed)
        self._timer_engine.durations_changed.connect(self._on_durations_changed)
        for widget in self._tool_tabs.values():
            widget.message.connect(self.notify)

    # ── public ────────────────────────────────────────────────────────────

    @property
    def timer_engine(self) -> TimerEngine:
        return self._timer_engine

    @property
    def settings(self) -> Settings:
        return self._settings

    def notify(self, message: str) -> None:
        self.statusBar().showMessage(message, NOTIFICATION_MS)

    def set_dark_mode(self, enabled: bool) -> None:
        if self._settings.dark_mode == enabled:
            return
        self._settings.dark_mode = enabled
        self._apply_theme()
        self._save_settings()

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_phase_completed(self, phase: Phase, message: str) -> None:
        self.notify(message)
        if self._sounds is not None:
            self._sounds.play_for_phase(phase)
        self._refresh_today()

    def _on_durations_changed(self, work: int, rest: int) -> None:
        self._settings.work_duration_minutes = work
        self._settings.break_duration_minutes = rest
        self._save_settings()

    # ── internal ──────────────────────────────────────────────────────────

    def _apply_theme(self) -> None:
        self.setStyleSheet(build_stylesheet(get_palette(self._settings.dark_mode)))
        if self._dark_action.isChecked() != self._settings.dark_mode:
            self._dark_action.setChecked(self._settings.dark_mode)

    def _refresh_today(self) -> None:
        if not self._db_enabled:
            return
        today = date.today()
        self._timer_widget.set_today_summary(
            sessions_completed_on(today), focus_minutes_on(today),
        )
        self._timer_widget.set_recent_phases(recent_phases())

    def _save_settings(self) -> None:
        if self._persist_settings:
            save_settings(self._settings)

    def closeEvent(self, event: QCloseEvent) -> None:
        self._timer_engine.shutdown()
        logger.info("StudyHub closing")
        super().closeEvent(event)
