"""Tests for the Qt TimerEngine host.

Covers: QTimer lifecycle on start/pause/reset/completion, signal
emissions, duration changes, and logging of finished phases to the
database.
"""

from datetime import date

from studyhub.database.db import get_session
from studyhub.database.models import PhaseRecord
from studyhub.database.stats import sessions_completed_on, focus_minutes_on
from studyhub.timer.engine import TimerEngine, TICK_INTERVAL_MS
from studyhub.timer.session import (
    Phase, WORK_COMPLETE_MESSAGE, BREAK_COMPLETE_MESSAGE,
)

from helpers import SignalCollector, run_ticks, finish_phase


# ═══════════════════════════════════════════════════════════════════════════
#  QTIMER LIFECYCLE
# ═══════════════════════════════════════════════════════════════════════════


class TestTicking:

    def test_initial_state(self, engine):
        assert engine.phase == Phase.WORK
        assert engine.remaining == 25 * 60
        assert engine.is_running is False
        assert engine.ticking is False

    def test_interval_is_one_second(self, engine):
        assert engine._qt_timer.interval() == TICK_INTERVAL_MS == 1000

    def test_start_starts_qtimer(self, engine):
        engine.start()
        assert engine.is_running is True
        assert engine.ticking is True

    def test_pause_stops_qtimer(self, engine):
        engine.start()
        engine._on_tick()
        engine.pause()
        assert engine.ticking is False
        assert engine.remaining == 25 * 60 - 1

    def test_reset_stops_qtimer(self, engine):
        engine.start()
        run_ticks(engine, 30)
        engine.reset()
        assert engine.ticking is False
        assert engine.remaining == 25 * 60

    def test_completion_stops_qtimer(self, engine):
        engine.start()
        finish_phase(engine)
        assert engine.ticking is False
        assert engine.is_running is False
        assert engine.phase == Phase.BREAK

    def test_stray_timeout_after_pause_is_ignored(self, engine):
        engine.start()
        engine.pause()
        engine._on_tick()
        assert engine.remaining == 25 * 60

    def test_toggle(self, engine):
        engine.toggle()
        assert engine.is_running is True
        engine.toggle()
        assert engine.is_running is False

    def test_shutdown(self, engine):
        engine.start()
        engine.shutdown()
        assert engine.ticking is False
        assert engine.is_running is False


# ═══════════════════════════════════════════════════════════════════════════
#  SCENARIOS
# ═══════════════════════════════════════════════════════════════════════════


class TestScenarios:

    def test_classic_work_phase(self, engine_no_db):
        engine_no_db.start()
        run_ticks(engine_no_db, 1500)
        assert engine_no_db.phase == Phase.BREAK
        assert engine_no_db.remaining == 300
        assert engine_no_db.completed_sessions == 1
        assert engine_no_db.is_running is False

    def test_one_minute_cycle(self, qapp):
        engine = TimerEngine(work_minutes=1, break_minutes=1, db_enabled=False)
        engine.start()
        run_ticks(engine, 60)
        assert engine.phase == Phase.BREAK
        assert engine.remaining == 60

        engine.start()
        run_ticks(engine, 60)
        assert engine.phase == Phase.WORK
        assert engine.remaining == 60
        assert engine.completed_sessions == 1


# ═══════════════════════════════════════════════════════════════════════════
#  SIGNALS
# ═══════════════════════════════════════════════════════════════════════════


class TestSignals:

    def test_ticked_emits_remaining(self, engine):
        c = SignalCollector()
        engine.ticked.connect(c)
        engine.start()
        engine._on_tick()
        assert c.last == 25 * 60 - 1

    def test_running_changed(self, engine):
        c = SignalCollector()
        engine.running_changed.connect(c)
        engine.start()
        engine.pause()
        assert c.items == [True, False]

    def test_start_twice_emits_once(self, engine):
        c = SignalCollector()
        engine.running_changed.connect(c)
        engine.start()
        engine.start()
        assert len(c) == 1

    def test_phase_completed_messages(self, qapp):
        engine = TimerEngine(work_minutes=1, break_minutes=1, db_enabled=False)
        c = SignalCollector()
        engine.phase_completed.connect(c)

        engine.start()
        run_ticks(engine, 60)
        engine.start()
        run_ticks(engine, 60)

        assert c.items == [
            (Phase.WORK, WORK_COMPLETE_MESSAGE),
            (Phase.BREAK, BREAK_COMPLETE_MESSAGE),
        ]

    def test_phase_changed_on_completion(self, engine):
        c = SignalCollector()
        engine.phase_changed.connect(c)
        engine.start()
        finish_phase(engine)
        assert c.last == Phase.BREAK

    def test_completion_reports_stopped(self, engine):
        c = SignalCollector()
        engine.running_changed.connect(c)
        engine.start()
        finish_phase(engine)
        assert c.last is False

    def test_reset_emits_phase_and_remaining(self, engine):
        phases = SignalCollector()
        ticks = SignalCollector()
        engine.phase_changed.connect(phases)
        engine.ticked.connect(ticks)
        engine.start()
        finish_phase(engine)
        engine.reset()
        assert phases.last == Phase.WORK
        assert ticks.last == 25 * 60


# ═══════════════════════════════════════════════════════════════════════════
#  DURATIONS
# ═══════════════════════════════════════════════════════════════════════════


class TestDurations:

    def test_set_work_while_stopped(self, engine):
        c = SignalCollector()
        engine.durations_changed.connect(c)
        assert engine.set_work_duration(40) is True
        assert engine.remaining == 40 * 60
        assert c.last == (40, 5)

    def test_set_work_while_running_is_ignored(self, engine):
        c = SignalCollector()
        engine.durations_changed.connect(c)
        engine.start()
        assert engine.set_work_duration(40) is False
        assert engine.work_minutes == 25
        assert engine.remaining == 25 * 60
        assert len(c) == 0

    def test_set_break_while_running_is_ignored(self, engine):
        engine.start()
        assert engine.set_break_duration(10) is False
        assert engine.break_minutes == 5

    def test_apply_preset(self, engine):
        c = SignalCollector()
        engine.durations_changed.connect(c)
        engine.apply_preset("quick")
        assert (engine.work_minutes, engine.break_minutes) == (15, 3)
        assert c.last == (15, 3)


# ═══════════════════════════════════════════════════════════════════════════
#  DATABASE LOGGING
# ═══════════════════════════════════════════════════════════════════════════


class TestPhaseLogging:

    def test_work_completion_is_logged(self, engine):
        engine.start()
        finish_phase(engine)
        with get_session() as db:
            records = db.query(PhaseRecord).all()
        assert len(records) == 1
        assert records[0].phase == "work"
        assert records[0].duration_minutes == 25

    def test_break_completion_is_logged(self, engine):
        engine.start()
        finish_phase(engine)
        engine.start()
        finish_phase(engine)
        with get_session() as db:
            phases = [r.phase for r in db.query(PhaseRecord).order_by(PhaseRecord.id)]
        assert phases == ["work", "break"]

    def test_pause_and_reset_log_nothing(self, engine):
        engine.start()
        run_ticks(engine, 10)
        engine.pause()
        engine.reset()
        with get_session() as db:
            assert db.query(PhaseRecord).count() == 0

    def test_db_disabled_logs_nothing(self, engine_no_db):
        engine_no_db.start()
        finish_phase(engine_no_db)
        with get_session() as db:
            assert db.query(PhaseRecord).count() == 0

    def test_today_stats(self, engine):
        engine.start()
        finish_phase(engine)
        engine.start()
        finish_phase(engine)  # break, not counted
        engine.start()
        finish_phase(engine)
        assert sessions_completed_on(date.today()) == 2
        assert focus_minutes_on(date.today()) == 50

    def test_failed_write_still_reports_completion(self, engine, monkeypatch):
        from sqlalchemy.exc import SQLAlchemyError
        import studyhub.database.db as db_module

        def broken_session():
            raise SQLAlchemyError("disk I/O error")

        monkeypatch.setattr(db_module, "get_session", broken_session)
        running = SignalCollector()
        completed = SignalCollector()
        engine.running_changed.connect(running)
        engine.phase_completed.connect(completed)

        engine.start()
        finish_phase(engine)

        assert running.last is False
        assert completed.last == (Phase.WORK, WORK_COMPLETE_MESSAGE)
        assert engine.phase == Phase.BREAK
