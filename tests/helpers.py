"""Shared test helpers for StudyHub."""

from studyhub.timer.engine import TimerEngine
from studyhub.timer.session import TimerSession


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


def run_ticks(target, count: int) -> None:
    """Deliver *count* ticks to a TimerSession or a TimerEngine."""
    tick = target.tick if isinstance(target, TimerSession) else target._on_tick
    for _ in range(count):
        tick()


def finish_phase(engine: TimerEngine) -> None:
    """Fast-complete the running phase by jumping to the last tick."""
    engine.session._remaining = 1
    engine._on_tick()
