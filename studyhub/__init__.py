"""StudyHub: pomodoro timer and student tools."""

__version__ = "0.1.0"
