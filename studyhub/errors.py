"""Exception types for StudyHub.

Tools validate their form input and raise :class:`InvalidInputError` with a
message that can be shown to the user as-is.
"""


class StudyHubError(Exception):
    """Base class for StudyHub errors."""


class InvalidInputError(StudyHubError, ValueError):
    """Form input a tool can't work with (empty notes, unknown grade, ...)."""
