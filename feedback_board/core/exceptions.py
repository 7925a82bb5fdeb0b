"""Exception hierarchy for Feedback Board."""

from __future__ import annotations


class FeedbackBoardError(Exception):
    """Base class for errors raised by the package."""


class InvalidFilterError(FeedbackBoardError, ValueError):
    """Raised when a filter value is neither ``all`` nor a rating 1-5."""


class InvalidThemeError(FeedbackBoardError, ValueError):
    """Raised when a theme name is not ``dark`` or ``light``."""


class CoordinatorBusyError(FeedbackBoardError, RuntimeError):
    """Raised when an event arrives while another one is being processed."""
