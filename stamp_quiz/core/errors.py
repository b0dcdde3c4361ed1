"""Exceptions raised by the quiz core."""

from __future__ import annotations


class QuizError(Exception):
    """Base class for all quiz core errors."""


class InvalidConfiguration(QuizError):
    """Raised when a session is configured with an unusable item list or time budget."""


class IndexOutOfRange(QuizError, IndexError):
    """Raised when an answer slot outside the configured item range is accessed."""


class InvalidTransition(QuizError):
    """Raised when an event arrives in a phase that does not accept it.

    The session state is left untouched when this is raised.
    """
