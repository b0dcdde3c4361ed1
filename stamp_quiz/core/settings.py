"""User-adjustable settings for running a quiz."""

from __future__ import annotations

from dataclasses import dataclass, replace

from stamp_quiz.constants.quiz_constants import (
    DEFAULT_NEXT_KEY,
    DEFAULT_PREV_KEY,
    DEFAULT_START_KEY,
    DEFAULT_TOTAL_SECONDS,
)
from stamp_quiz.core.errors import InvalidConfiguration


@dataclass(slots=True)
class QuizSettings:
    """Time budget, key bindings and display preferences.

    Key names are Qt key names without the ``Key_`` prefix, e.g. ``"Right"``.
    """

    total_seconds: float = DEFAULT_TOTAL_SECONDS
    start_key: str = DEFAULT_START_KEY
    next_key: str = DEFAULT_NEXT_KEY
    prev_key: str = DEFAULT_PREV_KEY
    game_font_size: int = 16
    dark_theme: bool = False

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if self.total_seconds <= 0:
            raise InvalidConfiguration("Total time must be a positive number of seconds.")
        keys = [self.start_key, self.next_key, self.prev_key]
        if any(not key for key in keys):
            raise InvalidConfiguration("Key bindings must not be empty.")
        if len(set(keys)) != len(keys):
            raise InvalidConfiguration("Start, next and previous keys must be different.")
        if self.game_font_size <= 0:
            raise InvalidConfiguration("Font size must be positive.")

    def with_changes(self, **changes: object) -> QuizSettings:
        """Return a validated copy with the given fields replaced."""
        return replace(self, **changes)
