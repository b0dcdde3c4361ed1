"""Qt UI components for the quiz application."""

from .dialog_helpers import (
    confirm_restart,
    show_error,
    show_info,
    show_warning,
)
from .question_renderer import render_item_label
from .quiz_main_window import QuizMainWindow

__all__ = [
    "QuizMainWindow",
    "confirm_restart",
    "show_error",
    "show_info",
    "show_warning",
    "render_item_label",
]
