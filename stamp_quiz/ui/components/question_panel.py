"""Component for answering the current quiz question."""

from __future__ import annotations

from collections.abc import Callable
import math
from pathlib import Path

from PySide6.QtCore import Qt
from PySide6.QtGui import QPixmap
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QProgressBar,
    QVBoxLayout,
    QWidget,
)

from stamp_quiz.constants.quiz_constants import LOW_TIME_WARNING_SECONDS
from stamp_quiz.constants.ui_constants import (
    ANSWER_PLACEHOLDER,
    POINTS_TEMPLATE,
    QUESTION_NUMBER_TEMPLATE,
    TIMER_TEMPLATE,
)
from stamp_quiz.core.models import QuizItem
from stamp_quiz.styling.color_palette import Theme
from stamp_quiz.styling.styles import Styles
from stamp_quiz.ui.question_renderer import render_item_label


class QuestionPanel(QWidget):
    """UI component showing one question, its answer input and the timer."""

    def __init__(
        self,
        on_answer_changed: Callable[[str], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_answer_changed = on_answer_changed

        self._game_font_size: int = 16
        self._theme = Theme.LIGHT
        self._current_label: str | None = None

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        # Header row: question number, points
        header_row = QHBoxLayout()
        self.number_label = QLabel("", self)
        header_row.addWidget(self.number_label)
        header_row.addStretch()
        self.points_label = QLabel("", self)
        header_row.addWidget(self.points_label)
        layout.addLayout(header_row)

        # Timer row
        timer_row = QHBoxLayout()
        self.timer_label = QLabel("", self)
        timer_row.addWidget(self.timer_label)

        self.time_progress = QProgressBar(self)
        self.time_progress.setRange(0, 1000)
        self.time_progress.setValue(1000)
        self.time_progress.setTextVisible(False)
        timer_row.addWidget(self.time_progress, stretch=1)
        layout.addLayout(timer_row)

        self.image_label = QLabel(self)
        self.image_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.image_label, stretch=1)

        self.label_view = QLabel(self)
        self.label_view.setTextFormat(Qt.RichText)
        self.label_view.setWordWrap(True)
        self.label_view.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.label_view)

        self.answer_input = QLineEdit(self)
        self.answer_input.setPlaceholderText(ANSWER_PLACEHOLDER)
        self.answer_input.setAlignment(Qt.AlignCenter)
        self.answer_input.textEdited.connect(self.on_answer_changed)
        layout.addWidget(self.answer_input)

    def show_question(self, index: int, total: int, item: QuizItem, prefilled_answer: str) -> None:
        self.number_label.setText(QUESTION_NUMBER_TEMPLATE.format(number=index + 1, total=total))
        self.points_label.setText(POINTS_TEMPLATE.format(points=item.points))
        self._current_label = item.label
        self.label_view.setText(render_item_label(item.label, self._game_font_size))
        self._show_image(item.image_ref)

        self.answer_input.setText(prefilled_answer)
        self.answer_input.setFocus()
        self.answer_input.end(False)

    def answer_text(self) -> str:
        return self.answer_input.text()

    def update_timer(self, remaining_seconds: float, total_seconds: float) -> None:
        seconds_left = max(0, math.ceil(remaining_seconds))
        self.timer_label.setText(TIMER_TEMPLATE.format(seconds=seconds_left))
        fraction = 0.0 if total_seconds <= 0 else max(0.0, min(1.0, remaining_seconds / total_seconds))
        self.time_progress.setValue(int(fraction * 1000))

        warning = 0 < seconds_left <= min(LOW_TIME_WARNING_SECONDS, total_seconds)
        self.timer_label.setStyleSheet(
            Styles.get_timer_style(
                self._game_font_size,
                warning=warning,
                blink_state=(seconds_left % 2 == 0),
                theme=self._theme,
            )
        )

    def set_theme(self, theme: Theme) -> None:
        self._theme = theme

    def apply_font_size(self, font_size: int) -> None:
        self._game_font_size = font_size
        game_label_style = f"font-size: {font_size}pt;"
        self.number_label.setStyleSheet(game_label_style)
        self.points_label.setStyleSheet(game_label_style)
        self.timer_label.setStyleSheet(Styles.get_timer_style(font_size, theme=self._theme))
        self.answer_input.setStyleSheet(f"font-size: {font_size + 4}pt;")
        self.label_view.setText(render_item_label(self._current_label, font_size))

    def _show_image(self, image_ref: str | None) -> None:
        if not image_ref or not Path(image_ref).exists():
            self.image_label.clear()
            self.image_label.setVisible(False)
            return
        pixmap = QPixmap(image_ref)
        if pixmap.width() > 640 or pixmap.height() > 360:
            pixmap = pixmap.scaled(640, 360, Qt.KeepAspectRatio, Qt.SmoothTransformation)
        self.image_label.setPixmap(pixmap)
        self.image_label.setVisible(True)
