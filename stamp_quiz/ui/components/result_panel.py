"""Component for the score and stamp shown after the quiz."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from PySide6.QtCore import Qt
from PySide6.QtGui import QPixmap
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from stamp_quiz.constants.ui_constants import (
    RESULT_PERFECT_BANNER,
    RESULT_RESTART_BUTTON,
    RESULT_SCORE_TEMPLATE,
    RESULT_TIMEOUT_NOTE,
    TIER_LABELS,
)
from stamp_quiz.core.models import FinishReason, ScoreResult
from stamp_quiz.core.stamp_selector import select_stamp
from stamp_quiz.styling.color_palette import Theme
from stamp_quiz.styling.styles import Styles


class ResultPanel(QWidget):
    """UI component showing the final score, tier stamp and a restart button."""

    def __init__(self, on_restart: Callable[[], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_restart = on_restart
        self._game_font_size: int = 16
        self._theme = Theme.LIGHT
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)
        layout.addStretch()

        self.timeout_label = QLabel(RESULT_TIMEOUT_NOTE, self)
        self.timeout_label.setAlignment(Qt.AlignCenter)
        self.timeout_label.setVisible(False)
        layout.addWidget(self.timeout_label)

        self.score_label = QLabel("", self)
        self.score_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.score_label)

        self.stamp_label = QLabel(self)
        self.stamp_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.stamp_label)

        self.tier_label = QLabel("", self)
        self.tier_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.tier_label)

        self.perfect_label = QLabel(RESULT_PERFECT_BANNER, self)
        self.perfect_label.setAlignment(Qt.AlignCenter)
        self.perfect_label.setVisible(False)
        layout.addWidget(self.perfect_label)

        layout.addStretch()

        self.restart_button = QPushButton(RESULT_RESTART_BUTTON, self)
        self.restart_button.clicked.connect(self.on_restart)
        layout.addWidget(self.restart_button)

    def show_result(self, result: ScoreResult, reason: FinishReason, stamp_paths: list[str]) -> None:
        self.score_label.setText(
            RESULT_SCORE_TEMPLATE.format(earned=result.earned_points, possible=result.possible_points)
        )
        self.tier_label.setText(TIER_LABELS.get(result.tier.name, result.tier.name))
        self.timeout_label.setVisible(reason is FinishReason.TIMEOUT)
        self.perfect_label.setVisible(result.is_perfect)

        stamp_path = select_stamp(stamp_paths, result.tier)
        if stamp_path and Path(stamp_path).exists():
            pixmap = QPixmap(stamp_path)
            self.stamp_label.setPixmap(pixmap.scaledToHeight(240, Qt.SmoothTransformation))
            self.stamp_label.setVisible(True)
        else:
            self.stamp_label.clear()
            self.stamp_label.setVisible(False)

    def set_theme(self, theme: Theme) -> None:
        self._theme = theme
        self.apply_font_size(self._game_font_size)

    def apply_font_size(self, font_size: int) -> None:
        self._game_font_size = font_size
        self.score_label.setStyleSheet(Styles.get_score_style(font_size, self._theme))
        self.perfect_label.setStyleSheet(Styles.get_perfect_banner_style(font_size, self._theme))
        self.tier_label.setStyleSheet(f"font-size: {font_size}pt;")
        self.timeout_label.setStyleSheet(f"font-size: {font_size}pt;")
        self.restart_button.setStyleSheet(f"font-size: {font_size}pt;")
