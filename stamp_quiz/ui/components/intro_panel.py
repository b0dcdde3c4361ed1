"""Component for the intro text and countdown before the quiz starts."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget

from stamp_quiz.styling.color_palette import Theme
from stamp_quiz.styling.styles import Styles


class IntroPanel(QWidget):
    """UI component showing the instructions while counting down."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._theme = Theme.LIGHT
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)
        layout.addStretch()

        self.intro_label = QLabel("", self)
        self.intro_label.setAlignment(Qt.AlignCenter)
        self.intro_label.setWordWrap(True)
        layout.addWidget(self.intro_label)

        self.countdown_label = QLabel("", self)
        self.countdown_label.setAlignment(Qt.AlignCenter)
        self.countdown_label.setStyleSheet(Styles.get_countdown_style(self._theme))
        layout.addWidget(self.countdown_label)

        layout.addStretch()

    def set_intro_text(self, text: str) -> None:
        self.intro_label.setText(text)

    def set_countdown(self, value: int) -> None:
        self.countdown_label.setText(str(value))

    def set_theme(self, theme: Theme) -> None:
        self._theme = theme
        self.countdown_label.setStyleSheet(Styles.get_countdown_style(theme))

    def apply_font_size(self, font_size: int) -> None:
        self.intro_label.setStyleSheet(f"font-size: {font_size}pt;")
