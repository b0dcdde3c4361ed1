"""Component for the title screen shown while the session is idle."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget

from stamp_quiz.constants.about import APP_NAME
from stamp_quiz.constants.ui_constants import TITLE_NO_QUIZ_MESSAGE
from stamp_quiz.styling.styles import Styles


class TitlePanel(QWidget):
    """UI component showing the quiz title and how to start."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)
        layout.addStretch()

        self.title_label = QLabel(APP_NAME, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.title_label)

        self.prompt_label = QLabel(TITLE_NO_QUIZ_MESSAGE, self)
        self.prompt_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.prompt_label)

        self.status_label = QLabel("", self)
        self.status_label.setAlignment(Qt.AlignCenter)
        self.status_label.setWordWrap(True)
        layout.addWidget(self.status_label)

        layout.addStretch()

    def set_title(self, title: str) -> None:
        self.title_label.setText(title)

    def set_prompt(self, prompt: str) -> None:
        self.prompt_label.setText(prompt)

    def set_status_message(self, message: str) -> None:
        self.status_label.setText(message)

    def apply_font_size(self, font_size: int) -> None:
        self.title_label.setStyleSheet(f"font-size: {font_size * 2}pt; font-weight: bold;")
        self.prompt_label.setStyleSheet(f"font-size: {font_size}pt;")
        self.status_label.setStyleSheet(f"font-size: {max(8, font_size - 4)}pt;")
