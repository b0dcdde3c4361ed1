"""Settings dialog for configuring StampQuiz preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDialog,
    QDoubleSpinBox,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)

from stamp_quiz.core.errors import InvalidConfiguration
from stamp_quiz.core.settings import QuizSettings
from stamp_quiz.ui.dialog_helpers import show_error

KEY_CHOICES: tuple[str, ...] = (
    "Return",
    "Enter",
    "Space",
    "Right",
    "Left",
    "Up",
    "Down",
    "PageUp",
    "PageDown",
    "F1",
    "F2",
)


class SettingsDialog(QDialog):
    """Dialog for configuring time budget, key bindings and display settings."""

    def __init__(self, parent=None, settings: QuizSettings | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(400)

        self._settings = settings or QuizSettings()
        self._result: QuizSettings | None = None

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        # Quiz settings group
        quiz_group = QGroupBox("Quiz")
        quiz_layout = QVBoxLayout()
        quiz_group.setLayout(quiz_layout)

        time_row = QHBoxLayout()
        time_label = QLabel("Total time:")
        time_label.setToolTip("Time budget for the whole quiz. Applied from the next session.")
        self.time_spinbox = QDoubleSpinBox()
        self.time_spinbox.setRange(1.0, 24 * 60 * 60)
        self.time_spinbox.setDecimals(0)
        self.time_spinbox.setValue(self._settings.total_seconds)
        self.time_spinbox.setSuffix(" s")
        time_row.addWidget(time_label)
        time_row.addStretch()
        time_row.addWidget(self.time_spinbox)
        quiz_layout.addLayout(time_row)

        layout.addWidget(quiz_group)

        # Key bindings group
        keys_group = QGroupBox("Keys")
        keys_layout = QVBoxLayout()
        keys_group.setLayout(keys_layout)
        self.start_key_combo = self._add_key_row(keys_layout, "Start quiz:", self._settings.start_key)
        self.next_key_combo = self._add_key_row(keys_layout, "Next question:", self._settings.next_key)
        self.prev_key_combo = self._add_key_row(keys_layout, "Previous question:", self._settings.prev_key)
        layout.addWidget(keys_group)

        # Display settings group
        display_group = QGroupBox("Display")
        display_layout = QVBoxLayout()
        display_group.setLayout(display_layout)

        font_row = QHBoxLayout()
        font_label = QLabel("Game Font Size (questions, timer):")
        self.font_spinbox = QSpinBox()
        self.font_spinbox.setRange(10, 40)
        self.font_spinbox.setValue(self._settings.game_font_size)
        self.font_spinbox.setSuffix(" pt")
        font_row.addWidget(font_label)
        font_row.addStretch()
        font_row.addWidget(self.font_spinbox)
        display_layout.addLayout(font_row)

        self.dark_theme_checkbox = QCheckBox("Dark theme")
        self.dark_theme_checkbox.setChecked(self._settings.dark_theme)
        display_layout.addWidget(self.dark_theme_checkbox)

        layout.addWidget(display_group)

        # Buttons
        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    def _add_key_row(self, layout: QVBoxLayout, caption: str, current: str) -> QComboBox:
        row = QHBoxLayout()
        combo = QComboBox()
        combo.addItems(KEY_CHOICES)
        if current not in KEY_CHOICES:
            combo.addItem(current)
        combo.setCurrentText(current)
        row.addWidget(QLabel(caption))
        row.addStretch()
        row.addWidget(combo)
        layout.addLayout(row)
        return combo

    def accept(self) -> None:
        try:
            self._result = self._settings.with_changes(
                total_seconds=self.time_spinbox.value(),
                start_key=self.start_key_combo.currentText(),
                next_key=self.next_key_combo.currentText(),
                prev_key=self.prev_key_combo.currentText(),
                game_font_size=self.font_spinbox.value(),
                dark_theme=self.dark_theme_checkbox.isChecked(),
            )
        except InvalidConfiguration as exc:
            show_error(self, "Invalid settings", str(exc))
            return
        super().accept()

    def get_settings(self) -> QuizSettings:
        """Get the validated settings, or the original ones if the dialog was cancelled."""
        return self._result or self._settings
