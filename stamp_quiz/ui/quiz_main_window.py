"""Qt main window hosting a timed quiz session."""

from __future__ import annotations

import logging
from pathlib import Path
import time

from PySide6.QtCore import QEvent, QObject, Qt, QTimer
from PySide6.QtGui import QKeyEvent
from PySide6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from stamp_quiz.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from stamp_quiz.constants.quiz_constants import (
    RESULT_DELAY_AFTER_COMPLETION_SECONDS,
    RESULT_DELAY_AFTER_TIMEOUT_SECONDS,
    TICK_INTERVAL_MS,
)
from stamp_quiz.constants.ui_constants import (
    BUTTON_ABOUT,
    BUTTON_HELP,
    BUTTON_IMPORT,
    BUTTON_RESTART,
    BUTTON_SETTINGS,
    CONFIRM_RESTART_MESSAGE,
    DEFAULT_INTRO_TEXT,
    IMPORT_DIALOG_TITLE,
    IMPORT_FILE_FILTER,
    NO_QUIZ_LOADED_MESSAGE,
    TITLE_NO_QUIZ_MESSAGE,
    TITLE_PROMPT_TEMPLATE,
    WINDOW_TITLE,
)
from stamp_quiz.core.errors import QuizError
from stamp_quiz.core.models import (
    Direction,
    FinishReason,
    QuizItem,
    ScoreResult,
    SessionPhase,
)
from stamp_quiz.core.quiz_importer import QuizDefinition, load_quiz_from_file
from stamp_quiz.core.services.quiz_session import QuizSession, SessionListener
from stamp_quiz.core.settings import QuizSettings
from stamp_quiz.styling.color_palette import Theme
from stamp_quiz.styling.styles import Styles
from stamp_quiz.ui.components.intro_panel import IntroPanel
from stamp_quiz.ui.components.question_panel import QuestionPanel
from stamp_quiz.ui.components.result_panel import ResultPanel
from stamp_quiz.ui.components.title_panel import TitlePanel
from stamp_quiz.ui.dialog_helpers import (
    confirm_restart,
    show_error,
    show_info,
    show_warning,
)
from stamp_quiz.ui.settings_dialog import SettingsDialog

logger = logging.getLogger(__name__)

_PANEL_INDEX = {
    SessionPhase.IDLE: 0,
    SessionPhase.INTRO: 1,
    SessionPhase.RUNNING: 2,
}


def _qt_key(name: str) -> int | None:
    key = getattr(Qt.Key, f"Key_{name}", None)
    if key is None:
        return None
    return int(key.value)


class QuizMainWindow(QMainWindow, SessionListener):
    """Main Qt window translating clock and key events into session events."""

    def __init__(
        self,
        session: QuizSession,
        settings: QuizSettings | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)

        self.session = session
        self.settings = settings or QuizSettings()
        self._quiz: QuizDefinition | None = None
        self._last_tick_at: float | None = None
        self._pending_result: tuple[ScoreResult, FinishReason] | None = None

        self._build_ui()
        self._configure_timers()
        self._apply_styles()
        self.session.set_listener(self)
        self._refresh_title()

    # --- Layout ---

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_buttons(root_layout)

        self.panel_stack = QStackedWidget(self)
        self.title_panel = TitlePanel(self)
        self.intro_panel = IntroPanel(self)
        self.question_panel = QuestionPanel(on_answer_changed=self._handle_answer_changed, parent=self)
        self.result_panel = ResultPanel(on_restart=self._handle_restart, parent=self)

        self.panel_stack.addWidget(self.title_panel)
        self.panel_stack.addWidget(self.intro_panel)
        self.panel_stack.addWidget(self.question_panel)
        self.panel_stack.addWidget(self.result_panel)
        root_layout.addWidget(self.panel_stack, stretch=1)

        # Navigation keys would otherwise move the cursor inside the answer field.
        self.question_panel.answer_input.installEventFilter(self)

    def _build_buttons(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()

        self.import_button = QPushButton(BUTTON_IMPORT, self)
        self.import_button.clicked.connect(self._handle_import_quiz)
        button_row.addWidget(self.import_button)

        self.restart_button = QPushButton(BUTTON_RESTART, self)
        self.restart_button.clicked.connect(self._handle_restart)
        button_row.addWidget(self.restart_button)

        button_row.addStretch()

        self.settings_button = QPushButton(BUTTON_SETTINGS, self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)

        self.about_button = QPushButton(BUTTON_ABOUT, self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        self.help_button = QPushButton(BUTTON_HELP, self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        for button in (
            self.import_button,
            self.restart_button,
            self.settings_button,
            self.about_button,
            self.help_button,
        ):
            button.setFocusPolicy(Qt.NoFocus)

        layout.addLayout(button_row)

    def _configure_timers(self) -> None:
        self.tick_timer = QTimer(self)
        self.tick_timer.setInterval(TICK_INTERVAL_MS)
        self.tick_timer.timeout.connect(self._handle_tick)

        self.intro_timer = QTimer(self)
        self.intro_timer.setSingleShot(True)
        self.intro_timer.timeout.connect(self._handle_intro_step)

        self.result_timer = QTimer(self)
        self.result_timer.setSingleShot(True)
        self.result_timer.timeout.connect(self._show_pending_result)

    # --- Quiz loading ---

    def load_quiz(self, file_path: Path) -> bool:
        """Import a quiz file and configure the session with it."""
        try:
            quiz = load_quiz_from_file(file_path)
        except (OSError, QuizError) as exc:
            show_error(self, "Import failed", str(exc))
            return False

        if quiz.total_seconds is not None:
            self.settings = self.settings.with_changes(total_seconds=quiz.total_seconds)

        self._stop_timers()
        if self.session.phase is not SessionPhase.IDLE:
            self.session.restart()
        try:
            warnings = self.session.configure(quiz.items, self.settings.total_seconds)
        except QuizError as exc:
            show_error(self, "Quiz rejected", str(exc))
            return False

        self._quiz = quiz
        logger.info("Loaded %d items from %s", len(quiz.items), file_path)
        self._refresh_title()
        status = f"Loaded {len(quiz.items)} questions from {file_path.name}."
        if warnings:
            status += "\n" + "\n".join(warnings)
        self.title_panel.set_status_message(status)
        return True

    def _handle_import_quiz(self) -> None:
        if self.session.phase in (SessionPhase.INTRO, SessionPhase.RUNNING):
            if not confirm_restart(self, CONFIRM_RESTART_MESSAGE):
                return

        file_path, _ = QFileDialog.getOpenFileName(
            self,
            IMPORT_DIALOG_TITLE,
            str(Path.home()),
            IMPORT_FILE_FILTER,
        )
        if not file_path:
            return
        self.load_quiz(Path(file_path))

    # --- Host events ---

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        if event.type() == QEvent.Type.KeyPress and self._handle_key(event):
            return True
        return super().eventFilter(watched, event)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if not self._handle_key(event):
            super().keyPressEvent(event)

    def _handle_key(self, event: QKeyEvent) -> bool:
        if event.isAutoRepeat():
            return False
        key = event.key()
        phase = self.session.phase
        if phase is SessionPhase.IDLE and key == _qt_key(self.settings.start_key):
            self._start_session()
            return True
        if phase is SessionPhase.RUNNING:
            if key == _qt_key(self.settings.next_key):
                self._advance(Direction.NEXT)
                return True
            if key == _qt_key(self.settings.prev_key):
                self._advance(Direction.PREV)
                return True
        return False

    def _start_session(self) -> None:
        if not self.session.is_configured:
            show_warning(self, "No quiz", NO_QUIZ_LOADED_MESSAGE)
            return
        try:
            self.session.start()
        except QuizError as exc:
            show_error(self, "Cannot start quiz", str(exc))
            return
        self._schedule_intro_step()

    def _schedule_intro_step(self) -> None:
        delay = self.session.next_intro_delay
        if delay is not None:
            self.intro_timer.start(int(delay * 1000))

    def _handle_intro_step(self) -> None:
        if self.session.phase is not SessionPhase.INTRO:
            return
        self.session.intro_step()
        self._schedule_intro_step()

    def _handle_tick(self) -> None:
        now = time.monotonic()
        delta = 0.0 if self._last_tick_at is None else now - self._last_tick_at
        self._last_tick_at = now
        self.session.tick(delta, draft_text=self.question_panel.answer_text())

    def _advance(self, direction: Direction) -> None:
        self.session.advance(direction, draft_text=self.question_panel.answer_text())

    def _handle_answer_changed(self, text: str) -> None:
        if self.session.phase is SessionPhase.RUNNING:
            self.session.answer_changed(text)

    def _handle_restart(self) -> None:
        if self.session.phase in (SessionPhase.INTRO, SessionPhase.RUNNING):
            if not confirm_restart(self, CONFIRM_RESTART_MESSAGE):
                return
        self._stop_timers()
        self.session.restart()
        self._reconfigure_if_idle()

    def _stop_timers(self) -> None:
        self.tick_timer.stop()
        self.intro_timer.stop()
        self.result_timer.stop()
        self._last_tick_at = None
        self._pending_result = None

    def _reconfigure_if_idle(self) -> None:
        if self.session.phase is not SessionPhase.IDLE or not self.session.is_configured:
            return
        if self.session.total_seconds != self.settings.total_seconds:
            self.session.configure(self.session.items, self.settings.total_seconds)

    # --- Session listener hooks ---

    def on_phase_changed(self, phase: SessionPhase) -> None:
        if phase is SessionPhase.RUNNING:
            self._last_tick_at = time.monotonic()
            self.tick_timer.start()
        elif phase is SessionPhase.FINISHED:
            self.tick_timer.stop()
            self._last_tick_at = None
            return
        elif phase is SessionPhase.IDLE:
            self._refresh_title()

        if phase is SessionPhase.INTRO:
            self.intro_panel.set_intro_text(self._intro_text())
        self.panel_stack.setCurrentIndex(_PANEL_INDEX[phase])

    def on_countdown(self, value: int) -> None:
        self.intro_panel.set_countdown(value)

    def on_question_shown(self, index: int, item: QuizItem, prefilled_answer: str) -> None:
        self.question_panel.show_question(index, self.session.item_count, item, prefilled_answer)

    def on_time_changed(self, remaining_seconds: float, total_seconds: float) -> None:
        self.question_panel.update_timer(remaining_seconds, total_seconds)

    def on_finished(self, result: ScoreResult, reason: FinishReason) -> None:
        self._pending_result = (result, reason)
        delay = (
            RESULT_DELAY_AFTER_TIMEOUT_SECONDS
            if reason is FinishReason.TIMEOUT
            else RESULT_DELAY_AFTER_COMPLETION_SECONDS
        )
        self.result_timer.start(int(delay * 1000))

    def _show_pending_result(self) -> None:
        if self._pending_result is None or self.session.phase is not SessionPhase.FINISHED:
            return
        result, reason = self._pending_result
        stamps = self._quiz.stamp_paths if self._quiz is not None else []
        self.result_panel.show_result(result, reason, stamps)
        self.panel_stack.setCurrentWidget(self.result_panel)
        self._pending_result = None

    # --- Dialogs and styling ---

    def _refresh_title(self) -> None:
        title = (self._quiz.title if self._quiz is not None else None) or APP_NAME
        self.title_panel.set_title(title)
        if self.session.is_configured:
            self.title_panel.set_prompt(TITLE_PROMPT_TEMPLATE.format(key=self.settings.start_key))
        else:
            self.title_panel.set_prompt(TITLE_NO_QUIZ_MESSAGE)

    def _intro_text(self) -> str:
        if self._quiz is not None and self._quiz.intro_text:
            return self._quiz.intro_text
        return DEFAULT_INTRO_TEXT.format(
            next_key=self.settings.next_key,
            prev_key=self.settings.prev_key,
            count=self.session.item_count,
        )

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(self, self.settings)
        if dialog.exec():
            self.settings = dialog.get_settings()
            self._reconfigure_if_idle()
            self._refresh_title()
            self._apply_styles()

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def _apply_styles(self) -> None:
        theme = Theme.DARK if self.settings.dark_theme else Theme.LIGHT
        self.setStyleSheet(Styles.get_main_window_style(theme))

        font_size = self.settings.game_font_size
        self.intro_panel.set_theme(theme)
        self.question_panel.set_theme(theme)
        self.result_panel.set_theme(theme)
        self.title_panel.apply_font_size(font_size)
        self.intro_panel.apply_font_size(font_size)
        self.question_panel.apply_font_size(font_size)
        self.result_panel.apply_font_size(font_size)

    def closeEvent(self, event) -> None:
        self._stop_timers()
        super().closeEvent(event)
