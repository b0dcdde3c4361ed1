"""Application entry point for StampQuiz."""

from __future__ import annotations

from pathlib import Path
import sys

from PySide6.QtWidgets import QApplication

from stamp_quiz.constants.ui_constants import DEFAULT_QUIZ_FILENAME
from stamp_quiz.core.services.quiz_session import QuizSession
from stamp_quiz.core.settings import QuizSettings
from stamp_quiz.ui.quiz_main_window import QuizMainWindow
from stamp_quiz.utils.logging_config import configure_logging


def _determine_quiz_path(argv: list[str]) -> Path | None:
    """Quiz file from the command line, else the default file in the working directory."""
    if len(argv) > 1:
        return Path(argv[1])
    default_quiz_path = Path(DEFAULT_QUIZ_FILENAME)
    if default_quiz_path.exists():
        return default_quiz_path
    return None


def main() -> None:
    """Initialize logging, load the quiz and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting StampQuiz…")

    settings = QuizSettings()
    session = QuizSession(total_seconds=settings.total_seconds)

    app = QApplication(sys.argv)
    window = QuizMainWindow(session=session, settings=settings)

    quiz_path = _determine_quiz_path(sys.argv)
    if quiz_path is not None:
        window.load_quiz(quiz_path)
    else:
        logger.info("No quiz file given; waiting for an import")

    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
