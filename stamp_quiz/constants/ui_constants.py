"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "StampQuiz"
DEFAULT_QUIZ_FILENAME: str = "quiz_items.txt"

TITLE_PROMPT_TEMPLATE: str = "Press {key} to begin"
TITLE_NO_QUIZ_MESSAGE: str = "Import a quiz file to begin."
DEFAULT_INTRO_TEXT: str = (
    "The quiz is about to begin.\n"
    "Type your answer for each question.\n"
    "Use {next_key} for the next question and {prev_key} for the previous one.\n"
    "{count} questions. Finish before the time runs out!"
)

QUESTION_NUMBER_TEMPLATE: str = "No. {number} / {total}"
POINTS_TEMPLATE: str = "Points: {points}"
TIMER_TEMPLATE: str = "{seconds}s"
ANSWER_PLACEHOLDER: str = "Type your answer here"

RESULT_SCORE_TEMPLATE: str = "Score: {earned} / {possible}"
RESULT_PERFECT_BANNER: str = "Perfect score!"
RESULT_TIMEOUT_NOTE: str = "Time is up."
RESULT_RESTART_BUTTON: str = "Play Again"

TIER_LABELS: dict[str, str] = {
    "LOWEST": "Keep practicing",
    "LOW": "Good effort",
    "MID": "Well done",
    "HIGH": "Excellent",
    "PERFECT": "Perfect",
}

BUTTON_IMPORT: str = "Import Quiz"
BUTTON_RESTART: str = "Restart"
BUTTON_SETTINGS: str = "Settings"
BUTTON_ABOUT: str = "About"
BUTTON_HELP: str = "Help"

IMPORT_DIALOG_TITLE: str = "Select quiz file"
IMPORT_FILE_FILTER: str = "Quiz files (*.txt);;All files (*.*)"

NO_QUIZ_LOADED_MESSAGE: str = "Please import a quiz first."
CONFIRM_RESTART_MESSAGE: str = "Restarting discards all answers of the current session. Continue?"
