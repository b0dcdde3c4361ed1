"""Static metadata describing StampQuiz."""

APP_NAME = "StampQuiz"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "StampQuiz runs a timed, free-text quiz from a plain-text quiz file. "
    "Answers are graded when the last question is passed or the time runs out, "
    "and the result is awarded a stamp."
)

HELP_TEXT = (
    "Write a .txt quiz file with an optional header block followed by one block per question:\n\n"
    "TITLE: Kanji Quiz\n"
    "TIMELIMIT: 480\n"
    "STAMP: stamps/try_again.png\n"
    "STAMP: stamps/perfect.png\n"
    "---\n"
    "LABEL: Which kanji is made of three trees?\n"
    "IMAGE: images/q1.png\n"
    "ANSWER: 森\n"
    "POINTS: 2\n\n"
    "Blocks are separated by blank lines or '---'. STAMP lines are listed from the lowest "
    "result tier to the highest."
)
