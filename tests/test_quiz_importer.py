from pathlib import Path

import pytest

from stamp_quiz.core.errors import InvalidConfiguration
from stamp_quiz.core.models import QuizItem
from stamp_quiz.core.quiz_importer import (
    QuizImportError,
    load_quiz_from_file,
    load_quiz_from_text,
)

QUIZ_TEXT = """\
TITLE: Kanji Quiz
INTRO: Type the kanji.
  Use the arrow keys to move.
TIMELIMIT: 300
STAMP: stamps/low.png
STAMP: stamps/perfect.png

LABEL: Three trees
ANSWER: 森
POINTS: 2

---
LABEL: **Sun** and moon
  make something bright
IMAGE: images/q2.png
ANSWER:  明
POINTS: 4
"""


def test_load_quiz_with_header_and_items(tmp_path: Path) -> None:
    quiz_path = tmp_path / "quiz.txt"
    quiz_path.write_text(QUIZ_TEXT, encoding="utf-8")

    quiz = load_quiz_from_file(quiz_path)

    assert quiz.source_path == quiz_path
    assert quiz.title == "Kanji Quiz"
    assert quiz.intro_text == "Type the kanji.\nUse the arrow keys to move."
    assert quiz.total_seconds == 300.0
    assert quiz.stamp_paths == [
        str(tmp_path / "stamps" / "low.png"),
        str(tmp_path / "stamps" / "perfect.png"),
    ]
    assert quiz.items == [
        QuizItem(answer="森", points=2, label="Three trees"),
        QuizItem(
            answer="明",
            points=4,
            label="**Sun** and moon\nmake something bright",
            image_ref=str(tmp_path / "images" / "q2.png"),
        ),
    ]


def test_header_is_optional() -> None:
    quiz = load_quiz_from_text("ANSWER: 森\nPOINTS: 2\n")
    assert quiz.title is None
    assert quiz.total_seconds is None
    assert quiz.stamp_paths == []
    assert quiz.items == [QuizItem(answer="森", points=2)]


def test_answer_may_contain_colons() -> None:
    quiz = load_quiz_from_text("ANSWER: 12:30\nPOINTS: 1\n")
    assert quiz.items[0].answer == "12:30"


@pytest.mark.parametrize(
    "text",
    [
        "",
        "TITLE: Only a header\n",
        "LABEL: no answer\nPOINTS: 2\n",
        "ANSWER: 森\n",
        "ANSWER: 森\nPOINTS: two\n",
        "ANSWER: 森\nPOINTS: 0\n",
        "ANSWER: 森\nANSWER: 林\nPOINTS: 1\n",
        "stray text\nANSWER: 森\nPOINTS: 1\n",
        "TITLE: Mixed\nANSWER: 森\nPOINTS: 1\n",
        "ANSWER: 森\nPOINTS: 1\n\nTITLE: Late header\n",
        "TIMELIMIT: -5\n\nANSWER: 森\nPOINTS: 1\n",
        "STAMP:\n\nANSWER: 森\nPOINTS: 1\n",
    ],
)
def test_invalid_quiz_text_is_rejected(text: str) -> None:
    with pytest.raises(QuizImportError):
        load_quiz_from_text(text)


def test_import_error_is_a_configuration_error() -> None:
    assert issubclass(QuizImportError, InvalidConfiguration)


def test_missing_file_raises_os_error(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        load_quiz_from_file(tmp_path / "missing.txt")
