"""Utilities for importing quizzes from a human-friendly text file.

File format (blocks separated by blank lines or '---'):

    TITLE: Kanji Quiz               (optional header block, first block only)
    INTRO: Text shown during the    (continuation lines allowed)
       countdown before the quiz.
    TIMELIMIT: 480                  (seconds for the whole quiz)
    STAMP: stamps/try_again.png     (repeatable, lowest tier first)

    LABEL: Optional question text (supports markdown). Additional lines
       until the next marker are treated as part of the label.
    IMAGE: images/q1.png            (optional, relative to the quiz file)
    ANSWER: 森
    POINTS: 2

Example:

    TITLE: Kanji Quiz
    TIMELIMIT: 300

    LABEL: Which kanji is made of three trees?
    ANSWER: 森
    POINTS: 2
"""

from __future__ import annotations

from dataclasses import dataclass, field
import math
from pathlib import Path

from stamp_quiz.core.errors import InvalidConfiguration
from stamp_quiz.core.models import QuizItem


class QuizImportError(InvalidConfiguration):
    """Raised when a quiz definition cannot be parsed."""


@dataclass(slots=True)
class QuizDefinition:
    """Container for imported quiz metadata and items."""

    source_path: Path | None
    items: list[QuizItem]
    title: str | None = None
    intro_text: str | None = None
    total_seconds: float | None = None
    stamp_paths: list[str] = field(default_factory=list)


_HEADER_KEYS = ("TITLE", "INTRO", "TIMELIMIT", "STAMP")
_ITEM_KEYS = ("LABEL", "IMAGE", "ANSWER", "POINTS")
_MULTILINE_KEYS = ("INTRO", "LABEL")


def load_quiz_from_file(file_path: Path) -> QuizDefinition:
    text = file_path.read_text(encoding="utf-8")
    quiz = load_quiz_from_text(text, base_dir=file_path.parent)
    quiz.source_path = file_path
    return quiz


def load_quiz_from_text(text: str, base_dir: Path | None = None) -> QuizDefinition:
    quiz = QuizDefinition(source_path=None, items=[])
    for number, block in enumerate(_split_blocks(text), start=1):
        sections = _parse_sections(block, number)
        keys = {key for key, _ in sections}
        if keys <= set(_HEADER_KEYS):
            if number != 1:
                raise QuizImportError(f"Block {number}: header fields must come first.")
            _apply_header(quiz, sections, base_dir)
        elif keys <= set(_ITEM_KEYS):
            quiz.items.append(_build_item(sections, number, base_dir))
        else:
            raise QuizImportError(f"Block {number}: header and question fields cannot be mixed.")

    if not quiz.items:
        raise QuizImportError("Quiz file did not contain any questions.")
    return quiz


def _split_blocks(text: str) -> list[str]:
    blocks: list[str] = []
    current_block: list[str] = []
    for raw_line in text.splitlines():
        stripped = raw_line.strip()
        if stripped == "---":
            if current_block:
                blocks.append("\n".join(current_block).strip())
                current_block = []
            continue
        if stripped:
            current_block.append(raw_line)
        elif current_block:
            blocks.append("\n".join(current_block).strip())
            current_block = []
    if current_block:
        blocks.append("\n".join(current_block).strip())
    return [block for block in blocks if block]


def _parse_sections(block: str, number: int) -> list[tuple[str, str]]:
    sections: list[tuple[str, str]] = []
    for raw_line in block.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        key, separator, value = line.partition(":")
        key = key.strip().upper()
        if separator and key in _HEADER_KEYS + _ITEM_KEYS:
            sections.append((key, value.strip()))
            continue

        if sections and sections[-1][0] in _MULTILINE_KEYS:
            previous_key, previous_value = sections[-1]
            sections[-1] = (previous_key, f"{previous_value}\n{line}".strip())
        else:
            raise QuizImportError(
                f"Block {number}: encountered text outside of a known section: '{line}'."
            )
    return sections


def _apply_header(quiz: QuizDefinition, sections: list[tuple[str, str]], base_dir: Path | None) -> None:
    for key, value in sections:
        if key == "TITLE":
            quiz.title = value or None
        elif key == "INTRO":
            quiz.intro_text = value or None
        elif key == "TIMELIMIT":
            quiz.total_seconds = _parse_time_limit(value)
        elif key == "STAMP":
            if not value:
                raise QuizImportError("STAMP must include an image path.")
            quiz.stamp_paths.append(_resolve_path(value, base_dir))


def _build_item(sections: list[tuple[str, str]], number: int, base_dir: Path | None) -> QuizItem:
    fields: dict[str, str] = {}
    for key, value in sections:
        if key in fields:
            raise QuizImportError(f"Block {number}: {key} is defined more than once.")
        fields[key] = value

    answer = fields.get("ANSWER", "").strip()
    if not answer:
        raise QuizImportError(f"Block {number}: answer missing (ANSWER: ...).")

    raw_points = fields.get("POINTS", "").strip()
    if not raw_points:
        raise QuizImportError(f"Block {number}: points missing (POINTS: ...).")
    try:
        points = int(raw_points)
    except ValueError as exc:
        raise QuizImportError(f"Block {number}: POINTS must be a whole number.") from exc
    if points <= 0:
        raise QuizImportError(f"Block {number}: POINTS must be a positive integer.")

    image = fields.get("IMAGE", "").strip()
    return QuizItem(
        answer=answer,
        points=points,
        label=fields.get("LABEL", "").strip() or None,
        image_ref=_resolve_path(image, base_dir) if image else None,
    )


def _parse_time_limit(raw_value: str) -> float:
    if not raw_value:
        raise QuizImportError("TIMELIMIT must include a number of seconds.")
    try:
        seconds = float(raw_value)
    except ValueError as exc:  # pragma: no cover - conversion error details unnecessary
        raise QuizImportError("TIMELIMIT must be a number of seconds.") from exc
    if not math.isfinite(seconds) or seconds <= 0:
        raise QuizImportError("TIMELIMIT must be a positive number of seconds.")
    return seconds


def _resolve_path(raw_path: str, base_dir: Path | None) -> str:
    path = Path(raw_path)
    if base_dir is not None and not path.is_absolute():
        path = base_dir / path
    return str(path)
