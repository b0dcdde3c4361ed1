"""Service for holding the answers typed during a quiz session."""

from __future__ import annotations

from stamp_quiz.core.errors import IndexOutOfRange


class AnswerStore:
    """Fixed-size, index-aligned storage of the last saved answer per question."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("Answer store size must not be negative.")
        self._answers: list[str | None] = [None] * size

    def __len__(self) -> int:
        return len(self._answers)

    def save(self, index: int, text: str) -> None:
        """Store the trimmed answer text for a question, replacing any previous value."""
        self._check_index(index)
        self._answers[index] = (text or "").strip()

    def get(self, index: int) -> str:
        """Return the saved answer for a question, or an empty string if none was saved."""
        self._check_index(index)
        return self._answers[index] or ""

    def is_answered(self, index: int) -> bool:
        return bool(self.get(index))

    def snapshot(self) -> list[str]:
        """Return a copy of all answers with unset slots as empty strings."""
        return [answer or "" for answer in self._answers]

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._answers):
            raise IndexOutOfRange(f"Answer index {index} out of range")
