"""Service for grading a finished quiz session."""

from __future__ import annotations

from collections.abc import Sequence

from stamp_quiz.constants.quiz_constants import (
    HIGH_PERCENT,
    LOW_PERCENT,
    MID_PERCENT,
    PERFECT_PERCENT,
)
from stamp_quiz.core.models import GradeTier, ItemOutcome, QuizItem, ScoreResult
from stamp_quiz.core.services.answer_store import AnswerStore

DEFAULT_TIER_THRESHOLDS: tuple[tuple[int, GradeTier], ...] = (
    (PERFECT_PERCENT, GradeTier.PERFECT),
    (HIGH_PERCENT, GradeTier.HIGH),
    (MID_PERCENT, GradeTier.MID),
    (LOW_PERCENT, GradeTier.LOW),
)


class ScoringEngine:
    """Totals earned points and maps the ratio to a grade tier."""

    def __init__(
        self,
        thresholds: Sequence[tuple[int, GradeTier]] = DEFAULT_TIER_THRESHOLDS,
    ) -> None:
        # Evaluated in order; first inclusive match wins.
        self._thresholds = sorted(thresholds, key=lambda entry: -entry[0])

    def score(self, items: Sequence[QuizItem], answers: AnswerStore) -> ScoreResult:
        """Grade every item against the saved answers.

        An answer counts only when it is non-empty and equals the canonical
        answer exactly after trimming surrounding whitespace.
        """
        earned = 0
        possible = 0
        outcomes: list[ItemOutcome] = []
        for index, item in enumerate(items):
            possible += item.points
            given = answers.get(index).strip() if index < len(answers) else ""
            expected = (item.answer or "").strip()
            is_correct = bool(given) and given == expected
            if is_correct:
                earned += item.points
            outcomes.append(
                ItemOutcome(
                    index=index,
                    given=given,
                    expected=expected,
                    points=item.points,
                    is_correct=is_correct,
                )
            )

        return ScoreResult(
            earned_points=earned,
            possible_points=possible,
            tier=self.grade(earned, possible),
            outcomes=tuple(outcomes),
        )

    def grade(self, earned: int, possible: int) -> GradeTier:
        """Return the tier for a score; thresholds are inclusive."""
        if possible <= 0:
            return GradeTier.LOWEST
        for percent, tier in self._thresholds:
            # Integer comparison keeps boundaries such as 18/20 == 90% exact.
            if earned * 100 >= possible * percent:
                return tier
        return GradeTier.LOWEST
