"""Domain models for the quiz application."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, auto


class SessionPhase(Enum):
    """Lifecycle phase of a quiz session."""

    IDLE = auto()
    INTRO = auto()
    RUNNING = auto()
    FINISHED = auto()


class Direction(Enum):
    """Navigation direction between questions."""

    NEXT = auto()
    PREV = auto()


class GradeTier(IntEnum):
    """Result tier awarded at the end of a session, ordered lowest to highest."""

    LOWEST = 0
    LOW = 1
    MID = 2
    HIGH = 3
    PERFECT = 4


class FinishReason(Enum):
    """Why a session reached the finished phase."""

    TIMEOUT = auto()
    COMPLETED = auto()


@dataclass(frozen=True, slots=True)
class QuizItem:
    """Free-text question with a canonical answer and a point value."""

    answer: str
    points: int
    label: str | None = None
    image_ref: str | None = None  # Opaque to the core; the Qt host treats it as an image path


@dataclass(frozen=True, slots=True)
class ItemOutcome:
    """Grading outcome of a single item."""

    index: int
    given: str
    expected: str
    points: int
    is_correct: bool


@dataclass(frozen=True, slots=True)
class ScoreResult:
    """Immutable snapshot of a graded session."""

    earned_points: int
    possible_points: int
    tier: GradeTier
    outcomes: tuple[ItemOutcome, ...] = ()

    @property
    def ratio(self) -> float:
        if self.possible_points <= 0:
            return 0.0
        return self.earned_points / self.possible_points

    @property
    def is_perfect(self) -> bool:
        return self.tier is GradeTier.PERFECT

    @property
    def correct_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.is_correct)
