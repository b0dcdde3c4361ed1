import pytest

from stamp_quiz.core.models import GradeTier, QuizItem
from stamp_quiz.core.services.answer_store import AnswerStore
from stamp_quiz.core.services.scoring import ScoringEngine


def _store(answers: list[str]) -> AnswerStore:
    store = AnswerStore(len(answers))
    for index, answer in enumerate(answers):
        store.save(index, answer)
    return store


@pytest.mark.parametrize(
    ("earned", "possible", "tier"),
    [
        (20, 20, GradeTier.PERFECT),
        (19, 20, GradeTier.HIGH),
        (18, 20, GradeTier.HIGH),
        (17, 20, GradeTier.MID),
        (15, 20, GradeTier.MID),
        (14, 20, GradeTier.LOW),
        (10, 20, GradeTier.LOW),
        (9, 20, GradeTier.LOWEST),
        (0, 20, GradeTier.LOWEST),
        (0, 0, GradeTier.LOWEST),
    ],
)
def test_grade_thresholds_are_inclusive(earned: int, possible: int, tier: GradeTier) -> None:
    assert ScoringEngine().grade(earned, possible) is tier


def test_all_correct_is_perfect() -> None:
    items = [QuizItem(answer="森", points=2), QuizItem(answer="明", points=10)]
    result = ScoringEngine().score(items, _store(["森", "明"]))
    assert result.earned_points == result.possible_points == 12
    assert result.tier is GradeTier.PERFECT
    assert result.is_perfect
    assert result.ratio == 1.0


def test_mixed_answers_scenario() -> None:
    items = [
        QuizItem(answer="森", points=2),
        QuizItem(answer="明", points=4),
        QuizItem(answer="休", points=6),
    ]
    result = ScoringEngine().score(items, _store(["x", "明", ""]))
    assert result.earned_points == 4
    assert result.possible_points == 12
    assert result.tier is GradeTier.LOWEST
    assert [outcome.is_correct for outcome in result.outcomes] == [False, True, False]
    assert result.correct_count == 1


def test_eighteen_of_twenty_points_is_high() -> None:
    items = [QuizItem(answer=str(index), points=2) for index in range(10)]
    answers = [str(index) for index in range(9)] + ["wrong"]
    result = ScoringEngine().score(items, _store(answers))
    assert (result.earned_points, result.possible_points) == (18, 20)
    assert result.tier is GradeTier.HIGH


def test_match_is_exact_and_case_sensitive_after_trimming() -> None:
    items = [
        QuizItem(answer=" Tree ", points=1),
        QuizItem(answer="Tree", points=1),
        QuizItem(answer="Tree", points=1),
    ]
    result = ScoringEngine().score(items, _store(["Tree", "tree", "Trees"]))
    assert [outcome.is_correct for outcome in result.outcomes] == [True, False, False]
    assert result.outcomes[0].expected == "Tree"


def test_empty_answer_never_matches_empty_canonical_answer() -> None:
    items = [QuizItem(answer="   ", points=3)]
    result = ScoringEngine().score(items, _store([""]))
    assert result.earned_points == 0
    assert result.possible_points == 3


def test_custom_thresholds() -> None:
    engine = ScoringEngine(thresholds=[(50, GradeTier.LOW), (100, GradeTier.PERFECT)])
    assert engine.grade(10, 10) is GradeTier.PERFECT
    assert engine.grade(9, 10) is GradeTier.LOW
    assert engine.grade(4, 10) is GradeTier.LOWEST
