import logging

import pytest

from stamp_quiz.constants.quiz_constants import (
    INTRO_COUNTDOWN_STEPS,
    INTRO_STEP_SECONDS,
    INTRO_TERMINAL_PAUSE_SECONDS,
)
from stamp_quiz.core.errors import InvalidConfiguration, InvalidTransition
from stamp_quiz.core.models import (
    Direction,
    FinishReason,
    GradeTier,
    QuizItem,
    SessionPhase,
)
from stamp_quiz.core.services.quiz_session import QuizSession, SessionListener


class RecordingListener(SessionListener):
    def __init__(self) -> None:
        self.phases: list[SessionPhase] = []
        self.countdowns: list[int] = []
        self.shown: list[tuple[int, str]] = []
        self.finished: list[tuple[int, FinishReason]] = []

    def on_phase_changed(self, phase: SessionPhase) -> None:
        self.phases.append(phase)

    def on_countdown(self, value: int) -> None:
        self.countdowns.append(value)

    def on_question_shown(self, index: int, item: QuizItem, prefilled_answer: str) -> None:
        self.shown.append((index, prefilled_answer))

    def on_finished(self, result, reason: FinishReason) -> None:
        self.finished.append((result.earned_points, reason))


def _items(*points: int) -> list[QuizItem]:
    return [QuizItem(answer=f"a{index}", points=value) for index, value in enumerate(points)]


def _finish_intro(session: QuizSession) -> None:
    for _ in range(INTRO_COUNTDOWN_STEPS + 1):
        session.intro_step()


def _running_session(items: list[QuizItem], total_seconds: float = 10.0) -> QuizSession:
    session = QuizSession(items, total_seconds)
    session.start()
    _finish_intro(session)
    return session


def test_intro_countdown_leads_to_first_question() -> None:
    listener = RecordingListener()
    session = QuizSession(_items(2, 4), 30.0, listener=listener)
    assert session.phase is SessionPhase.IDLE

    session.start()
    assert session.phase is SessionPhase.INTRO
    assert session.next_intro_delay == INTRO_STEP_SECONDS

    for _ in range(INTRO_COUNTDOWN_STEPS):
        session.intro_step()
    assert session.phase is SessionPhase.INTRO
    assert session.countdown_value == 0
    assert session.next_intro_delay == INTRO_TERMINAL_PAUSE_SECONDS

    session.intro_step()
    assert session.phase is SessionPhase.RUNNING
    assert session.current_index == 0
    assert session.remaining_seconds == 30.0
    assert session.current_item == session.items[0]
    assert session.next_intro_delay is None
    assert listener.countdowns == [5, 4, 3, 2, 1, 0]
    assert listener.phases == [SessionPhase.INTRO, SessionPhase.RUNNING]
    assert listener.shown == [(0, "")]


def test_intro_consumes_no_time() -> None:
    session = QuizSession(_items(1), 10.0)
    session.tick(3.0)
    session.start()
    session.tick(3.0)
    assert session.remaining_seconds == 10.0
    _finish_intro(session)
    assert session.remaining_seconds == 10.0


def test_ticks_accumulate_elapsed_time() -> None:
    session = _running_session(_items(1, 1), 10.0)
    for delta in (1.5, 2.0, 0.5):
        session.tick(delta)
    assert session.remaining_seconds == 6.0
    assert session.elapsed_seconds == 4.0
    assert session.phase is SessionPhase.RUNNING


def test_time_running_out_clamps_and_finishes() -> None:
    listener = RecordingListener()
    session = QuizSession(_items(1, 1), 10.0, listener=listener)
    session.start()
    _finish_intro(session)

    for delta in (4.0, 4.0, 3.0):
        session.tick(delta)

    assert session.remaining_seconds == 0.0
    assert session.phase is SessionPhase.FINISHED
    assert session.finish_reason is FinishReason.TIMEOUT
    assert listener.finished == [(0, FinishReason.TIMEOUT)]


def test_tick_after_finish_is_ignored() -> None:
    session = _running_session(_items(1), 5.0)
    session.tick(10.0)
    result = session.result
    session.tick(1.0)
    assert session.phase is SessionPhase.FINISHED
    assert session.remaining_seconds == 0.0
    assert session.result is result


def test_negative_tick_is_rejected() -> None:
    session = _running_session(_items(1))
    with pytest.raises(ValueError):
        session.tick(-1.0)
    assert session.remaining_seconds == 10.0


def test_timeout_flushes_current_draft_before_scoring() -> None:
    session = _running_session([QuizItem(answer="森", points=2)], 5.0)
    session.answer_changed("  森 ")
    session.tick(5.0)
    assert session.answers == ["森"]
    assert session.result is not None
    assert session.result.earned_points == 2
    assert session.result.tier is GradeTier.PERFECT


def test_timeout_uses_text_passed_with_tick() -> None:
    session = _running_session([QuizItem(answer="森", points=2)], 5.0)
    session.tick(6.0, draft_text="森")
    assert session.result.earned_points == 2


def test_draft_is_not_saved_until_flush() -> None:
    session = _running_session(_items(1, 1))
    session.answer_changed("draft")
    assert session.draft_text == "draft"
    assert session.answers == ["", ""]

    session.save_draft_answer("  saved  ")
    assert session.answers == ["saved", ""]
    assert session.current_index == 0


def test_next_then_prev_restores_answers() -> None:
    session = _running_session(_items(1, 1, 1))
    session.answer_changed("first")
    session.advance(Direction.NEXT)
    assert session.current_index == 1
    assert session.prefilled_answer == ""

    session.answer_changed("second")
    session.advance(Direction.PREV)
    assert session.current_index == 0
    assert session.prefilled_answer == "first"
    assert session.draft_text == "first"

    session.advance(Direction.NEXT)
    assert session.current_index == 1
    assert session.prefilled_answer == "second"


def test_advance_uses_text_passed_with_event() -> None:
    listener = RecordingListener()
    session = QuizSession(_items(1, 1), 10.0, listener=listener)
    session.start()
    _finish_intro(session)

    session.advance(Direction.NEXT, draft_text=" typed ")
    session.advance(Direction.PREV)
    assert listener.shown == [(0, ""), (1, ""), (0, "typed")]


def test_prev_on_first_question_is_a_no_op() -> None:
    session = _running_session(_items(1, 1))
    session.tick(2.0)
    before = (session.phase, session.current_index, session.remaining_seconds, session.answers)

    session.advance(Direction.PREV)

    after = (session.phase, session.current_index, session.remaining_seconds, session.answers)
    assert after == before


def test_next_on_last_question_completes_session() -> None:
    items = [QuizItem(answer="森", points=2), QuizItem(answer="明", points=4)]
    session = _running_session(items)
    session.advance(Direction.NEXT, draft_text="森")
    session.advance(Direction.NEXT, draft_text="明")

    assert session.phase is SessionPhase.FINISHED
    assert session.finish_reason is FinishReason.COMPLETED
    assert session.current_index == 1
    assert session.answers == ["森", "明"]
    assert session.result.earned_points == session.result.possible_points == 6
    assert session.result.tier is GradeTier.PERFECT


def test_scoring_scenario_through_navigation() -> None:
    items = [
        QuizItem(answer="森", points=2),
        QuizItem(answer="明", points=4),
        QuizItem(answer="休", points=6),
    ]
    session = _running_session(items)
    session.advance(Direction.NEXT, draft_text="x")
    session.advance(Direction.NEXT, draft_text="明")
    session.advance(Direction.NEXT, draft_text="")

    result = session.result
    assert result.earned_points == 4
    assert result.possible_points == 12
    assert result.tier is GradeTier.LOWEST


def _idle(session: QuizSession) -> None:
    pass


def _intro(session: QuizSession) -> None:
    session.start()
    session.intro_step()


def _running(session: QuizSession) -> None:
    session.start()
    _finish_intro(session)
    session.advance(Direction.NEXT, draft_text="typed")
    session.answer_changed("partial")


def _finished(session: QuizSession) -> None:
    _running(session)
    session.tick(100.0)


@pytest.mark.parametrize("drive", [_idle, _intro, _running, _finished])
def test_restart_returns_to_idle_with_empty_answers(drive) -> None:
    session = QuizSession(_items(1, 2, 3), 10.0)
    drive(session)

    session.restart()

    assert session.phase is SessionPhase.IDLE
    assert session.answers == ["", "", ""]
    assert session.result is None
    assert session.finish_reason is None
    assert session.current_index == 0
    assert session.remaining_seconds == 10.0
    assert session.countdown_value == INTRO_COUNTDOWN_STEPS
    assert session.draft_text == ""


def test_restart_allows_a_new_session() -> None:
    session = _running_session(_items(1))
    session.advance(Direction.NEXT, draft_text="a0")
    assert session.phase is SessionPhase.FINISHED

    session.restart()
    session.start()
    _finish_intro(session)
    assert session.phase is SessionPhase.RUNNING
    assert session.prefilled_answer == ""


@pytest.mark.parametrize(
    "items",
    [
        [],
        [QuizItem(answer="a", points=0)],
        [QuizItem(answer="a", points=-2)],
        [QuizItem(answer="a", points=1), QuizItem(answer="b", points=0)],
    ],
)
def test_invalid_items_are_rejected(items: list[QuizItem]) -> None:
    with pytest.raises(InvalidConfiguration):
        QuizSession(items, 10.0)


@pytest.mark.parametrize("total_seconds", [0, -5.0, float("inf"), float("nan")])
def test_invalid_time_budget_is_rejected(total_seconds: float) -> None:
    with pytest.raises(InvalidConfiguration):
        QuizSession(_items(1), total_seconds)


def test_start_without_items_is_rejected() -> None:
    session = QuizSession()
    assert not session.is_configured
    with pytest.raises(InvalidConfiguration):
        session.start()
    assert session.phase is SessionPhase.IDLE


def test_underfilled_quiz_warns(caplog: pytest.LogCaptureFixture) -> None:
    session = QuizSession()
    with caplog.at_level(logging.WARNING, logger="stamp_quiz"):
        warnings = session.configure(_items(1, 2, 3), 10.0)
    assert len(warnings) == 1
    assert "26" in warnings[0]
    assert session.configuration_warnings == warnings
    assert any(record.levelno == logging.WARNING for record in caplog.records)


def test_full_quiz_has_no_warnings() -> None:
    session = QuizSession(_items(*([2] * 26)), 10.0)
    assert session.configuration_warnings == []


@pytest.mark.parametrize(
    "event",
    [
        lambda session: session.advance(Direction.NEXT),
        lambda session: session.answer_changed("x"),
        lambda session: session.save_draft_answer("x"),
        lambda session: session.intro_step(),
    ],
)
def test_running_events_are_rejected_while_idle(event) -> None:
    session = QuizSession(_items(1), 10.0)
    with pytest.raises(InvalidTransition):
        event(session)
    assert session.phase is SessionPhase.IDLE
    assert session.answers == [""]


def test_start_twice_is_rejected() -> None:
    session = QuizSession(_items(1), 10.0)
    session.start()
    with pytest.raises(InvalidTransition):
        session.start()
    assert session.phase is SessionPhase.INTRO
    assert session.countdown_value == INTRO_COUNTDOWN_STEPS


def test_advance_after_finish_is_rejected() -> None:
    session = _running_session(_items(1))
    session.advance(Direction.NEXT)
    with pytest.raises(InvalidTransition):
        session.advance(Direction.PREV)
    assert session.phase is SessionPhase.FINISHED


def test_configure_while_running_is_rejected() -> None:
    session = _running_session(_items(1, 1))
    with pytest.raises(InvalidTransition):
        session.configure(_items(3), 5.0)
    assert session.item_count == 2
    assert session.phase is SessionPhase.RUNNING


def test_configure_after_finish_resets_to_idle() -> None:
    session = _running_session(_items(1))
    session.tick(10.0)
    session.configure(_items(1, 1, 1), 20.0)
    assert session.phase is SessionPhase.IDLE
    assert session.answers == ["", "", ""]
    assert session.total_seconds == 20.0
    assert session.result is None


def test_zero_step_intro_goes_straight_to_pause() -> None:
    session = QuizSession(_items(1), 10.0, intro_steps=0)
    session.start()
    assert session.next_intro_delay == INTRO_TERMINAL_PAUSE_SECONDS
    session.intro_step()
    assert session.phase is SessionPhase.RUNNING
