"""Service for driving a timed quiz session from host events."""

from __future__ import annotations

from collections.abc import Sequence
import logging
import math

from stamp_quiz.constants.quiz_constants import (
    DEFAULT_TOTAL_SECONDS,
    INTRO_COUNTDOWN_STEPS,
    INTRO_STEP_SECONDS,
    INTRO_TERMINAL_PAUSE_SECONDS,
    RECOMMENDED_ITEM_COUNT,
)
from stamp_quiz.core.errors import InvalidConfiguration, InvalidTransition
from stamp_quiz.core.models import (
    Direction,
    FinishReason,
    QuizItem,
    ScoreResult,
    SessionPhase,
)
from stamp_quiz.core.services.answer_store import AnswerStore
from stamp_quiz.core.services.scoring import ScoringEngine

logger = logging.getLogger(__name__)


class SessionListener:
    """Receives notifications from a QuizSession. Override the hooks you need."""

    def on_phase_changed(self, phase: SessionPhase) -> None:
        pass

    def on_countdown(self, value: int) -> None:
        pass

    def on_question_shown(self, index: int, item: QuizItem, prefilled_answer: str) -> None:
        pass

    def on_time_changed(self, remaining_seconds: float, total_seconds: float) -> None:
        pass

    def on_finished(self, result: ScoreResult, reason: FinishReason) -> None:
        pass


class QuizSession:
    """State machine for one timed quiz: idle, intro countdown, running, finished.

    The session never sleeps or polls. The host feeds it discrete events
    (``start``, ``intro_step``, ``tick``, ``advance``) and renders whatever
    the session reports back, either by reading its properties or through a
    :class:`SessionListener`.

    Answers follow a draft/flush model: the text being edited is only a
    draft until a flush point (navigation, finishing, or an explicit
    ``save_draft_answer``) writes it into the answer store.
    """

    def __init__(
        self,
        items: Sequence[QuizItem] | None = None,
        total_seconds: float = DEFAULT_TOTAL_SECONDS,
        *,
        scoring_engine: ScoringEngine | None = None,
        listener: SessionListener | None = None,
        intro_steps: int = INTRO_COUNTDOWN_STEPS,
    ) -> None:
        if intro_steps < 0:
            raise ValueError("Intro countdown steps must not be negative.")
        self._items: tuple[QuizItem, ...] = ()
        self._total_seconds: float = self._validate_total_seconds(total_seconds)
        self._scoring = scoring_engine or ScoringEngine()
        self._listener = listener or SessionListener()
        self._intro_steps = intro_steps
        self._warnings: list[str] = []
        self._reset_state()
        if items is not None:
            self.configure(items, total_seconds)

    # --- Configuration ---

    def configure(self, items: Sequence[QuizItem], total_seconds: float | None = None) -> list[str]:
        """Install a new item list and time budget and return to the idle phase.

        Returns the non-fatal configuration warnings, which are also logged.
        """
        if self._phase in (SessionPhase.INTRO, SessionPhase.RUNNING):
            raise InvalidTransition(f"Cannot configure a session while {self._phase.name}.")

        prepared = tuple(items)
        if not prepared:
            raise InvalidConfiguration("Quiz must contain at least one item.")
        for index, item in enumerate(prepared):
            if not isinstance(item, QuizItem):
                raise InvalidConfiguration(f"Item {index + 1} is not a QuizItem.")
            if isinstance(item.points, bool) or not isinstance(item.points, int) or item.points <= 0:
                raise InvalidConfiguration(
                    f"Item {index + 1} must be worth a positive whole number of points."
                )

        seconds = self._total_seconds if total_seconds is None else total_seconds
        self._total_seconds = self._validate_total_seconds(seconds)
        self._items = prepared
        self._warnings = self._collect_warnings(prepared)
        for warning in self._warnings:
            logger.warning(warning)

        self._reset_state()
        logger.info(
            "Configured quiz with %d items and %.1f seconds", len(prepared), self._total_seconds
        )
        return list(self._warnings)

    def set_listener(self, listener: SessionListener | None) -> None:
        self._listener = listener or SessionListener()

    # --- Events ---

    def start(self) -> None:
        """Leave the idle phase and begin the intro countdown."""
        if not self._items:
            raise InvalidConfiguration("No quiz items configured.")
        self._require_phase("start", SessionPhase.IDLE)

        self._countdown_value = self._intro_steps
        self._set_phase(SessionPhase.INTRO)
        self._listener.on_countdown(self._countdown_value)

    def intro_step(self) -> None:
        """Signal that one intro unit (or the terminal pause) has elapsed."""
        self._require_phase("intro_step", SessionPhase.INTRO)

        if self._countdown_value > 0:
            self._countdown_value -= 1
            self._listener.on_countdown(self._countdown_value)
            return
        self._begin_running()

    def tick(self, delta_seconds: float, draft_text: str | None = None) -> None:
        """Consume elapsed time. Ignored outside the running phase."""
        if delta_seconds < 0 or math.isnan(delta_seconds):
            raise ValueError("Elapsed time must be a non-negative number of seconds.")
        if self._phase is not SessionPhase.RUNNING:
            return

        if draft_text is not None:
            self._draft_text = draft_text
        self._remaining_seconds = max(0.0, self._remaining_seconds - delta_seconds)
        self._listener.on_time_changed(self._remaining_seconds, self._total_seconds)

        if self._remaining_seconds <= 0.0:
            self._flush_draft()
            self._finish(FinishReason.TIMEOUT)

    def advance(self, direction: Direction, draft_text: str | None = None) -> None:
        """Save the current answer and move to the next or previous question.

        Moving forward from the last question finishes the session. Moving
        back from the first question leaves the session where it is.
        """
        if not isinstance(direction, Direction):
            raise ValueError(f"Unknown direction: {direction!r}")
        self._require_phase("advance", SessionPhase.RUNNING)

        if draft_text is not None:
            self._draft_text = draft_text
        self._flush_draft()

        if direction is Direction.NEXT:
            if self._current_index >= len(self._items) - 1:
                self._finish(FinishReason.COMPLETED)
                return
            self._current_index += 1
        else:
            if self._current_index == 0:
                return
            self._current_index -= 1
        self._show_current_question()

    def answer_changed(self, text: str) -> None:
        """Update the draft for the current question without saving it."""
        self._require_phase("answer_changed", SessionPhase.RUNNING)
        self._draft_text = text or ""

    def save_draft_answer(self, text: str) -> None:
        """Set the draft for the current question and save it immediately."""
        self._require_phase("save_draft_answer", SessionPhase.RUNNING)
        self._draft_text = text or ""
        self._flush_draft()

    def restart(self) -> None:
        """Discard answers, timing and result and return to the idle phase."""
        logger.info("Restarting session from %s", self._phase.name)
        self._reset_state()
        self._listener.on_phase_changed(self._phase)

    # --- Observations ---

    @property
    def phase(self) -> SessionPhase:
        return self._phase

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def remaining_seconds(self) -> float:
        return self._remaining_seconds

    @property
    def total_seconds(self) -> float:
        return self._total_seconds

    @property
    def elapsed_seconds(self) -> float:
        return self._total_seconds - self._remaining_seconds

    @property
    def countdown_value(self) -> int:
        return self._countdown_value

    @property
    def next_intro_delay(self) -> float | None:
        """Seconds the host should wait before the next ``intro_step``, or None outside the intro."""
        if self._phase is not SessionPhase.INTRO:
            return None
        if self._countdown_value > 0:
            return INTRO_STEP_SECONDS
        return INTRO_TERMINAL_PAUSE_SECONDS

    @property
    def items(self) -> tuple[QuizItem, ...]:
        return self._items

    @property
    def item_count(self) -> int:
        return len(self._items)

    @property
    def is_configured(self) -> bool:
        return bool(self._items)

    @property
    def current_item(self) -> QuizItem | None:
        if self._phase is not SessionPhase.RUNNING:
            return None
        return self._items[self._current_index]

    @property
    def prefilled_answer(self) -> str:
        """Saved answer for the current question, used to prefill the input."""
        if self._phase is not SessionPhase.RUNNING:
            return ""
        return self._answers.get(self._current_index)

    @property
    def draft_text(self) -> str:
        return self._draft_text

    @property
    def answers(self) -> list[str]:
        return self._answers.snapshot()

    @property
    def result(self) -> ScoreResult | None:
        return self._result

    @property
    def finish_reason(self) -> FinishReason | None:
        return self._finish_reason

    @property
    def configuration_warnings(self) -> list[str]:
        return list(self._warnings)

    # --- Internals ---

    def _reset_state(self) -> None:
        self._phase = SessionPhase.IDLE
        self._current_index = 0
        self._remaining_seconds = self._total_seconds
        self._countdown_value = self._intro_steps
        self._draft_text = ""
        self._answers = AnswerStore(len(self._items))
        self._result: ScoreResult | None = None
        self._finish_reason: FinishReason | None = None

    def _begin_running(self) -> None:
        self._remaining_seconds = self._total_seconds
        self._current_index = 0
        self._set_phase(SessionPhase.RUNNING)
        self._show_current_question()
        self._listener.on_time_changed(self._remaining_seconds, self._total_seconds)

    def _show_current_question(self) -> None:
        prefilled = self._answers.get(self._current_index)
        self._draft_text = prefilled
        self._listener.on_question_shown(
            self._current_index, self._items[self._current_index], prefilled
        )

    def _flush_draft(self) -> None:
        self._answers.save(self._current_index, self._draft_text)

    def _finish(self, reason: FinishReason) -> None:
        self._finish_reason = reason
        self._result = self._scoring.score(self._items, self._answers)
        self._set_phase(SessionPhase.FINISHED)
        logger.info(
            "Session finished (%s): %d / %d points, tier %s",
            reason.name,
            self._result.earned_points,
            self._result.possible_points,
            self._result.tier.name,
        )
        self._listener.on_finished(self._result, reason)

    def _set_phase(self, phase: SessionPhase) -> None:
        previous = self._phase
        self._phase = phase
        logger.info("Session phase %s -> %s", previous.name, phase.name)
        self._listener.on_phase_changed(phase)

    def _require_phase(self, event: str, expected: SessionPhase) -> None:
        if self._phase is not expected:
            logger.debug("Rejected %s while %s", event, self._phase.name)
            raise InvalidTransition(
                f"Cannot {event} while {self._phase.name}; expected {expected.name}."
            )

    @staticmethod
    def _validate_total_seconds(total_seconds: float) -> float:
        try:
            seconds = float(total_seconds)
        except (TypeError, ValueError) as exc:
            raise InvalidConfiguration("Total time must be a number of seconds.") from exc
        if not math.isfinite(seconds) or seconds <= 0:
            raise InvalidConfiguration("Total time must be a positive number of seconds.")
        return seconds

    @staticmethod
    def _collect_warnings(items: Sequence[QuizItem]) -> list[str]:
        warnings: list[str] = []
        if len(items) < RECOMMENDED_ITEM_COUNT:
            warnings.append(
                f"Quiz has {len(items)} items; {RECOMMENDED_ITEM_COUNT} are recommended."
            )
        for index, item in enumerate(items):
            if not (item.answer or "").strip():
                warnings.append(f"Item {index + 1} has an empty answer and can never be scored.")
        return warnings
