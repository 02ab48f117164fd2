"""Orchestrates one play-through: session start, questions, answers and the end of the game.

The controller is the only writer of ``SessionSnapshot``. The board and the
countdown can only ask for transitions through the public intent methods and
the timer signals; everything else is ignored when the current state does not
allow it.

Network calls go through the request dispatcher and come back on the Qt main
thread, so transitions never interleave. Two rules keep the ordering intact:
a submission moves the state to ``SUBMITTING`` before the request leaves, and
the countdown is always stopped before the state moves away from
``PLAYING``/``FEEDBACK``.
"""

from __future__ import annotations

from dataclasses import replace
from functools import partial
import logging
from typing import Any

from PySide6.QtCore import QObject, Signal

from quiz_player.constants.game_constants import (
    MAX_DIFFICULTY,
    MAX_LIVES,
    MIN_DIFFICULTY,
    QUESTION_TIME_BUDGET_SECONDS,
    START_DIFFICULTY,
)
from quiz_player.constants.message_constants import (
    ABANDON_ERROR_MESSAGE,
    ABANDON_SUCCESS_MESSAGE,
    COMPLETED_MESSAGE,
    CONNECTION_ERROR_MESSAGE,
    CORRECT_ANSWER_MESSAGE,
    INVALID_SESSION_MESSAGE,
    NO_MORE_QUESTIONS_MESSAGE,
    NO_QUESTIONS_AVAILABLE_MESSAGE,
    NO_VERIFIED_QUESTIONS_MESSAGE,
    SELECT_OPTION_MESSAGE,
    START_ERROR_MESSAGE,
    SUBMIT_ERROR_MESSAGE,
    TIMEOUT_MESSAGE,
    WRONG_ANSWER_MESSAGE,
)
from quiz_player.core.countdown_timer import CountdownTimer
from quiz_player.core.models import (
    AbandonResult,
    AnswerVerdict,
    NextQuestionResult,
    Notification,
    NotificationLevel,
    SessionInfo,
    SessionStatus,
)
from quiz_player.core.services.game_api import GameApiClient, GameApiError
from quiz_player.core.services.identity_store import IdentityStore
from quiz_player.core.services.request_dispatcher import RequestDispatcher
from quiz_player.core.session_state import TERMINAL_STATES, GameState, Route, SessionSnapshot

logger = logging.getLogger(__name__)


def _clamp_difficulty(value: float) -> float:
    return max(MIN_DIFFICULTY, min(MAX_DIFFICULTY, value))


class QuizSessionController(QObject):
    """State machine for a single adaptive quiz session."""

    snapshot_changed = Signal(object)
    notification_posted = Signal(object)
    navigation_requested = Signal(object)

    def __init__(
        self,
        api: GameApiClient,
        dispatcher: RequestDispatcher,
        identity_store: IdentityStore,
        timer: CountdownTimer | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._api = api
        self._dispatcher = dispatcher
        self._identity_store = identity_store
        self._timer = timer or CountdownTimer(parent=self)
        self._timer.ticked.connect(self._handle_tick)
        self._timer.expired.connect(self._handle_expired)

        self._snapshot = SessionSnapshot()
        self._started: bool = False
        self._shut_down: bool = False

    @property
    def snapshot(self) -> SessionSnapshot:
        return self._snapshot

    # --- Startup ---

    def start(self) -> None:
        """Read the stored identity and open a session with the scoring service."""
        if self._started or self._is_detached():
            return
        self._started = True

        identity = self._identity_store.load()
        if identity is None:
            logger.warning("No stored player identity; sending the player back to the entry screen")
            self._leave(Route.ENTRY)
            return

        self._update(player_name=identity.player_name, state=GameState.LOADING)
        logger.info("Starting session for player %s (room %s)", identity.player_id, identity.room_code)
        self._dispatcher.submit(
            "start_session",
            partial(self._api.start_session, identity.player_id, START_DIFFICULTY, identity.room_code),
            self._on_session_started,
            self._on_session_start_failed,
        )

    def _on_session_started(self, info: SessionInfo) -> None:
        if self._is_detached():
            return
        self._update(session_id=info.session_id, difficulty=info.current_difficulty, room=info.room)
        logger.info("Session %s started at difficulty %.1f", info.session_id, info.current_difficulty)
        self._load_next_question()

    def _on_session_start_failed(self, error: GameApiError) -> None:
        if self._is_detached():
            return
        self._notify(NotificationLevel.ERROR, error.message or START_ERROR_MESSAGE)
        self._leave(Route.ENTRY)

    # --- Questions ---

    def _load_next_question(self) -> None:
        snapshot = self._snapshot
        if snapshot.session_id is None:
            self._notify(NotificationLevel.ERROR, INVALID_SESSION_MESSAGE)
            return

        self._timer.stop()
        self._update(
            state=GameState.LOADING,
            selected_option_id=None,
            verdict=None,
            fetch_failed=False,
            abandon_prompt_open=False,
        )
        self._dispatcher.submit(
            "get_next_question",
            partial(self._api.get_next_question, snapshot.session_id, snapshot.difficulty),
            self._on_question_loaded,
            self._on_question_failed,
        )

    def _on_question_loaded(self, result: NextQuestionResult) -> None:
        if self._is_detached() or self._snapshot.state is not GameState.LOADING:
            return

        question = result.question
        if question is not None:
            changes: dict[str, Any] = {
                "state": GameState.PLAYING,
                "question": question,
                "selected_option_id": None,
                "remaining_seconds": QUESTION_TIME_BUDGET_SECONDS,
            }
            if question.progress is not None:
                changes["max_questions"] = question.progress.max_questions
                changes["locked_levels"] = question.progress.locked_levels
                changes["question_count"] = question.progress.total_answered
            self._update(**changes)
            self._timer.start(QUESTION_TIME_BUDGET_SECONDS)
            return

        if result.completed:
            if self._snapshot.question_count == 0:
                # Nothing was ever playable; not a win.
                self._finish(GameState.NO_QUESTIONS, NotificationLevel.WARNING, NO_QUESTIONS_AVAILABLE_MESSAGE)
            else:
                self._finish(GameState.COMPLETED, NotificationLevel.SUCCESS, result.message or COMPLETED_MESSAGE)
            return

        self._finish(GameState.COMPLETED, NotificationLevel.WARNING, NO_MORE_QUESTIONS_MESSAGE)

    def _on_question_failed(self, error: GameApiError) -> None:
        if self._is_detached() or self._snapshot.state is not GameState.LOADING:
            return

        if error.is_not_found:
            state = GameState.NO_QUESTIONS if self._snapshot.question_count == 0 else GameState.COMPLETED
            self._finish(state, NotificationLevel.WARNING, NO_VERIFIED_QUESTIONS_MESSAGE)
            return

        self._update(fetch_failed=True)
        self._notify(NotificationLevel.ERROR, error.message or CONNECTION_ERROR_MESSAGE)

    def retry(self) -> None:
        """Fetch the question again after a transient failure."""
        snapshot = self._snapshot
        if self._is_detached() or snapshot.state is not GameState.LOADING or not snapshot.fetch_failed:
            return
        self._load_next_question()

    # --- Answering ---

    def select_option(self, option_id: int) -> None:
        snapshot = self._snapshot
        if not snapshot.accepts_selection or snapshot.question is None:
            return
        if all(option.id != option_id for option in snapshot.question.options):
            logger.warning("Ignoring selection of unknown option %s", option_id)
            return
        self._update(selected_option_id=option_id)

    def submit_answer(self) -> None:
        """Submit the selected option. Without a selection the player is asked to pick one."""
        snapshot = self._snapshot
        if not snapshot.accepts_selection:
            return
        if snapshot.selected_option_id is None:
            self._notify(NotificationLevel.WARNING, SELECT_OPTION_MESSAGE)
            return
        self._dispatch_answer(snapshot.selected_option_id)

    def _handle_tick(self, remaining: int) -> None:
        if self._is_detached() or self._snapshot.state is not GameState.PLAYING:
            return
        self._update(remaining_seconds=remaining)

    def _handle_expired(self) -> None:
        if not self._snapshot.accepts_selection:
            return
        logger.info("Time is up for question %s", self._snapshot.question.id if self._snapshot.question else None)
        self._dispatch_answer(self._snapshot.selected_option_id)

    def _dispatch_answer(self, selected_option_id: int | None) -> None:
        # Manual submit and expiry both end up here; only the first call in PLAYING gets through.
        snapshot = self._snapshot
        if snapshot.state is not GameState.PLAYING or snapshot.abandon_pending or self._is_detached():
            return
        if snapshot.session_id is None or snapshot.question is None:
            self._notify(NotificationLevel.ERROR, INVALID_SESSION_MESSAGE)
            return

        self._timer.stop()
        time_taken = max(0, min(QUESTION_TIME_BUDGET_SECONDS, QUESTION_TIME_BUDGET_SECONDS - snapshot.remaining_seconds))
        self._update(state=GameState.SUBMITTING)
        self._dispatcher.submit(
            "submit_answer",
            partial(
                self._api.submit_answer,
                snapshot.session_id,
                snapshot.question.id,
                selected_option_id,
                time_taken,
            ),
            self._on_answer_accepted,
            self._on_answer_rejected,
        )

    def _on_answer_accepted(self, verdict: AnswerVerdict) -> None:
        snapshot = self._snapshot
        if self._is_detached() or snapshot.state is not GameState.SUBMITTING:
            return

        question_count = snapshot.question_count + 1
        self._update(
            state=GameState.FEEDBACK,
            score=verdict.score,
            lives=max(0, min(MAX_LIVES, verdict.lives)),
            difficulty=_clamp_difficulty(verdict.next_difficulty),
            question_count=question_count,
            verdict=verdict,
            is_last_question=question_count >= snapshot.max_questions,
        )
        logger.info(
            "Answer %s: score=%s lives=%s difficulty=%.2f (%s/%s)",
            "correct" if verdict.is_correct else "wrong",
            verdict.score,
            verdict.lives,
            verdict.next_difficulty,
            question_count,
            snapshot.max_questions,
        )
        if verdict.is_correct:
            self._notify(NotificationLevel.SUCCESS, CORRECT_ANSWER_MESSAGE)
        elif snapshot.selected_option_id is None:
            self._notify(NotificationLevel.INFO, TIMEOUT_MESSAGE)
        else:
            self._notify(NotificationLevel.INFO, WRONG_ANSWER_MESSAGE)

    def _on_answer_rejected(self, error: GameApiError) -> None:
        if self._is_detached() or self._snapshot.state is not GameState.SUBMITTING:
            return
        # The question starts over with a full budget; nothing else changes.
        self._update(state=GameState.PLAYING, remaining_seconds=QUESTION_TIME_BUDGET_SECONDS)
        self._timer.start(QUESTION_TIME_BUDGET_SECONDS)
        self._notify(NotificationLevel.ERROR, error.message or SUBMIT_ERROR_MESSAGE)

    def next_question(self) -> None:
        """Leave the feedback screen: results, game over or the next question."""
        snapshot = self._snapshot
        if self._is_detached() or snapshot.state is not GameState.FEEDBACK or snapshot.abandon_pending:
            return

        if snapshot.is_last_question or snapshot.cap_reached:
            self._leave(Route.RESULTS)
            return

        server_says_over = snapshot.verdict is not None and snapshot.verdict.status is SessionStatus.GAME_OVER
        if snapshot.lives <= 0 or server_says_over:
            self._timer.stop()
            self._update(state=GameState.GAMEOVER, abandon_prompt_open=False)
            return

        self._load_next_question()

    # --- Abandon ---

    def open_abandon_prompt(self) -> None:
        snapshot = self._snapshot
        if not snapshot.can_abandon or snapshot.abandon_prompt_open:
            return
        self._update(abandon_prompt_open=True)

    def cancel_abandon(self) -> None:
        if not self._snapshot.abandon_prompt_open:
            return
        self._update(abandon_prompt_open=False)

    def confirm_abandon(self) -> None:
        snapshot = self._snapshot
        if not snapshot.abandon_prompt_open or not snapshot.can_abandon or snapshot.session_id is None:
            return

        self._timer.stop()
        self._update(abandon_prompt_open=False, abandon_pending=True)
        logger.info("Abandoning session %s", snapshot.session_id)
        self._dispatcher.submit(
            "abandon_session",
            partial(self._api.abandon_session, snapshot.session_id),
            self._on_abandoned,
            self._on_abandon_failed,
        )

    def _on_abandoned(self, result: AbandonResult) -> None:
        if self._is_detached():
            return
        if result.status is not SessionStatus.ABANDONED:
            logger.warning("Abandon answered with status %s", result.status.value)
            self._on_abandon_failed(GameApiError())
            return
        logger.info("Session %s abandoned with final score %s", self._snapshot.session_id, result.final_score)
        self._update(abandon_pending=False)
        self._notify(NotificationLevel.WARNING, ABANDON_SUCCESS_MESSAGE)
        self._leave(Route.RESULTS)

    def _on_abandon_failed(self, error: GameApiError) -> None:
        if self._is_detached():
            return
        logger.warning("Abandon failed: %s", error)
        if self._snapshot.state is GameState.PLAYING:
            self._update(abandon_pending=False, remaining_seconds=QUESTION_TIME_BUDGET_SECONDS)
            self._timer.start(QUESTION_TIME_BUDGET_SECONDS)
        else:
            self._update(abandon_pending=False)
        self._notify(NotificationLevel.ERROR, error.message or ABANDON_ERROR_MESSAGE)

    # --- Leaving the board ---

    def view_results(self) -> None:
        snapshot = self._snapshot
        if self._is_detached():
            return
        if snapshot.state in TERMINAL_STATES or (snapshot.state is GameState.FEEDBACK and snapshot.is_last_question):
            self._leave(Route.RESULTS)

    def go_home(self) -> None:
        if self._is_detached() or self._snapshot.state not in TERMINAL_STATES:
            return
        self._identity_store.clear()
        self._leave(Route.ENTRY)

    def go_to_profile(self) -> None:
        if self._is_detached() or self._snapshot.state not in TERMINAL_STATES:
            return
        self._leave(Route.PROFILE)

    def shutdown(self) -> None:
        """Tear down: no tick, expiry or late response may touch state afterwards."""
        self._timer.stop()
        self._shut_down = True

    # --- Internals ---

    def _is_detached(self) -> bool:
        return self._shut_down or self._snapshot.has_exited

    def _finish(self, state: GameState, level: NotificationLevel, message: str) -> None:
        self._timer.stop()
        self._update(state=state, question=None, selected_option_id=None, abandon_prompt_open=False)
        self._notify(level, message)

    def _leave(self, route: Route) -> None:
        self._timer.stop()
        self._update(exit_route=route, abandon_prompt_open=False)
        logger.info("Leaving the board for %s", route.name)
        self.navigation_requested.emit(route)

    def _update(self, **changes: Any) -> None:
        previous = self._snapshot
        self._snapshot = replace(previous, **changes)
        if previous.state is not self._snapshot.state:
            logger.debug("Game state %s -> %s", previous.state.name, self._snapshot.state.name)
        self.snapshot_changed.emit(self._snapshot)

    def _notify(self, level: NotificationLevel, message: str) -> None:
        self.notification_posted.emit(Notification(level=level, message=message))
