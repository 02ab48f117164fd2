"""Shared fixtures: a Qt core application, a scripted game API and a hand-driven dispatcher."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Callable

import pytest
from PySide6.QtCore import QCoreApplication

from quiz_player.core.countdown_timer import CountdownTimer
from quiz_player.core.models import (
    AbandonResult,
    AnswerVerdict,
    NextQuestionResult,
    PlayerIdentity,
    Question,
    QuestionOption,
    QuestionProgress,
    SessionInfo,
    SessionStatus,
)
from quiz_player.core.quiz_session import QuizSessionController
from quiz_player.core.services.game_api import GameApiError
from quiz_player.core.session_state import GameState


@pytest.fixture(scope="session", autouse=True)
def qapp():
    """QTimer and queued signals need a core application; no display is required."""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


def make_question(
    question_id: int = 1,
    option_ids: tuple[int, ...] = (7, 8, 9),
    progress: QuestionProgress | None = None,
) -> Question:
    return Question(
        id=question_id,
        statement=f"Question {question_id}?",
        options=tuple(QuestionOption(id=option_id, text=f"Option {option_id}") for option_id in option_ids),
        difficulty=1.0,
        progress=progress,
    )


def make_verdict(
    is_correct: bool = True,
    score: int = 10,
    lives: int = 3,
    next_difficulty: float = 1.5,
    correct_option_id: int | None = 7,
    status: SessionStatus = SessionStatus.ACTIVE,
) -> AnswerVerdict:
    return AnswerVerdict(
        is_correct=is_correct,
        score=score,
        lives=lives,
        next_difficulty=next_difficulty,
        correct_option_id=correct_option_id,
        status=status,
    )


def queue_question(api, question_id=1, **kwargs):
    api.next_results.append(NextQuestionResult(question=make_question(question_id, **kwargs)))


def start_playing(controller, api, dispatcher, question_id=1, **kwargs):
    queue_question(api, question_id, **kwargs)
    controller.start()
    dispatcher.complete("start_session")
    dispatcher.complete("get_next_question")
    assert controller.snapshot.state is GameState.PLAYING


class FakeGameApi:
    """Scripted stand-in for GameApiClient that records every call it receives."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.session: SessionInfo | Exception = SessionInfo(session_id=42, current_difficulty=1.0)
        self.next_results: deque[NextQuestionResult | Exception] = deque()
        self.verdicts: deque[AnswerVerdict | Exception] = deque()
        self.abandon_outcome: AbandonResult | Exception = AbandonResult(
            status=SessionStatus.ABANDONED, final_score=0
        )

    def count(self, name: str) -> int:
        return sum(1 for call_name, _ in self.calls if call_name == name)

    def last_call(self, name: str) -> tuple[Any, ...]:
        return [args for call_name, args in self.calls if call_name == name][-1]

    def start_session(self, player_id: int, start_difficulty: float = 1.0, room_code: str | None = None) -> SessionInfo:
        self.calls.append(("start_session", (player_id, start_difficulty, room_code)))
        return self._resolve(self.session)

    def get_next_question(self, session_id: int, difficulty: float, category_id: int = 0) -> NextQuestionResult:
        self.calls.append(("get_next_question", (session_id, difficulty)))
        return self._resolve(self.next_results.popleft())

    def submit_answer(
        self, session_id: int, question_id: int, selected_option_id: int | None, time_taken: int
    ) -> AnswerVerdict:
        self.calls.append(("submit_answer", (session_id, question_id, selected_option_id, time_taken)))
        return self._resolve(self.verdicts.popleft())

    def abandon_session(self, session_id: int) -> AbandonResult:
        self.calls.append(("abandon_session", (session_id,)))
        return self._resolve(self.abandon_outcome)

    @staticmethod
    def _resolve(outcome: Any) -> Any:
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@dataclass
class PendingRequest:
    name: str
    call: Callable[[], Any]
    on_success: Callable[[Any], None]
    on_error: Callable[[GameApiError], None]


class ManualDispatcher:
    """Holds requests until the test completes them, so "in flight" is observable."""

    def __init__(self) -> None:
        self.pending: list[PendingRequest] = []
        self.dispatched: list[str] = []

    def submit(self, name, call, on_success, on_error) -> int:
        self.pending.append(PendingRequest(name, call, on_success, on_error))
        self.dispatched.append(name)
        return len(self.dispatched)

    def pending_names(self) -> list[str]:
        return [request.name for request in self.pending]

    def complete(self, name: str | None = None) -> Any:
        index = 0
        if name is not None:
            index = self.pending_names().index(name)
        request = self.pending.pop(index)
        try:
            result = request.call()
        except GameApiError as exc:
            request.on_error(exc)
            return exc
        request.on_success(result)
        return result


class FakeIdentityStore:
    def __init__(self, identity: PlayerIdentity | None) -> None:
        self.identity = identity
        self.cleared = False

    def load(self) -> PlayerIdentity | None:
        return self.identity

    def clear(self) -> None:
        self.cleared = True
        self.identity = None


@pytest.fixture
def api() -> FakeGameApi:
    return FakeGameApi()


@pytest.fixture
def dispatcher() -> ManualDispatcher:
    return ManualDispatcher()


@pytest.fixture
def identity_store() -> FakeIdentityStore:
    return FakeIdentityStore(PlayerIdentity(player_id=7, player_name="Ada", room_code="ABC123"))


@pytest.fixture
def recorder():
    return SignalRecorder()


class SignalRecorder:
    def __init__(self) -> None:
        self.snapshots: list[Any] = []
        self.notifications: list[Any] = []
        self.routes: list[Any] = []

    def attach(self, controller: QuizSessionController) -> None:
        controller.snapshot_changed.connect(self.snapshots.append)
        controller.notification_posted.connect(self.notifications.append)
        controller.navigation_requested.connect(self.routes.append)


@pytest.fixture
def timer() -> CountdownTimer:
    """Countdown handed to the controller; tests tick it by hand instead of waiting."""
    countdown = CountdownTimer()
    yield countdown
    countdown.stop()


@pytest.fixture
def controller(api, dispatcher, identity_store, recorder, timer) -> QuizSessionController:
    session = QuizSessionController(api, dispatcher, identity_store, timer=timer)
    recorder.attach(session)
    yield session
    session.shutdown()
