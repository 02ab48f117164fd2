"""Explicit state record owned by the quiz session controller.

The controller never mutates a snapshot. Every transition builds a new one
with ``dataclasses.replace`` and publishes it, so observers can hold on to a
snapshot without seeing it change underneath them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from quiz_player.constants.game_constants import (
    DEFAULT_MAX_QUESTIONS,
    MAX_DIFFICULTY,
    MAX_LIVES,
    START_DIFFICULTY,
    TIMER_SAFE_THRESHOLD_SECONDS,
    TIMER_WARNING_THRESHOLD_SECONDS,
)
from quiz_player.core.models import AnswerVerdict, Question, RoomContext


class GameState(Enum):
    """Discrete phase of a play-through. Exactly one holds at a time."""

    LOADING = auto()
    PLAYING = auto()
    SUBMITTING = auto()
    FEEDBACK = auto()
    GAMEOVER = auto()
    COMPLETED = auto()
    NO_QUESTIONS = auto()


TERMINAL_STATES = frozenset({GameState.GAMEOVER, GameState.COMPLETED, GameState.NO_QUESTIONS})


class Route(Enum):
    """Screens the player can be sent to once they leave the board."""

    ENTRY = auto()
    RESULTS = auto()
    PROFILE = auto()


class TimerLevel(Enum):
    SAFE = auto()
    WARNING = auto()
    DANGER = auto()


class OptionMark(Enum):
    """How an option should be highlighted."""

    NONE = auto()
    SELECTED = auto()
    CORRECT = auto()
    INCORRECT = auto()


@dataclass(slots=True, frozen=True)
class SessionSnapshot:
    state: GameState = GameState.LOADING
    player_name: str = ""
    session_id: int | None = None
    room: RoomContext | None = None

    question: Question | None = None
    selected_option_id: int | None = None
    remaining_seconds: int = 0

    score: int = 0
    lives: int = MAX_LIVES
    difficulty: float = START_DIFFICULTY
    question_count: int = 0
    max_questions: int = DEFAULT_MAX_QUESTIONS
    locked_levels: tuple[int, ...] = ()

    verdict: AnswerVerdict | None = None
    is_last_question: bool = False

    abandon_prompt_open: bool = False
    abandon_pending: bool = False
    fetch_failed: bool = False
    exit_route: Route | None = None

    @property
    def has_exited(self) -> bool:
        return self.exit_route is not None

    @property
    def display_state(self) -> GameState:
        """State as the board should render it; an in-flight submit looks like loading."""
        if self.state is GameState.SUBMITTING:
            return GameState.LOADING
        return self.state

    @property
    def accepts_selection(self) -> bool:
        return self.state is GameState.PLAYING and not self.abandon_pending and not self.has_exited

    @property
    def can_abandon(self) -> bool:
        return (
            self.state in (GameState.PLAYING, GameState.FEEDBACK)
            and not self.abandon_pending
            and not self.has_exited
        )

    @property
    def lives_display(self) -> tuple[bool, ...]:
        return tuple(index < self.lives for index in range(MAX_LIVES))

    @property
    def difficulty_percentage(self) -> int:
        return round(self.difficulty / MAX_DIFFICULTY * 100)

    @property
    def progress_percentage(self) -> int:
        if self.max_questions <= 0:
            return 0
        return round(self.question_count / self.max_questions * 100)

    @property
    def remaining_questions(self) -> int:
        return max(0, self.max_questions - self.question_count)

    @property
    def cap_reached(self) -> bool:
        return self.question_count >= self.max_questions

    @property
    def timer_level(self) -> TimerLevel:
        if self.remaining_seconds > TIMER_SAFE_THRESHOLD_SECONDS:
            return TimerLevel.SAFE
        if self.remaining_seconds > TIMER_WARNING_THRESHOLD_SECONDS:
            return TimerLevel.WARNING
        return TimerLevel.DANGER

    def option_mark(self, option_id: int) -> OptionMark:
        """Highlight for an option. Correctness is only shown once the server has ruled."""
        selected = self.selected_option_id == option_id
        if self.state is not GameState.FEEDBACK or self.verdict is None:
            return OptionMark.SELECTED if selected else OptionMark.NONE
        if self.verdict.correct_option_id == option_id:
            return OptionMark.CORRECT
        if selected and not self.verdict.is_correct:
            return OptionMark.INCORRECT
        return OptionMark.NONE
