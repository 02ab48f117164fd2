"""Domain models for the quiz player."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SessionStatus(Enum):
    """Lifecycle status of a play-through as reported by the scoring service."""

    ACTIVE = "active"
    GAME_OVER = "game_over"
    COMPLETED = "completed"
    ABANDONED = "abandoned"

    @classmethod
    def parse(cls, value: str | None) -> SessionStatus:
        # Unknown values are treated as still running.
        try:
            return cls(value)
        except ValueError:
            return cls.ACTIVE


@dataclass(slots=True, frozen=True)
class PlayerIdentity:
    """Player established by the entry flow and read once per game."""

    player_id: int
    player_name: str
    room_code: str | None = None


@dataclass(slots=True, frozen=True)
class RoomContext:
    """Room a session was joined through, with the filters it applies."""

    id: int
    room_code: str
    name: str
    filter_categories: tuple[int, ...] | None = None
    filter_difficulties: tuple[int, ...] | None = None


@dataclass(slots=True, frozen=True)
class SessionInfo:
    """Result of starting a session."""

    session_id: int
    current_difficulty: float
    status: SessionStatus = SessionStatus.ACTIVE
    room: RoomContext | None = None


@dataclass(slots=True, frozen=True)
class QuestionOption:
    id: int
    text: str


@dataclass(slots=True, frozen=True)
class QuestionProgress:
    """Progress metadata attached to a question by the scoring service."""

    total_answered: int
    max_questions: int
    locked_levels: tuple[int, ...] = ()


@dataclass(slots=True, frozen=True)
class Question:
    """Multiple-choice question currently in play. Never mutated in place."""

    id: int
    statement: str
    options: tuple[QuestionOption, ...]
    difficulty: float
    category_id: int | None = None
    progress: QuestionProgress | None = None


@dataclass(slots=True, frozen=True)
class NextQuestionResult:
    """Three-way outcome of asking for the next question."""

    question: Question | None = None
    completed: bool = False
    message: str | None = None


@dataclass(slots=True, frozen=True)
class AnswerVerdict:
    """Server verdict for a submitted answer; the only source of correctness."""

    is_correct: bool
    score: int
    lives: int
    next_difficulty: float
    correct_option_id: int | None = None
    status: SessionStatus = SessionStatus.ACTIVE
    explanation: str | None = None


@dataclass(slots=True, frozen=True)
class AbandonResult:
    status: SessionStatus
    final_score: int
    lives_remaining: int = 0
    total_questions_answered: int = 0
    ended_at: str | None = None


class NotificationLevel(Enum):
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass(slots=True, frozen=True)
class Notification:
    """Transient message for the presentation layer."""

    level: NotificationLevel
    message: str
