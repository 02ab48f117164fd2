"""Wire schemas for the Backend Game API.

The scoring service answers every call with an ``ok`` flag. These models only
validate and normalise payloads; converting to domain models happens in
``to_domain`` so the rest of the application never sees raw JSON.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from quiz_player.constants.game_constants import DEFAULT_MAX_QUESTIONS
from quiz_player.core.models import (
    AbandonResult,
    AnswerVerdict,
    NextQuestionResult,
    Question,
    QuestionOption,
    QuestionProgress,
    RoomContext,
    SessionInfo,
    SessionStatus,
)


class ResponseEnvelope(BaseModel):
    model_config = ConfigDict(extra="ignore")

    ok: bool = True
    error: str | None = None


class StartSessionRequest(BaseModel):
    player_id: int
    start_difficulty: float
    room_code: str | None = None


class SubmitAnswerRequest(BaseModel):
    question_id: int
    selected_option_id: int | None
    time_taken: int


class RoomPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    room_code: str
    name: str
    filter_categories: list[int] | None = None
    filter_difficulties: list[int] | None = None

    def to_domain(self) -> RoomContext:
        return RoomContext(
            id=self.id,
            room_code=self.room_code,
            name=self.name,
            filter_categories=tuple(self.filter_categories) if self.filter_categories is not None else None,
            filter_difficulties=tuple(self.filter_difficulties) if self.filter_difficulties is not None else None,
        )


class StartSessionResponse(ResponseEnvelope):
    session_id: int
    current_difficulty: float
    status: str = SessionStatus.ACTIVE.value
    room: RoomPayload | None = None

    def to_domain(self) -> SessionInfo:
        return SessionInfo(
            session_id=self.session_id,
            current_difficulty=self.current_difficulty,
            status=SessionStatus.parse(self.status),
            room=self.room.to_domain() if self.room else None,
        )


class OptionPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    text: str


class ProgressPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    total_answered: int = 0
    max_questions: int = DEFAULT_MAX_QUESTIONS
    locked_levels: list[int] = Field(default_factory=list)


class QuestionPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    statement: str
    difficulty: float
    category_id: int | None = None
    options: list[OptionPayload] = Field(default_factory=list)
    progress: ProgressPayload | None = None

    def to_domain(self) -> Question:
        progress = None
        if self.progress is not None:
            progress = QuestionProgress(
                total_answered=self.progress.total_answered,
                max_questions=self.progress.max_questions,
                locked_levels=tuple(self.progress.locked_levels),
            )
        return Question(
            id=self.id,
            statement=self.statement,
            options=tuple(QuestionOption(id=option.id, text=option.text) for option in self.options),
            difficulty=self.difficulty,
            category_id=self.category_id,
            progress=progress,
        )


class NextQuestionResponse(ResponseEnvelope):
    question: QuestionPayload | None = None
    completed: bool = False
    message: str | None = None

    def to_domain(self) -> NextQuestionResult:
        return NextQuestionResult(
            question=self.question.to_domain() if self.question else None,
            completed=self.completed,
            message=self.message,
        )


class SubmitAnswerResponse(ResponseEnvelope):
    is_correct: bool = False
    score: int
    lives: int
    next_difficulty: float
    correct_option_id: int | None = None
    status: str = SessionStatus.ACTIVE.value
    explanation: str | None = None

    def to_domain(self) -> AnswerVerdict:
        return AnswerVerdict(
            is_correct=self.is_correct,
            score=self.score,
            lives=self.lives,
            next_difficulty=self.next_difficulty,
            correct_option_id=self.correct_option_id,
            status=SessionStatus.parse(self.status),
            explanation=self.explanation,
        )


class AbandonSessionResponse(ResponseEnvelope):
    status: str
    final_score: int
    lives_remaining: int = 0
    total_questions_answered: int = 0
    ended_at: str | None = None

    def to_domain(self) -> AbandonResult:
        return AbandonResult(
            status=SessionStatus.parse(self.status),
            final_score=self.final_score,
            lives_remaining=self.lives_remaining,
            total_questions_answered=self.total_questions_answered,
            ended_at=self.ended_at,
        )
