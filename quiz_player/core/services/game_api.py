"""Blocking HTTP client for the Backend Game API.

Calls are synchronous; the session controller never calls them directly on
the GUI thread but hands them to ``RequestDispatcher``.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from quiz_player.constants.game_constants import START_DIFFICULTY
from quiz_player.constants.network_constants import (
    DEFAULT_API_BASE_URL,
    GAMES_ABANDON_PATH_TEMPLATE,
    GAMES_ANSWER_PATH_TEMPLATE,
    GAMES_NEXT_PATH,
    GAMES_START_PATH,
    HTTP_NOT_FOUND,
    REQUEST_TIMEOUT_SECONDS,
)
from quiz_player.core.models import AbandonResult, AnswerVerdict, NextQuestionResult, SessionInfo
from quiz_player.core.services.api_schemas import (
    AbandonSessionResponse,
    NextQuestionResponse,
    ResponseEnvelope,
    StartSessionRequest,
    StartSessionResponse,
    SubmitAnswerRequest,
    SubmitAnswerResponse,
)

logger = logging.getLogger(__name__)

_ResponseT = TypeVar("_ResponseT", bound=BaseModel)


class GameApiError(Exception):
    """Raised when a Backend Game API call fails.

    ``message`` carries the server's own explanation when it sent one and is
    ``None`` for transport failures and unreadable payloads.
    """

    def __init__(self, message: str | None = None, status_code: int | None = None) -> None:
        super().__init__(message or f"Game API request failed (status {status_code})")
        self.message = message
        self.status_code = status_code

    @property
    def is_not_found(self) -> bool:
        return self.status_code == HTTP_NOT_FOUND


def _normalize_room_code(room_code: str | None) -> str | None:
    if room_code is None:
        return None
    cleaned = room_code.strip().upper()
    return cleaned or None


def _extract_error_message(response: httpx.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    for key in ("error", "message"):
        value = body.get(key)
        if isinstance(value, str) and value.strip():
            return value
    return None


class GameApiClient:
    """Typed wrapper around the four game endpoints."""

    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE_URL,
        *,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
        client: httpx.Client | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.Client(base_url=base_url, timeout=timeout)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def start_session(
        self,
        player_id: int,
        start_difficulty: float = START_DIFFICULTY,
        room_code: str | None = None,
    ) -> SessionInfo:
        request = StartSessionRequest(
            player_id=player_id,
            start_difficulty=start_difficulty,
            room_code=_normalize_room_code(room_code),
        )
        payload = self._request(
            "POST",
            GAMES_START_PATH,
            StartSessionResponse,
            json=request.model_dump(exclude_none=True),
        )
        return payload.to_domain()

    def get_next_question(self, session_id: int, difficulty: float, category_id: int = 0) -> NextQuestionResult:
        params: dict[str, Any] = {"difficulty": difficulty, "session_id": session_id}
        if category_id > 0:
            params["category_id"] = category_id
        payload = self._request("GET", GAMES_NEXT_PATH, NextQuestionResponse, params=params)
        return payload.to_domain()

    def submit_answer(
        self,
        session_id: int,
        question_id: int,
        selected_option_id: int | None,
        time_taken: int,
    ) -> AnswerVerdict:
        # Correctness is never sent; the server derives it from the selected option.
        request = SubmitAnswerRequest(
            question_id=question_id,
            selected_option_id=selected_option_id,
            time_taken=time_taken,
        )
        payload = self._request(
            "POST",
            GAMES_ANSWER_PATH_TEMPLATE.format(session_id=session_id),
            SubmitAnswerResponse,
            json=request.model_dump(),
        )
        return payload.to_domain()

    def abandon_session(self, session_id: int) -> AbandonResult:
        payload = self._request(
            "POST",
            GAMES_ABANDON_PATH_TEMPLATE.format(session_id=session_id),
            AbandonSessionResponse,
        )
        return payload.to_domain()

    def _request(self, method: str, path: str, schema: type[_ResponseT], **kwargs: Any) -> _ResponseT:
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise GameApiError() from exc

        if response.is_error:
            message = _extract_error_message(response)
            logger.warning("%s %s returned %s: %s", method, path, response.status_code, message)
            raise GameApiError(message, status_code=response.status_code)

        try:
            body = response.json()
            envelope = ResponseEnvelope.model_validate(body)
            if not envelope.ok:
                raise GameApiError(envelope.error, status_code=response.status_code)
            payload = schema.model_validate(body)
        except (ValueError, ValidationError) as exc:
            logger.error("%s %s returned an unreadable payload: %s", method, path, exc)
            raise GameApiError(status_code=response.status_code) from exc

        logger.info("%s %s -> %s", method, path, response.status_code)
        return payload
