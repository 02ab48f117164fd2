"""Asks the player to confirm an abandon request outside of the controller's signal emission."""

from __future__ import annotations

import logging
from typing import Callable

from PySide6.QtCore import QObject, QTimer

from quiz_player.core.quiz_session import QuizSessionController
from quiz_player.core.session_state import SessionSnapshot

logger = logging.getLogger(__name__)


class AbandonPromptRelay(QObject):
    """Turns an open abandon prompt into one confirmation question.

    ``ask`` usually shows a modal dialog, which spins a nested event loop. It
    is therefore queued to the next event-loop iteration so that every
    observer of the snapshot that opened the prompt has been notified first.
    """

    def __init__(
        self,
        controller: QuizSessionController,
        ask: Callable[[], bool],
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._ask = ask
        self._scheduled = False
        controller.snapshot_changed.connect(self._handle_snapshot)

    def _handle_snapshot(self, snapshot: SessionSnapshot) -> None:
        if snapshot.abandon_prompt_open and not self._scheduled:
            self._scheduled = True
            QTimer.singleShot(0, self._ask_player)

    def _ask_player(self) -> None:
        try:
            # The prompt may have been closed before this call was delivered.
            if not self._controller.snapshot.abandon_prompt_open:
                return
            confirmed = self._ask()
        finally:
            self._scheduled = False

        logger.debug("Abandon prompt answered: %s", "confirm" if confirmed else "cancel")
        if confirmed:
            self._controller.confirm_abandon()
        else:
            self._controller.cancel_abandon()
