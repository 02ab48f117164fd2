"""Persisted player identity shared between the entry flow and the board."""

from __future__ import annotations

import logging

from PySide6.QtCore import QSettings

from quiz_player.constants.about import APP_NAME, APP_ORGANIZATION
from quiz_player.core.models import PlayerIdentity

logger = logging.getLogger(__name__)

PLAYER_ID_KEY = "playerId"
PLAYER_NAME_KEY = "playerName"
ROOM_CODE_KEY = "roomCode"
DEFAULT_PLAYER_NAME = "Player"


class IdentityStore:
    """Reads and writes the current player's identifier, name and room code."""

    def __init__(self, settings: QSettings | None = None) -> None:
        self._settings = settings or QSettings(APP_ORGANIZATION, APP_NAME)

    def load(self) -> PlayerIdentity | None:
        """Return the stored identity, or ``None`` when no usable player id is present."""
        raw_id = self._settings.value(PLAYER_ID_KEY)
        if raw_id in (None, ""):
            return None
        try:
            player_id = int(raw_id)
        except (TypeError, ValueError):
            logger.warning("Ignoring malformed stored player id %r", raw_id)
            return None

        player_name = str(self._settings.value(PLAYER_NAME_KEY) or "") or DEFAULT_PLAYER_NAME
        room_code = str(self._settings.value(ROOM_CODE_KEY) or "").strip() or None
        return PlayerIdentity(player_id=player_id, player_name=player_name, room_code=room_code)

    def save(self, identity: PlayerIdentity) -> None:
        self._settings.setValue(PLAYER_ID_KEY, str(identity.player_id))
        self._settings.setValue(PLAYER_NAME_KEY, identity.player_name)
        if identity.room_code:
            self._settings.setValue(ROOM_CODE_KEY, identity.room_code)
        else:
            self._settings.remove(ROOM_CODE_KEY)
        self._settings.sync()

    def clear(self) -> None:
        for key in (PLAYER_ID_KEY, PLAYER_NAME_KEY, ROOM_CODE_KEY):
            self._settings.remove(key)
        self._settings.sync()
