"""Qt UI components for the quiz board."""

from .dialog_helpers import (
    confirm_abandon_game,
    show_error,
    show_info,
    show_warning,
)
from .player_board_window import PlayerBoardWindow

__all__ = [
    "PlayerBoardWindow",
    "confirm_abandon_game",
    "show_error",
    "show_info",
    "show_warning",
]
