"""Application entry point for QuizPlayerQt."""

from __future__ import annotations

import os
import sys

from PySide6.QtWidgets import QApplication

from quiz_player.constants.about import APP_NAME, APP_ORGANIZATION, APP_VERSION
from quiz_player.constants.network_constants import API_BASE_URL_ENV_VAR, DEFAULT_API_BASE_URL
from quiz_player.core.quiz_session import QuizSessionController
from quiz_player.core.services.game_api import GameApiClient
from quiz_player.core.services.identity_store import IdentityStore
from quiz_player.core.services.request_dispatcher import RequestDispatcher
from quiz_player.ui.player_board_window import PlayerBoardWindow
from quiz_player.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, wire the session controller and launch the Qt board."""
    logger = configure_logging()
    api_base_url = os.environ.get(API_BASE_URL_ENV_VAR, DEFAULT_API_BASE_URL)
    logger.info("Starting %s %s against %s", APP_NAME, APP_VERSION, api_base_url)

    app = QApplication(sys.argv)
    app.setOrganizationName(APP_ORGANIZATION)
    app.setApplicationName(APP_NAME)

    api = GameApiClient(api_base_url)
    dispatcher = RequestDispatcher(parent=app)
    controller = QuizSessionController(api, dispatcher, IdentityStore(), parent=app)

    window = PlayerBoardWindow(controller)
    window.show()
    controller.start()

    exit_code = app.exec()
    controller.shutdown()
    dispatcher.wait_for_done()
    api.close()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
