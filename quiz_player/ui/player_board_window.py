"""Qt main window hosting the quiz board."""

from __future__ import annotations

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QLabel,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from quiz_player.constants.ui_constants import (
    BOARD_MIN_HEIGHT,
    BOARD_MIN_WIDTH,
    LOADING_TEXT,
    MISSING_IDENTITY_TEXT,
    RETRY_BUTTON,
    WINDOW_TITLE,
)
from quiz_player.core.abandon_prompt import AbandonPromptRelay
from quiz_player.core.models import Notification, NotificationLevel
from quiz_player.core.quiz_session import QuizSessionController
from quiz_player.core.session_state import TERMINAL_STATES, GameState, Route, SessionSnapshot
from quiz_player.styling.color_palette import ColorPalette, Theme
from quiz_player.styling.styles import Styles
from quiz_player.ui.components.hud_panel import HudPanel
from quiz_player.ui.components.outcome_panel import OutcomePanel
from quiz_player.ui.components.question_panel import QuestionPanel
from quiz_player.ui.dialog_helpers import confirm_abandon_game, show_error, show_info, show_warning

_NOTIFICATION_DURATION_MS = {
    NotificationLevel.INFO: 3000,
    NotificationLevel.SUCCESS: 5000,
    NotificationLevel.WARNING: 5000,
    NotificationLevel.ERROR: 5000,
}

_NOTIFICATION_COLORS = {
    NotificationLevel.INFO: ColorPalette.OPTION_SELECTED,
    NotificationLevel.SUCCESS: ColorPalette.OPTION_CORRECT,
    NotificationLevel.WARNING: ColorPalette.TIMER_WARNING,
    NotificationLevel.ERROR: ColorPalette.OPTION_INCORRECT,
}


class PlayerBoardWindow(QMainWindow):
    """Purely reactive view: renders snapshots and relays clicks as intents."""

    def __init__(self, controller: QuizSessionController, theme: Theme = Theme.LIGHT) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumSize(BOARD_MIN_WIDTH, BOARD_MIN_HEIGHT)

        self.controller = controller
        self._theme = theme

        self._build_ui()
        self._configure_notification_timer()
        self.setStyleSheet(Styles.get_board_style(theme))

        controller.snapshot_changed.connect(self._render)
        controller.notification_posted.connect(self._show_notification)
        controller.navigation_requested.connect(self._handle_navigation)
        self.abandon_prompt = AbandonPromptRelay(controller, lambda: confirm_abandon_game(self), parent=self)

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)
        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self.hud_panel = HudPanel(self)
        root_layout.addWidget(self.hud_panel)

        self.notification_label = QLabel("", self)
        self.notification_label.setWordWrap(True)
        self.notification_label.setVisible(False)
        root_layout.addWidget(self.notification_label)

        self.page_stack = QStackedWidget(self)

        loading_page = QWidget(self)
        loading_layout = QVBoxLayout()
        loading_page.setLayout(loading_layout)
        loading_layout.addStretch()
        self.loading_label = QLabel(LOADING_TEXT, loading_page)
        self.loading_label.setAlignment(Qt.AlignCenter)
        loading_layout.addWidget(self.loading_label)
        self.retry_button = QPushButton(RETRY_BUTTON, loading_page)
        self.retry_button.clicked.connect(self.controller.retry)
        self.retry_button.setVisible(False)
        loading_layout.addWidget(self.retry_button, alignment=Qt.AlignCenter)
        loading_layout.addStretch()

        self.question_panel = QuestionPanel(self.controller, self)
        self.outcome_panel = OutcomePanel(self.controller, self)

        self.page_stack.addWidget(loading_page)
        self.page_stack.addWidget(self.question_panel)
        self.page_stack.addWidget(self.outcome_panel)
        root_layout.addWidget(self.page_stack, stretch=1)

    def _configure_notification_timer(self) -> None:
        self.notification_timer = QTimer(self)
        self.notification_timer.setSingleShot(True)
        self.notification_timer.timeout.connect(self._hide_notification)

    def _render(self, snapshot: SessionSnapshot) -> None:
        self.hud_panel.render(snapshot)

        state = snapshot.display_state
        if state is GameState.LOADING:
            self.retry_button.setVisible(snapshot.fetch_failed)
            self.page_stack.setCurrentIndex(0)
        elif state in (GameState.PLAYING, GameState.FEEDBACK):
            self.question_panel.render(snapshot)
            self.page_stack.setCurrentIndex(1)
        elif state in TERMINAL_STATES:
            self.outcome_panel.render(snapshot)
            self.page_stack.setCurrentIndex(2)

    def _show_notification(self, notification: Notification) -> None:
        color = _NOTIFICATION_COLORS[notification.level].get(self._theme)
        self.notification_label.setStyleSheet(
            f"color: #FFFFFF; background-color: {color}; padding: 6px 10px; border-radius: 4px;"
        )
        self.notification_label.setText(notification.message)
        self.notification_label.setVisible(True)
        self.notification_timer.start(_NOTIFICATION_DURATION_MS[notification.level])

    def _hide_notification(self) -> None:
        self.notification_label.setVisible(False)
        self.notification_label.setText("")

    def _handle_navigation(self, route: Route) -> None:
        snapshot = self.controller.snapshot
        if route is Route.ENTRY and snapshot.session_id is None:
            # A failed start has already posted its reason to the banner.
            message = self.notification_label.text()
            if message:
                show_error(self, WINDOW_TITLE, message)
            else:
                show_warning(self, WINDOW_TITLE, MISSING_IDENTITY_TEXT)
        elif route is Route.RESULTS:
            show_info(
                self,
                WINDOW_TITLE,
                f"Final score: {snapshot.score}\nQuestions answered: {snapshot.question_count}",
            )
        self.close()

    def closeEvent(self, event: QCloseEvent) -> None:
        self.controller.shutdown()
        super().closeEvent(event)
