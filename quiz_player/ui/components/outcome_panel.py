"""Component for the terminal screens: game over, quiz complete and no questions."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from quiz_player.constants.ui_constants import (
    COMPLETED_TEXT,
    COMPLETED_TITLE,
    GAMEOVER_TEXT,
    GAMEOVER_TITLE,
    HOME_BUTTON,
    NO_QUESTIONS_TEXT,
    NO_QUESTIONS_TITLE,
    PROFILE_BUTTON,
    VIEW_RESULTS_BUTTON,
)
from quiz_player.core.quiz_session import QuizSessionController
from quiz_player.core.session_state import GameState, SessionSnapshot
from quiz_player.styling.styles import Styles

_OUTCOME_TEXTS = {
    GameState.GAMEOVER: (GAMEOVER_TITLE, GAMEOVER_TEXT),
    GameState.COMPLETED: (COMPLETED_TITLE, COMPLETED_TEXT),
    GameState.NO_QUESTIONS: (NO_QUESTIONS_TITLE, NO_QUESTIONS_TEXT),
}


class OutcomePanel(QWidget):
    def __init__(self, controller: QuizSessionController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = controller
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)
        layout.addStretch()

        self.title_label = QLabel("", self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.title_label)

        self.detail_label = QLabel("", self)
        self.detail_label.setAlignment(Qt.AlignCenter)
        self.detail_label.setWordWrap(True)
        layout.addWidget(self.detail_label)

        self.score_label = QLabel("", self)
        self.score_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.score_label)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.home_button = QPushButton(HOME_BUTTON, self)
        self.home_button.clicked.connect(self.controller.go_home)
        button_row.addWidget(self.home_button)

        self.profile_button = QPushButton(PROFILE_BUTTON, self)
        self.profile_button.clicked.connect(self.controller.go_to_profile)
        button_row.addWidget(self.profile_button)

        self.results_button = QPushButton(VIEW_RESULTS_BUTTON, self)
        self.results_button.clicked.connect(self.controller.view_results)
        button_row.addWidget(self.results_button)
        button_row.addStretch()
        layout.addLayout(button_row)
        layout.addStretch()

    def render(self, snapshot: SessionSnapshot) -> None:
        title, detail = _OUTCOME_TEXTS.get(snapshot.state, ("", ""))
        self.title_label.setText(title)
        self.detail_label.setText(detail)
        self.score_label.setText(
            f"Final score: {snapshot.score} · Questions answered: {snapshot.question_count}"
        )
        # Nothing was played, so there is nothing to rank.
        self.results_button.setVisible(snapshot.state is not GameState.NO_QUESTIONS)
