"""Component showing the question in play, its options and the answer controls."""

from __future__ import annotations

from functools import partial

from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from quiz_player.constants.message_constants import CORRECT_ANSWER_MESSAGE, TIMEOUT_MESSAGE, WRONG_ANSWER_MESSAGE
from quiz_player.constants.ui_constants import (
    ABANDON_BUTTON,
    NEXT_QUESTION_BUTTON,
    QUESTION_FONT_SIZE,
    SUBMIT_BUTTON,
    VIEW_RESULTS_BUTTON,
)
from quiz_player.core.markdown_math_renderer import renderer
from quiz_player.core.models import Question
from quiz_player.core.quiz_session import QuizSessionController
from quiz_player.core.session_state import GameState, SessionSnapshot
from quiz_player.styling.styles import Styles


def _verdict_text(snapshot: SessionSnapshot) -> str:
    if snapshot.verdict.is_correct:
        return CORRECT_ANSWER_MESSAGE
    if snapshot.selected_option_id is None:
        return TIMEOUT_MESSAGE
    return WRONG_ANSWER_MESSAGE


class QuestionPanel(QWidget):
    """Renders PLAYING and FEEDBACK snapshots and forwards player intents."""

    def __init__(self, controller: QuizSessionController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = controller
        self._rendered_question_id: int | None = None
        self._rendered_explanation: str | None = None
        self.option_buttons: dict[int, QPushButton] = {}
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.statement_view = QWebEngineView(self)
        layout.addWidget(self.statement_view, stretch=1)

        self.options_layout = QVBoxLayout()
        layout.addLayout(self.options_layout)

        self.verdict_label = QLabel("", self)
        self.verdict_label.setStyleSheet(Styles.get_large_label_style())
        self.verdict_label.setVisible(False)
        layout.addWidget(self.verdict_label)

        button_row = QHBoxLayout()
        self.abandon_button = QPushButton(ABANDON_BUTTON, self)
        self.abandon_button.clicked.connect(self.controller.open_abandon_prompt)
        button_row.addWidget(self.abandon_button)
        button_row.addStretch()

        self.submit_button = QPushButton(SUBMIT_BUTTON, self)
        self.submit_button.clicked.connect(self.controller.submit_answer)
        button_row.addWidget(self.submit_button)

        self.next_button = QPushButton(NEXT_QUESTION_BUTTON, self)
        self.next_button.clicked.connect(self.controller.next_question)
        button_row.addWidget(self.next_button)
        layout.addLayout(button_row)

    def render(self, snapshot: SessionSnapshot) -> None:
        question = snapshot.question
        if question is None:
            return

        explanation = snapshot.verdict.explanation if snapshot.verdict else None
        if question.id != self._rendered_question_id or explanation != self._rendered_explanation:
            self.statement_view.setHtml(
                renderer.render_document(question.statement, explanation=explanation, font_size=QUESTION_FONT_SIZE)
            )
            self._rendered_explanation = explanation
        if question.id != self._rendered_question_id:
            self._rebuild_options(question)
            self._rendered_question_id = question.id

        for option_id, button in self.option_buttons.items():
            button.setStyleSheet(Styles.get_option_style(snapshot.option_mark(option_id)))
            button.setEnabled(snapshot.accepts_selection)

        feedback = snapshot.state is GameState.FEEDBACK
        self.submit_button.setVisible(not feedback)
        self.submit_button.setEnabled(snapshot.accepts_selection and snapshot.selected_option_id is not None)
        self.next_button.setVisible(feedback)
        self.next_button.setEnabled(feedback and not snapshot.abandon_pending)
        self.next_button.setText(VIEW_RESULTS_BUTTON if snapshot.is_last_question else NEXT_QUESTION_BUTTON)
        self.abandon_button.setEnabled(snapshot.can_abandon)

        if feedback and snapshot.verdict is not None:
            self.verdict_label.setText(_verdict_text(snapshot))
            self.verdict_label.setVisible(True)
        else:
            self.verdict_label.setVisible(False)

    def _rebuild_options(self, question: Question) -> None:
        while self.options_layout.count():
            item = self.options_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

        self.option_buttons = {}
        for index, option in enumerate(question.options):
            letter = chr(ord("A") + index)
            button = QPushButton(f"{letter}. {option.text}", self)
            button.clicked.connect(partial(self.controller.select_option, option.id))
            self.options_layout.addWidget(button)
            self.option_buttons[option.id] = button
