"""Heads-up display: lives, score, difficulty, progress and countdown."""

from __future__ import annotations

from PySide6.QtWidgets import QHBoxLayout, QLabel, QProgressBar, QVBoxLayout, QWidget

from quiz_player.constants.game_constants import MAX_LIVES, QUESTION_TIME_BUDGET_SECONDS
from quiz_player.core.session_state import GameState, SessionSnapshot
from quiz_player.styling.styles import Styles


class HudPanel(QWidget):
    """Read-only strip rendered from the latest snapshot."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        top_row = QHBoxLayout()
        self.player_label = QLabel("", self)
        self.player_label.setStyleSheet(Styles.get_large_label_style())
        top_row.addWidget(self.player_label)

        self.room_label = QLabel("", self)
        self.room_label.setVisible(False)
        top_row.addWidget(self.room_label)
        top_row.addStretch()

        self.heart_labels: list[QLabel] = []
        for _ in range(MAX_LIVES):
            heart = QLabel("♥", self)
            self.heart_labels.append(heart)
            top_row.addWidget(heart)

        self.score_label = QLabel("Score: 0", self)
        self.score_label.setStyleSheet(Styles.get_large_label_style())
        top_row.addWidget(self.score_label)
        layout.addLayout(top_row)

        meter_row = QHBoxLayout()
        meter_row.addWidget(QLabel("Difficulty", self))
        self.difficulty_bar = QProgressBar(self)
        self.difficulty_bar.setRange(0, 100)
        meter_row.addWidget(self.difficulty_bar, stretch=1)

        self.progress_label = QLabel("", self)
        meter_row.addWidget(self.progress_label)
        self.progress_bar = QProgressBar(self)
        self.progress_bar.setRange(0, 100)
        meter_row.addWidget(self.progress_bar, stretch=1)
        layout.addLayout(meter_row)

        timer_row = QHBoxLayout()
        self.timer_label = QLabel("", self)
        timer_row.addWidget(self.timer_label)
        self.timer_bar = QProgressBar(self)
        self.timer_bar.setRange(0, QUESTION_TIME_BUDGET_SECONDS)
        self.timer_bar.setTextVisible(False)
        timer_row.addWidget(self.timer_bar, stretch=1)
        layout.addLayout(timer_row)

    def render(self, snapshot: SessionSnapshot) -> None:
        self.player_label.setText(snapshot.player_name)
        if snapshot.room is not None:
            self.room_label.setText(f"Room {snapshot.room.room_code} · {snapshot.room.name}")
            self.room_label.setVisible(True)
        else:
            self.room_label.setVisible(False)

        for heart, full in zip(self.heart_labels, snapshot.lives_display):
            heart.setStyleSheet(Styles.get_heart_style(full))

        self.score_label.setText(f"Score: {snapshot.score}")
        self.difficulty_bar.setValue(snapshot.difficulty_percentage)
        self.difficulty_bar.setFormat(f"{snapshot.difficulty:.1f}")
        self.progress_label.setText(
            f"Question {min(snapshot.question_count + 1, snapshot.max_questions)} of {snapshot.max_questions}"
            f" ({snapshot.remaining_questions} left)"
        )
        self.progress_bar.setValue(snapshot.progress_percentage)

        counting = snapshot.state is GameState.PLAYING
        self.timer_label.setVisible(counting)
        self.timer_bar.setVisible(counting)
        if counting:
            self.timer_label.setText(f"{snapshot.remaining_seconds}s")
            self.timer_label.setStyleSheet(Styles.get_timer_style(snapshot.timer_level))
            self.timer_bar.setValue(snapshot.remaining_seconds)
