"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "QuizPlayerQt"
BOARD_MIN_WIDTH: int = 720
BOARD_MIN_HEIGHT: int = 560
QUESTION_FONT_SIZE: int = 14

SUBMIT_BUTTON: str = "Submit Answer"
NEXT_QUESTION_BUTTON: str = "Next Question"
VIEW_RESULTS_BUTTON: str = "View Results"
ABANDON_BUTTON: str = "Abandon Game"
RETRY_BUTTON: str = "Retry"
HOME_BUTTON: str = "Back to Start"
PROFILE_BUTTON: str = "My Profile"

ABANDON_DIALOG_TITLE: str = "Abandon game?"
ABANDON_DIALOG_TEXT: str = (
    "If you leave now the game ends and your current score is final. Do you want to abandon?"
)
LOADING_TEXT: str = "Loading…"
GAMEOVER_TITLE: str = "Game over"
GAMEOVER_TEXT: str = "You ran out of lives."
COMPLETED_TITLE: str = "Quiz complete"
COMPLETED_TEXT: str = "You have answered every question available."
NO_QUESTIONS_TITLE: str = "No questions"
NO_QUESTIONS_TEXT: str = "There are no questions available for this game."
MISSING_IDENTITY_TEXT: str = "No player is registered on this computer. Start a new game from the entry screen."
