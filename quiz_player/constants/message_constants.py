"""User-facing texts for notifications and answer feedback."""

START_ERROR_MESSAGE: str = "The game could not be started. Please try again from the start screen."
INVALID_SESSION_MESSAGE: str = "There is no active game session."
CONNECTION_ERROR_MESSAGE: str = "Could not reach the game server. Check your connection and retry."
COMPLETED_MESSAGE: str = "Congratulations, you completed the quiz!"
NO_MORE_QUESTIONS_MESSAGE: str = "There are no more questions available. The game is over."
NO_VERIFIED_QUESTIONS_MESSAGE: str = "There are no verified questions left for this game."
NO_QUESTIONS_AVAILABLE_MESSAGE: str = "No questions are available for this game yet."
SELECT_OPTION_MESSAGE: str = "Select an answer before submitting."
SUBMIT_ERROR_MESSAGE: str = "Your answer could not be processed. Please answer again."
CORRECT_ANSWER_MESSAGE: str = "Correct answer!"
WRONG_ANSWER_MESSAGE: str = "Wrong answer."
TIMEOUT_MESSAGE: str = "Time is up."
ABANDON_SUCCESS_MESSAGE: str = "You left the game. Your score has been saved."
ABANDON_ERROR_MESSAGE: str = "The game could not be abandoned. It is still active."
