"""Network configuration constants for the Backend Game API."""

DEFAULT_API_BASE_URL: str = "http://localhost:3000/api"
API_BASE_URL_ENV_VAR: str = "QUIZ_PLAYER_API_URL"
REQUEST_TIMEOUT_SECONDS: float = 10.0

GAMES_START_PATH: str = "/games/start"
GAMES_NEXT_PATH: str = "/games/next"
GAMES_ANSWER_PATH_TEMPLATE: str = "/games/{session_id}/answer"
GAMES_ABANDON_PATH_TEMPLATE: str = "/games/{session_id}/abandon"

HTTP_NOT_FOUND: int = 404
