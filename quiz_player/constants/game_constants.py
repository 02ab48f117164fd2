"""Game rules mirrored from the scoring service and shared by core and UI."""

QUESTION_TIME_BUDGET_SECONDS: int = 30
TIMER_TICK_INTERVAL_MS: int = 1000
TIMER_SAFE_THRESHOLD_SECONDS: int = 15
TIMER_WARNING_THRESHOLD_SECONDS: int = 5

MAX_LIVES: int = 3
START_DIFFICULTY: float = 1.0
MIN_DIFFICULTY: float = 1.0
MAX_DIFFICULTY: float = 5.0
DEFAULT_MAX_QUESTIONS: int = 15
