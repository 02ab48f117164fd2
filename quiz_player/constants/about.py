"""Static metadata describing QuizPlayerQt."""

APP_NAME = "QuizPlayerQt"
APP_VERSION = "0.1.0"
APP_ORGANIZATION = "QuizPlayerQt"
