"""Quiz-related constants shared across the core layers."""

DEFAULT_DATA_SOURCE_URL: str = "https://tednewardsandbox.site44.com/questions.json"
DEFAULT_AUTO_REFRESH_ENABLED: bool = False
DEFAULT_REFRESH_INTERVAL_SECONDS: int = 1800

CACHE_FILE_NAME: str = "quizzes.json"
SETTINGS_ORGANIZATION: str = "iQuiz"
SETTINGS_APPLICATION: str = "iQuiz"

MIN_OPTION_COUNT: int = 2
