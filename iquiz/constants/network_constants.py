"""Network configuration constants for remote topic fetches."""

FETCH_TIMEOUT_SECONDS: float = 15.0
ALLOWED_URL_SCHEMES: tuple[str, ...] = ("http", "https")
BODY_PREVIEW_CHARS: int = 500
