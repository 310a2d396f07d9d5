"""Exception hierarchy for topic synchronisation and quiz sessions."""

from __future__ import annotations


class QuizError(Exception):
    """Base class for every error raised by the quiz core."""


class DecodeError(QuizError):
    """Raised when a topic document cannot be decoded into a TopicSet."""

    def __init__(self, message: str, body_preview: str | None = None) -> None:
        super().__init__(message)
        self.body_preview = body_preview


# --- Remote source ---


class RemoteSourceError(QuizError):
    """Raised when fetching the remote topic document fails."""


class InvalidURL(RemoteSourceError):
    """The configured data source is not an absolute http(s) URL."""


class Unreachable(RemoteSourceError):
    """The network is reported unavailable; no request was attempted."""


class TransportError(RemoteSourceError):
    """The request failed below HTTP (timeout, DNS, refused connection...)."""


class ServerError(RemoteSourceError):
    """The server answered with a status outside 200-299."""

    def __init__(self, status: int) -> None:
        super().__init__(f"Server responded with HTTP {status}.")
        self.status = status


class EmptyResponse(RemoteSourceError):
    """The server answered successfully but with an empty body."""


# --- Local store ---


class LocalStoreError(QuizError):
    """Raised when the persisted topic cache cannot be read."""


class NotFound(LocalStoreError):
    """No cache has been written yet."""


class CorruptData(LocalStoreError):
    """The cache file exists but does not decode."""


# --- Session ---


class SessionError(QuizError):
    """Raised when the session engine is driven incorrectly."""


class EmptyQuestionSet(SessionError):
    """A session needs at least one question."""


class InvalidOptionIndex(SessionError):
    """The selected option does not exist on the current question."""


class NoSelection(SessionError):
    """submit() was called before any option was selected."""


class InvalidSessionState(SessionError):
    """The operation is not allowed in the session's current state."""


class InvalidQuestionIndex(SessionError, IndexError):
    """The question index is outside the session's question list."""
