"""Fake UserFeedback for testing."""

from trunk_tagger.gateway.feedback.abc import UserFeedback


class FakeUserFeedback(UserFeedback):
    """Records every message with its level.

    Mutation Tracking:
    -----------------
    - messages: List of (level, message) tuples in emission order
    """

    def __init__(self) -> None:
        self._messages: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        self._messages.append(("info", message))

    def success(self, message: str) -> None:
        self._messages.append(("success", message))

    def error(self, message: str) -> None:
        self._messages.append(("error", message))

    @property
    def messages(self) -> list[tuple[str, str]]:
        """All recorded (level, message) tuples."""
        return self._messages.copy()

    def text(self) -> str:
        """All messages joined by newlines, for substring assertions."""
        return "\n".join(message for _, message in self._messages)
