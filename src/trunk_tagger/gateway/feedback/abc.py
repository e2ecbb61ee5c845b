"""User-facing diagnostic output abstraction.

Progress and result messages for the operator watching a CI log. These are
distinct from logging: --quiet silences them, but not developer diagnostics.
"""

from abc import ABC, abstractmethod


class UserFeedback(ABC):
    """Abstract interface for operator-visible messages."""

    @abstractmethod
    def info(self, message: str) -> None:
        """Show an informational progress message."""
        ...

    @abstractmethod
    def success(self, message: str) -> None:
        """Show a success message."""
        ...

    @abstractmethod
    def error(self, message: str) -> None:
        """Show an error message. Never suppressed."""
        ...
