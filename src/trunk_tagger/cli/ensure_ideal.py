"""CLI error handling for non-ideal-state type narrowing.

Commands get discriminated unions back from the publisher. EnsureIdeal turns
the non-ideal half of such a union into a user-facing error and exit code 1,
and hands the ideal value back with its type narrowed.
"""

from __future__ import annotations

from typing import TypeVar

from trunk_tagger.gateway.feedback.abc import UserFeedback
from trunk_tagger.non_ideal_state import NonIdealState, PublishFailure

T = TypeVar("T")


class EnsureIdeal:
    """Helper class for narrowing non-ideal-state discriminated unions."""

    @staticmethod
    def ideal_state(result: T | NonIdealState, feedback: UserFeedback) -> T:
        """Ensure result is not a NonIdealState, otherwise exit with error.

        The error names the stage that failed and, for publish failures, how
        many attempts were made.

        Raises:
            SystemExit: If result is NonIdealState (with exit code 1)
        """
        if isinstance(result, NonIdealState):
            detail = f"[{result.stage}] {result.message}"
            if isinstance(result, PublishFailure):
                detail = f"{detail} (attempts: {result.attempts}/{result.max_attempts})"
            feedback.error(detail)
            raise SystemExit(1)
        return result
