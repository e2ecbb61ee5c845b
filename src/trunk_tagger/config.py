"""Publisher configuration.

Settings come from an optional TOML file in the repository root, with CLI
flags layered on top by the caller.

Example .trunk-tagger.toml:
  remote = "origin"
  main_branch = "main"

  [retry]
  max_retries = 3
  base_delay = 2
  multiplier = 2
  max_delay = 30
  # Optional overall budget for the retry loop, in seconds
  deadline = 120
"""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

CONFIG_FILENAME = ".trunk-tagger.toml"

_TOP_LEVEL_KEYS = {"remote", "main_branch", "retry"}
_RETRY_KEYS = {"max_retries", "base_delay", "multiplier", "max_delay", "deadline"}


class ConfigError(ValueError):
    """Raised when a config file is unreadable or holds invalid values."""


@dataclass(frozen=True)
class RetryPolicy:
    """Exponential backoff for tag creation.

    The delay before retry n (1-based) is base_delay * multiplier**(n + 1),
    capped at max_delay. With the defaults that is 8s, 16s, then 30s (capped
    from 32s).
    """

    max_retries: int = 3
    base_delay: float = 2
    multiplier: float = 2
    max_delay: float = 30

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1

    def delay_for_retry(self, retry_number: int) -> float:
        """Seconds to wait before the given retry (1-based)."""
        if retry_number < 1:
            raise ValueError(f"retry_number must be >= 1, got {retry_number}")
        return min(self.base_delay * (self.multiplier ** (retry_number + 1)), self.max_delay)

    def delays(self) -> list[float]:
        """All backoff delays, in order."""
        return [self.delay_for_retry(n) for n in range(1, self.max_retries + 1)]


@dataclass(frozen=True)
class PublisherConfig:
    """Everything the publisher needs besides its gateways.

    Attributes:
        remote: Remote holding the authoritative tag namespace
        main_branch: Branch manual commits must be reachable from
        retry: Backoff policy for tag creation
        deadline_seconds: Optional overall budget for the retry loop. None
            means only the retry count bounds the run.
    """

    remote: str = "origin"
    main_branch: str = "main"
    retry: RetryPolicy = field(default_factory=RetryPolicy)
    deadline_seconds: float | None = None

    @property
    def main_ref(self) -> str:
        """Remote-tracking ref of the main branch (e.g., 'origin/main')."""
        return f"{self.remote}/{self.main_branch}"


def load_config(path: Path) -> PublisherConfig:
    """Load a config file if present; otherwise return defaults.

    Raises:
        ConfigError: If the file is not valid TOML or contains unknown keys
            or out-of-range values
    """
    if not path.exists():
        return PublisherConfig()

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    _reject_unknown_keys(data, _TOP_LEVEL_KEYS, str(path))
    retry_data = data.get("retry", {})
    if not isinstance(retry_data, dict):
        raise ConfigError(f"{path}: [retry] must be a table")
    _reject_unknown_keys(retry_data, _RETRY_KEYS, f"{path} [retry]")

    defaults = RetryPolicy()
    retry = RetryPolicy(
        max_retries=_as_int(retry_data, "max_retries", defaults.max_retries, minimum=0),
        base_delay=_as_number(retry_data, "base_delay", defaults.base_delay, minimum=0),
        multiplier=_as_number(retry_data, "multiplier", defaults.multiplier, minimum=1),
        max_delay=_as_number(retry_data, "max_delay", defaults.max_delay, minimum=0),
    )
    deadline = retry_data.get("deadline")
    if deadline is not None:
        deadline = _as_number(retry_data, "deadline", 0, minimum=0)

    return PublisherConfig(
        remote=_as_str(data, "remote", "origin"),
        main_branch=_as_str(data, "main_branch", "main"),
        retry=retry,
        deadline_seconds=deadline,
    )


def _reject_unknown_keys(data: dict[str, Any], allowed: set[str], where: str) -> None:
    unknown = sorted(set(data) - allowed)
    if unknown:
        raise ConfigError(f"{where}: unknown keys: {', '.join(unknown)}")


def _as_str(data: dict[str, Any], key: str, default: str) -> str:
    value = data.get(key, default)
    if not isinstance(value, str) or not value:
        raise ConfigError(f"'{key}' must be a non-empty string")
    return value


def _as_int(data: dict[str, Any], key: str, default: int, *, minimum: int) -> int:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"'{key}' must be an integer")
    if value < minimum:
        raise ConfigError(f"'{key}' must be >= {minimum}, got {value}")
    return value


def _as_number(data: dict[str, Any], key: str, default: float, *, minimum: float) -> float:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"'{key}' must be a number")
    if value < minimum:
        raise ConfigError(f"'{key}' must be >= {minimum}, got {value}")
    return value
