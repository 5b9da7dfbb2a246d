"""Environment overrides for engine tuning knobs.

All knobs are read once at import time. Values use the ``QUBIC_`` prefix:

- ``QUBIC_MAX_SEARCH_DEPTH`` (default: 8)
  Largest ``max_depth`` an :class:`~qubic.models.EngineConfig` accepts.
- ``QUBIC_MEDIUM_DEPTH`` (default: 3)
  Search depth used by the "medium" difficulty profile.
- ``QUBIC_HARD_DEPTH`` (default: 5)
  Search depth used by the "hard" difficulty profile.
"""

from __future__ import annotations

import os

from .errors import ConfigurationError


def env_int(key: str, default: int, minimum: int = 1) -> int:
    """Read a positive integer from the environment."""
    raw = os.getenv(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"{key} must be an integer",
            context={"key": key, "value": raw},
        ) from e
    if value < minimum:
        raise ConfigurationError(
            f"{key} must be >= {minimum}",
            context={"key": key, "value": value},
        )
    return value


MAX_SEARCH_DEPTH = env_int("QUBIC_MAX_SEARCH_DEPTH", 8)
MEDIUM_DEPTH = env_int("QUBIC_MEDIUM_DEPTH", 3)
HARD_DEPTH = env_int("QUBIC_HARD_DEPTH", 5)
