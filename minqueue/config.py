"""
Runtime configuration for minqueue.

Values are module-level constants read once at import time. Each one can be
overridden through an environment variable:

- ``MINQUEUE_INITIAL_CAPACITY``: starting slot capacity of a new queue.
- ``MINQUEUE_MAX_SIZE``: largest number of live entries a queue accepts.
- ``MINQUEUE_LOG_LEVEL``: level the CLI configures logging with.

Per-queue values passed to ``IndexedMinHeap(...)`` take precedence.
"""

import os

# Largest live count whose next slot still fits a signed 32-bit index.
MAX_SLOT_INDEX = 2**31 - 1

# Level names accepted by MINQUEUE_LOG_LEVEL and the CLI --log-level option.
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_int(name: str, default: int, minimum: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


def _env_level(name: str, default: str) -> str:
    raw = os.environ.get(name, default).strip().upper()
    if raw not in LOG_LEVELS:
        raise ValueError(f"{name} must be one of {', '.join(LOG_LEVELS)}, got {raw!r}")
    return raw


DEFAULT_INITIAL_CAPACITY = _env_int("MINQUEUE_INITIAL_CAPACITY", 4, 2)
DEFAULT_MAX_SIZE = _env_int("MINQUEUE_MAX_SIZE", MAX_SLOT_INDEX - 1, 1)
LOG_LEVEL = _env_level("MINQUEUE_LOG_LEVEL", "WARNING")
