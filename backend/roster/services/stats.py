from __future__ import annotations

import math


def compute_level(experience: int) -> int:
    """Return the level reached with ``experience`` points.

    ``(sqrt(2500 + 200 * exp) - 50) / 100`` evaluated in floating point and
    truncated toward zero only after the division.
    """
    return int((math.sqrt(2500 + 200 * experience) - 50) / 100)


def compute_experience_next_level(level: int, experience: int) -> int:
    """Return the experience still missing to reach ``level + 1``.

    Not clamped: a record whose level lags its experience yields a
    negative result.
    """
    return 50 * (level + 1) * (level + 2) - experience


def derive_stats(experience: int) -> tuple[int, int]:
    """Return ``(level, until_next_level)`` for ``experience``."""
    level = compute_level(experience)
    return level, compute_experience_next_level(level, experience)
