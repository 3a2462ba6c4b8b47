"""Level progression arithmetic.

A player at level ``n`` needs ``50 * (n + 1) * (n + 2)`` total experience to
reach level ``n + 1``; the level for a given experience is the inverse of
that quadratic.
"""

import math


def calculate_level(experience: int) -> int:
    """Return the level reached with ``experience`` points.

    :param experience: Non-negative experience points
    :returns: ``floor((sqrt(2500 + 200 * experience) - 50) / 100)``
    """
    return int(math.sqrt(2500 + 200 * experience) - 50) // 100


def calculate_experience_until_next_level(level: int, experience: int) -> int:
    """Return the experience still missing to leave ``level``.

    Only meaningful when ``level`` was computed from the same ``experience``;
    a stale pair can produce a negative result.
    """
    return 50 * (level + 1) * (level + 2) - experience
