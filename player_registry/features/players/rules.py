"""Validation rules for player fields.

Each predicate takes a single (possibly missing) value and answers whether it
may be stored. Race, profession and banned have no rejectable values and are
not checked here.
"""

from datetime import date
from typing import Any, Optional

MAX_NAME_LENGTH = 12
MAX_TITLE_LENGTH = 30
MIN_EXPERIENCE = 0
MAX_EXPERIENCE = 10_000_000

# Both bounds are exclusive
MIN_BIRTHDAY = date(2000, 1, 1)
MAX_BIRTHDAY = date(3000, 1, 1)


def _is_text_valid(value: Optional[str], max_length: int) -> bool:
    return value is not None and 0 < len(value) <= max_length


def is_name_valid(name: Optional[str]) -> bool:
    return _is_text_valid(name, MAX_NAME_LENGTH)


def is_title_valid(title: Optional[str]) -> bool:
    return _is_text_valid(title, MAX_TITLE_LENGTH)


def is_experience_valid(experience: Optional[int]) -> bool:
    return experience is not None and MIN_EXPERIENCE <= experience <= MAX_EXPERIENCE


def is_birthday_valid(birthday: Optional[date]) -> bool:
    return birthday is not None and MIN_BIRTHDAY < birthday < MAX_BIRTHDAY


def is_player_valid(player: Any) -> bool:
    """Check the validated fields of a player-shaped object.

    :param player: Anything with name, title, experience and birthday attributes
    :returns: True if every validated field passes its rule
    """
    return (
        player is not None
        and is_name_valid(player.name)
        and is_title_valid(player.title)
        and is_experience_valid(player.experience)
        and is_birthday_valid(player.birthday)
    )
