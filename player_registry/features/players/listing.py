"""In-memory listing pipeline: filter, then sort, then paginate.

Every stage takes and returns plain lists of player-shaped objects, so the
same pipeline serves ORM rows and test doubles alike.
"""

from typing import Any, Optional, Sequence, TypeVar

from player_registry.core.enums import PlayerOrder

from .schemas import PlayerFilter
from .transformers import date_to_epoch_millis

DEFAULT_PAGE_NUMBER = 0
DEFAULT_PAGE_SIZE = 3

P = TypeVar("P")


def _in_range(value: int, lower: Optional[int], upper: Optional[int]) -> bool:
    if lower is not None and value < lower:
        return False
    if upper is not None and value > upper:
        return False
    return True


def matches_filter(player: Any, criteria: PlayerFilter) -> bool:
    """Check one player against every criterion that is set."""
    if criteria.name is not None and criteria.name not in player.name:
        return False
    if criteria.title is not None and criteria.title not in player.title:
        return False
    if criteria.race is not None and player.race != criteria.race:
        return False
    if criteria.profession is not None and player.profession != criteria.profession:
        return False
    if criteria.after is not None or criteria.before is not None:
        birthday = date_to_epoch_millis(player.birthday)
        if not _in_range(birthday, criteria.after, criteria.before):
            return False
    if criteria.banned is not None and player.banned != criteria.banned:
        return False
    if not _in_range(player.experience, criteria.min_experience, criteria.max_experience):
        return False
    return _in_range(player.level, criteria.min_level, criteria.max_level)


def filter_players(players: Sequence[P], criteria: Optional[PlayerFilter]) -> list[P]:
    """Keep the players matching ``criteria``, in their original order."""
    if criteria is None:
        return list(players)
    return [player for player in players if matches_filter(player, criteria)]


def sort_players(players: Sequence[P], order: Optional[PlayerOrder]) -> list[P]:
    """Order players ascending by ``order``; ties keep their input order."""
    if order is None:
        return list(players)
    return sorted(players, key=lambda player: getattr(player, order.field_name))


def paginate(
    players: Sequence[P],
    page_number: Optional[int] = None,
    page_size: Optional[int] = None,
) -> list[P]:
    """Return one page of ``players``.

    A page that starts past the end of the sequence is empty.

    :param players: Filtered and sorted players
    :param page_number: Zero-based page index, defaults to 0
    :param page_size: Players per page, defaults to 3
    :raises ValueError: If the page number is negative or the size not positive
    """
    number = DEFAULT_PAGE_NUMBER if page_number is None else page_number
    size = DEFAULT_PAGE_SIZE if page_size is None else page_size
    if number < 0 or size < 1:
        raise ValueError(f"invalid page: number={number}, size={size}")
    start = number * size
    return list(players[start : start + size])
