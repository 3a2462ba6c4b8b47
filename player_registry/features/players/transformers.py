"""Transformers for converting between layers in players feature.

This module provides transformation functions for:
- ORM models → Pydantic schemas (API responses)
- epoch milliseconds ↔ calendar dates (wire format for birthdays)
"""

from datetime import date, datetime, time, timezone
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .orm_models import PlayerORM
    from .schemas import PlayerResponse


def date_to_epoch_millis(value: date) -> int:
    """Milliseconds since the epoch at UTC midnight of ``value``."""
    midnight = datetime.combine(value, time.min, tzinfo=timezone.utc)
    return int(midnight.timestamp()) * 1000


def epoch_millis_to_date(millis: float) -> date:
    """UTC calendar date containing the instant ``millis``.

    :raises ValueError: If the instant is outside the representable range
    """
    try:
        return datetime.fromtimestamp(millis / 1000, tz=timezone.utc).date()
    except (OverflowError, OSError) as e:
        raise ValueError(f"timestamp out of range: {millis}") from e


def player_orm_to_response(player: "PlayerORM") -> "PlayerResponse":
    """Transform PlayerORM domain model to PlayerResponse API schema.

    :param player: Player domain model from storage
    :returns: Player response schema for API
    """
    from .schemas import PlayerResponse

    return PlayerResponse.model_validate(player)
