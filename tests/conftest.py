"""
Shared fixtures for the player registry test suite.
"""

import os

# Keep the import-time engine off PostgreSQL during tests
os.environ.setdefault("DATABASE_DSN", "sqlite+aiosqlite:///:memory:")

from datetime import date  # noqa: E402

import pytest  # noqa: E402

from player_registry.core.enums import Profession, Race  # noqa: E402
from player_registry.features.players.orm_models import PlayerORM  # noqa: E402


def build_player(
    id=None,
    name="Alaric",
    title="Keeper of the Gate",
    race=Race.HUMAN,
    profession=Profession.WARRIOR,
    experience=1000,
    birthday=date(2010, 5, 17),
    banned=False,
) -> PlayerORM:
    """Build a player with consistent progression fields."""
    player = PlayerORM(
        id=id,
        name=name,
        title=title,
        race=race,
        profession=profession,
        experience=experience,
        birthday=birthday,
        banned=banned,
    )
    player.recalculate_progression()
    return player


@pytest.fixture
def player_factory():
    """Factory for player rows with derived level fields."""
    return build_player
