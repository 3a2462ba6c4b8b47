"""Dependencies for the players feature.

Injects the repository into the service following dependency inversion principle.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from player_registry.core import get_db, get_global_settings
from .repository import SQLAlchemyPlayerRepository, PlayerRepositoryInterface
from .service import PlayerService


async def get_player_repository(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PlayerRepositoryInterface:
    """Get player repository instance.

    :param db: Database session
    :returns: Player repository implementation
    """
    return SQLAlchemyPlayerRepository(db)


async def get_player_service(
    repository: Annotated[PlayerRepositoryInterface, Depends(get_player_repository)],
) -> PlayerService:
    """Get player service instance.

    :param repository: Player repository
    :returns: Player service with injected dependencies
    """
    return PlayerService(
        repository, default_page_size=get_global_settings().default_page_size
    )


# Type aliases for cleaner dependency injection
PlayerServiceDep = Annotated[PlayerService, Depends(get_player_service)]

__all__ = [
    "get_player_service",
    "get_player_repository",
    "PlayerServiceDep",
]
