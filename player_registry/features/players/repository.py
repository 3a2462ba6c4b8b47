"""Repository pattern implementation for players feature.

Provides collection-like interface for accessing player domain objects.
Isolates data access logic from business logic following Martin Fowler's Repository Pattern.
"""

from abc import ABC, abstractmethod
from typing import Optional

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .orm_models import PlayerORM

logger = structlog.get_logger(__name__)


class PlayerRepositoryInterface(ABC):
    """Interface for player repository.

    Defines contract for data access operations.
    Enables mocking and swapping the storage behind the service.
    """

    @abstractmethod
    async def find_all(self) -> list[PlayerORM]:
        """Get every stored player.

        :returns: List of players in storage order
        """
        pass

    @abstractmethod
    async def find_by_id(self, player_id: int) -> Optional[PlayerORM]:
        """Get player by identity.

        :param player_id: Player's database identity
        :returns: PlayerORM if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, player: PlayerORM) -> PlayerORM:
        """Insert a new player or persist changes to a loaded one.

        :param player: Player domain object to store
        :returns: Stored player with generated fields populated
        """
        pass

    @abstractmethod
    async def delete(self, player: PlayerORM) -> None:
        """Remove player from repository.

        :param player: Player to delete
        """
        pass


class SQLAlchemyPlayerRepository(PlayerRepositoryInterface):
    """SQLAlchemy implementation of player repository.

    Handles all database operations for players using SQLAlchemy async sessions.
    """

    def __init__(self, db: AsyncSession):
        """Initialize repository with database session.

        :param db: Async database session
        """
        self.db = db

    async def find_all(self) -> list[PlayerORM]:
        """Get all players ordered by identity."""
        result = await self.db.execute(select(PlayerORM).order_by(PlayerORM.id))
        players = list(result.scalars().all())

        logger.debug("players_retrieved", count=len(players))

        return players

    async def find_by_id(self, player_id: int) -> Optional[PlayerORM]:
        """Get player by identity."""
        player = await self.db.get(PlayerORM, player_id)

        if player:
            logger.debug("player_retrieved", player_id=player_id, name=player.name)

        return player

    async def save(self, player: PlayerORM) -> PlayerORM:
        """Insert or update player record."""
        is_new = player.id is None
        self.db.add(player)
        await self.db.commit()
        await self.db.refresh(player)

        logger.info(
            "player_created" if is_new else "player_saved",
            player_id=player.id,
            name=player.name,
        )

        return player

    async def delete(self, player: PlayerORM) -> None:
        """Delete player row."""
        await self.db.delete(player)
        await self.db.commit()

        logger.info("player_deleted", player_id=player.id)


class InMemoryPlayerRepository(PlayerRepositoryInterface):
    """Dictionary-backed repository for tests and local experiments.

    Identities are assigned from a counter starting at 1 and never reused.
    """

    def __init__(self, players: Optional[list[PlayerORM]] = None):
        self._players: dict[int, PlayerORM] = {}
        self._next_id = 1
        for player in players or []:
            self._store(player)

    def _store(self, player: PlayerORM) -> PlayerORM:
        if player.id is None:
            player.id = self._next_id
        self._next_id = max(self._next_id, player.id + 1)
        self._players[player.id] = player
        return player

    async def find_all(self) -> list[PlayerORM]:
        return sorted(self._players.values(), key=lambda player: player.id)

    async def find_by_id(self, player_id: int) -> Optional[PlayerORM]:
        return self._players.get(player_id)

    async def save(self, player: PlayerORM) -> PlayerORM:
        return self._store(player)

    async def delete(self, player: PlayerORM) -> None:
        self._players.pop(player.id, None)
