"""Players feature: validation, level arithmetic, listing pipeline and CRUD endpoints."""

from .router import router as players_router
from .service import PlayerService
from .repository import (
    PlayerRepositoryInterface,
    SQLAlchemyPlayerRepository,
    InMemoryPlayerRepository,
)

__all__ = [
    "players_router",
    "PlayerService",
    "PlayerRepositoryInterface",
    "SQLAlchemyPlayerRepository",
    "InMemoryPlayerRepository",
]
