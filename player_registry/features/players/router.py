"""Player REST endpoints.

Service exceptions raised here are translated to 400/404 responses by the
handlers registered in ``player_registry.main``.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query, Response
import structlog

from player_registry.core.enums import PlayerOrder, Profession, Race
from .dependencies import PlayerServiceDep
from .schemas import PlayerCreate, PlayerFilter, PlayerResponse, PlayerUpdate

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/rest/players", tags=["players"])


def get_player_filter(
    name: Optional[str] = Query(None, description="Substring of the name"),
    title: Optional[str] = Query(None, description="Substring of the title"),
    race: Optional[Race] = Query(None),
    profession: Optional[Profession] = Query(None),
    after: Optional[int] = Query(
        None, description="Earliest birthday, epoch milliseconds"
    ),
    before: Optional[int] = Query(
        None, description="Latest birthday, epoch milliseconds"
    ),
    banned: Optional[bool] = Query(None),
    min_experience: Optional[int] = Query(None, alias="minExperience"),
    max_experience: Optional[int] = Query(None, alias="maxExperience"),
    min_level: Optional[int] = Query(None, alias="minLevel"),
    max_level: Optional[int] = Query(None, alias="maxLevel"),
) -> PlayerFilter:
    """Collect the listing filter from query parameters."""
    return PlayerFilter(
        name=name,
        title=title,
        race=race,
        profession=profession,
        after=after,
        before=before,
        banned=banned,
        min_experience=min_experience,
        max_experience=max_experience,
        min_level=min_level,
        max_level=max_level,
    )


PlayerFilterDep = Annotated[PlayerFilter, Depends(get_player_filter)]


@router.get("", response_model=list[PlayerResponse])
async def list_players(
    player_service: PlayerServiceDep,
    criteria: PlayerFilterDep,
    order: Optional[PlayerOrder] = Query(None, description="Sort key"),
    page_number: Optional[int] = Query(None, alias="pageNumber", ge=0),
    page_size: Optional[int] = Query(None, alias="pageSize", ge=1),
) -> list[PlayerResponse]:
    """
    List players matching the filter, sorted and paginated.

    Filters combine with AND. Pages are zero-based; a page past the end is
    an empty array.

    Examples:
        GET /rest/players?name=al&race=ELF&order=LEVEL&pageNumber=1&pageSize=5
        GET /rest/players?after=946684800000&banned=false
    """
    return await player_service.list_players(
        criteria, order=order, page_number=page_number, page_size=page_size
    )


@router.get("/count", response_model=int)
async def count_players(
    player_service: PlayerServiceDep, criteria: PlayerFilterDep
) -> int:
    """Count players matching the filter."""
    return await player_service.count_players(criteria)


@router.post("", response_model=PlayerResponse)
async def create_player(
    player: PlayerCreate, player_service: PlayerServiceDep
) -> PlayerResponse:
    """Create a player; level and untilNextLevel are derived from experience."""
    return await player_service.create_player(player)


@router.get("/{player_id}", response_model=PlayerResponse)
async def get_player(player_id: str, player_service: PlayerServiceDep) -> PlayerResponse:
    """Get player by id."""
    return await player_service.get_player(player_id)


@router.post("/{player_id}", response_model=PlayerResponse)
async def update_player(
    player_id: str, player: PlayerUpdate, player_service: PlayerServiceDep
) -> PlayerResponse:
    """Update the fields present in the body; omitted fields keep their values."""
    return await player_service.update_player(player_id, player)


@router.delete("/{player_id}")
async def delete_player(player_id: str, player_service: PlayerServiceDep) -> Response:
    """Delete player by id."""
    await player_service.delete_player(player_id)
    logger.info("player_removed", player_id=player_id)
    return Response(status_code=200)
