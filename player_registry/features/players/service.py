"""Player service for handling player data operations.

Thin orchestration layer:
- listing runs the in-memory filter → sort → paginate pipeline over the full collection
- writes run validation rules, derive progression fields, then persist
- storage is reached only through PlayerRepositoryInterface
"""

from typing import Any, Optional, Union

import structlog

from player_registry.core.decorators import service_error_handler
from player_registry.core.enums import PlayerOrder
from player_registry.core.exceptions import NotFoundError, ValidationError

from . import rules
from .listing import DEFAULT_PAGE_SIZE, filter_players, paginate, sort_players
from .orm_models import PlayerORM
from .repository import PlayerRepositoryInterface
from .schemas import PlayerCreate, PlayerFilter, PlayerResponse, PlayerUpdate
from .transformers import player_orm_to_response

logger = structlog.get_logger(__name__)

SERVICE_NAME = "PlayerService"

# Largest identity the BIGINT id column can hold
MAX_PLAYER_ID = 2**63 - 1

# Field name -> rule for the fields whose values can be rejected
FIELD_RULES = {
    "name": rules.is_name_valid,
    "title": rules.is_title_valid,
    "experience": rules.is_experience_valid,
    "birthday": rules.is_birthday_valid,
}

# Fields whose change invalidates level and until_next_level
PROGRESSION_FIELDS = frozenset({"experience", "birthday"})


def parse_player_id(token: Union[str, int]) -> int:
    """Parse a player identity token.

    Accepts ASCII digits with at most one leading ``+``. Surrounding
    whitespace, signs other than a single ``+``, separators and fractions are
    all rejected.

    :param token: Raw identity, usually a URL path segment
    :returns: Positive integer identity
    :raises ValidationError: If the token is not a positive integer
    """
    text = str(token)
    digits = text[1:] if text.startswith("+") else text
    well_formed = digits.isascii() and digits.isdecimal()
    if not well_formed or not 0 < int(digits) <= MAX_PLAYER_ID:
        raise ValidationError(
            message="player id must be a positive integer",
            service=SERVICE_NAME,
            field="id",
            value=token,
        )
    return int(digits)


class PlayerService:
    """Service for handling player data operations."""

    def __init__(
        self,
        repository: PlayerRepositoryInterface,
        default_page_size: int = DEFAULT_PAGE_SIZE,
    ):
        """Initialize player service with its repository.

        :param repository: Storage for player records
        :param default_page_size: Page size used when a listing names none
        """
        self.repository = repository
        self.default_page_size = default_page_size

    async def _filtered(self, criteria: Optional[PlayerFilter]) -> list[PlayerORM]:
        players = await self.repository.find_all()
        return filter_players(players, criteria)

    async def _load(self, player_id: Union[str, int], operation: str) -> PlayerORM:
        parsed_id = parse_player_id(player_id)
        player = await self.repository.find_by_id(parsed_id)
        if player is None:
            raise NotFoundError(
                message=f"Player {parsed_id} not found",
                service=SERVICE_NAME,
                operation=operation,
                context={"player_id": parsed_id},
            )
        return player

    @staticmethod
    def _validate_fields(fields: dict[str, Any], operation: str) -> None:
        for field, value in fields.items():
            rule = FIELD_RULES.get(field)
            if rule is not None and not rule(value):
                raise ValidationError(
                    message=f"invalid {field}",
                    service=SERVICE_NAME,
                    operation=operation,
                    field=field,
                    value=value,
                )

    @service_error_handler(SERVICE_NAME)
    async def filter_players(
        self, criteria: Optional[PlayerFilter] = None
    ) -> list[PlayerResponse]:
        """Get every player matching ``criteria``, unsorted and unpaginated."""
        players = await self._filtered(criteria)
        return [player_orm_to_response(player) for player in players]

    @service_error_handler(SERVICE_NAME)
    async def list_players(
        self,
        criteria: Optional[PlayerFilter] = None,
        order: Optional[PlayerOrder] = None,
        page_number: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> list[PlayerResponse]:
        """Get one page of matching players.

        :param criteria: Filter criteria, all optional
        :param order: Sort key, or None to keep storage order
        :param page_number: Zero-based page index
        :param page_size: Players per page, defaults to the configured size
        :returns: Player responses for the requested page
        """
        if page_size is None:
            page_size = self.default_page_size
        players = sort_players(await self._filtered(criteria), order)
        page = paginate(players, page_number, page_size)

        logger.debug(
            "players_listed",
            matched=len(players),
            returned=len(page),
            order=order.value if order else None,
            page_number=page_number,
            page_size=page_size,
        )

        return [player_orm_to_response(player) for player in page]

    @service_error_handler(SERVICE_NAME)
    async def count_players(self, criteria: Optional[PlayerFilter] = None) -> int:
        """Count players matching ``criteria``."""
        return len(await self._filtered(criteria))

    @service_error_handler(SERVICE_NAME)
    async def create_player(self, candidate: PlayerCreate) -> PlayerResponse:
        """Validate and store a new player.

        :param candidate: Client-supplied fields
        :returns: Stored player with identity and progression fields
        :raises ValidationError: If a field is invalid or a required one is missing
        """
        if not rules.is_player_valid(candidate):
            raise ValidationError(
                message="name, title, experience or birthday is invalid",
                service=SERVICE_NAME,
                operation="create_player",
                context={"fields": sorted(candidate.present_fields())},
            )
        for field in ("race", "profession"):
            if getattr(candidate, field) is None:
                raise ValidationError(
                    message=f"{field} is required",
                    service=SERVICE_NAME,
                    operation="create_player",
                    field=field,
                )

        player = PlayerORM(
            name=candidate.name,
            title=candidate.title,
            race=candidate.race,
            profession=candidate.profession,
            experience=candidate.experience,
            birthday=candidate.birthday,
            banned=bool(candidate.banned),
        )
        player.recalculate_progression()

        stored = await self.repository.save(player)
        logger.info("player_registered", player_id=stored.id, level=stored.level)
        return player_orm_to_response(stored)

    @service_error_handler(SERVICE_NAME)
    async def get_player(self, player_id: Union[str, int]) -> PlayerResponse:
        """Get player by identity.

        :raises ValidationError: If the identity is not a positive integer
        :raises NotFoundError: If no player has this identity
        """
        return player_orm_to_response(await self._load(player_id, "get_player"))

    @service_error_handler(SERVICE_NAME)
    async def update_player(
        self, player_id: Union[str, int], partial: PlayerUpdate
    ) -> PlayerResponse:
        """Overwrite the fields present in ``partial``.

        All present fields are validated before any is applied, so a rejected
        update leaves the stored player untouched.

        :param player_id: Identity of the player to update
        :param partial: Fields to change; omitted or null fields are kept
        :returns: Updated player
        :raises ValidationError: If the identity or a present field is invalid
        :raises NotFoundError: If no player has this identity
        """
        player = await self._load(player_id, "update_player")
        changes = partial.present_fields()
        self._validate_fields(changes, "update_player")

        for field, value in changes.items():
            setattr(player, field, value)
        if PROGRESSION_FIELDS & changes.keys():
            player.recalculate_progression()

        stored = await self.repository.save(player)
        logger.info(
            "player_updated", player_id=stored.id, fields=sorted(changes)
        )
        return player_orm_to_response(stored)

    @service_error_handler(SERVICE_NAME)
    async def delete_player(self, player_id: Union[str, int]) -> None:
        """Delete player by identity.

        :raises ValidationError: If the identity is not a positive integer
        :raises NotFoundError: If no player has this identity
        """
        player = await self._load(player_id, "delete_player")
        await self.repository.delete(player)
