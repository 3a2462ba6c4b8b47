"""create_player_table

Revision ID: 0001
Revises:
Create Date: 2026-10-18 12:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

RACES = ("HUMAN", "DWARF", "ELF", "GIANT", "ORC", "TROLL", "HOBBIT")
PROFESSIONS = (
    "WARRIOR",
    "ROGUE",
    "SORCERER",
    "CLERIC",
    "PALADIN",
    "NAZGUL",
    "WARLOCK",
    "DRUID",
)


def upgrade() -> None:
    """Upgrade schema - create the player table."""
    op.create_table(
        "player",
        sa.Column(
            "id",
            sa.BigInteger().with_variant(sa.Integer(), "sqlite"),
            primary_key=True,
            autoincrement=True,
        ),
        sa.Column("name", sa.String(12), nullable=False),
        sa.Column("title", sa.String(30), nullable=False),
        sa.Column(
            "race",
            sa.Enum(*RACES, name="race", native_enum=False, length=16),
            nullable=False,
        ),
        sa.Column(
            "profession",
            sa.Enum(*PROFESSIONS, name="profession", native_enum=False, length=16),
            nullable=False,
        ),
        sa.Column("experience", sa.Integer(), nullable=False),
        sa.Column("level", sa.Integer(), nullable=False),
        sa.Column("untilNextLevel", sa.Integer(), nullable=False),
        sa.Column("birthday", sa.Date(), nullable=False),
        sa.Column("banned", sa.Boolean(), nullable=False, server_default=sa.false()),
        # Experience bounds mirror the service validation rules
        sa.CheckConstraint(
            "experience >= 0 AND experience <= 10000000",
            name="check_player_experience_range",
        ),
    )


def downgrade() -> None:
    """Downgrade schema - drop the player table."""
    op.drop_table("player")
