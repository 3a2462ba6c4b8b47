"""SQLAlchemy 2.0 ORM model for the players feature.

The row carries its derived progression fields (level, until_next_level);
``recalculate_progression`` keeps them in step with experience.
"""

from datetime import date

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Date,
    Enum as SQLEnum,
    Integer,
    String,
)
from sqlalchemy.orm import Mapped, mapped_column

from player_registry.core.enums import Profession, Race
from player_registry.core.models import Base

from .leveling import calculate_experience_until_next_level, calculate_level


class PlayerORM(Base):
    """Player game-character record."""

    __tablename__ = "player"
    __table_args__ = (
        CheckConstraint(
            "experience >= 0 AND experience <= 10000000",
            name="check_player_experience_range",
        ),
    )

    # SQLite only autoincrements an INTEGER primary key
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
        comment="Identity assigned on creation",
    )

    name: Mapped[str] = mapped_column(
        String(12),
        nullable=False,
        comment="Character name (up to 12 characters)",
    )

    title: Mapped[str] = mapped_column(
        String(30),
        nullable=False,
        comment="Character title (up to 30 characters)",
    )

    race: Mapped[Race] = mapped_column(
        SQLEnum(Race, native_enum=False, length=16),
        nullable=False,
    )

    profession: Mapped[Profession] = mapped_column(
        SQLEnum(Profession, native_enum=False, length=16),
        nullable=False,
    )

    experience: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Experience points (0 to 10 000 000)",
    )

    level: Mapped[int] = mapped_column(Integer, nullable=False)

    until_next_level: Mapped[int] = mapped_column(
        "untilNextLevel",
        Integer,
        nullable=False,
        comment="Experience remaining until the next level",
    )

    birthday: Mapped[date] = mapped_column(
        Date,
        nullable=False,
        comment="Registration date (years 2000 to 3000, exclusive)",
    )

    banned: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def recalculate_progression(self) -> None:
        """Derive level and until_next_level from the current experience."""
        self.level = calculate_level(self.experience)
        self.until_next_level = calculate_experience_until_next_level(
            self.level, self.experience
        )

    def __repr__(self) -> str:
        return f"<PlayerORM(id={self.id}, name='{self.name}', level={self.level})>"
