"""
Tests for the filter, sort and paginate pipeline.
"""

from datetime import date

import pytest

from player_registry.core.enums import PlayerOrder, Profession, Race
from player_registry.features.players.listing import (
    filter_players,
    paginate,
    sort_players,
)
from player_registry.features.players.schemas import PlayerFilter
from player_registry.features.players.transformers import date_to_epoch_millis


@pytest.fixture
def roster(player_factory):
    """Five players with distinct attributes."""
    return [
        player_factory(
            id=1,
            name="Gimli",
            title="Axe Bearer",
            race=Race.DWARF,
            profession=Profession.WARRIOR,
            experience=50,
            birthday=date(2005, 1, 1),
        ),
        player_factory(
            id=2,
            name="Legolas",
            title="Prince of Mirkwood",
            race=Race.ELF,
            profession=Profession.ROGUE,
            experience=100,
            birthday=date(2003, 6, 1),
            banned=True,
        ),
        player_factory(
            id=3,
            name="Aragorn",
            title="King of Gondor",
            race=Race.HUMAN,
            profession=Profession.PALADIN,
            experience=150,
            birthday=date(2001, 2, 2),
        ),
        player_factory(
            id=4,
            name="Gandalf",
            title="The Grey",
            race=Race.HUMAN,
            profession=Profession.SORCERER,
            experience=200,
            birthday=date(2008, 8, 8),
        ),
        player_factory(
            id=5,
            name="Bilbo",
            title="Ring Bearer",
            race=Race.HOBBIT,
            profession=Profession.ROGUE,
            experience=250,
            birthday=date(2002, 9, 22),
        ),
    ]


def ids(players):
    return [player.id for player in players]


class TestFilterPlayers:
    """Criteria are optional and combine with AND."""

    def test_no_criteria_returns_everything_in_order(self, roster):
        assert ids(filter_players(roster, PlayerFilter())) == [1, 2, 3, 4, 5]
        assert ids(filter_players(roster, None)) == [1, 2, 3, 4, 5]

    def test_name_is_case_sensitive_substring(self, roster):
        assert ids(filter_players(roster, PlayerFilter(name="G"))) == [1, 4]
        assert ids(filter_players(roster, PlayerFilter(name="g"))) == [2, 3]

    def test_title_substring(self, roster):
        assert ids(filter_players(roster, PlayerFilter(title="Bearer"))) == [1, 5]

    def test_race_and_profession_equality(self, roster):
        assert ids(filter_players(roster, PlayerFilter(race=Race.HUMAN))) == [3, 4]
        criteria = PlayerFilter(race=Race.HUMAN, profession=Profession.PALADIN)
        assert ids(filter_players(roster, criteria)) == [3]

    def test_banned_equality(self, roster):
        assert ids(filter_players(roster, PlayerFilter(banned=True))) == [2]
        assert ids(filter_players(roster, PlayerFilter(banned=False))) == [1, 3, 4, 5]

    def test_experience_range_is_inclusive(self, roster):
        criteria = PlayerFilter(min_experience=100, max_experience=200)
        kept = filter_players(roster, criteria)
        assert [player.experience for player in kept] == [100, 150, 200]

    def test_level_bounds_are_independent(self, roster):
        # experience 50 is level 0, every other roster entry is level 1
        assert ids(filter_players(roster, PlayerFilter(max_level=0))) == [1]
        assert ids(filter_players(roster, PlayerFilter(min_level=1))) == [2, 3, 4, 5]

    def test_after_keeps_birthdays_on_or_after(self, player_factory):
        players = [
            player_factory(id=1, birthday=date(1999, 1, 1)),
            player_factory(id=2, birthday=date(2000, 6, 1)),
            player_factory(id=3, birthday=date(2500, 1, 1)),
        ]
        criteria = PlayerFilter(after=date_to_epoch_millis(date(2000, 1, 1)))
        assert ids(filter_players(players, criteria)) == [2, 3]

    def test_birthday_bounds_keep_exact_matches(self, roster):
        exact = date_to_epoch_millis(date(2003, 6, 1))
        assert ids(filter_players(roster, PlayerFilter(after=exact, before=exact))) == [2]

    def test_before_drops_later_birthdays(self, roster):
        criteria = PlayerFilter(before=date_to_epoch_millis(date(2003, 1, 1)))
        assert ids(filter_players(roster, criteria)) == [3, 5]

    def test_criteria_combine(self, roster):
        criteria = PlayerFilter(profession=Profession.ROGUE, banned=False)
        assert ids(filter_players(roster, criteria)) == [5]


class TestSortPlayers:
    @pytest.mark.parametrize(
        "order,expected",
        [
            (PlayerOrder.ID, [1, 2, 3, 4, 5]),
            (PlayerOrder.NAME, [3, 5, 4, 1, 2]),
            (PlayerOrder.EXPERIENCE, [1, 2, 3, 4, 5]),
            (PlayerOrder.BIRTHDAY, [3, 5, 2, 1, 4]),
        ],
    )
    def test_ascending_by_key(self, roster, order, expected):
        assert ids(sort_players(list(reversed(roster)), order)) == expected

    def test_no_order_keeps_input(self, roster):
        shuffled = [roster[2], roster[0], roster[4], roster[1], roster[3]]
        assert ids(sort_players(shuffled, None)) == [3, 1, 5, 2, 4]

    def test_equal_keys_keep_input_order(self, roster):
        shuffled = [roster[4], roster[2], roster[0], roster[3], roster[1]]
        # Levels: 5→1, 3→1, 1→0, 4→1, 2→1
        assert ids(sort_players(shuffled, PlayerOrder.LEVEL)) == [1, 5, 3, 4, 2]


class TestPaginate:
    @pytest.fixture
    def seven(self):
        return list(range(7))

    def test_defaults_to_first_page_of_three(self, seven):
        assert paginate(seven) == [0, 1, 2]

    def test_second_page(self, seven):
        assert paginate(seven, page_number=1, page_size=3) == [3, 4, 5]

    def test_last_page_is_short(self, seven):
        assert paginate(seven, page_number=2, page_size=3) == [6]

    def test_page_past_the_end_is_empty(self, seven):
        assert paginate(seven, page_number=3, page_size=3) == []
        assert paginate(seven, page_number=10, page_size=5) == []

    @pytest.mark.parametrize("page_number,page_size", [(-1, 3), (0, 0)])
    def test_rejects_invalid_page(self, seven, page_number, page_size):
        with pytest.raises(ValueError):
            paginate(seven, page_number=page_number, page_size=page_size)
