"""
Tests for player wire schemas.
"""

from datetime import date

import pytest
from pydantic import ValidationError

from player_registry.core.enums import Profession, Race
from player_registry.features.players.schemas import (
    PlayerFilter,
    PlayerResponse,
    PlayerUpdate,
)
from player_registry.features.players.transformers import (
    date_to_epoch_millis,
    epoch_millis_to_date,
    player_orm_to_response,
)


class TestBirthdayParsing:
    def test_epoch_millis_become_utc_date(self):
        update = PlayerUpdate.model_validate({"birthday": 1262304000000})
        assert update.birthday == date(2010, 1, 1)

    def test_late_evening_millis_keep_utc_day(self):
        # 2010-01-01T23:59:59.999Z
        update = PlayerUpdate.model_validate({"birthday": 1262390399999})
        assert update.birthday == date(2010, 1, 1)

    def test_iso_date_is_accepted(self):
        update = PlayerUpdate.model_validate({"birthday": "2021-07-09"})
        assert update.birthday == date(2021, 7, 9)

    @pytest.mark.parametrize("value", [True, "yesterday", 10**20])
    def test_undecodable_birthday_is_rejected(self, value):
        with pytest.raises(ValidationError):
            PlayerUpdate.model_validate({"birthday": value})

    def test_epoch_helpers_agree(self):
        assert epoch_millis_to_date(date_to_epoch_millis(date(2999, 12, 31))) == date(
            2999, 12, 31
        )


class TestPresentFields:
    def test_only_sent_fields_are_present(self):
        update = PlayerUpdate.model_validate({"title": "Warden", "experience": 0})
        assert update.present_fields() == {"title": "Warden", "experience": 0}

    def test_false_is_present_and_null_is_absent(self):
        update = PlayerUpdate.model_validate({"banned": False, "name": None})
        assert update.present_fields() == {"banned": False}

    def test_unknown_and_derived_keys_are_ignored(self):
        update = PlayerUpdate.model_validate(
            {"id": 5, "level": 9, "untilNextLevel": 1, "banned": True}
        )
        assert update.present_fields() == {"banned": True}

    def test_camel_case_and_field_names_both_populate(self):
        criteria = PlayerFilter.model_validate({"minExperience": 5, "max_level": 2})
        assert criteria.min_experience == 5
        assert criteria.max_level == 2


class TestPlayerResponse:
    def test_wire_shape(self, player_factory):
        player = player_factory(
            id=3,
            name="Haldir",
            title="Marchwarden",
            race=Race.ELF,
            profession=Profession.ROGUE,
            experience=300,
            birthday=date(2010, 1, 1),
        )

        payload = player_orm_to_response(player).model_dump(by_alias=True)

        assert payload == {
            "id": 3,
            "name": "Haldir",
            "title": "Marchwarden",
            "race": Race.ELF,
            "profession": Profession.ROGUE,
            "experience": 300,
            "level": 2,
            "untilNextLevel": 300,
            "birthday": 1262304000000,
            "banned": False,
        }

    def test_json_uses_enum_names(self, player_factory):
        response = PlayerResponse.model_validate(player_factory(id=1))
        assert '"race":"HUMAN"' in response.model_dump_json(by_alias=True)
