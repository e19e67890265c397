import pytest
from pydantic import ValidationError

from dynasty_edge.models import DEFAULT_WEIGHTS, EdgeEngineWeights, LeagueSnapshot, PlayerRecord


def test_player_record_is_frozen():
    record = PlayerRecord(player_id="p1", full_name="Test Player", position="wr", age=24, value=3500)

    assert record.player_id == "p1"
    assert record.position == "WR"
    assert record.has_value

    with pytest.raises((TypeError, ValidationError)):
        record.player_id = "p2"  # type: ignore[attr-defined]


def test_player_record_rejects_negative_value():
    with pytest.raises(ValidationError):
        PlayerRecord(player_id="p1", position="RB", value=-1)


def test_player_without_value_is_not_priced():
    record = PlayerRecord(player_id="p1", position="D/ST")
    assert record.position == "DEF"
    assert record.value == 0
    assert not record.has_value


def test_roster_display_name_defaults_to_team_number():
    snapshot = LeagueSnapshot.model_validate({"season": 2025, "rosters": [{"roster_id": 7}]})
    assert snapshot.rosters[0].display_name == "Team 7"


def test_default_weights():
    assert DEFAULT_WEIGHTS.as_dict() == {"starters": 45, "bench": 15, "picks": 15, "depth": 20, "age": 5}
    assert DEFAULT_WEIGHTS.total == 100


def test_weights_reject_negative_and_zero_total():
    with pytest.raises(ValidationError):
        EdgeEngineWeights(starters=-5)
    with pytest.raises(ValidationError):
        EdgeEngineWeights(starters=0, bench=0, picks=0, depth=0, age=0)
