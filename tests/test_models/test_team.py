"""Tests for the Team entity and TeamModel."""

from datetime import date

import pytest
from pydantic import ValidationError

from src.models.team import Team, TeamModel


class TestTeam:
    """Test the immutable Team entity."""

    def test_team_is_frozen(self, sample_team):
        """Entities cannot be mutated after creation."""
        with pytest.raises(ValidationError):
            sample_team.name = "Changed"

    def test_model_copy_returns_new_instance(self, sample_team):
        """Updating through model_copy leaves the original untouched."""
        renamed = sample_team.model_copy(update={"name": "Lakers"})
        assert renamed.name == "Lakers"
        assert sample_team.name == "Los Angeles Lakers"

    def test_json_dict_uses_camel_case(self, sample_team):
        """JSON output uses the source feed field names."""
        data = sample_team.to_json_dict()
        assert data == {
            "teamId": "LAL",
            "name": "Los Angeles Lakers",
            "city": "Los Angeles",
            "league": "NBA",
            "founded": "1947-01-01",
            "venue": "Crypto.com Arena",
        }

    def test_accepts_aliases_and_field_names(self):
        """Entities can be built from either naming style."""
        by_alias = Team.model_validate({"teamId": "BOS", "name": "Boston Celtics"})
        by_name = Team(team_id="BOS", name="Boston Celtics")
        assert by_alias == by_name

    def test_optional_fields_default_to_none(self):
        team = Team(team_id="MIA")
        assert team.founded is None
        assert team.venue is None


class TestTeamModel:
    """Test SQLAlchemy TeamModel."""

    def test_team_model_table_name(self):
        assert TeamModel.__tablename__ == "teams"

    def test_team_model_columns(self):
        """Descriptive and audit columns are present."""
        columns = {col.name for col in TeamModel.__table__.columns}
        assert {"team_id", "created_at", "updated_at"}.issubset(columns)
        assert set(TeamModel.DESCRIPTIVE_COLUMNS).issubset(columns)

    def test_entity_round_trip(self, sample_team):
        """Converting to a row and back preserves every field."""
        model = TeamModel.from_entity(sample_team)
        assert model.to_entity() == sample_team

    def test_update_from_entity(self, sample_team):
        model = TeamModel.from_entity(sample_team)
        model.update_from_entity(sample_team.model_copy(update={"venue": None, "founded": date(1948, 1, 1)}))
        assert model.venue is None
        assert model.founded == date(1948, 1, 1)
        assert model.team_id == "LAL"

    def test_team_model_repr(self, sample_team):
        assert repr(TeamModel.from_entity(sample_team)) == "<Team LAL: Los Angeles Lakers (NBA)>"
