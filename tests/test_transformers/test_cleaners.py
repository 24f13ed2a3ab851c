"""Tests for deduplication and text cleanup."""

import pytest

from src.models.team import Team
from src.transformers.cleaners import DataCleaner, clean_string


@pytest.fixture
def cleaner():
    return DataCleaner()


class TestCleanString:
    """Test the clean_string helper."""

    @pytest.mark.parametrize("value,expected", [
        ("  Lakers  ", "Lakers"),
        ("Golden   State\tWarriors", "Golden State Warriors"),
        ("   ", None),
        ("", None),
        (None, None),
    ])
    def test_clean_string(self, value, expected):
        assert clean_string(value) == expected


class TestDataCleaner:
    """Test DataCleaner batch methods."""

    def test_duplicate_ids_keep_first(self, cleaner, sample_team):
        """The first occurrence of an id wins and the duplicate is counted."""
        duplicate = sample_team.model_copy(update={"name": "Some Other Name"})
        result = cleaner.clean_teams([sample_team, duplicate])

        assert result.records == [sample_team]
        assert result.duplicates_removed == 1
        assert "Removed duplicate team LAL" in cleaner.cleaning_log

    def test_order_is_preserved(self, cleaner, sample_teams):
        reversed_teams = list(reversed(sample_teams))
        result = cleaner.clean_teams(reversed_teams)
        assert [team.team_id for team in result.records] == ["GSW", "LAL"]

    def test_team_text_fields_are_cleaned(self, cleaner):
        team = Team(team_id="GSW", name=" Golden  State Warriors ", city="San   Francisco",
                    league=" NBA", venue="   ")
        cleaned = cleaner.clean_teams([team]).records[0]

        assert cleaned.name == "Golden State Warriors"
        assert cleaned.city == "San Francisco"
        assert cleaned.league == "NBA"
        assert cleaned.venue is None

    def test_input_is_not_mutated(self, cleaner):
        team = Team(team_id="GSW", name=" Warriors ", city="SF", league="NBA")
        cleaner.clean_teams([team])
        assert team.name == " Warriors "

    def test_player_and_game_fields(self, cleaner, sample_player, sample_game):
        player = sample_player.model_copy(update={"name": "LeBron   James ", "position": " SF "})
        game = sample_game.model_copy(update={"status": "  Final "})

        assert cleaner.clean_players([player]).records[0].name == "LeBron James"
        assert cleaner.clean_players([player]).records[0].position == "SF"
        assert cleaner.clean_games([game]).records[0].status == "Final"

    def test_none_entries_are_skipped(self, cleaner, sample_game):
        result = cleaner.clean_games([None, sample_game, None])
        assert result.records == [sample_game]

    def test_cleaning_is_idempotent(self, cleaner, sample_teams):
        messy = [team.model_copy(update={"name": f"  {team.name}  "}) for team in sample_teams]
        once = cleaner.clean_teams(messy + messy).records
        twice = cleaner.clean_teams(once)

        assert twice.records == once
        assert twice.duplicates_removed == 0

    @pytest.mark.parametrize("records", [None, []])
    def test_empty_input(self, cleaner, records):
        result = cleaner.clean_players(records)
        assert result.records == []
        assert result.duplicates_removed == 0
