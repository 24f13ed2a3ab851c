"""Tests for the XML game extractor."""

from datetime import datetime

import pytest

from src.extractors.xml_extractor import XmlDataExtractor


def game_xml(game_id="G001", home="LAL", away="GSW", date="2024-01-15 19:30:00",
             status="Final", home_score="118", away_score="124"):
    parts = [f"<gameId>{game_id}</gameId>", f"<homeTeamId>{home}</homeTeamId>",
             f"<awayTeamId>{away}</awayTeamId>", f"<date>{date}</date>", f"<status>{status}</status>"]
    if home_score is not None:
        parts.append(f"<homeScore>{home_score}</homeScore>")
    if away_score is not None:
        parts.append(f"<awayScore>{away_score}</awayScore>")
    return "<game>" + "".join(parts) + "</game>"


@pytest.fixture
def extractor():
    return XmlDataExtractor()


@pytest.fixture
def write_xml(tmp_path):
    def _write(*games, wrapper="games", raw=None):
        path = tmp_path / "games.xml"
        content = raw if raw is not None else f"<{wrapper}>{''.join(games)}</{wrapper}>"
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write


class TestExtractGames:
    """Test XmlDataExtractor.extract_games."""

    def test_extracts_game(self, extractor, write_xml):
        games = extractor.extract_games(write_xml(game_xml()))

        assert len(games) == 1
        game = games[0]
        assert game.game_id == "G001"
        assert game.date == datetime(2024, 1, 15, 19, 30)
        assert game.home_score == 118
        assert game.away_score == 124
        assert game.status == "Final"

    def test_games_at_any_depth(self, extractor, write_xml):
        path = write_xml(raw=f"<feed><season><games>{game_xml()}{game_xml(game_id='G002')}</games></season></feed>")
        assert [game.game_id for game in extractor.extract_games(path)] == ["G001", "G002"]

    def test_same_home_and_away_is_skipped(self, extractor, write_xml):
        games = extractor.extract_games(write_xml(game_xml(away="LAL"), game_xml(game_id="G002")))
        assert [game.game_id for game in games] == ["G002"]

    def test_scores_are_optional(self, extractor, write_xml):
        game = extractor.extract_games(write_xml(game_xml(status="Scheduled", home_score=None,
                                                           away_score=None)))[0]
        assert game.home_score is None
        assert game.away_score is None

    def test_negative_score_skips_record(self, extractor, write_xml):
        assert extractor.extract_games(write_xml(game_xml(home_score="-5"))) == []

    def test_non_numeric_score_skips_record(self, extractor, write_xml):
        assert extractor.extract_games(write_xml(game_xml(away_score="abc"))) == []

    @pytest.mark.parametrize("score", ["1_000", "١٠٠", "1.5", "12abc"])
    def test_only_ascii_digit_scores_are_accepted(self, extractor, write_xml, score):
        assert extractor.extract_games(write_xml(game_xml(home_score=score))) == []

    def test_signed_score_is_accepted(self, extractor, write_xml):
        game = extractor.extract_games(write_xml(game_xml(home_score="+98")))[0]
        assert game.home_score == 98

    def test_date_without_time_skips_record(self, extractor, write_xml):
        assert extractor.extract_games(write_xml(game_xml(date="2024-01-15"))) == []

    def test_blank_required_field_skips_record(self, extractor, write_xml):
        assert extractor.extract_games(write_xml(game_xml(status="   "))) == []

    def test_text_is_trimmed(self, extractor, write_xml):
        game = extractor.extract_games(write_xml(game_xml(game_id="  G009 ", home=" BOS ")))[0]
        assert game.game_id == "G009"
        assert game.home_team_id == "BOS"

    def test_malformed_xml_yields_empty(self, extractor, write_xml):
        assert extractor.extract_games(write_xml(raw="<games><game>")) == []

    def test_missing_file_yields_empty(self, extractor, tmp_path):
        assert extractor.extract_games(str(tmp_path / "absent.xml")) == []

    def test_round_trip_through_json(self, extractor, write_xml):
        data = extractor.extract_games(write_xml(game_xml()))[0].to_json_dict()
        assert data == {
            "gameId": "G001",
            "homeTeamId": "LAL",
            "awayTeamId": "GSW",
            "date": "2024-01-15 19:30:00",
            "homeScore": 118,
            "awayScore": 124,
            "status": "Final",
        }


class TestValidateXmlStructure:
    """Test XmlDataExtractor.validate_xml_structure."""

    def test_valid_feed(self, extractor, write_xml):
        assert extractor.validate_xml_structure(write_xml(game_xml())) is True

    def test_no_games(self, extractor, write_xml):
        assert extractor.validate_xml_structure(write_xml()) is False

    def test_first_game_missing_field(self, extractor, write_xml):
        path = write_xml("<game><gameId>G001</gameId></game>", game_xml(game_id="G002"))
        assert extractor.validate_xml_structure(path) is False

    def test_malformed_xml(self, extractor, write_xml):
        assert extractor.validate_xml_structure(write_xml(raw="not xml")) is False
