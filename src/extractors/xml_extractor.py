"""XML feed extractor for game data."""

import logging
import re
import xml.etree.ElementTree as ET
from datetime import datetime
from typing import List, Optional

from src.models.game import Game, GAME_DATE_FORMAT

logger = logging.getLogger(__name__)

GAME_TAG = 'game'
REQUIRED_GAME_FIELDS = ('gameId', 'homeTeamId', 'awayTeamId', 'date', 'status')
DATE_TIME_PATTERN = re.compile(r'^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$')
SCORE_PATTERN = re.compile(r'^[+-]?[0-9]+\Z')


class InvalidScoreError(ValueError):
    """Raised when a score element holds a negative or non-numeric value."""


class XmlDataExtractor:
    """Reads games from every ``<game>`` element of an XML feed."""

    def extract_games(self, file_path: str) -> List[Game]:
        """Extract games from an XML file.

        Args:
            file_path: Path to the XML file

        Returns:
            Games in document order; empty if the file cannot be parsed
        """
        games: List[Game] = []

        try:
            root = ET.parse(file_path).getroot()
        except (OSError, ET.ParseError) as e:
            logger.error(f"Error reading XML file {file_path}: {e}")
            return games

        logger.info(f"Processing XML file: {file_path}")

        for number, element in enumerate(root.iter(GAME_TAG), start=1):
            game = self._parse_game_element(element, number)
            if game is not None:
                games.append(game)

        logger.info(f"Successfully extracted {len(games)} games from XML file: {file_path}")
        return games

    def _parse_game_element(self, element: ET.Element, number: int) -> Optional[Game]:
        fields = {name: self._child_text(element, name) for name in REQUIRED_GAME_FIELDS}

        if any(value is None for value in fields.values()):
            logger.warning(f"Missing required fields in game record {number}: "
                           + ", ".join(f"{k}={v}" for k, v in fields.items()))
            return None

        if fields['homeTeamId'] == fields['awayTeamId']:
            logger.warning(f"Game {number} has same home and away team: {fields['homeTeamId']}")
            return None

        date_str = fields['date']
        try:
            if not DATE_TIME_PATTERN.match(date_str):
                raise ValueError(f"expected YYYY-MM-DD HH:MM:SS, got {date_str!r}")
            date = datetime.strptime(date_str, GAME_DATE_FORMAT)
        except ValueError:
            logger.warning(f"Invalid date format in game {number}: {date_str}")
            return None

        # Scores are absent for games that have not been played
        try:
            home_score = self._parse_score(element, 'homeScore')
            away_score = self._parse_score(element, 'awayScore')
        except InvalidScoreError as e:
            logger.warning(f"Invalid score in game {number}: {e}")
            return None

        return Game(
            game_id=fields['gameId'],
            home_team_id=fields['homeTeamId'],
            away_team_id=fields['awayTeamId'],
            date=date,
            home_score=home_score,
            away_score=away_score,
            status=fields['status'],
        )

    def _parse_score(self, element: ET.Element, tag: str) -> Optional[int]:
        text = self._child_text(element, tag)
        if text is None:
            return None
        if not SCORE_PATTERN.match(text):
            raise InvalidScoreError(f"{tag} is not a number: {text}")
        score = int(text)
        if score < 0:
            raise InvalidScoreError(f"{tag} is negative: {score}")
        return score

    @staticmethod
    def _child_text(element: ET.Element, tag: str) -> Optional[str]:
        """Trimmed text of the first descendant named ``tag``, or None if blank."""
        child = element.find(f'.//{tag}')
        if child is None:
            return None
        text = ''.join(child.itertext()).strip()
        return text or None

    def validate_xml_structure(self, file_path: str) -> bool:
        """Check that the feed has games and the first one carries every required field."""
        try:
            root = ET.parse(file_path).getroot()
        except (OSError, ET.ParseError) as e:
            logger.error(f"Error validating XML file structure {file_path}: {e}")
            return False

        first_game = next(root.iter(GAME_TAG), None)
        if first_game is None:
            logger.error(f"XML file has no game elements: {file_path}")
            return False

        for name in REQUIRED_GAME_FIELDS:
            if self._child_text(first_game, name) is None:
                logger.error(f"XML game element missing required field: {name}")
                return False

        return True
