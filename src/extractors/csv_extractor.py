"""Delimited-text extractor for team data."""

import csv
import logging
import re
from datetime import datetime
from typing import List, Optional

from src.models.team import Team

logger = logging.getLogger(__name__)

# teamId, name, city, league, founded, venue
TEAM_COLUMN_COUNT = 6
DATE_FORMAT = '%Y-%m-%d'
DATE_PATTERN = re.compile(r'^\d{4}-\d{2}-\d{2}$')


class CsvDataExtractor:
    """Reads teams from a CSV file with a header row.

    Malformed rows are logged and skipped; a file that cannot be read yields
    an empty list. Nothing is raised to the caller.
    """

    def extract_teams(self, file_path: str) -> List[Team]:
        """Extract teams from a CSV file.

        Args:
            file_path: Path to the CSV file

        Returns:
            Teams in source order
        """
        teams: List[Team] = []

        try:
            with open(file_path, newline='', encoding='utf-8') as handle:
                records = list(csv.reader(handle))
        except (OSError, csv.Error, UnicodeDecodeError) as e:
            logger.error(f"Error reading CSV file {file_path}: {e}")
            return teams

        if not records:
            logger.warning(f"CSV file is empty: {file_path}")
            return teams

        logger.info(f"Processing CSV file: {file_path} with headers: {', '.join(records[0])}")

        # The first row is the header and is never parsed as data
        for line_number, record in enumerate(records[1:], start=2):
            team = self._parse_team_record(record, line_number)
            if team is not None:
                teams.append(team)

        logger.info(f"Successfully extracted {len(teams)} teams from CSV file: {file_path}")
        return teams

    def _parse_team_record(self, record: List[str], line_number: int) -> Optional[Team]:
        """Parse one CSV row into a team, or return None if it is unusable."""
        if len(record) < TEAM_COLUMN_COUNT:
            logger.warning(f"Insufficient columns in record at line {line_number}: "
                           f"expected {TEAM_COLUMN_COUNT}, got {len(record)}")
            return None

        team_id, name, city, league, founded_str, venue = (
            value.strip() for value in record[:TEAM_COLUMN_COUNT]
        )

        if not (team_id and name and city and league):
            logger.warning(f"Missing required fields in record at line {line_number}")
            return None

        founded = None
        if founded_str:
            try:
                if not DATE_PATTERN.match(founded_str):
                    raise ValueError(f"expected YYYY-MM-DD, got {founded_str!r}")
                founded = datetime.strptime(founded_str, DATE_FORMAT).date()
            except ValueError:
                logger.warning(f"Invalid date format in record at line {line_number}: {founded_str}")
                return None

        return Team(
            team_id=team_id,
            name=name,
            city=city,
            league=league,
            founded=founded,
            venue=venue or None,
        )

    def validate_csv_structure(self, file_path: str) -> bool:
        """Check that the file has a header row wide enough for team records."""
        try:
            with open(file_path, newline='', encoding='utf-8') as handle:
                headers = next(csv.reader(handle), None)
        except (OSError, csv.Error, UnicodeDecodeError) as e:
            logger.error(f"Error validating CSV file structure {file_path}: {e}")
            return False

        if headers is None:
            logger.error(f"CSV file is empty: {file_path}")
            return False

        if len(headers) < TEAM_COLUMN_COUNT:
            logger.error(f"Invalid CSV structure: expected at least {TEAM_COLUMN_COUNT} columns, "
                         f"got {len(headers)}")
            return False

        return True
