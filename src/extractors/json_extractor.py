"""JSON extractor for player data."""

import json
import logging
from typing import Any, Dict, List, Optional

from src.models.player import Player, PlayerStatistics

logger = logging.getLogger(__name__)

REQUIRED_PLAYER_FIELDS = ('playerId', 'name', 'teamId', 'position', 'age')


class JsonDataExtractor:
    """Reads players from a JSON document.

    Three document shapes are accepted: a bare array of players, an object
    holding a ``players`` array, or a single player object.
    """

    def extract_players(self, file_path: str) -> List[Player]:
        """Extract players from a JSON file.

        Args:
            file_path: Path to the JSON file

        Returns:
            Players in source order; empty if the file cannot be read
        """
        players: List[Player] = []

        try:
            root = self._read_document(file_path)
        except (OSError, ValueError) as e:
            logger.error(f"Error reading JSON file {file_path}: {e}")
            return players

        logger.info(f"Processing JSON file: {file_path}")

        for index, node in enumerate(self._player_nodes(root), start=1):
            player = self._parse_player_node(node, index)
            if player is not None:
                players.append(player)

        logger.info(f"Successfully extracted {len(players)} players from JSON file: {file_path}")
        return players

    @staticmethod
    def _read_document(file_path: str) -> Any:
        with open(file_path, encoding='utf-8') as handle:
            return json.load(handle)

    @staticmethod
    def _player_nodes(root: Any) -> List[Any]:
        """Normalize the three accepted shapes into one list of nodes."""
        if isinstance(root, list):
            return root
        if isinstance(root, dict) and 'players' in root:
            nodes = root['players']
            if isinstance(nodes, list):
                return nodes
            logger.warning("'players' field is not an array; no players extracted")
            return []
        return [root]

    def _parse_player_node(self, node: Any, index: int) -> Optional[Player]:
        if not isinstance(node, dict):
            logger.warning(f"Player record {index} is not an object, skipping")
            return None

        player_id = self._get_text(node, 'playerId')
        name = self._get_text(node, 'name')
        team_id = self._get_text(node, 'teamId')
        position = self._get_text(node, 'position')
        age = self._get_int(node, 'age')

        if None in (player_id, name, team_id, position, age):
            logger.warning(f"Missing required fields in player record {index}: playerId={player_id}, "
                           f"name={name}, teamId={team_id}, position={position}, age={age}")
            return None

        return Player(
            player_id=player_id,
            name=name,
            team_id=team_id,
            position=position,
            age=age,
            statistics=self._parse_statistics(node.get('statistics')),
        )

    def _parse_statistics(self, node: Any) -> PlayerStatistics:
        """Build statistics, defaulting every missing counter to zero."""
        if not isinstance(node, dict):
            return PlayerStatistics()

        return PlayerStatistics(
            games_played=self._get_int(node, 'gamesPlayed', 0),
            points=self._get_int(node, 'points', 0),
            assists=self._get_int(node, 'assists', 0),
        )

    @staticmethod
    def _get_text(node: Dict[str, Any], field: str) -> Optional[str]:
        value = node.get(field)
        if value is None or isinstance(value, (dict, list)):
            return None
        text = str(value).strip()
        return text or None

    @staticmethod
    def _get_int(node: Dict[str, Any], field: str, default: Optional[int] = None) -> Optional[int]:
        value = node.get(field)
        if value is None or isinstance(value, bool):
            return default
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            # json.load yields inf for 1e400 and nan for NaN
            try:
                return int(value)
            except (OverflowError, ValueError):
                return default
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                return default
        return default

    def validate_json_structure(self, file_path: str) -> bool:
        """Check that the document has one of the accepted player shapes."""
        try:
            root = self._read_document(file_path)
        except (OSError, ValueError) as e:
            logger.error(f"Error validating JSON file structure {file_path}: {e}")
            return False

        if isinstance(root, list):
            return len(root) > 0
        if isinstance(root, dict) and 'players' in root:
            nodes = root['players']
            return isinstance(nodes, list) and len(nodes) > 0
        return isinstance(root, dict) and 'playerId' in root and 'name' in root
