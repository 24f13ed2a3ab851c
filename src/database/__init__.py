"""Database configuration and management module."""

from .config import get_database_url, get_engine, get_session
from .manager import DatabaseManager

__all__ = [
    'get_database_url',
    'get_engine',
    'get_session',
    'DatabaseManager',
]
