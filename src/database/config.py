"""Engine and session settings for the relational sink.

The URL comes from ``DATABASE_URL`` or is assembled from the ``DB_*``
variables. SQLite URLs get a single shared connection so an in-memory
database survives across sessions.
"""

import os
from typing import Any, Dict, Optional

from sqlalchemy import create_engine, Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

DEFAULT_DB_SETTINGS = {
    'DB_HOST': 'localhost',
    'DB_PORT': '5432',
    'DB_NAME': 'sports_data',
    'DB_USER': 'etl_user',
    'DB_PASSWORD': 'etl_password',
}


def get_database_url(database_url: Optional[str] = None) -> str:
    """Resolve the sink URL: explicit argument, then DATABASE_URL, then DB_* parts."""
    if database_url:
        return database_url

    env_url = os.getenv('DATABASE_URL')
    if env_url:
        return env_url

    parts = {key: os.getenv(key, default) for key, default in DEFAULT_DB_SETTINGS.items()}
    return (
        f"postgresql://{parts['DB_USER']}:{parts['DB_PASSWORD']}"
        f"@{parts['DB_HOST']}:{parts['DB_PORT']}/{parts['DB_NAME']}"
    )


def is_sqlite(url: str) -> bool:
    return url.startswith('sqlite')


def engine_options(url: str) -> Dict[str, Any]:
    """Default ``create_engine`` keyword arguments for a sink URL."""
    options: Dict[str, Any] = {
        'echo': os.getenv('DATABASE_ECHO', 'false').lower() == 'true',
    }
    if is_sqlite(url):
        options['poolclass'] = StaticPool
        options['connect_args'] = {'check_same_thread': False, 'timeout': 20}
    else:
        # Server connections can go stale between scheduled runs
        options['pool_pre_ping'] = True
    return options


def get_engine(database_url: Optional[str] = None, **kwargs) -> Engine:
    """Build the sink engine.

    Args:
        database_url: Optional URL override
        **kwargs: Engine arguments that replace the defaults

    Returns:
        SQLAlchemy Engine instance
    """
    url = get_database_url(database_url)
    options = engine_options(url)
    options.update(kwargs)
    return create_engine(url, **options)


def get_session(engine: Optional[Engine] = None) -> sessionmaker[Session]:
    """Session factory for the sink.

    Loaders commit explicitly once a whole batch has been written, so
    neither autoflush nor expiry on commit is wanted.
    """
    return sessionmaker(
        bind=engine if engine is not None else get_engine(),
        autoflush=False,
        expire_on_commit=False,
    )
