"""
Database schema and connection pool for confessions.

The table is declared with SQLAlchemy Core so the same definition
works on PostgreSQL (production) and SQLite (tests).
"""

import logging

from sqlalchemy import Column, Integer, MetaData, Table, Text, create_engine
from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

metadata = MetaData()

confessions = Table(
    "confessions",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("content", Text, nullable=False),
)


def build_engine(database_url: str, pool_size: int, pool_timeout: float = 30.0) -> Engine:
    """Create an engine backed by a bounded connection pool.

    Args:
        database_url: SQLAlchemy connection URL.
        pool_size: Maximum number of simultaneous connections. There is no
            overflow: a caller that finds the pool empty waits.
        pool_timeout: Seconds to wait for a connection before giving up.

    Returns:
        A SQLAlchemy engine. No connection is opened until first use.
    """
    return create_engine(
        database_url,
        pool_size=pool_size,
        max_overflow=0,
        pool_timeout=pool_timeout,
        pool_pre_ping=True,
    )


def run_migrations(engine: Engine) -> None:
    """Create the confessions table if it does not exist yet.

    Must complete before the application serves any request.
    """
    metadata.create_all(engine, checkfirst=True)
    logger.info("Schema ready on %s", engine.url.render_as_string(hide_password=True))
