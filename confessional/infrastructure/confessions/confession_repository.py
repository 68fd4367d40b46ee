"""
Adapter: Confession persistence.

Implements the ConfessionRepository port on top of a SQLAlchemy engine.
Every database failure is re-raised as StorageError.
"""

import logging
from typing import Optional

from sqlalchemy import func, insert, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from confessional.domain.confessions.entities import Confession, NewConfession
from confessional.domain.confessions.errors import StorageError
from confessional.domain.confessions.ports import ConfessionRepository
from confessional.infrastructure.confessions.schema import confessions

logger = logging.getLogger(__name__)


class ConfessionRepositoryAdapter(ConfessionRepository):
    """Reads and writes the confessions table.

    Connections are borrowed from the engine's pool for the duration
    of a single statement and returned on every path.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def insert(self, new_confession: NewConfession) -> Confession:
        """Insert a confession and return the stored row.

        Args:
            new_confession: The content to store.

        Returns:
            The stored confession, including its assigned id.
        """
        statement = (
            insert(confessions)
            .values(content=new_confession.content)
            .returning(confessions.c.id, confessions.c.content)
        )
        try:
            with self._engine.begin() as conn:
                row = conn.execute(statement).one()
        except SQLAlchemyError as exc:
            logger.warning("Insert into confessions failed: %s", exc)
            raise StorageError(exc) from exc
        return Confession(id=row.id, content=row.content)

    def fetch_random(self) -> Optional[Confession]:
        """Return one row selected with the database's random() ordering.

        Returns:
            A confession, or None when the table is empty.
        """
        statement = (
            select(confessions.c.id, confessions.c.content)
            .order_by(func.random())
            .limit(1)
        )
        try:
            with self._engine.connect() as conn:
                row = conn.execute(statement).first()
        except SQLAlchemyError as exc:
            logger.warning("Random confession lookup failed: %s", exc)
            raise StorageError(exc) from exc
        if row is None:
            return None
        return Confession(id=row.id, content=row.content)

    def count(self) -> int:
        """Return the total number of rows in the confessions table."""
        statement = select(func.count()).select_from(confessions)
        try:
            with self._engine.connect() as conn:
                return conn.execute(statement).scalar_one()
        except SQLAlchemyError as exc:
            logger.warning("Confession count failed: %s", exc)
            raise StorageError(exc) from exc
