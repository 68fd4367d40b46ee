"""
Service: create and read confessions.

Operations:
    create(content)  -> Confession           (side effect: one insert)
    get_random()     -> Confession | None    (read-only)
    total_count()    -> int                  (read-only)
Failure cases: StorageError, propagated unchanged from the repository.
"""

import logging
from typing import Optional

from confessional.domain.confessions.entities import Confession, NewConfession
from confessional.domain.confessions.ports import ConfessionRepository

logger = logging.getLogger(__name__)


class ConfessionService:
    """Orchestrates confession storage for the request handlers.

    Keeps handlers free of storage plumbing. Validation beyond
    "content is present" is enforced by the input type.
    """

    def __init__(self, repository: ConfessionRepository) -> None:
        self._repository = repository

    def create(self, content: str) -> Confession:
        """Store a new confession.

        Args:
            content: The confession text.

        Returns:
            The stored confession with its assigned id.
        """
        confession = self._repository.insert(NewConfession(content=content))
        logger.info("Stored confession id=%d", confession.id)
        return confession

    def get_random(self) -> Optional[Confession]:
        """Return a random stored confession, or None if the board is empty."""
        confession = self._repository.fetch_random()
        if confession is None:
            logger.debug("No confessions stored yet")
        return confession

    def total_count(self) -> int:
        return self._repository.count()
