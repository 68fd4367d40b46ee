"""
Port interfaces (ABCs) for the confessions bounded context.

Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from confessional.domain.confessions.entities import Confession, NewConfession


class ConfessionRepository(ABC):
    """Port for persisting and retrieving confessions."""

    @abstractmethod
    def insert(self, new_confession: NewConfession) -> Confession:
        """Persist a new confession and return it with its assigned id.

        Raises:
            StorageError: If the underlying store fails.
        """
        raise NotImplementedError

    @abstractmethod
    def fetch_random(self) -> Optional[Confession]:
        """Return one confession chosen at random, or None if there are none.

        Raises:
            StorageError: If the underlying store fails.
        """
        raise NotImplementedError

    @abstractmethod
    def count(self) -> int:
        """Return the total number of stored confessions."""
        raise NotImplementedError
