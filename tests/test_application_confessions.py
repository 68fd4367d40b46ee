"""
Tests for ConfessionService.

Uses a mocked repository port. No real infrastructure needed.
"""

from unittest.mock import MagicMock

import pytest

from confessional.application.confessions.confession_service import (
    ConfessionService,
)
from confessional.domain.confessions.entities import Confession, NewConfession
from confessional.domain.confessions.errors import StorageError
from confessional.domain.confessions.ports import ConfessionRepository


@pytest.fixture
def repository() -> MagicMock:
    return MagicMock(spec=ConfessionRepository)


class TestConfessionService:
    """Tests for create / get_random / total_count orchestration."""

    def test_create_inserts_new_confession(self, repository: MagicMock) -> None:
        """create() builds a NewConfession and returns the stored row."""
        repository.insert.return_value = Confession(id=7, content="hello")
        service = ConfessionService(repository=repository)

        result = service.create("hello")

        repository.insert.assert_called_once_with(NewConfession(content="hello"))
        assert result == Confession(id=7, content="hello")

    def test_get_random_returns_none_when_empty(self, repository: MagicMock) -> None:
        """get_random() passes through None for an empty board."""
        repository.fetch_random.return_value = None
        assert ConfessionService(repository=repository).get_random() is None

    def test_total_count_delegates(self, repository: MagicMock) -> None:
        """total_count() returns the repository count."""
        repository.count.return_value = 42
        assert ConfessionService(repository=repository).total_count() == 42

    def test_storage_error_propagates(self, repository: MagicMock) -> None:
        """StorageError from the repository is not swallowed."""
        repository.insert.side_effect = StorageError(RuntimeError("disk full"))
        with pytest.raises(StorageError, match="disk full"):
            ConfessionService(repository=repository).create("x")
