"""
Tests for the error-kind to HTTP mapping.
"""

import pytest

from confessional.domain.confessions.errors import (
    AssetNotFoundError,
    ConfessionBoardError,
    ErrorKind,
    StorageError,
)
from confessional.shared.errors.handlers import to_http


class TestToHttp:
    """Tests for to_http()."""

    def test_storage_error_is_500_with_cause(self) -> None:
        """Storage failures map to 500 with the prefixed cause."""
        assert to_http(StorageError(RuntimeError("boom"))) == (
            500,
            "Database error: boom",
        )

    def test_not_found_is_404_with_message(self) -> None:
        """Missing assets map to 404 with the lookup message."""
        assert to_http(AssetNotFoundError("a/b.png")) == (404, "No such file: a/b.png")

    @pytest.mark.parametrize("kind", list(ErrorKind))
    def test_every_kind_is_mapped(self, kind: ErrorKind) -> None:
        """Every ErrorKind has a response."""
        status_code, body = to_http(ConfessionBoardError(kind, "msg"))
        assert status_code in (404, 500)
        assert body.endswith("msg")
