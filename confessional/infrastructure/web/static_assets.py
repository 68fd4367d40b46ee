"""
Adapter: Static asset lookup.

Resolves request paths to files under a fixed asset root.
Any path that cannot be resolved to a regular file inside the root,
including paths the filesystem refuses outright, is reported as missing.
"""

import logging
from pathlib import Path

from confessional.domain.confessions.errors import AssetNotFoundError

logger = logging.getLogger(__name__)


class StaticAssetStore:
    """Locates files under a single root directory."""

    def __init__(self, root: Path) -> None:
        self._root = Path(root).resolve()

    @property
    def root(self) -> Path:
        return self._root

    def locate(self, relative_path: str) -> Path:
        """Return the absolute path of an asset.

        Args:
            relative_path: Path taken from the request URL.

        Returns:
            Resolved path of an existing regular file inside the root.

        Raises:
            AssetNotFoundError: If the file is absent, lies outside the root,
                or the path is not a valid filesystem name (NUL byte,
                over-long component).
        """
        try:
            candidate = (self._root / relative_path.lstrip("/")).resolve()
            inside_root = candidate.is_relative_to(self._root)
            is_file = inside_root and candidate.is_file()
        except (OSError, ValueError) as exc:
            logger.warning("Unusable asset path %r: %s", relative_path[:80], exc)
            raise AssetNotFoundError(relative_path) from exc

        if not inside_root:
            logger.warning("Rejected asset path outside root: %r", relative_path)
            raise AssetNotFoundError(relative_path)
        if not is_file:
            raise AssetNotFoundError(relative_path)
        return candidate
