"""
Tests for settings loading and fatal startup behavior.
"""

from pathlib import Path

import pytest

from confessional.core.config import load_settings
from confessional.domain.confessions.errors import StartupConfigError
from confessional.main import main


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> pytest.MonkeyPatch:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("CONNECTION_POOL_SIZE", raising=False)
    return monkeypatch


class TestLoadSettings:
    """Tests for load_settings()."""

    def test_valid_environment(self, clean_env: pytest.MonkeyPatch) -> None:
        """Required variables load and optional ones take defaults."""
        clean_env.setenv("DATABASE_URL", "sqlite:///x.db")
        clean_env.setenv("CONNECTION_POOL_SIZE", "4")
        settings = load_settings(env_file=None)
        assert settings.database_url == "sqlite:///x.db"
        assert settings.connection_pool_size == 4
        assert settings.static_root == Path("site")

    def test_missing_database_url(self, clean_env: pytest.MonkeyPatch) -> None:
        """A missing DATABASE_URL is reported by name."""
        clean_env.setenv("CONNECTION_POOL_SIZE", "4")
        with pytest.raises(StartupConfigError) as excinfo:
            load_settings(env_file=None)
        assert excinfo.value.problems == ["DATABASE_URL is not set in the environment"]

    def test_missing_both(self, clean_env: pytest.MonkeyPatch) -> None:
        """Each missing variable gets its own message."""
        with pytest.raises(StartupConfigError) as excinfo:
            load_settings(env_file=None)
        assert len(excinfo.value.problems) == 2

    @pytest.mark.parametrize("value", ["ten", "0", "-3"])
    def test_unparsable_pool_size(
        self, clean_env: pytest.MonkeyPatch, value: str
    ) -> None:
        """Non-integer or non-positive pool sizes are unparsable."""
        clean_env.setenv("DATABASE_URL", "sqlite:///x.db")
        clean_env.setenv("CONNECTION_POOL_SIZE", value)
        with pytest.raises(StartupConfigError) as excinfo:
            load_settings(env_file=None)
        [problem] = excinfo.value.problems
        assert problem.startswith("CONNECTION_POOL_SIZE is set but could not be parsed")

    def test_reads_dotenv_file(self, clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """Values can come from a dotenv file."""
        env_file = tmp_path / "custom.env"
        env_file.write_text(
            "DATABASE_URL=sqlite:///from-file.db\nCONNECTION_POOL_SIZE=3\n",
            encoding="utf-8",
        )
        settings = load_settings(env_file=str(env_file))
        assert settings.database_url == "sqlite:///from-file.db"
        assert settings.connection_pool_size == 3


class TestMain:
    """The process refuses to start on invalid configuration."""

    def test_exits_non_zero(self, clean_env: pytest.MonkeyPatch) -> None:
        """main() exits with status 1 when configuration is missing."""
        with pytest.raises(SystemExit) as excinfo:
            main()
        assert excinfo.value.code == 1
