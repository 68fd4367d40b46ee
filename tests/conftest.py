"""
Shared fixtures: an application wired to a throwaway SQLite database
and a static asset root populated with a couple of files.
"""

from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from confessional.core.config import Settings
from confessional.main import create_app

SECRET_TEXT = "the password is hunter2"


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Asset root with one stylesheet and a nested script; a secret sits beside it."""
    root = tmp_path / "site"
    (root / "js").mkdir(parents=True)
    (root / "style.css").write_text("body { color: black; }", encoding="utf-8")
    (root / "js" / "app.js").write_text("console.log('hi');", encoding="utf-8")
    (tmp_path / "secret.txt").write_text(SECRET_TEXT, encoding="utf-8")
    return root


@pytest.fixture
def settings(tmp_path: Path, site_root: Path) -> Settings:
    return Settings(
        _env_file=None,
        database_url=f"sqlite:///{tmp_path / 'confessions.db'}",
        connection_pool_size=2,
        static_root=site_root,
    )


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI):
    """Client with the lifespan running, so the schema exists."""
    with TestClient(app) as test_client:
        yield test_client
