from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from uploader.config import Settings
from uploader.main import create_app


TEST_TOKENS = frozenset({"abc123", "second-token"})


@pytest.fixture()
def media_root(tmp_path: Path) -> Path:
    d = tmp_path / "www" / "media"
    d.mkdir(parents=True, exist_ok=True)
    return d


@pytest.fixture()
def settings(media_root: Path) -> Settings:
    return Settings(tokens=TEST_TOKENS, media_root=media_root)


@pytest.fixture()
def app(settings: Settings):
    return create_app(settings)


@pytest.fixture()
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def token() -> str:
    return "abc123"
