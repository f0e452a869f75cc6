from pathlib import Path
from typing import Generator
import pytest
from fastapi.testclient import TestClient
from pytest_mock import MockerFixture

from src.config import Settings
from src.main import app as main_app


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    db_path: Path = tmp_path / "test_app.db"
    return Settings(
        DATABASE_URL=f"sqlite:///{db_path}?check_same_thread=false",
        LOG_LEVEL="DEBUG",
    )


@pytest.fixture
def client(
    test_settings: Settings, mocker: MockerFixture
) -> Generator[TestClient, None, None]:
    mocker.patch("src.main.settings", test_settings)
    with TestClient(main_app) as test_client:
        yield test_client
