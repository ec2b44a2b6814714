from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from csvshelf.config import StorageConfig
from csvshelf.main import create_app
from csvshelf.services.file_service import FileService
from csvshelf.services.repository import FileRepository


@pytest.fixture()
def data_dir(tmp_path: Path) -> Path:
    return tmp_path / "www" / "data"


@pytest.fixture()
def config(data_dir: Path) -> StorageConfig:
    return StorageConfig(repository_root=str(data_dir), max_upload_size_bytes=1_000)


@pytest.fixture()
def repository(data_dir: Path) -> FileRepository:
    data_dir.mkdir(parents=True, exist_ok=True)
    return FileRepository(data_dir)


@pytest.fixture()
def service(config: StorageConfig) -> FileService:
    return FileService.from_config(config)


@pytest.fixture()
def client(config: StorageConfig) -> TestClient:
    return TestClient(create_app(config))
