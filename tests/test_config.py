import pytest

from csvshelf.config import StorageConfig
from csvshelf.services.errors import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "CSVSHELF_DATA_DIR", "CSVSHELF_MAX_UPLOAD_SIZE", "CSVSHELF_ALLOWED_TYPE",
        "CSVSHELF_CSV_ENCODING", "CSVSHELF_HOST", "CSVSHELF_PORT", "CSVSHELF_LOG_LEVEL",
    ):
        # load_dotenv가 설정한 값도 테스트 후 제거되도록 먼저 기록
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_defaults():
    config = StorageConfig.from_env(env_path=None)

    assert config.repository_root == "www/data"
    assert config.max_upload_size_bytes == 2_000_000
    assert config.allowed_sniffed_type == "text/plain; charset=utf-8"
    assert config.port == 8080


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("CSVSHELF_DATA_DIR", "/srv/csv")
    monkeypatch.setenv("CSVSHELF_MAX_UPLOAD_SIZE", "500")
    monkeypatch.setenv("CSVSHELF_LOG_LEVEL", "debug")

    config = StorageConfig.from_env(env_path=None)

    assert config.repository_root == "/srv/csv"
    assert config.max_upload_size_bytes == 500
    assert config.log_level == "DEBUG"


def test_dotenv_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("CSVSHELF_PORT=9090\n")

    assert StorageConfig.from_env(env_path=env_file).port == 9090


@pytest.mark.parametrize("value", ["abc", "-1", "1.5"])
def test_invalid_integer(monkeypatch, value):
    monkeypatch.setenv("CSVSHELF_MAX_UPLOAD_SIZE", value)
    with pytest.raises(ConfigError):
        StorageConfig.from_env(env_path=None)
