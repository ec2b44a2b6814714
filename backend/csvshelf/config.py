"""
설정 모듈
환경 변수(.env)에서 저장소/업로드 설정을 읽어 StorageConfig로 제공
"""
import os
import logging
from pathlib import Path
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from csvshelf.services.errors import ConfigError

# backend 폴더의 .env 파일
ENV_PATH = Path(__file__).parent.parent / ".env"

DEFAULT_DATA_DIR = "www/data"
DEFAULT_MAX_UPLOAD_SIZE = 2_000_000
PLAIN_TEXT_TYPE = "text/plain; charset=utf-8"


@dataclass
class StorageConfig:
    """저장소 설정"""
    repository_root: str = DEFAULT_DATA_DIR
    max_upload_size_bytes: int = DEFAULT_MAX_UPLOAD_SIZE
    allowed_sniffed_type: str = PLAIN_TEXT_TYPE
    csv_encoding: str = "utf-8-sig"
    host: str = "localhost"
    port: int = 8080
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env_path: Optional[Path] = ENV_PATH) -> "StorageConfig":
        """
        환경 변수에서 설정 로드

        Args:
            env_path: .env 파일 경로 (None이면 .env를 읽지 않음)

        Returns:
            StorageConfig
        """
        if env_path is not None:
            load_dotenv(env_path)

        return cls(
            repository_root=os.getenv("CSVSHELF_DATA_DIR", DEFAULT_DATA_DIR),
            max_upload_size_bytes=_read_int("CSVSHELF_MAX_UPLOAD_SIZE", DEFAULT_MAX_UPLOAD_SIZE),
            allowed_sniffed_type=os.getenv("CSVSHELF_ALLOWED_TYPE", PLAIN_TEXT_TYPE),
            csv_encoding=os.getenv("CSVSHELF_CSV_ENCODING", "utf-8-sig"),
            host=os.getenv("CSVSHELF_HOST", "localhost"),
            port=_read_int("CSVSHELF_PORT", 8080),
            log_level=os.getenv("CSVSHELF_LOG_LEVEL", "INFO").upper(),
        )


def _read_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from exc
    if value < 0:
        raise ConfigError(f"{name} must not be negative, got {value}")
    return value


def configure_logging(level: str = "INFO") -> None:
    """기본 로그 핸들러 설정 (이미 설정되어 있으면 레벨만 변경)"""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logging.getLogger("csvshelf").setLevel(level)
