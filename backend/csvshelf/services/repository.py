"""
File Repository
저장소 루트 아래 파일 목록 조회, 열기, 쓰기

모든 파일 이름은 루트 바로 아래의 단일 경로 요소여야 함 (하위 디렉터리, 상위 이동 불가)
쓰기는 원자적이지 않음: 실패 시 파일이 잘린 상태로 남거나 없을 수 있음
"""
import os
import logging
from pathlib import Path
from dataclasses import dataclass
from typing import BinaryIO

from csvshelf.services.errors import (
    InvalidNameError, NotFoundError, RepositoryError, WriteError
)

logger = logging.getLogger(__name__)

PREVIEW_NAME_LENGTH = 30

FORBIDDEN_NAME_CHARS = ("/", "\\", "\x00")


@dataclass(frozen=True)
class StoredFile:
    """저장된 파일"""
    name: str
    size_bytes: int

    @property
    def preview_name(self) -> str:
        """목록 표시용 이름 (30자 초과 시 말줄임)"""
        if len(self.name) > PREVIEW_NAME_LENGTH:
            return self.name[:PREVIEW_NAME_LENGTH] + "..."
        return self.name


class FileRepository:
    """디렉터리 기반 파일 저장소"""

    def __init__(self, root: Path):
        self.root = Path(root).resolve()

    def path_for(self, name: str) -> Path:
        """
        파일 이름을 루트 아래 절대 경로로 변환

        Raises:
            InvalidNameError: 경로 구분자 포함, '.'/'..', 또는 심볼릭 링크로 루트 밖을 가리키는 경우
        """
        if not name or name in (".", ".."):
            raise InvalidNameError(name, "empty or relative file name")
        if any(ch in name for ch in FORBIDDEN_NAME_CHARS):
            raise InvalidNameError(name, "file name must not contain path separators")

        path = self.root / name
        # 심볼릭 링크가 루트 밖을 가리키는지 확인
        resolved = path.resolve()
        if self.root not in resolved.parents:
            raise InvalidNameError(name, "file name escapes the repository root")
        return path

    def list_files(self) -> list[StoredFile]:
        """
        저장된 파일 목록 (하위 디렉터리 제외, 디렉터리 순회 순서 그대로)

        Raises:
            RepositoryError: 디렉터리를 읽을 수 없는 경우
        """
        files = []
        try:
            with os.scandir(self.root) as entries:
                for entry in entries:
                    if not entry.is_file():
                        continue
                    files.append(StoredFile(name=entry.name, size_bytes=entry.stat().st_size))
        except OSError as exc:
            raise RepositoryError(f"cannot list {self.root}: {exc}") from exc

        logger.debug(f"Listed {len(files)} files in {self.root}")
        return files

    def stat(self, name: str) -> StoredFile:
        path = self._existing_path(name)
        try:
            return StoredFile(name=name, size_bytes=path.stat().st_size)
        except OSError as exc:
            raise RepositoryError(f"cannot stat {name!r}: {exc}") from exc

    def open(self, name: str) -> BinaryIO:
        """
        저장된 파일을 바이너리 읽기 모드로 열기 (닫기는 호출자 책임)

        Raises:
            InvalidNameError, NotFoundError, RepositoryError
        """
        path = self._existing_path(name)
        try:
            return path.open("rb")
        except FileNotFoundError as exc:
            raise NotFoundError(name) from exc
        except OSError as exc:
            raise RepositoryError(f"cannot open {name!r}: {exc}") from exc

    def write(self, name: str, content: bytes) -> StoredFile:
        """
        파일 생성 또는 덮어쓰기

        Raises:
            InvalidNameError: 잘못된 이름
            WriteError: 쓰기 중 I/O 실패
        """
        path = self.path_for(name)
        try:
            with path.open("wb") as f:
                f.write(content)
        except OSError as exc:
            raise WriteError(f"cannot write {name!r}: {exc}") from exc

        logger.info(f"Stored {name} ({len(content)} bytes)")
        return StoredFile(name=name, size_bytes=len(content))

    def _existing_path(self, name: str) -> Path:
        path = self.path_for(name)
        if not path.is_file():
            raise NotFoundError(name)
        return path
