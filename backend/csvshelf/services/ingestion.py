"""
Ingestion Pipeline
업로드 검증 후 저장소에 기록 (검증 실패 시 저장소는 건드리지 않음)
"""
import logging
from typing import Optional

from csvshelf.services.repository import FileRepository, StoredFile
from csvshelf.services.validator import UploadValidator

logger = logging.getLogger(__name__)


class IngestionPipeline:
    """업로드 수집 파이프라인"""

    def __init__(self, validator: UploadValidator, repository: FileRepository):
        self.validator = validator
        self.repository = repository

    def ingest(self, content: bytes, declared_type: Optional[str], file_name: str) -> StoredFile:
        """
        업로드 파일 저장

        같은 이름의 파일이 있으면 덮어씀 (중복 검사 없음, 마지막 쓰기 우선)

        Raises:
            TooLargeError, InvalidTypeError: 검증 실패 (저장 전)
            InvalidNameError: 잘못된 파일 이름
            WriteError: 쓰기 실패
        """
        detected = self.validator.validate(content, declared_type)
        logger.info(f"FileType: {declared_type} (sniffed {detected}), File: {file_name}")
        return self.repository.write(file_name, content)
