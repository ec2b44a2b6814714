"""
Upload Validator
업로드 내용의 크기와 실제 타입(스니핑) 검증 - 저장 전에 실행
"""
import logging
from typing import Optional

from csvshelf.config import StorageConfig
from csvshelf.services.errors import TooLargeError, InvalidTypeError
from csvshelf.services.sniffer import detect_content_type

logger = logging.getLogger(__name__)


class UploadValidator:
    """업로드 검증기"""

    def __init__(self, config: StorageConfig):
        self.max_size = config.max_upload_size_bytes
        self.allowed_type = config.allowed_sniffed_type

    def validate(self, content: bytes, declared_type: Optional[str] = None) -> str:
        """
        업로드 검증

        Args:
            content: 업로드된 바이트
            declared_type: 클라이언트가 보낸 타입 (로그용, 판단에 사용하지 않음)

        Returns:
            스니핑된 Content-Type

        Raises:
            TooLargeError: 크기 제한 초과
            InvalidTypeError: 일반 텍스트가 아님
        """
        size = len(content)
        if size > self.max_size:
            logger.warning(f"Rejected upload: {size} bytes > {self.max_size}")
            raise TooLargeError(size, self.max_size)

        detected = detect_content_type(content)
        if detected != self.allowed_type:
            logger.warning(
                f"Rejected upload: sniffed {detected!r}, declared {declared_type!r}"
            )
            raise InvalidTypeError(detected, declared_type)

        return detected
