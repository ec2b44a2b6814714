"""
오류 정의
저장소/업로드/파싱 단계에서 발생하는 예외 계층
"""
from typing import Optional


class CsvShelfError(Exception):
    """모든 csvshelf 예외의 기본 클래스"""
    code = "CSVSHELF_ERROR"


class ConfigError(CsvShelfError):
    """잘못된 설정 값"""
    code = "INVALID_CONFIG"


class InvalidNameError(CsvShelfError):
    """저장소 루트를 벗어나는 파일 이름"""
    code = "INVALID_FILE_NAME"

    def __init__(self, name: str, reason: str = "invalid file name"):
        self.name = name
        self.reason = reason
        super().__init__(f"{reason}: {name!r}")


class NotFoundError(CsvShelfError):
    """저장소에 없는 파일"""
    code = "FILE_NOT_FOUND"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"no such stored file: {name!r}")


class RepositoryError(CsvShelfError):
    """저장소 디렉터리 I/O 실패 (목록 조회, 읽기, 생성)"""
    code = "REPOSITORY_ERROR"


class ParseError(CsvShelfError):
    """CSV 구조 오류"""
    code = "CANT_PARSE_FILE"

    def __init__(self, message: str, line: Optional[int] = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class IngestError(CsvShelfError):
    """업로드 저장 실패"""
    code = "INGEST_ERROR"


class UploadValidationError(IngestError):
    """업로드 검증 실패 (저장 전 거부)"""
    code = "INVALID_FILE"


class TooLargeError(UploadValidationError):
    code = "FILE_TOO_BIG"

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(f"upload of {size} bytes exceeds limit of {limit} bytes")


class InvalidTypeError(UploadValidationError):
    code = "INVALID_FILE_TYPE"

    def __init__(self, detected_type: str, declared_type: Optional[str] = None):
        self.detected_type = detected_type
        self.declared_type = declared_type
        super().__init__(f"content sniffed as {detected_type!r}, plain text required")


class WriteError(IngestError):
    code = "CANT_WRITE_FILE"
