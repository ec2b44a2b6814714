"""
FastAPI 의존성
"""
from fastapi import Request

from csvshelf.config import StorageConfig
from csvshelf.services.file_service import FileService


def get_config(request: Request) -> StorageConfig:
    return request.app.state.config


def get_file_service(request: Request) -> FileService:
    """첫 요청 시 FileService 생성 (저장소 디렉터리도 이때 생성)"""
    service = getattr(request.app.state, "file_service", None)
    if service is None:
        service = FileService.from_config(request.app.state.config)
        request.app.state.file_service = service
    return service
