"""
Files Router
저장된 파일 목록 / 미리보기 / 통계 / 다운로드
"""
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from csvshelf.dependencies import get_file_service
from csvshelf.models.schemas import (
    ErrorResponse, FileListResponse, StoredFileInfo, PreviewResponse, SummaryResponse
)
from csvshelf.services.file_service import FileService

router = APIRouter()

# 저장소 오류 응답 (main의 예외 핸들러가 생성)
READ_ERRORS = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    422: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.get("/files", response_model=FileListResponse)
def list_files(
    name: Optional[str] = None,
    service: FileService = Depends(get_file_service),
) -> FileListResponse:
    """저장된 파일 목록 (이름순)"""
    files = sorted(service.list_files(), key=lambda f: f.name)

    return FileListResponse(
        name=name or "Anonymous",
        time=datetime.now().strftime("%b %d %H:%M:%S"),
        files=[
            StoredFileInfo(name=f.name, preview_name=f.preview_name, size_bytes=f.size_bytes)
            for f in files
        ],
    )


@router.get("/file", response_model=PreviewResponse, responses=READ_ERRORS)
def preview_file(
    name: Optional[str] = None,
    service: FileService = Depends(get_file_service),
) -> PreviewResponse:
    """CSV 파일 미리보기 (요청마다 다시 파싱)"""
    if not name:
        raise HTTPException(status_code=400, detail="Missing parameter: name")

    table = service.read_preview(name)
    return PreviewResponse(
        name=name,
        columns=table.columns,
        rows=table.rows,
        total_rows=table.total_rows,
    )


@router.get("/file/summary", response_model=SummaryResponse, responses=READ_ERRORS)
def summarize_file(
    name: Optional[str] = None,
    service: FileService = Depends(get_file_service),
) -> SummaryResponse:
    """CSV 컬럼별 통계"""
    if not name:
        raise HTTPException(status_code=400, detail="Missing parameter: name")

    result = service.summarize(name)
    return SummaryResponse(
        name=name,
        columns=result.columns,
        total_rows=result.total_rows,
        ragged_rows=result.ragged_rows,
        column_stats=result.column_stats,
    )


@router.get("/files/{name}/download", responses=READ_ERRORS)
def download_file(name: str, service: FileService = Depends(get_file_service)):
    """저장된 파일 원본 다운로드"""
    path = service.resolve_download(name)
    return FileResponse(path=str(path), filename=name, media_type="text/csv")
