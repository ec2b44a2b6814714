from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool

from csvshelf.config import StorageConfig
from csvshelf.dependencies import get_config, get_file_service
from csvshelf.models.schemas import ErrorResponse, UploadResponse
from csvshelf.services.file_service import FileService

router = APIRouter()


@router.post(
    "/upload",
    response_model=UploadResponse,
    responses={
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        415: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def upload_file(
    file: Optional[UploadFile] = File(None),
    type_field: Optional[str] = Form(None, alias="type"),
    service: FileService = Depends(get_file_service),
    config: StorageConfig = Depends(get_config),
) -> UploadResponse:
    if file is None or not file.filename:
        raise HTTPException(status_code=400, detail="INVALID_FILE")

    # 제한 + 1 바이트까지만 읽어서 크기 초과 판단
    contents = await file.read(config.max_upload_size_bytes + 1)
    declared_type = type_field or file.content_type

    stored = await run_in_threadpool(service.ingest_upload, contents, declared_type, file.filename)

    return UploadResponse(
        filename=stored.name,
        size_bytes=stored.size_bytes,
        declared_type=declared_type,
    )
