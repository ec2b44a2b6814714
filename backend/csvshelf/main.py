import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from csvshelf.config import StorageConfig, configure_logging
from csvshelf.models.schemas import ErrorResponse
from csvshelf.routers import files, upload
from csvshelf.services.errors import (
    CsvShelfError, InvalidNameError, NotFoundError, RepositoryError, ParseError,
    TooLargeError, InvalidTypeError, UploadValidationError, WriteError
)

logger = logging.getLogger(__name__)

# 예외 클래스 -> HTTP 상태 코드 (위에서부터 먼저 일치하는 것 사용)
ERROR_STATUS = (
    (TooLargeError, 413),
    (InvalidTypeError, 415),
    (UploadValidationError, 400),
    (InvalidNameError, 400),
    (NotFoundError, 404),
    (ParseError, 422),
    (WriteError, 500),
    (RepositoryError, 500),
)


def status_for(exc: CsvShelfError) -> int:
    for error_type, status_code in ERROR_STATUS:
        if isinstance(exc, error_type):
            return status_code
    return 500


async def csvshelf_error_handler(request: Request, exc: CsvShelfError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(detail=exc.code, message=str(exc)).model_dump(),
    )


def create_app(config: Optional[StorageConfig] = None) -> FastAPI:
    config = config or StorageConfig.from_env()
    configure_logging(config.log_level)

    app = FastAPI(title="csvshelf CSV 파일 저장소 API", version="1.0.0")
    app.state.config = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:5173"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(CsvShelfError, csvshelf_error_handler)

    app.include_router(files.router, prefix="/api", tags=["files"])
    app.include_router(upload.router, prefix="/api", tags=["upload"])

    @app.get("/api/health")
    def health_check():
        return {"status": "healthy"}

    return app


app = create_app()
