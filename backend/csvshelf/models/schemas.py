"""
Pydantic 모델 정의 - API 응답 스키마
"""
from typing import Optional
from pydantic import BaseModel, Field


# ============================================================================
# 파일 목록
# ============================================================================

class StoredFileInfo(BaseModel):
    """저장된 파일 정보"""
    name: str = Field(..., description="파일 이름 (접근 키)")
    preview_name: str = Field(..., description="표시용 이름 (30자 초과 시 말줄임)")
    size_bytes: int = Field(..., ge=0, description="파일 크기 (바이트)")


class FileListResponse(BaseModel):
    """파일 목록 응답"""
    name: str = Field(default="Anonymous", description="사용자 이름")
    time: str = Field(..., description="서버 시각")
    files: list[StoredFileInfo] = Field(default_factory=list)


# ============================================================================
# 미리보기 / 분석
# ============================================================================

class PreviewResponse(BaseModel):
    """CSV 미리보기 응답"""
    name: str
    columns: list[str] = Field(default_factory=list, description="헤더 (중복 가능)")
    rows: list[list[str]] = Field(default_factory=list, description="데이터 행")
    total_rows: int = Field(..., ge=0)


class ColumnStats(BaseModel):
    """컬럼 통계 정보"""
    column_name: str = Field(..., description="컬럼 이름")
    total_rows: int = Field(..., ge=0, description="전체 행 수")
    non_empty_count: int = Field(..., ge=0, description="값이 있는 행 수")
    empty_count: int = Field(..., ge=0, description="빈 값 행 수")
    unique_count: int = Field(..., ge=0, description="고유 값 수")
    sample_values: list[str] = Field(default_factory=list, description="샘플 값 (기본 최대 5개)")


class SummaryResponse(BaseModel):
    """CSV 컬럼 통계 응답"""
    name: str
    columns: list[str]
    total_rows: int = Field(..., ge=0)
    ragged_rows: int = Field(..., ge=0, description="헤더와 필드 수가 다른 행 수")
    column_stats: list[ColumnStats]


# ============================================================================
# 업로드
# ============================================================================

class UploadResponse(BaseModel):
    """업로드 결과"""
    success: bool = True
    filename: str
    size_bytes: int = Field(..., ge=0)
    declared_type: Optional[str] = None


class ErrorResponse(BaseModel):
    """오류 응답"""
    detail: str = Field(..., description="오류 코드")
    message: str = Field(..., description="상세 메시지")
