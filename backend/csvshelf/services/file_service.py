"""
File Service
목록 조회 / 미리보기 / 업로드 경계 연산
"""
from pathlib import Path
from typing import Optional

from csvshelf.config import StorageConfig
from csvshelf.services.file_analyzer import AnalysisResult, file_analyzer
from csvshelf.services.file_parser import TabularData, parse_table
from csvshelf.services.ingestion import IngestionPipeline
from csvshelf.services.paths import resolve_repository_root
from csvshelf.services.repository import FileRepository, StoredFile
from csvshelf.services.validator import UploadValidator


class FileService:
    """저장소, 검증기, 파서를 묶은 서비스"""

    def __init__(self, repository: FileRepository, pipeline: IngestionPipeline, csv_encoding: str = "utf-8-sig"):
        self.repository = repository
        self.pipeline = pipeline
        self.csv_encoding = csv_encoding

    @classmethod
    def from_config(cls, config: StorageConfig) -> "FileService":
        repository = FileRepository(resolve_repository_root(config))
        pipeline = IngestionPipeline(UploadValidator(config), repository)
        return cls(repository, pipeline, csv_encoding=config.csv_encoding)

    def list_files(self) -> list[StoredFile]:
        return self.repository.list_files()

    def read_preview(self, name: str) -> TabularData:
        with self.repository.open(name) as stream:
            return parse_table(stream, encoding=self.csv_encoding)

    def ingest_upload(self, content: bytes, declared_type: Optional[str], file_name: str) -> StoredFile:
        return self.pipeline.ingest(content, declared_type, file_name)

    def summarize(self, name: str) -> AnalysisResult:
        return file_analyzer.analyze(self.read_preview(name))

    def resolve_download(self, name: str) -> Path:
        """다운로드할 파일 경로 (없으면 NotFoundError)"""
        self.repository.stat(name)
        return self.repository.path_for(name)
