"""
File Analyzer 서비스
파싱된 CSV의 컬럼별 통계 생성
"""
from dataclasses import dataclass

import pandas as pd

from csvshelf.models.schemas import ColumnStats
from csvshelf.services.file_parser import TabularData


@dataclass
class AnalysisResult:
    """파일 분석 결과"""
    columns: list[str]
    total_rows: int
    column_stats: list[ColumnStats]
    ragged_rows: int


class FileAnalyzer:
    """파일 분석기"""

    def to_frame(self, table: TabularData) -> pd.DataFrame:
        """
        TabularData를 DataFrame으로 변환

        행 길이는 헤더 길이에 맞춤 (부족하면 빈 문자열, 넘치면 잘라냄)
        중복 컬럼 이름이 있을 수 있으므로 위치(iloc)로 접근할 것
        """
        width = len(table.columns)
        normalized = [
            (row + [""] * (width - len(row)))[:width]
            for row in table.rows
        ]
        return pd.DataFrame(normalized, columns=table.columns, dtype=str)

    def analyze(self, table: TabularData, sample_count: int = 5) -> AnalysisResult:
        """
        데이터 분석

        Args:
            table: 파싱된 CSV
            sample_count: 컬럼별 샘플 값 수

        Returns:
            AnalysisResult
        """
        if not table.columns:
            return AnalysisResult(columns=[], total_rows=0, column_stats=[], ragged_rows=0)

        df = self.to_frame(table)
        width = len(table.columns)

        column_stats = [
            self._analyze_column(df.iloc[:, i], table.columns[i], sample_count)
            for i in range(width)
        ]

        return AnalysisResult(
            columns=list(table.columns),
            total_rows=len(df),
            column_stats=column_stats,
            ragged_rows=sum(1 for row in table.rows if len(row) != width),
        )

    def _analyze_column(self, values: pd.Series, column: str, sample_count: int) -> ColumnStats:
        """단일 컬럼 분석"""
        stripped = values.str.strip()
        non_empty = stripped[stripped != ""]

        return ColumnStats(
            column_name=column,
            total_rows=len(values),
            non_empty_count=len(non_empty),
            empty_count=len(values) - len(non_empty),
            unique_count=int(non_empty.nunique()),
            sample_values=[str(v) for v in non_empty.unique()[:sample_count]],
        )


# 싱글톤 인스턴스
file_analyzer = FileAnalyzer()
