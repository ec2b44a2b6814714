"""
Tabular Parser
저장된 CSV 파일을 컬럼(헤더) + 행 구조로 변환
"""
import io
import sys
import csv
from dataclasses import dataclass, field
from typing import BinaryIO, Iterator

from csvshelf.services.errors import ParseError

# 기본 필드 길이 제한(131072자) 해제 - 업로드 크기 제한 안의 파일은 모두 읽을 수 있어야 함
csv.field_size_limit(sys.maxsize)

QUOTE = '"'
FIELD_BREAKS = ",\r\n"


@dataclass
class TabularData:
    """CSV 파싱 결과 (읽을 때마다 새로 계산)"""
    columns: list[str] = field(default_factory=list)
    rows: list[list[str]] = field(default_factory=list)

    @property
    def total_rows(self) -> int:
        return len(self.rows)


def has_bare_quote(raw: str) -> bool:
    """따옴표로 시작하지 않은 필드 안에 따옴표가 있는지 확인 (레코드 원문 기준)"""
    field_start = True
    in_quotes = False
    after_close = False

    for ch in raw:
        if in_quotes:
            if ch == QUOTE:
                in_quotes = False
                after_close = True
            continue
        if ch == QUOTE:
            # 필드 시작 또는 "" 이스케이프
            if field_start or after_close:
                in_quotes = True
                field_start = False
                after_close = False
                continue
            return True
        after_close = False
        field_start = ch in FIELD_BREAKS

    return False


def parse_table(stream: BinaryIO, encoding: str = "utf-8-sig") -> TabularData:
    """
    CSV 스트림 파싱

    - 첫 레코드는 columns, 이후 레코드는 rows
    - 행마다 필드 수가 달라도 그대로 전달
    - 빈 줄은 건너뜀
    - 따옴표 불균형, 따옴표 없는 필드 안의 따옴표 등 구조 오류는 ParseError

    스트림은 닫지 않음 (호출자 소유)
    """
    if stream.seekable():
        stream.seek(0)

    text = io.TextIOWrapper(stream, encoding=encoding, newline="")
    raw_lines: list[str] = []

    def lines() -> Iterator[str]:
        # reader는 레코드 하나를 끝낼 때까지만 줄을 읽으므로 raw_lines가 현재 레코드 원문
        for line in text:
            raw_lines.append(line)
            yield line

    reader = csv.reader(lines(), strict=True)
    result = TabularData()

    try:
        first = True
        for record in reader:
            raw = "".join(raw_lines)
            raw_lines.clear()
            if not record:
                continue
            if has_bare_quote(raw):
                raise ParseError('bare " in non-quoted field', line=reader.line_num)
            if first:
                result.columns = record
                first = False
            else:
                result.rows.append(record)
    except csv.Error as exc:
        raise ParseError(str(exc), line=reader.line_num) from exc
    except UnicodeDecodeError as exc:
        # 디코딩은 청크 단위라 줄 번호를 특정할 수 없음
        raise ParseError(f"cannot decode as {encoding}: {exc.reason}") from exc
    finally:
        text.detach()

    return result


def parse_bytes(content: bytes, encoding: str = "utf-8-sig") -> TabularData:
    """바이트 내용을 바로 파싱"""
    return parse_table(io.BytesIO(content), encoding=encoding)
