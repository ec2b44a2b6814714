"""
Content Sniffer
업로드 바이트의 시그니처를 검사해 MIME 타입 판별 (WHATWG MIME Sniffing 표 기반)
클라이언트가 보낸 Content-Type은 사용하지 않음
"""
from typing import Optional

SNIFF_LENGTH = 512

PLAIN_TEXT_UTF8 = "text/plain; charset=utf-8"
OCTET_STREAM = "application/octet-stream"

WHITESPACE = b"\t\n\x0c\r "
TAG_TERMINATORS = b" >"

# HTML 태그 시그니처 (대소문자 무시, 뒤에 공백 또는 '>' 필요)
HTML_SIGNATURES = (
    b"<!DOCTYPE HTML", b"<HTML", b"<HEAD", b"<SCRIPT", b"<IFRAME", b"<H1",
    b"<DIV", b"<FONT", b"<TABLE", b"<A", b"<STYLE", b"<TITLE", b"<B",
    b"<BODY", b"<BR", b"<P", b"<!--",
)

_RIFF_MASK = b"\xff\xff\xff\xff\x00\x00\x00\x00\xff\xff\xff\xff"

# (마스크, 패턴, 선행 공백 무시 여부, MIME) - 순서대로 검사, 마스크 None이면 접두사 일치
SIGNATURES = (
    (b"\xff\xff\xff\xff\xff", b"<?xml", True, "text/xml; charset=utf-8"),
    (None, b"%PDF-", False, "application/pdf"),
    (None, b"%!PS-Adobe-", False, "application/postscript"),
    # BOM
    (None, b"\xfe\xff", False, "text/plain; charset=utf-16be"),
    (None, b"\xff\xfe", False, "text/plain; charset=utf-16le"),
    (None, b"\xef\xbb\xbf", False, PLAIN_TEXT_UTF8),
    # 이미지
    (None, b"\x00\x00\x01\x00", False, "image/x-icon"),
    (None, b"\x00\x00\x02\x00", False, "image/x-icon"),
    (None, b"BM", False, "image/bmp"),
    (None, b"GIF87a", False, "image/gif"),
    (None, b"GIF89a", False, "image/gif"),
    (_RIFF_MASK + b"\xff\xff", b"RIFF\x00\x00\x00\x00WEBPVP", False, "image/webp"),
    (None, b"\x89PNG\r\n\x1a\n", False, "image/png"),
    (None, b"\xff\xd8\xff", False, "image/jpeg"),
    # 오디오/비디오
    (_RIFF_MASK, b"FORM\x00\x00\x00\x00AIFF", False, "audio/aiff"),
    (None, b"ID3", False, "audio/mpeg"),
    (None, b"OggS\x00", False, "application/ogg"),
    (None, b"MThd\x00\x00\x00\x06", False, "audio/midi"),
    (_RIFF_MASK, b"RIFF\x00\x00\x00\x00AVI ", False, "video/avi"),
    (_RIFF_MASK, b"RIFF\x00\x00\x00\x00WAVE", False, "audio/wave"),
    (None, b"\x1a\x45\xdf\xa3", False, "video/webm"),
    # 폰트
    (None, b"\x00\x01\x00\x00", False, "font/ttf"),
    (None, b"OTTO", False, "font/otf"),
    (None, b"ttcf", False, "font/collection"),
    (None, b"wOFF", False, "font/woff"),
    (None, b"wOF2", False, "font/woff2"),
    # 압축
    (None, b"\x1f\x8b\x08", False, "application/x-gzip"),
    (None, b"PK\x03\x04", False, "application/zip"),
    (None, b"Rar!\x1a\x07\x00", False, "application/x-rar-compressed"),
    (None, b"Rar!\x1a\x07\x01\x00", False, "application/x-rar-compressed"),
    (None, b"7z\xbc\xaf\x27\x1c", False, "application/x-7z-compressed"),
    (None, b"\x00asm", False, "application/wasm"),
)

# 텍스트 파일에 나타나지 않는 제어 문자
BINARY_BYTES = frozenset(
    list(range(0x00, 0x09)) + [0x0b] + list(range(0x0e, 0x1b)) + list(range(0x1c, 0x20))
)


def _match_html(data: bytes) -> bool:
    data = data.lstrip(WHITESPACE)
    for sig in HTML_SIGNATURES:
        if len(data) < len(sig) + 1:
            continue
        if data[:len(sig)].upper() == sig and data[len(sig)] in TAG_TERMINATORS:
            return True
    return False


def _match(data: bytes, mask: Optional[bytes], pattern: bytes, skip_ws: bool) -> bool:
    if skip_ws:
        data = data.lstrip(WHITESPACE)
    if mask is None:
        return data.startswith(pattern)
    if len(data) < len(pattern):
        return False
    return all((b & m) == p for b, m, p in zip(data, mask, pattern))


def _match_mp4(data: bytes) -> bool:
    # [box size][ftyp][major brand][minor version][compatible brands...]
    if len(data) < 12:
        return False
    box_size = int.from_bytes(data[:4], "big")
    if len(data) < box_size or box_size % 4 != 0:
        return False
    if data[4:8] != b"ftyp":
        return False
    for start in range(8, box_size, 4):
        if start == 12:
            continue
        if data[start:start + 3] == b"mp4":
            return True
    return False


def sniff_signature(data: bytes) -> Optional[str]:
    """시그니처가 일치하는 MIME 반환 (일치 없으면 None)"""
    if _match_html(data):
        return "text/html; charset=utf-8"

    for mask, pattern, skip_ws, mime in SIGNATURES:
        if _match(data, mask, pattern, skip_ws):
            return mime

    if _match_mp4(data):
        return "video/mp4"

    return None


def is_binary(data: bytes) -> bool:
    return any(b in BINARY_BYTES for b in data)


def detect_content_type(data: bytes) -> str:
    """
    바이트 내용으로 Content-Type 판별

    처음 512바이트만 검사하며 항상 유효한 MIME 문자열을 반환
    (알 수 없는 바이너리는 application/octet-stream)
    """
    sample = data[:SNIFF_LENGTH]

    mime = sniff_signature(sample)
    if mime is not None:
        return mime

    if is_binary(sample):
        return OCTET_STREAM
    return PLAIN_TEXT_UTF8
