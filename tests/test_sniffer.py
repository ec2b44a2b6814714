import pytest

from csvshelf.services.sniffer import detect_content_type, PLAIN_TEXT_UTF8, OCTET_STREAM


@pytest.mark.parametrize("data", [
    b"name,val\nx,1\ny,2\n",
    b"",
    b"\xef\xbb\xbfname,val\n",
    "이름,값\n홍길동,1\n".encode("utf-8"),
    b"<ab,c\n1,2\n",
    b"a\tb\r\nc\td\r\n",
])
def test_plain_text(data):
    assert detect_content_type(data) == PLAIN_TEXT_UTF8


@pytest.mark.parametrize("data, expected", [
    (b"<!DOCTYPE html><html></html>", "text/html; charset=utf-8"),
    (b"  \n<html>\n<body>", "text/html; charset=utf-8"),
    (b"<p>hello</p>", "text/html; charset=utf-8"),
    (b"<?xml version='1.0'?><a/>", "text/xml; charset=utf-8"),
    (b"%PDF-1.7\n", "application/pdf"),
    (b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR", "image/png"),
    (b"GIF89a\x01\x00", "image/gif"),
    (b"\xff\xd8\xff\xe0\x00\x10JFIF", "image/jpeg"),
    (b"PK\x03\x04\x14\x00\x06\x00", "application/zip"),
    (b"\x1f\x8b\x08\x00\x00\x00", "application/x-gzip"),
    (b"RIFF\x24\x00\x00\x00WAVEfmt ", "audio/wave"),
    (b"\xff\xfen\x00a\x00", "text/plain; charset=utf-16le"),
    (b"\x00\x00\x00\x18ftypmp42\x00\x00\x00\x00mp42isom", "video/mp4"),
])
def test_signatures(data, expected):
    assert detect_content_type(data) == expected


def test_control_bytes_are_binary():
    assert detect_content_type(b"name,val\n\x00\x01\x02") == OCTET_STREAM


def test_only_first_512_bytes_are_inspected():
    assert detect_content_type(b"a" * 512 + b"\x00") == PLAIN_TEXT_UTF8
