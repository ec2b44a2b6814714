import pytest

from csvshelf.config import StorageConfig
from csvshelf.services.errors import TooLargeError, InvalidTypeError
from csvshelf.services.validator import UploadValidator


@pytest.fixture()
def validator():
    return UploadValidator(StorageConfig(max_upload_size_bytes=16))


def test_accepts_plain_text_within_limit(validator):
    assert validator.validate(b"a,b\n1,2\n", "text/csv") == "text/plain; charset=utf-8"


def test_accepts_payload_exactly_at_limit(validator):
    validator.validate(b"a" * 16, "text/csv")


def test_rejects_payload_over_limit(validator):
    with pytest.raises(TooLargeError) as exc_info:
        validator.validate(b"a" * 17, "text/csv")

    assert exc_info.value.size == 17
    assert exc_info.value.limit == 16
    assert exc_info.value.code == "FILE_TOO_BIG"


@pytest.mark.parametrize("declared", ["text/csv", "text/plain", None, "image/png"])
def test_declared_type_is_ignored(validator, declared):
    with pytest.raises(InvalidTypeError) as exc_info:
        validator.validate(b"\x89PNG\r\n\x1a\n", declared)

    assert exc_info.value.detected_type == "image/png"
    assert exc_info.value.declared_type == declared


def test_declared_binary_type_does_not_reject_text(validator):
    validator.validate(b"x,y\n", "application/octet-stream")


def test_size_is_checked_before_type():
    validator = UploadValidator(StorageConfig(max_upload_size_bytes=4))
    with pytest.raises(TooLargeError):
        validator.validate(b"\x00" * 5, "text/csv")
