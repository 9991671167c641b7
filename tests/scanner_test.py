from __future__ import annotations

import io
from pathlib import Path

import pytest

from showlog.core.scanner import ReverseScanner

RECORD_SIZE = 8


def make_records(count: int) -> list[bytes]:
    return [bytes([index]) * RECORD_SIZE for index in range(count)]


def test_yields_records_newest_first() -> None:
    records = make_records(5)
    fp = io.BytesIO(b"".join(records))

    result = list(ReverseScanner(fp, RECORD_SIZE))

    assert result == list(reversed(records))


def test_skips_partial_trailing_record() -> None:
    records = make_records(3)
    fp = io.BytesIO(b"".join(records) + b"\xff" * 5)

    result = list(ReverseScanner(fp, RECORD_SIZE))

    assert result == list(reversed(records))


def test_partial_trailing_record_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    fp = io.BytesIO(b"".join(make_records(2)) + b"\xff" * 3)

    list(ReverseScanner(fp, RECORD_SIZE))

    assert "Skipping 3 trailing bytes" in caplog.text


def test_file_shorter_than_one_record() -> None:
    fp = io.BytesIO(b"\x01" * (RECORD_SIZE - 1))

    assert list(ReverseScanner(fp, RECORD_SIZE)) == []


def test_empty_file() -> None:
    assert list(ReverseScanner(io.BytesIO(b""), RECORD_SIZE)) == []


@pytest.mark.parametrize("record_size", [0, -8])
def test_invalid_record_size(record_size: int) -> None:
    with pytest.raises(ValueError):
        ReverseScanner(io.BytesIO(b""), record_size)


def test_scan_is_lazy() -> None:
    records = make_records(4)
    fp = io.BytesIO(b"".join(records))

    scan = iter(ReverseScanner(fp, RECORD_SIZE))

    assert next(scan) == records[3]
    assert fp.tell() == 4 * RECORD_SIZE
    assert next(scan) == records[2]
    assert fp.tell() == 3 * RECORD_SIZE


def test_short_read_ends_scan() -> None:
    class ShortReads(io.BytesIO):
        def read(self, size: int = -1) -> bytes:
            if self.tell() < RECORD_SIZE * 2:
                return super().read(size)[:-1]
            return super().read(size)

    records = make_records(4)

    result = list(ReverseScanner(ShortReads(b"".join(records)), RECORD_SIZE))

    assert result == [records[3], records[2]]


def test_failed_seek_ends_scan() -> None:
    class FailingSeek(io.BytesIO):
        def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
            if whence == io.SEEK_SET and offset < RECORD_SIZE * 3:
                raise OSError("seek failed")
            return super().seek(offset, whence)

    records = make_records(5)

    result = list(ReverseScanner(FailingSeek(b"".join(records)), RECORD_SIZE))

    assert result == [records[4], records[3]]


def test_reads_real_file(tmp_path: Path) -> None:
    records = make_records(3)
    log_file = tmp_path / "dirlog"
    log_file.write_bytes(b"".join(records))

    with open(log_file, "rb") as fp:
        result = list(ReverseScanner(fp, RECORD_SIZE))

    assert result == list(reversed(records))
