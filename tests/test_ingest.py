import io
import pytest

from satsort.core.errors import MalformedInputError, ResourceLimitError, SatSortError
from satsort.ingest import load_lines, read_lines

def read(data: bytes, **limits):
    return read_lines(io.BytesIO(data), name="input.txt", **limits)

def test_empty_stream():
    assert read(b"") == []

def test_unix_and_dos_terminators():
    assert read(b"b\r\na\n\n") == [b"b", b"a", b""]

def test_missing_final_newline():
    with pytest.raises(MalformedInputError, match="input.txt:2"):
        read(b"a\nb")

def test_stray_carriage_return():
    with pytest.raises(MalformedInputError, match="input.txt:2: carriage return"):
        read(b"a\nb\rc\n")

def test_line_count_limit():
    assert read(b"a\nb\n", max_lines=2) == [b"a", b"b"]
    with pytest.raises(ResourceLimitError):
        read(b"a\nb\nc\n", max_lines=2)

def test_line_length_limit():
    assert read(b"abc\r\n", max_line_bytes=3) == [b"abc"]
    with pytest.raises(ResourceLimitError, match="input.txt:2"):
        read(b"abc\nabcd\n", max_line_bytes=3)

def test_load_lines_from_file(tmp_path):
    path = tmp_path / "lines.txt"
    path.write_bytes(b"pear\napple\n")
    assert load_lines(path) == [b"pear", b"apple"]

def test_load_lines_missing_file(tmp_path):
    with pytest.raises(SatSortError):
        load_lines(tmp_path / "missing.txt")
