import pytest

from wp_versioning.content import normalize_line_endings, read_text, write_text
from wp_versioning.exceptions import FileNotReadableError, VersioningError


def test_normalize_line_endings_mixed():
    assert normalize_line_endings("a\r\nb\rc\n") == "a\nb\nc\n"


@pytest.mark.parametrize("text", ["", "plain", "a\r\n\r\nb", "\r\r\n\n", "x\ny\r"])
def test_normalize_line_endings_idempotent(text):
    once = normalize_line_endings(text)
    assert normalize_line_endings(once) == once
    assert "\r" not in once


def test_read_text_normalizes(tmp_path):
    path = tmp_path / "style.css"
    path.write_bytes(b"/*\r\nVersion: 1.0\r\n*/\r\n")

    assert read_text(path) == "/*\nVersion: 1.0\n*/\n"


def test_read_text_missing_file(tmp_path):
    missing = tmp_path / "missing.php"

    with pytest.raises(FileNotReadableError) as exc_info:
        read_text(missing)

    assert str(missing) in str(exc_info.value)
    assert isinstance(exc_info.value, VersioningError)


def test_write_text_keeps_lf(tmp_path):
    path = tmp_path / "out.php"
    write_text(path, "a\nb\n")

    assert path.read_bytes() == b"a\nb\n"
