"""Reading, writing and line-ending normalization of text files."""

from pathlib import Path
from typing import Union

from .exceptions import FileNotReadableError, FileNotWritableError
from .logger import get_logger

logger = get_logger()


def normalize_line_endings(content: str) -> str:
    """Convert CRLF and lone CR line endings to LF.

    Args:
        content: Text to normalize.

    Returns:
        Text containing LF line endings only.

    Example:
        >>> normalize_line_endings("a\\r\\nb\\rc\\n")
        'a\\nb\\nc\\n'
    """
    return content.replace("\r\n", "\n").replace("\r", "\n")


def read_text(path: Union[Path, str]) -> str:
    """Read a UTF-8 file and normalize its line endings.

    Args:
        path: File to read.

    Returns:
        File content with LF line endings.

    Raises:
        FileNotReadableError: If the file does not exist or cannot be read.
    """
    path = Path(path)
    try:
        # newline="" keeps the raw endings so normalization sees them
        with open(path, encoding="utf-8", newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Read failed for {path}: {e}")
        raise FileNotReadableError(path) from e

    return normalize_line_endings(content)


def write_text(path: Union[Path, str], content: str) -> None:
    """Write text as UTF-8 without translating line endings.

    Raises:
        FileNotWritableError: If the file cannot be written.
    """
    path = Path(path)
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        logger.debug(f"Write failed for {path}: {e}")
        raise FileNotWritableError(path) from e
