"""Version lookup and increment.

The version is either read from the ``Version:`` line of a header comment
or, in manifest mode, from the ``version`` field of ``package.json``.
In both cases the last dot-separated segment is incremented.
"""

import json
import re
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from .content import read_text
from .exceptions import FileNotReadableError, InvalidVersionError, ManifestError, VersionNotFoundError
from .logger import get_logger
from .models import HeaderComment, Manifest

logger = get_logger()

VERSION_LINE = re.compile(r"Version\s?:(.*)")
_NUMERIC_SEGMENT = re.compile(r"[0-9]+")


def increment_version(old_version: str) -> str:
    """Increment the last dot-separated segment of a version string.

    Args:
        old_version: Version to increment (e.g. "0.0.1"). Surrounding
            whitespace is ignored.

    Returns:
        Incremented version (e.g. "0.0.2").

    Raises:
        InvalidVersionError: If the last segment is not a base-10 integer.

    Example:
        >>> increment_version("1.9")
        '1.10'
    """
    segments = old_version.strip().split(".")
    last = segments[-1].strip()

    if not _NUMERIC_SEGMENT.fullmatch(last):
        raise InvalidVersionError(old_version.strip())

    segments[-1] = str(int(last) + 1)
    return ".".join(segments)


def find_version(header: HeaderComment) -> str:
    """Return the trimmed value of the first ``Version:`` line of a header.

    Raises:
        VersionNotFoundError: If the header has no Version line.
    """
    match = VERSION_LINE.search(header.text)
    if match is None:
        raise VersionNotFoundError("Version not found in header comment")
    return match.group(1).strip()


def replace_version(header: HeaderComment, new_version: str) -> HeaderComment:
    """Rewrite the first ``Version:`` line of a header with a new version.

    Only the matched ``Version...`` part of the line is replaced, so a
    leading ``* `` in PHP headers is kept.

    Raises:
        VersionNotFoundError: If the header has no Version line.
    """
    match = VERSION_LINE.search(header.text)
    if match is None:
        raise VersionNotFoundError("Version not found in header comment")

    text = header.text[: match.start()] + f"Version: {new_version}" + header.text[match.end():]
    return header.with_text(text)


def manifest_path_for(index_file: Union[Path, str]) -> Path:
    """Path of the package.json next to the given index file."""
    return Path(".") / Path(index_file).parent / "package.json"


def read_manifest(path: Union[Path, str]) -> Manifest:
    """Load and validate package.json.

    Raises:
        ManifestError: If the file is unreadable, not JSON or has no version.
    """
    try:
        data = json.loads(read_text(path))
    except FileNotReadableError as e:
        raise ManifestError(path, "file not readable") from e
    except json.JSONDecodeError as e:
        raise ManifestError(path, f"invalid JSON ({e.msg})") from e

    if not isinstance(data, dict):
        raise ManifestError(path, "top-level value is not an object")

    try:
        manifest = Manifest.model_validate(data)
    except ValidationError as e:
        raise ManifestError(path, "missing or invalid 'version' field") from e

    logger.debug(f"Loaded manifest {path} (version {manifest.version})")
    return manifest
