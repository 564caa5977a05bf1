"""Custom exceptions for wp-versioning."""

from pathlib import Path
from typing import Union


class VersioningError(Exception):
    """Base exception for all versioning errors."""

    pass


class FileNotReadableError(VersioningError, OSError):
    """Raised when a target file or manifest cannot be read.

    Attributes:
        path: Path of the file that could not be read.
    """

    def __init__(self, path: Union[Path, str]):
        self.path = Path(path)
        super().__init__(f"Unable to read file: {path}")


class FileNotWritableError(VersioningError, OSError):
    """Raised when the rewritten file or metadata.json cannot be written."""

    def __init__(self, path: Union[Path, str]):
        self.path = Path(path)
        super().__init__(f"Unable to write file: {path}")


class ManifestError(VersioningError):
    """Raised when package.json is unreadable, invalid JSON or has no version."""

    def __init__(self, path: Union[Path, str], details: str):
        """Initializes ManifestError.

        Args:
            path: Path of the manifest.
            details: Detailed error message.
        """
        self.path = Path(path)
        self.details = details
        super().__init__(f"Unable to read manifest {path}: {details}")


class HeaderNotFoundError(VersioningError, ValueError):
    """Raised when no header comment is found at the start of a file."""

    pass


class VersionNotFoundError(VersioningError, ValueError):
    """Raised when the header comment has no Version line."""

    pass


class InvalidVersionError(VersioningError, ValueError):
    """Raised when the last version segment is not a base-10 integer."""

    def __init__(self, version: str):
        self.version = version
        super().__init__(f"Non-numeric version segment in '{version}'")
