"""Data models for wp-versioning."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

MetadataRecord = dict[str, str]


class HeaderDialect(str, Enum):
    """Syntax of the header comment at the start of a file."""

    PHP = "php"
    BLOCK = "block"


class TargetKind(str, Enum):
    """Where the version record is read from."""

    DEFAULT = "default"
    MANIFEST = "manifest"
    EXPLICIT = "explicit"


@dataclass(frozen=True)
class HeaderComment:
    """Header comment extracted from the beginning of a file.

    Attributes:
        text: Exact matched substring, markers included.
        dialect: Dialect the header was matched with.
        start: Offset of the header in the file content (always 0).
        end: Exclusive end offset of the header in the file content.
    """

    text: str
    dialect: HeaderDialect
    start: int = 0
    end: int = 0

    def with_text(self, text: str) -> HeaderComment:
        """Return a copy carrying new text, keeping the original span."""
        return replace(self, text=text)


class Target(BaseModel):
    """Resolved file that holds the version record.

    Attributes:
        kind: Resolution result (default style.css, manifest or explicit file).
        path: Path of the file to read.
    """

    kind: TargetKind
    path: Path

    model_config = ConfigDict(frozen=True)

    @property
    def is_plugin(self) -> bool:
        """True if a non-default index file was supplied."""
        return self.kind is not TargetKind.DEFAULT


class Manifest(BaseModel):
    """Subset of package.json used for versioning."""

    version: str = Field(..., min_length=1)

    model_config = ConfigDict(extra="allow")


@dataclass
class RunResult:
    """Outcome of a successful run.

    Attributes:
        version: The incremented version reported to the pipeline.
        target: The resolved target.
        metadata: Metadata written to metadata.json (including is_plugin).
        written: Files written during the run, in order.
    """

    version: str
    target: Target
    metadata: dict[str, object] = field(default_factory=dict)
    written: list[Path] = field(default_factory=list)
