"""Versioning run: resolve, read, bump, substitute and persist.

The run walks through a fixed sequence of states and never goes back::

    RESOLVE_TARGET -> READ_AND_NORMALIZE -> EXTRACT_AND_BUMP_VERSION
        -> SUBSTITUTE -> PERSIST_OUTPUTS

Any VersioningError ends the run; its message is reported once as the
step failure. Files already written stay written (no rollback).
"""

import argparse
import json
from enum import Enum
from pathlib import Path
from typing import Optional, Protocol

from .ci import ActionsReporter, get_input
from .config import Config, get_config, set_config
from .content import read_text, write_text
from .exceptions import VersioningError
from .header import decode_header, extract_header, splice_header
from .logger import get_logger, setup_logger
from .models import MetadataRecord, RunResult, Target, TargetKind
from .resolver import resolve_target
from .version import find_version, increment_version, manifest_path_for, read_manifest, replace_version

logger = get_logger()

INDEX_FILE_INPUT = "indexFile"


class RunState(str, Enum):
    """Sequential states of a versioning run."""

    RESOLVE_TARGET = "resolve_target"
    READ_AND_NORMALIZE = "read_and_normalize"
    EXTRACT_AND_BUMP_VERSION = "extract_and_bump_version"
    SUBSTITUTE = "substitute"
    PERSIST_OUTPUTS = "persist_outputs"
    DONE = "done"
    FAILED = "failed"


class Reporter(Protocol):
    def set_output(self, name: str, value: str) -> None: ...

    def set_failed(self, message: str) -> None: ...


class Versioning:
    """Single versioning run for one index file.

    Example:
        >>> result = Versioning("my-plugin.php").run()
        >>> result.version
        '1.0.1'
    """

    def __init__(
        self,
        index_file: Optional[str] = None,
        metadata_path: Optional[Path] = None,
        reporter: Optional[Reporter] = None,
        config: Optional[Config] = None,
    ):
        self.index_file = index_file
        self.config = config or get_config()
        self.metadata_path = metadata_path or self.config.output.metadata_file
        self.reporter = reporter or ActionsReporter()
        self.state = RunState.RESOLVE_TARGET
        self.written: list[Path] = []

    def _enter(self, state: RunState) -> None:
        logger.debug(f"{self.state.value} -> {state.value}")
        self.state = state

    def run(self) -> RunResult:
        """Execute all states in order.

        Returns:
            RunResult with the new version and the written files.

        Raises:
            VersioningError: On the first failing state.
        """
        target = resolve_target(self.index_file, self.config)
        logger.info(f"Reading file: {target.path}")

        if target.kind is TargetKind.MANIFEST:
            new_version, metadata = self._bump_manifest(target)
        else:
            new_version, metadata = self._bump_header(target)

        self._enter(RunState.PERSIST_OUTPUTS)
        metadata["is_plugin"] = target.is_plugin
        self._write(self.metadata_path, json.dumps(metadata, indent=self.config.output.json_indent, ensure_ascii=False))
        logger.info(f"Generated {self.metadata_path}")

        self.reporter.set_output(self.config.output.output_name, new_version)
        self._enter(RunState.DONE)
        return RunResult(version=new_version, target=target, metadata=metadata, written=list(self.written))

    def _bump_header(self, target: Target) -> tuple[str, dict]:
        self._enter(RunState.READ_AND_NORMALIZE)
        content = read_text(target.path)

        self._enter(RunState.EXTRACT_AND_BUMP_VERSION)
        header = extract_header(content, source=str(target.path))
        current = find_version(header)
        new_version = increment_version(current)
        logger.info(f"New version: {current} -> {new_version}")

        self._enter(RunState.SUBSTITUTE)
        new_header = replace_version(header, new_version)
        self._write(target.path, splice_header(content, header, new_header))
        logger.info(f"Updated {target.path}")

        record: MetadataRecord = decode_header(new_header)
        return new_version, dict(record)

    def _bump_manifest(self, target: Target) -> tuple[str, dict]:
        # The manifest is only read; there is no header to substitute.
        self._enter(RunState.READ_AND_NORMALIZE)
        manifest = read_manifest(manifest_path_for(target.path))

        self._enter(RunState.EXTRACT_AND_BUMP_VERSION)
        new_version = increment_version(manifest.version)
        logger.info(f"New version: {manifest.version} -> {new_version}")

        metadata = {key: value for key, value in manifest.model_dump().items() if isinstance(value, str)}
        metadata["version"] = new_version
        return new_version, metadata

    def _write(self, path: Path, content: str) -> None:
        write_text(path, content)
        self.written.append(Path(path))


def run_versioning(
    index_file: Optional[str] = None,
    metadata_path: Optional[Path] = None,
    reporter: Optional[Reporter] = None,
    config: Optional[Config] = None,
) -> Optional[RunResult]:
    """Run versioning and report a failure instead of raising.

    Returns:
        RunResult on success, None if the run failed (the failure message
        has then been passed to ``reporter.set_failed``).
    """
    reporter = reporter or ActionsReporter()
    versioning = Versioning(index_file, metadata_path=metadata_path, reporter=reporter, config=config)
    try:
        return versioning.run()
    except VersioningError as e:
        logger.error(f"Versioning failed in state {versioning.state.value}: {e}")
        versioning.state = RunState.FAILED
        reporter.set_failed(str(e))
        return None


def main(argv: Optional[list[str]] = None) -> int:
    """Console entry point.

    ``--index-file`` takes precedence over the ``indexFile`` action input.
    """
    parser = argparse.ArgumentParser(description="Increment the version of a WordPress plugin or theme")
    parser.add_argument("--index-file", default=None, help="file holding the version (default: style.css)")
    parser.add_argument("--config", type=Path, default=Path("versioning.yaml"))
    parser.add_argument("--metadata-file", type=Path, default=None)
    args = parser.parse_args(argv)

    config = Config(args.config)
    set_config(config)
    setup_logger(log_file=config.logging.file)

    index_file = args.index_file if args.index_file is not None else get_input(INDEX_FILE_INPUT)

    reporter = ActionsReporter()
    run_versioning(index_file, metadata_path=args.metadata_file, reporter=reporter, config=config)
    return reporter.exit_code
